import uuid

import pytest
from apps.pubs.models import Pub
from apps.pubs.services import (
    format_average,
    with_rating_aggregates,
    get_pub_rating_summary,
    PubNotFoundError,
)
from apps.ratings.models import Rating


class TestFormatAverage:

    def test_rounds_to_one_decimal(self):
        assert format_average(9.1666) == '9.2'

    def test_rounds_half_up(self):
        assert format_average(8.25) == '8.3'

    def test_whole_number(self):
        assert format_average(7.0) == '7.0'

    def test_none(self):
        assert format_average(None) is None


@pytest.mark.django_db
class TestAggregatesFromDatabase:

    def test_annotated_average(self, rated_dublin_pub, galway_pub):
        pubs = {pub.id: pub for pub in with_rating_aggregates(Pub.objects.all())}

        rated = pubs[rated_dublin_pub.id]
        assert rated.average_rating == pytest.approx(9.1666, abs=1e-3)
        assert rated.rating_count == 3

        unrated = pubs[galway_pub.id]
        assert unrated.average_rating is None
        assert unrated.rating_count == 0

    def test_single_rating_is_its_own_average(self, galway_pub, user):
        Rating.objects.create(user=user, pub=galway_pub, score=7.0)

        summary = get_pub_rating_summary(pub_id=galway_pub.id)

        assert summary['average_rating'] == 7.0
        assert summary['rating_count'] == 1

    def test_ratings_of_other_pubs_are_not_mixed_in(self, rated_dublin_pub, galway_pub, user):
        Rating.objects.create(user=user, pub=galway_pub, score=1.0)

        summary = get_pub_rating_summary(pub_id=rated_dublin_pub.id)

        assert summary['average_rating'] == pytest.approx(9.1666, abs=1e-3)
        assert summary['rating_count'] == 3

    def test_average_follows_rating_changes(self, rated_dublin_pub):
        Rating.objects.filter(pub=rated_dublin_pub, score=8.0).delete()

        summary = get_pub_rating_summary(pub_id=rated_dublin_pub.id)

        assert summary['average_rating'] == pytest.approx(9.75)
        assert summary['rating_count'] == 2

    def test_last_rating_removed_is_none(self, rated_dublin_pub):
        Rating.objects.filter(pub=rated_dublin_pub).delete()

        summary = get_pub_rating_summary(pub_id=rated_dublin_pub.id)

        assert summary['average_rating'] is None
        assert summary['rating_count'] == 0

    def test_summary_of_unrated_pub(self, galway_pub):
        summary = get_pub_rating_summary(pub_id=galway_pub.id)

        assert summary == {'pub_id': galway_pub.id, 'average_rating': None, 'rating_count': 0}

    def test_summary_unknown_pub(self):
        with pytest.raises(PubNotFoundError):
            get_pub_rating_summary(pub_id=uuid.uuid4())

    def test_summary_malformed_id(self):
        with pytest.raises(PubNotFoundError):
            get_pub_rating_summary(pub_id='nope')

    def test_summary_database_failure(self, galway_pub, monkeypatch):
        from django.db import OperationalError
        from apps.common.exceptions import BackingStoreError
        from apps.pubs.services import rating_aggregation

        def broken(queryset):
            raise OperationalError('canceling statement due to statement timeout')

        monkeypatch.setattr(rating_aggregation, 'with_rating_aggregates', broken)

        with pytest.raises(BackingStoreError):
            get_pub_rating_summary(pub_id=galway_pub.id, timeout=0.5)
