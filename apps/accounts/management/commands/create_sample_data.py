"""
Management command to create sample data for development.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 1 staff user (admin) and 3 regular users
- 5 Irish pubs with coordinates
- 8 ratings

Running it again without --clear reuses existing rows instead of
duplicating them.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.pubs.models import Pub
from apps.ratings.models import Rating
from apps.photos.models import Photo

SAMPLE_PASSWORD = 'password123'

USERS = [
    ('guinness_lover', 'user1@example.com'),
    ('pint_connoisseur', 'user2@example.com'),
    ('irish_stout', 'user3@example.com'),
]

PUBS = [
    {
        'name': 'The Guinness Pub',
        'address': '123 Dublin St, Dublin',
        'latitude': 53.349805,
        'longitude': -6.26031,
        'phone_number': '+353 1 234 5678',
        'website': 'https://guinness.com',
        'opening_hours': 'Mon-Sun: 11am - 11pm',
    },
    {
        'name': 'Irish Tavern',
        'address': '456 Cork Rd, Cork',
        'latitude': 51.896892,
        'longitude': -8.486316,
        'phone_number': '+353 2 345 6789',
        'website': 'https://irishtavern.com',
        'opening_hours': 'Mon-Sat: 12pm - 12am, Sun: 12pm - 11pm',
    },
    {
        'name': 'Emerald Isle Bar',
        'address': '789 Galway Ave, Galway',
        'latitude': 53.270668,
        'longitude': -9.056791,
        'phone_number': '+353 3 456 7890',
        'website': 'https://emeraldisle.com',
        'opening_hours': 'Daily: 10am - 2am',
    },
    {
        'name': 'Dublin Porter',
        'address': '42 Temple Bar, Dublin',
        'latitude': 53.345367,
        'longitude': -6.263419,
        'phone_number': '+353 1 555 1234',
        'website': 'https://dublinporter.com',
        'opening_hours': 'Mon-Sun: 10am - 1am',
    },
    {
        'name': 'Celtic Brew House',
        'address': '78 High Street, Kilkenny',
        'latitude': 52.654145,
        'longitude': -7.252297,
        'phone_number': '+353 56 781 2345',
        'website': 'https://celticbrewhouse.ie',
        'opening_hours': 'Mon-Thu: 12pm - 11pm, Fri-Sat: 12pm - 1am, Sun: 12pm - 10pm',
    },
]

# (username, pub name, score, comment)
RATINGS = [
    ('guinness_lover', 'The Guinness Pub', 9.5, 'Perfect pint, creamy head and great temperature!'),
    ('pint_connoisseur', 'The Guinness Pub', 8.0, 'Good pint but could use a colder glass.'),
    ('irish_stout', 'The Guinness Pub', 10.0, 'Best pint in all of Dublin!'),
    ('guinness_lover', 'Irish Tavern', 7.0, 'Decent pint but could be colder.'),
    ('pint_connoisseur', 'Emerald Isle Bar', 9.0, 'Excellent pour with a perfect head.'),
    ('irish_stout', 'Dublin Porter', 8.5, 'Great atmosphere and a well-poured pint!'),
    ('guinness_lover', 'Celtic Brew House', 9.2, 'Fantastic creamy head and perfect temperature.'),
    ('pint_connoisseur', 'Dublin Porter', 7.8, "Good pint, but not the best I've had."),
]


class Command(BaseCommand):
    help = 'Create sample users, pubs and ratings for development'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        pubs = self.create_pubs(users['admin'])
        created = self.create_ratings(users, pubs)

        self.stdout.write(self.style.SUCCESS(
            f'Sample data ready: {len(users)} users, {len(pubs)} pubs, {created} new ratings'
        ))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (staff)')
        for _, email in USERS:
            self.stdout.write(f'  {email} / {SAMPLE_PASSWORD}')

    def clear_data(self):
        """Clear all data except superusers created by hand."""
        Photo.objects.all().delete()
        Rating.objects.all().delete()
        Pub.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'username': 'admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for username, email in USERS:
            user, _ = User.objects.get_or_create(
                email=email,
                defaults={'username': username}
            )
            user.set_password(SAMPLE_PASSWORD)
            user.save()
            users[username] = user

        return users

    def create_pubs(self, created_by):
        """Create pubs."""
        self.stdout.write('  Creating pubs...')

        pubs = {}
        for data in PUBS:
            data = dict(data)
            pub, _ = Pub.objects.get_or_create(
                name=data.pop('name'),
                address=data.pop('address'),
                defaults={**data, 'created_by': created_by}
            )
            pubs[pub.name] = pub

        return pubs

    def create_ratings(self, users, pubs):
        """Create ratings. Returns how many were new."""
        self.stdout.write('  Creating ratings...')

        created = 0
        for username, pub_name, score, comment in RATINGS:
            _, was_created = Rating.objects.get_or_create(
                user=users[username],
                pub=pubs[pub_name],
                comment=comment,
                defaults={'score': score}
            )
            created += int(was_created)

        return created
