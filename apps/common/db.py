"""Per-call query timeouts for read paths."""

import logging
from contextlib import contextmanager

from django.conf import settings
from django.db import DatabaseError, connection, transaction

from .exceptions import BackingStoreError

logger = logging.getLogger(__name__)


def resolve_timeout(timeout=None):
    """Return the timeout in seconds, falling back to QUERY_TIMEOUT_SECONDS."""
    if timeout is None:
        timeout = getattr(settings, 'QUERY_TIMEOUT_SECONDS', None)
    if timeout is not None and timeout <= 0:
        return None
    return timeout


@contextmanager
def bounded_query(timeout=None):
    """
    Run the enclosed queries with a statement timeout.

    PostgreSQL gets ``SET LOCAL statement_timeout`` scoped to a transaction.
    Other backends rely on their connection level timeout (SQLite's busy
    timeout, configured in settings), so the per-call value is not applied.

    Any DatabaseError raised inside the block, including a cancelled
    statement, is re-raised as BackingStoreError.
    """
    timeout = resolve_timeout(timeout)

    try:
        with transaction.atomic():
            if timeout is not None and connection.vendor == 'postgresql':
                with connection.cursor() as cursor:
                    cursor.execute(
                        "SET LOCAL statement_timeout = %s",
                        [int(timeout * 1000)],
                    )
            yield
    except DatabaseError as e:
        logger.error("Query failed (timeout=%ss): %s", timeout, e)
        raise BackingStoreError(f"Data store query failed: {e}") from e
