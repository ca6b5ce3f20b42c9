"""
Wait for database replicas to catch up with the primary.

The reset walk reads ids from a replica and writes through the primary,
so between batches it blocks until every replica has replayed the
writes made so far. This keeps the replicas from falling behind under
a large reset, and stops the next batch being listed from stale data.

Only PostgreSQL streaming replication is supported: the primary's
current WAL position is recorded, and each replica is polled until its
replay position has passed it.

"""
from __future__ import annotations

import abc
import logging
import time
from typing import Callable, Sequence

from django.core.exceptions import ImproperlyConfigured
from django.db import connections
from django.db.backends.utils import CursorWrapper
from django.utils.module_loading import import_string

from .exceptions import ReplicationTimeoutError
from .settings import (
    REPLICA_DATABASES,
    REPLICATION_POLL_INTERVAL,
    REPLICATION_TIMEOUT,
    REPLICATION_WAITER,
)

logger = logging.getLogger(__name__)


class ReplicationWaiter(abc.ABC):
    """Blocks until storage replicas have caught up."""

    @abc.abstractmethod
    def wait(self) -> None:
        pass


class NoopReplicationWaiter(ReplicationWaiter):
    """Waiter for setups with no replicas - returns immediately."""

    def wait(self) -> None:
        pass


class ReplicaLagWaiter(ReplicationWaiter):
    """Poll PostgreSQL replicas until they reach the primary's WAL position."""

    def __init__(
        self,
        replicas: Sequence[str] | None = None,
        primary: str = "default",
        timeout: float = REPLICATION_TIMEOUT,
        poll_interval: float = REPLICATION_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.replicas = list(REPLICA_DATABASES if replicas is None else replicas)
        self.primary = primary
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.clock = clock
        self.sleep = sleep

    def _cursor(self, alias: str) -> CursorWrapper:
        connection = connections[alias]
        if connection.vendor != "postgresql":
            raise ImproperlyConfigured(
                f"Database '{alias}' is not PostgreSQL ({connection.vendor}), "
                "replication lag cannot be checked."
            )
        return connection.cursor()

    def primary_position(self) -> str:
        """Return the current WAL position of the primary."""
        with self._cursor(self.primary) as cursor:
            cursor.execute("SELECT pg_current_wal_lsn()::text")
            return cursor.fetchone()[0]

    def is_caught_up(self, alias: str, position: str) -> bool:
        """Return True if the replica has replayed up to position."""
        with self._cursor(alias) as cursor:
            cursor.execute(
                "SELECT pg_wal_lsn_diff(pg_last_wal_replay_lsn(), %s::pg_lsn)",
                [position],
            )
            lag = cursor.fetchone()[0]
        # NULL replay position means the database is not a standby
        if lag is None:
            return True
        logger.debug("Replica '%s' is %s bytes from %s", alias, lag, position)
        return lag >= 0

    def wait(self) -> None:
        if not self.replicas:
            return
        position = self.primary_position()
        deadline = self.clock() + self.timeout
        for alias in self.replicas:
            while not self.is_caught_up(alias, position):
                if self.clock() >= deadline:
                    raise ReplicationTimeoutError(
                        f"Replica '{alias}' did not reach {position} "
                        f"within {self.timeout}s"
                    )
                self.sleep(self.poll_interval)
        logger.debug("Replicas %s caught up to %s", self.replicas, position)


def get_replication_waiter() -> ReplicationWaiter:
    """Return an instance of the configured ReplicationWaiter class."""
    return import_string(REPLICATION_WAITER)()
