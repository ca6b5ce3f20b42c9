from __future__ import annotations

from django.conf import settings

# the default number of ids walked between replication waits
BATCH_SIZE: int = getattr(settings, "USER_TOKEN_BATCH_SIZE", 1000)

# seconds the operator has to abort a reset before anything is written
COUNTDOWN: int = getattr(settings, "USER_TOKEN_COUNTDOWN", 5)

# alias used to list ids - None defers to the database router
READ_DATABASE: str | None = getattr(settings, "USER_TOKEN_READ_DATABASE", None)

# aliases of the replicas that must catch up between batches
REPLICA_DATABASES: list[str] = getattr(settings, "USER_TOKEN_REPLICA_DATABASES", [])

REPLICATION_TIMEOUT: float = getattr(settings, "USER_TOKEN_REPLICATION_TIMEOUT", 60)

REPLICATION_POLL_INTERVAL: float = getattr(
    settings, "USER_TOKEN_REPLICATION_POLL_INTERVAL", 0.5
)

REPLICATION_WAITER: str = getattr(
    settings,
    "USER_TOKEN_REPLICATION_WAITER",
    "user_token.replication.ReplicaLagWaiter",
)
