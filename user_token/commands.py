from __future__ import annotations

import dataclasses
import logging
import time
from typing import Callable, Iterator, NamedTuple

from django.core.management.base import OutputWrapper

from .replication import ReplicationWaiter
from .repository import UserTokenRepository
from .settings import BATCH_SIZE, COUNTDOWN

logger = logging.getLogger(__name__)


class BatchWindow(NamedTuple):
    """A half-open id range (min_id, max_id]."""

    min_id: int
    max_id: int


@dataclasses.dataclass(frozen=True)
class RunConfiguration:
    """Options for a single reset run."""

    batch_size: int = BATCH_SIZE
    nowarn: bool = False
    nulls_only: bool = False

    def __post_init__(self) -> None:
        if self.batch_size <= 0:
            raise ValueError(f"Batch size must be positive, got {self.batch_size}.")


def iter_windows(max_id: int, batch_size: int) -> Iterator[BatchWindow]:
    """
    Split the id space [1, max_id] into contiguous windows.

    Windows start at (0, batch_size] and advance by batch_size until
    max_id is covered, so each id lies in exactly one window. Returns
    nothing if max_id is 0 (empty table).

    """
    min_id, upper = 0, batch_size
    while min_id < max_id:
        yield BatchWindow(min_id, upper)
        min_id, upper = upper, upper + batch_size


def countdown(
    seconds: int, stdout: OutputWrapper, sleep: Callable[[float], None] = time.sleep
) -> None:
    """Print the seconds remaining, one per second, then return."""
    for remaining in range(seconds, 0, -1):
        stdout.write(f" {remaining}", ending="")
        stdout.flush()
        sleep(1)
    stdout.write(" 0")


class BatchTokenResetter:
    """
    Regenerate the token of every user, walking ids in fixed-size batches.

    Ids are listed one window at a time; each user in the window has its
    token replaced and saved individually, and the resetter then blocks
    on the replication waiter before moving on. Nothing is retried or
    rolled back - any error from the repository or the waiter stops the
    run, and because each row is independent the run can simply be
    repeated.

    """

    def __init__(
        self,
        repository: UserTokenRepository,
        waiter: ReplicationWaiter,
        stdout: OutputWrapper,
        countdown_seconds: int = COUNTDOWN,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.repository = repository
        self.waiter = waiter
        self.stdout = stdout
        self.countdown_seconds = countdown_seconds
        self.sleep = sleep

    def warn(self, config: RunConfiguration) -> None:
        """Explain what is about to happen and give the operator time to abort."""
        if config.nulls_only:
            self.stdout.write(
                "The script is about to reset the user_token "
                "for USERS WITH NULL TOKENS in the database."
            )
        else:
            self.stdout.write(
                "The script is about to reset the user_token for ALL USERS in the database.\n"
                "This may log some of them out and is not necessary unless you believe your\n"
                "user table has been compromised."
            )
        self.stdout.write("")
        self.stdout.write(
            f"Abort with control-c in the next {self.countdown_seconds} seconds "
            "(skip this countdown with --nowarn) ...",
            ending="",
        )
        countdown(self.countdown_seconds, self.stdout, sleep=self.sleep)

    def reset(self, pk: int) -> None:
        """Give a single user a new token."""
        record = self.repository.load(pk)
        self.stdout.write(f'Resetting user_token for "{record.display_name}": ', ending="")
        record.set_token()
        self.repository.save(record)
        self.stdout.write(" OK")

    def run(self, config: RunConfiguration) -> int:
        """Reset tokens as per config, returning the number of users reset."""
        if not config.nowarn:
            self.warn(config)

        max_id = self.repository.find_max_id() or 0
        count = 0
        for window in iter_windows(max_id, config.batch_size):
            ids = self.repository.find_ids_in_range(
                window.min_id, window.max_id, nulls_only=config.nulls_only
            )
            logger.debug(
                "Resetting %s user tokens in (%s, %s]",
                len(ids),
                window.min_id,
                window.max_id,
            )
            for pk in ids:
                self.reset(pk)
                count += 1
            self.waiter.wait()

        logger.info("Reset %s user tokens (max id %s)", count, max_id)
        return count
