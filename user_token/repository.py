"""
Storage access for the token reset walk.

The batch walk in `user_token.commands` only talks to the abstract
UserTokenRepository, so it can be run against the Django ORM in
production and against a simple in-memory store in tests.

"""
from __future__ import annotations

import abc

from django.db import router

from .models import UserToken
from .settings import READ_DATABASE


class UserTokenRepository(abc.ABC):
    """Interface used by BatchTokenResetter to read and write tokens."""

    @abc.abstractmethod
    def find_max_id(self) -> int | None:
        """Return the highest id in storage, or None if there are none."""

    @abc.abstractmethod
    def find_ids_in_range(
        self, min_id: int, max_id: int, nulls_only: bool = False
    ) -> list[int]:
        """Return ids where min_id < id <= max_id, in ascending order."""

    @abc.abstractmethod
    def load(self, pk: int) -> UserToken:
        """Return the full record for an id."""

    @abc.abstractmethod
    def save(self, record: UserToken) -> None:
        """Persist the token of a record."""


class DjangoUserTokenRepository(UserTokenRepository):
    """
    UserTokenRepository backed by the Django ORM.

    Id listings are read from the read alias (a replica, if configured)
    to keep load off the primary; records are loaded and saved through
    the write alias so that they are never stale.

    """

    def __init__(
        self, read_using: str | None = None, write_using: str | None = None
    ) -> None:
        self.read_using = (
            read_using or READ_DATABASE or router.db_for_read(UserToken)
        )
        self.write_using = write_using or router.db_for_write(UserToken)

    def find_max_id(self) -> int | None:
        return UserToken.objects.using(self.read_using).max_id()

    def find_ids_in_range(
        self, min_id: int, max_id: int, nulls_only: bool = False
    ) -> list[int]:
        tokens = UserToken.objects.using(self.read_using).in_window(min_id, max_id)
        if nulls_only:
            tokens = tokens.nulls()
        return list(tokens.values_list("pk", flat=True))

    def load(self, pk: int) -> UserToken:
        return (
            UserToken.objects.using(self.write_using)
            .select_related("user")
            .get(pk=pk)
        )

    def save(self, record: UserToken) -> None:
        record.save(using=self.write_using, update_fields=["token"])
