from __future__ import annotations

import secrets
from typing import Any

from django.conf import settings
from django.db import models
from django.db.models import Max
from django.utils.translation import gettext_lazy as _lazy

TOKEN_LENGTH = 32

# placeholder stored for users that have never been issued a token
NULL_TOKEN = b"\x00" * TOKEN_LENGTH


def generate_token() -> bytes:
    """Return a new unpredictable token value."""
    return secrets.token_bytes(TOKEN_LENGTH)


class UserTokenQuerySet(models.query.QuerySet):
    """Custom QuerySet for UserToken objects."""

    def create_for_user(self, user: Any) -> UserToken:
        """Create a new UserToken (with the null token) for a user."""
        return self.create(user=user)

    def max_id(self) -> int | None:
        """Return the highest primary key, or None if the table is empty."""
        return self.aggregate(max_id=Max("pk")).get("max_id")

    def in_window(self, min_id: int, max_id: int) -> UserTokenQuerySet:
        """Filter to rows where min_id < pk <= max_id, in pk order."""
        return self.filter(pk__gt=min_id, pk__lte=max_id).order_by("pk")

    def nulls(self) -> UserTokenQuerySet:
        """Filter to rows that still hold the null token."""
        return self.filter(token=NULL_TOKEN)


class UserToken(models.Model):
    """
    The secret token assigned to a user account.

    The primary key is the user's own primary key, so walking UserToken
    ids is the same as walking user ids. New users are given the null
    token (32 x 00 bytes) until one is generated for them; once set the
    token is always a random value from `generate_token`.

    Changing the token invalidates anything that was validated against
    the previous value (e.g. "remember me" sessions).

    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        primary_key=True,
        related_name="user_token",
        on_delete=models.CASCADE,
        help_text=_lazy("The user account that owns the token."),
    )
    token = models.BinaryField(
        max_length=TOKEN_LENGTH,
        default=NULL_TOKEN,
        help_text=_lazy("Secret token value (all null bytes if never set)."),
    )

    objects = UserTokenQuerySet.as_manager()

    class Meta:
        verbose_name = "User token"
        verbose_name_plural = "User tokens"

    def __str__(self) -> str:
        return "User token for %s" % self.display_name

    def __repr__(self) -> str:
        return "<UserToken pk={} is_null={}>".format(self.pk, self.is_null)

    @property
    def display_name(self) -> str:
        return self.user.get_username()

    @property
    def is_null(self) -> bool:
        """Return True if the token is the null placeholder."""
        # postgres returns memoryview for binary columns
        return bytes(self.token) == NULL_TOKEN

    def set_token(self) -> None:
        """Replace the token with a new random value (does not save)."""
        self.token = generate_token()
