from __future__ import annotations

from django.apps import AppConfig


class UserTokenAppConfig(AppConfig):
    """AppConfig for user_token app."""

    name = "user_token"
    verbose_name = "User Tokens"

    def ready(self) -> None:
        from . import signals  # noqa: F401
