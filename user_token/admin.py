from __future__ import annotations

import logging

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from .models import UserToken

logger = logging.getLogger(__name__)


@admin.register(UserToken)
class UserTokenAdmin(admin.ModelAdmin):
    """Admin model for UserToken objects."""

    list_display = ("user", "is_null")
    readonly_fields = ("user", "is_null")
    search_fields = ("user__username",)
    raw_id_fields = ("user",)
    actions = ("reset_tokens",)

    @admin.display(description="Null token", boolean=True)
    def is_null(self, obj: UserToken) -> bool:
        return obj.is_null

    @admin.action(description="Reset selected user tokens")
    def reset_tokens(self, request: HttpRequest, queryset: QuerySet[UserToken]) -> None:
        count = 0
        for token in queryset.select_related("user").order_by("pk").iterator():
            token.set_token()
            token.save(update_fields=["token"])
            count += 1
        logger.info("Reset %s user tokens from the admin site", count)
        self.message_user(request, f"Reset {count} user token(s).", "success")
