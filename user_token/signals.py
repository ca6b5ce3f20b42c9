from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserToken

logger = logging.getLogger(__name__)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_token(sender: Any, instance: Any, created: bool, **kwargs: Any) -> None:
    """Give every new user a UserToken row holding the null token."""
    if not created or kwargs.get("raw"):
        return
    logger.debug("Creating null user token for user %s", instance.pk)
    UserToken.objects.create_for_user(instance)
