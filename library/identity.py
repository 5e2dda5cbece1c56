"""
Caller identity -> User row.

The identity string handed over by the session layer is the User primary key.
A row is created the first time an identity is seen and never changed after.
"""

from __future__ import annotations
import logging

from django.db import transaction

from .models import User

logger = logging.getLogger(__name__)

USERNAME_PREFIX = "user_"


def username_for(identity: str) -> str:
    return f"{USERNAME_PREFIX}{identity[:8]}"


@transaction.atomic
def on_connect(identity: str) -> User:
    user, created = User.objects.get_or_create(
        id=identity,
        defaults={"username": username_for(identity)},
    )
    if created:
        logger.info("Client connected: %s (new user %s)", identity, user.username)
    else:
        logger.debug("Client connected: %s", identity)
    return user


def on_disconnect(identity: str) -> None:
    logger.debug("Client disconnected: %s", identity)
