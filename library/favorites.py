from __future__ import annotations
import logging
from typing import List

from django.db import transaction

from .exceptions import TrackNotFound
from .models import Favorite, Track

logger = logging.getLogger(__name__)


@transaction.atomic
def add_to_favorites(user_id: str, track_id: str) -> tuple[Favorite, bool]:
    """Mark a track as favorite; returns (favorite, created). Adding twice is a no-op."""
    if not Track.objects.filter(pk=track_id).exists():
        logger.error("Track not found: %s", track_id)
        raise TrackNotFound(track_id)

    favorite, created = Favorite.objects.get_or_create(user_id=user_id, track_id=track_id)
    if created:
        logger.info("User %s favorited track %s", user_id, track_id)
    return favorite, created


@transaction.atomic
def remove_from_favorites(user_id: str, track_id: str) -> int:
    # filter().delete() also clears duplicate rows for the pair, should any exist
    removed, _ = Favorite.objects.filter(user_id=user_id, track_id=track_id).delete()
    logger.info("User %s unfavorited track %s (%d row(s))", user_id, track_id, removed)
    return removed


@transaction.atomic
def get_favorite_tracks(user_id: str) -> List[Track]:
    favorites = list(Favorite.objects.filter(user_id=user_id))
    tracks = Track.objects.in_bulk({f.track_id for f in favorites})
    return [tracks[f.track_id] for f in favorites if f.track_id in tracks]
