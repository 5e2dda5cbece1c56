"""
Playlists and their ordered entries.

Positions start at 1 and each new entry takes max(position) + 1 for its
playlist. Positions are never renumbered, so gaps left by the track cascade
stay. The playlist row is locked while the next position is computed so two
concurrent appends cannot pick the same slot.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from django.db import transaction
from django.db.models import Max

from .exceptions import PlaylistNotFound, TrackNotFound
from .models import Playlist, PlaylistEntry, Track

logger = logging.getLogger(__name__)


@transaction.atomic
def create_playlist(owner_id: str, name: str, description: Optional[str] = None, is_public: bool = False) -> Playlist:
    playlist = Playlist.objects.create(
        name=name,
        owner_id=owner_id,
        description=description,
        is_public=is_public,
    )
    logger.info("Created playlist %s (%r) for %s", playlist.id, playlist.name, owner_id)
    return playlist


def get_playlist(playlist_id: str) -> Playlist:
    playlist = Playlist.objects.filter(pk=playlist_id).first()
    if playlist is None:
        logger.error("Playlist not found: %s", playlist_id)
        raise PlaylistNotFound(playlist_id)
    return playlist


def next_position(playlist_id: str) -> int:
    top = PlaylistEntry.objects.filter(playlist_id=playlist_id).aggregate(top=Max("position"))["top"]
    return (top or 0) + 1


@transaction.atomic
def add_track_to_playlist(playlist_id: str, track_id: str) -> PlaylistEntry:
    if not Playlist.objects.select_for_update().filter(pk=playlist_id).exists():
        logger.error("Playlist not found: %s", playlist_id)
        raise PlaylistNotFound(playlist_id)

    if not Track.objects.filter(pk=track_id).exists():
        logger.error("Track not found: %s", track_id)
        raise TrackNotFound(track_id)

    entry = PlaylistEntry.objects.create(
        playlist_id=playlist_id,
        track_id=track_id,
        position=next_position(playlist_id),
    )
    logger.info("Added track %s to playlist %s at position %d", track_id, playlist_id, entry.position)
    return entry


@transaction.atomic
def get_playlist_tracks(playlist_id: str) -> List[Track]:
    """Tracks of a playlist by ascending position; entries whose track is gone are skipped."""
    get_playlist(playlist_id)

    entries = list(PlaylistEntry.objects.filter(playlist_id=playlist_id).order_by("position"))
    tracks = Track.objects.in_bulk({e.track_id for e in entries})

    ordered = [tracks[e.track_id] for e in entries if e.track_id in tracks]
    if len(ordered) < len(entries):
        logger.warning(
            "Playlist %s has %d entr(ies) pointing at missing tracks",
            playlist_id, len(entries) - len(ordered),
        )
    return ordered
