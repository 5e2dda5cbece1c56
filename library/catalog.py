# catalog.py
"""
Track catalog: add / list / get / search / update, plus the track-delete cascade.

- Every public function is one unit of work (transaction.atomic)
- Lookups that miss log an error and raise TrackNotFound; nothing is written
- update_track_metadata: title/artist/album keep their value when None is
  passed, genre/year are replaced unconditionally (None clears them)
- delete_track removes playlist entries and favorites referencing the track
  before the track row; the audio object in blob storage is left alone
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from django.db import transaction

from .exceptions import TrackNotFound
from .models import Favorite, PlaylistEntry, Track

logger = logging.getLogger(__name__)


# -------------------------------
# Create / read
# -------------------------------
@transaction.atomic
def add_track(
    title: str,
    artist: str,
    album: str,
    genre: Optional[str],
    year: Optional[int],
    duration_seconds: int,
    file_path: str,
    file_size_bytes: int,
) -> Track:
    track = Track.objects.create(
        title=title,
        artist=artist,
        album=album,
        genre=genre,
        year=year,
        duration_seconds=duration_seconds,
        file_path=file_path,
        file_size_bytes=file_size_bytes,
    )
    logger.info("Added track: %s - %s by %s", track.id, track.title, track.artist)
    return track


def list_tracks() -> List[Track]:
    return list(Track.objects.all())


def get_track(track_id: str) -> Track:
    track = Track.objects.filter(pk=track_id).first()
    if track is None:
        logger.error("Track with ID %s not found", track_id)
        raise TrackNotFound(track_id)
    return track


def _matches(track: Track, needle: str) -> bool:
    fields = (track.title, track.artist, track.album, track.genre)
    return any(needle in value.lower() for value in fields if value is not None)


def search_tracks(query: str) -> List[Track]:
    """Case-insensitive substring match on title, artist, album or genre."""
    # str.lower() in Python: the database LIKE only folds ASCII on SQLite
    needle = (query or "").lower()
    tracks = [t for t in Track.objects.all() if _matches(t, needle)]
    logger.info("Search %r matched %d track(s)", query, len(tracks))
    return tracks


# -------------------------------
# Update
# -------------------------------
@transaction.atomic
def update_track_metadata(
    track_id: str,
    title: Optional[str] = None,
    artist: Optional[str] = None,
    album: Optional[str] = None,
    genre: Optional[str] = None,
    year: Optional[int] = None,
) -> Track:
    track = Track.objects.select_for_update().filter(pk=track_id).first()
    if track is None:
        logger.error("Track with ID %s not found", track_id)
        raise TrackNotFound(track_id)

    if title is not None:
        track.title = title
    if artist is not None:
        track.artist = artist
    if album is not None:
        track.album = album

    # genre/year always take the given value, including None
    track.genre = genre
    track.year = year

    track.save()
    logger.info("Updated track metadata: %s", track.id)
    return track


# -------------------------------
# Delete (cascades to playlist entries and favorites)
# -------------------------------
@transaction.atomic
def delete_track(track_id: str) -> Dict[str, int]:
    track = Track.objects.select_for_update().filter(pk=track_id).first()
    if track is None:
        logger.error("Track with ID %s not found", track_id)
        raise TrackNotFound(track_id)

    entries_deleted, _ = PlaylistEntry.objects.filter(track_id=track_id).delete()
    favorites_deleted, _ = Favorite.objects.filter(track_id=track_id).delete()
    track.delete()

    # The file at track.file_path stays in blob storage; removing it is a separate job.
    logger.info(
        "Deleted track %s (%d playlist entries, %d favorites); file left at %s",
        track_id, entries_deleted, favorites_deleted, track.file_path,
    )
    return {"playlist_entries": entries_deleted, "favorites": favorites_deleted}
