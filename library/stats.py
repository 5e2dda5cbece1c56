from __future__ import annotations
import logging
from typing import Dict

from django.db import transaction

from .models import Playlist, Track, User

logger = logging.getLogger(__name__)


@transaction.atomic
def get_stats() -> Dict[str, int]:
    """Counts and sums over the whole library; all zeros for an empty store."""
    # summed in Python: u64 sizes overflow a database SUM
    track_count = total_duration = total_size = 0
    for duration, size in Track.objects.values_list("duration_seconds", "file_size_bytes").iterator():
        track_count += 1
        total_duration += duration
        total_size += size

    stats = {
        "track_count": track_count,
        "playlist_count": Playlist.objects.count(),
        "user_count": User.objects.count(),
        "total_duration_seconds": total_duration,
        "total_size_bytes": total_size,
    }
    logger.info(
        "Stats: %(track_count)d tracks, %(playlist_count)d playlists, %(user_count)d users, "
        "%(total_duration_seconds)d s, %(total_size_bytes)d bytes",
        stats,
    )
    return stats
