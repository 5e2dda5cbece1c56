"""
Errors raised by library operations, and the DRF handler that turns them into
HTTP responses.

Operations raise inside their transaction.atomic block, so a raised error
always means nothing was written.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler


class LibraryError(Exception):
    code = "library_error"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(LibraryError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    kind = "Object"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{self.kind} with ID {key} not found")


class TrackNotFound(NotFound):
    code = "track_not_found"
    kind = "Track"


class PlaylistNotFound(NotFound):
    code = "playlist_not_found"
    kind = "Playlist"


def library_exception_handler(exc, context):
    if isinstance(exc, LibraryError):
        return Response({"detail": str(exc), "code": exc.code}, status=exc.status_code)
    return exception_handler(exc, context)
