from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from . import catalog, favorites, playlists, stats
from .identity import on_disconnect
from .serializers import (
    FavoriteSerializer,
    PlaylistCreateSerializer,
    PlaylistEntrySerializer,
    PlaylistSerializer,
    TrackCreateSerializer,
    TrackMetadataSerializer,
    TrackRefSerializer,
    TrackSerializer,
)


class LibraryAPIView(APIView):
    """Base view: reports the end of every identified call to the identity layer."""

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        identity = getattr(request, "auth", None)
        if identity:
            on_disconnect(identity)
        return response


class ApiIndexView(LibraryAPIView):
    HELP_CONTENT = {
        "message": "Music library metadata API. Send the caller identity in the X-Caller-Identity header.",
        "endpoints": {
            "GET /api/tracks/": "List all tracks, or search with ?q= (title, artist, album, genre; case-insensitive).",
            "POST /api/tracks/": "Add a track: title, artist, album, genre?, year?, duration_seconds, file_path, file_size_bytes.",
            "GET /api/tracks/<id>/": "Fetch one track.",
            "PATCH /api/tracks/<id>/": "Update metadata. title/artist/album kept when omitted; genre/year cleared when omitted.",
            "DELETE /api/tracks/<id>/": "Delete a track with its playlist entries and favorites.",
            "POST /api/playlists/": "Create a playlist owned by the caller: name, description?, is_public?.",
            "GET /api/playlists/<id>/": "Fetch one playlist.",
            "GET /api/playlists/<id>/tracks/": "Tracks of a playlist in position order.",
            "POST /api/playlists/<id>/tracks/": "Append a track: track_id.",
            "GET /api/favorites/": "The caller's favorite tracks.",
            "POST /api/favorites/": "Add a favorite: track_id. Adding twice is a no-op.",
            "DELETE /api/favorites/<track_id>/": "Remove a favorite.",
            "GET /api/stats/": "Track, playlist and user counts with total duration and size.",
        },
        "example_request": {
            "title": "Song A",
            "artist": "Artist X",
            "album": "Album Y",
            "genre": None,
            "year": None,
            "duration_seconds": 180,
            "file_path": "a.mp3",
            "file_size_bytes": 1000,
        },
        "curl_example": "curl -X POST http://localhost:8000/api/tracks/ -H 'Content-Type: application/json' -d '{\"title\": \"Song A\", \"artist\": \"Artist X\", \"album\": \"Album Y\", \"duration_seconds\": 180, \"file_path\": \"a.mp3\", \"file_size_bytes\": 1000}'",
    }

    def get(self, request):
        return Response(self.HELP_CONTENT)


# -------------------------------
# Tracks
# -------------------------------
class TrackListView(LibraryAPIView):
    def get(self, request):
        query = request.query_params.get("q")
        tracks = catalog.list_tracks() if query is None else catalog.search_tracks(query)
        return Response(TrackSerializer(tracks, many=True).data)

    def post(self, request):
        serializer = TrackCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        track = catalog.add_track(**serializer.validated_data)
        return Response(TrackSerializer(track).data, status=status.HTTP_201_CREATED)


class TrackDetailView(LibraryAPIView):
    def get(self, request, track_id):
        return Response(TrackSerializer(catalog.get_track(track_id)).data)

    def patch(self, request, track_id):
        serializer = TrackMetadataSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        track = catalog.update_track_metadata(track_id, **serializer.validated_data)
        return Response(TrackSerializer(track).data)

    def delete(self, request, track_id):
        cascade = catalog.delete_track(track_id)
        return Response({"deleted": track_id, "cascade": cascade})


# -------------------------------
# Playlists
# -------------------------------
class PlaylistCreateView(LibraryAPIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = PlaylistCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        playlist = playlists.create_playlist(request.user.id, **serializer.validated_data)
        return Response(PlaylistSerializer(playlist).data, status=status.HTTP_201_CREATED)


class PlaylistDetailView(LibraryAPIView):
    def get(self, request, playlist_id):
        return Response(PlaylistSerializer(playlists.get_playlist(playlist_id)).data)


class PlaylistTracksView(LibraryAPIView):
    def get(self, request, playlist_id):
        tracks = playlists.get_playlist_tracks(playlist_id)
        return Response(TrackSerializer(tracks, many=True).data)

    def post(self, request, playlist_id):
        serializer = TrackRefSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = playlists.add_track_to_playlist(playlist_id, serializer.validated_data["track_id"])
        return Response(PlaylistEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


# -------------------------------
# Favorites (always the caller's)
# -------------------------------
class FavoriteListView(LibraryAPIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        tracks = favorites.get_favorite_tracks(request.user.id)
        return Response(TrackSerializer(tracks, many=True).data)

    def post(self, request):
        serializer = TrackRefSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        favorite, created = favorites.add_to_favorites(request.user.id, serializer.validated_data["track_id"])
        return Response(
            FavoriteSerializer(favorite).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class FavoriteDetailView(LibraryAPIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request, track_id):
        favorites.remove_from_favorites(request.user.id, track_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class StatsView(LibraryAPIView):
    def get(self, request):
        return Response(stats.get_stats())
