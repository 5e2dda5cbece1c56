from rest_framework import serializers

from .models import U64_MAX, Favorite, Playlist, PlaylistEntry, Track

U32_MAX = 2**32 - 1
U16_MAX = 2**16 - 1


class TrackSerializer(serializers.ModelSerializer):
    # the column is text; the API speaks integers
    file_size_bytes = serializers.IntegerField(read_only=True)

    class Meta:
        model = Track
        fields = [
            "id", "title", "artist", "album", "genre", "year",
            "duration_seconds", "file_path", "file_size_bytes", "date_added",
        ]


class PlaylistSerializer(serializers.ModelSerializer):
    class Meta:
        model = Playlist
        fields = ["id", "name", "owner_id", "description", "date_created", "is_public"]


class PlaylistEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = PlaylistEntry
        fields = ["id", "playlist_id", "track_id", "position", "date_added"]


class FavoriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Favorite
        fields = ["id", "user_id", "track_id", "date_added"]


class TrackCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    artist = serializers.CharField(max_length=255)
    album = serializers.CharField(max_length=255)
    genre = serializers.CharField(max_length=100, required=False, allow_null=True, default=None)
    year = serializers.IntegerField(required=False, allow_null=True, default=None, min_value=0, max_value=U16_MAX)
    duration_seconds = serializers.IntegerField(min_value=0, max_value=U32_MAX)
    file_path = serializers.CharField(max_length=1024)
    file_size_bytes = serializers.IntegerField(min_value=0, max_value=U64_MAX)


class TrackMetadataSerializer(serializers.Serializer):
    """
    Body of a metadata update. Missing and null are the same thing here:
    title/artist/album are then kept, genre/year are cleared.
    """

    title = serializers.CharField(max_length=255, required=False, allow_null=True, default=None)
    artist = serializers.CharField(max_length=255, required=False, allow_null=True, default=None)
    album = serializers.CharField(max_length=255, required=False, allow_null=True, default=None)
    genre = serializers.CharField(max_length=100, required=False, allow_null=True, default=None)
    year = serializers.IntegerField(required=False, allow_null=True, default=None, min_value=0, max_value=U16_MAX)


class PlaylistCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    is_public = serializers.BooleanField(required=False, default=False)


class TrackRefSerializer(serializers.Serializer):
    track_id = serializers.CharField(max_length=64)
