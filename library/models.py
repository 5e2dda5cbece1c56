from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.crypto import get_random_string

# library/models.py
#
# References between rows (playlist_id, track_id, user_id, owner_id) are plain
# indexed columns, not foreign keys: the track cascade lives in
# library.catalog.delete_track and readers skip ids that no longer resolve.


def generate_id() -> str:
    return get_random_string(16)


def current_timestamp() -> int:
    """Unix seconds, UTC."""
    return int(timezone.now().timestamp())


U64_MAX = 2**64 - 1


class UnsignedBigIntegerField(models.Field):
    """
    0..2**64-1 stored as decimal text. Backends top out at signed 64-bit
    integers, and SQLite turns larger NUMERIC values into floats.
    """

    description = "Unsigned 64-bit integer"
    default_validators = [MinValueValidator(0), MaxValueValidator(U64_MAX)]

    def get_internal_type(self):
        return "CharField"

    def db_type(self, connection):
        return "varchar(20)"

    def from_db_value(self, value, expression, connection):
        return None if value is None else int(value)

    def to_python(self, value):
        if value is None or isinstance(value, int):
            return value
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError("'%(value)s' must be an integer.", code="invalid", params={"value": value})

    def get_prep_value(self, value):
        value = super().get_prep_value(value)
        return None if value is None else str(int(value))


class Track(models.Model):
    id = models.CharField(max_length=64, primary_key=True, default=generate_id, editable=False)
    title = models.CharField(max_length=255)
    artist = models.CharField(max_length=255)
    album = models.CharField(max_length=255)
    genre = models.CharField(max_length=100, null=True, blank=True)
    year = models.PositiveIntegerField(null=True, blank=True, validators=[MaxValueValidator(65535)])
    duration_seconds = models.PositiveIntegerField()
    file_path = models.CharField(max_length=1024)
    file_size_bytes = UnsignedBigIntegerField()
    date_added = models.PositiveBigIntegerField(default=current_timestamp)

    class Meta:
        ordering = ["date_added", "id"]

    def __str__(self):
        return f"{self.title} by {self.artist}"


class Playlist(models.Model):
    id = models.CharField(max_length=64, primary_key=True, default=generate_id, editable=False)
    name = models.CharField(max_length=255)
    owner_id = models.CharField(max_length=255, db_index=True)
    description = models.TextField(null=True, blank=True)
    date_created = models.PositiveBigIntegerField(default=current_timestamp)
    is_public = models.BooleanField(default=False)

    def __str__(self):
        return self.name


class PlaylistEntry(models.Model):
    id = models.CharField(max_length=64, primary_key=True, default=generate_id, editable=False)
    playlist_id = models.CharField(max_length=64, db_index=True)
    track_id = models.CharField(max_length=64, db_index=True)
    position = models.PositiveIntegerField()
    date_added = models.PositiveBigIntegerField(default=current_timestamp)

    class Meta:
        ordering = ["playlist_id", "position"]
        verbose_name_plural = "playlist entries"
        constraints = [
            models.UniqueConstraint(fields=["playlist_id", "position"], name="unique_playlist_position"),
        ]

    def __str__(self):
        return f"{self.playlist_id}#{self.position} -> {self.track_id}"


class User(models.Model):
    """A caller seen at least once; the primary key is the caller identity."""

    id = models.CharField(max_length=255, primary_key=True)
    username = models.CharField(max_length=150)
    date_joined = models.PositiveBigIntegerField(default=current_timestamp)

    # DRF treats request.user as authenticated when this is true
    is_authenticated = True
    is_anonymous = False

    def __str__(self):
        return self.username


class Favorite(models.Model):
    id = models.CharField(max_length=64, primary_key=True, default=generate_id, editable=False)
    user_id = models.CharField(max_length=255, db_index=True)
    track_id = models.CharField(max_length=64, db_index=True)
    date_added = models.PositiveBigIntegerField(default=current_timestamp)

    class Meta:
        ordering = ["date_added", "id"]
        constraints = [
            models.UniqueConstraint(fields=["user_id", "track_id"], name="unique_user_favorite"),
        ]

    def __str__(self):
        return f"{self.user_id} <3 {self.track_id}"
