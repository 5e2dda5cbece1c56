from django.contrib import admin

from .models import Favorite, Playlist, PlaylistEntry, Track, User


@admin.register(Track)
class TrackAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "artist", "album", "genre", "year", "duration_seconds")
    search_fields = ("title", "artist", "album", "genre")


@admin.register(Playlist)
class PlaylistAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner_id", "is_public", "date_created")
    list_filter = ("is_public",)


@admin.register(PlaylistEntry)
class PlaylistEntryAdmin(admin.ModelAdmin):
    list_display = ("id", "playlist_id", "position", "track_id", "date_added")
    search_fields = ("playlist_id", "track_id")


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "date_joined")


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ("id", "user_id", "track_id", "date_added")
    search_fields = ("user_id", "track_id")
