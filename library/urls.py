from django.urls import path

from . import views

urlpatterns = [
    path("", views.ApiIndexView.as_view(), name="api_index"),
    path("tracks/", views.TrackListView.as_view(), name="track_list"),
    path("tracks/<str:track_id>/", views.TrackDetailView.as_view(), name="track_detail"),
    path("playlists/", views.PlaylistCreateView.as_view(), name="playlist_create"),
    path("playlists/<str:playlist_id>/", views.PlaylistDetailView.as_view(), name="playlist_detail"),
    path("playlists/<str:playlist_id>/tracks/", views.PlaylistTracksView.as_view(), name="playlist_tracks"),
    path("favorites/", views.FavoriteListView.as_view(), name="favorite_list"),
    path("favorites/<str:track_id>/", views.FavoriteDetailView.as_view(), name="favorite_detail"),
    path("stats/", views.StatsView.as_view(), name="stats"),
]
