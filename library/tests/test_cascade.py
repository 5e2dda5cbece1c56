import pytest

from library import catalog, favorites, playlists
from library.exceptions import TrackNotFound
from library.models import Favorite, PlaylistEntry, Track


@pytest.mark.django_db
def test_delete_track_removes_every_reference(make_track):
    doomed = make_track(title="Doomed")
    kept = make_track(title="Kept")
    p1 = playlists.create_playlist("alice", "P1")
    p2 = playlists.create_playlist("bob", "P2")
    for p in (p1, p2):
        playlists.add_track_to_playlist(p.id, doomed.id)
        playlists.add_track_to_playlist(p.id, kept.id)
    playlists.add_track_to_playlist(p1.id, doomed.id)  # duplicate entry
    favorites.add_to_favorites("alice", doomed.id)
    favorites.add_to_favorites("bob", doomed.id)
    favorites.add_to_favorites("bob", kept.id)

    summary = catalog.delete_track(doomed.id)

    assert summary == {"playlist_entries": 3, "favorites": 2}
    assert not Track.objects.filter(pk=doomed.id).exists()
    assert not PlaylistEntry.objects.filter(track_id=doomed.id).exists()
    assert not Favorite.objects.filter(track_id=doomed.id).exists()
    # references to other tracks are untouched
    assert PlaylistEntry.objects.filter(track_id=kept.id).count() == 2
    assert Favorite.objects.filter(track_id=kept.id).count() == 1


@pytest.mark.django_db
def test_delete_unknown_track_raises_without_mutation(make_track):
    track = make_track()
    p = playlists.create_playlist("alice", "P")
    playlists.add_track_to_playlist(p.id, track.id)

    with pytest.raises(TrackNotFound):
        catalog.delete_track("ghost")

    assert Track.objects.count() == 1
    assert PlaylistEntry.objects.count() == 1


@pytest.mark.django_db
def test_delete_track_is_all_or_nothing(make_track, monkeypatch):
    track = make_track()
    p = playlists.create_playlist("alice", "P")
    playlists.add_track_to_playlist(p.id, track.id)
    favorites.add_to_favorites("alice", track.id)

    def _boom(self, *args, **kwargs):
        raise RuntimeError("storage failure")

    # the last step of the cascade fails after entries/favorites were deleted
    monkeypatch.setattr(Track, "delete", _boom)

    with pytest.raises(RuntimeError):
        catalog.delete_track(track.id)

    assert PlaylistEntry.objects.filter(track_id=track.id).count() == 1
    assert Favorite.objects.filter(track_id=track.id).count() == 1
    assert Track.objects.filter(pk=track.id).exists()


@pytest.mark.django_db
def test_positions_are_not_renumbered_after_cascade(make_track):
    t1, t2, t3 = make_track(), make_track(), make_track()
    p = playlists.create_playlist("alice", "P")
    for t in (t1, t2, t3):
        playlists.add_track_to_playlist(p.id, t.id)

    catalog.delete_track(t2.id)
    t4 = make_track()
    entry = playlists.add_track_to_playlist(p.id, t4.id)

    positions = list(PlaylistEntry.objects.filter(playlist_id=p.id).values_list("position", flat=True))
    assert positions == [1, 3, 4]
    assert entry.position == 4
    assert [t.id for t in playlists.get_playlist_tracks(p.id)] == [t1.id, t3.id, t4.id]


@pytest.mark.django_db
def test_scenario_playlist_survives_track_deletion(make_track):
    t1 = make_track(title="Song A", artist="Artist X", album="Album Y",
                    duration_seconds=180, file_path="a.mp3", file_size_bytes=1000)
    p1 = playlists.create_playlist("alice", "My List", None, True)

    entry = playlists.add_track_to_playlist(p1.id, t1.id)
    assert entry.position == 1
    assert [t.id for t in playlists.get_playlist_tracks(p1.id)] == [t1.id]

    catalog.delete_track(t1.id)

    assert playlists.get_playlist_tracks(p1.id) == []
