import pytest

from library import playlists
from library.exceptions import PlaylistNotFound, TrackNotFound
from library.models import PlaylistEntry, Track


@pytest.mark.django_db
def test_create_playlist_sets_owner_and_timestamp():
    playlist = playlists.create_playlist("alice", "Road Trip", "long drives", True)

    stored = playlists.get_playlist(playlist.id)
    assert stored.owner_id == "alice"
    assert stored.name == "Road Trip"
    assert stored.description == "long drives"
    assert stored.is_public is True
    assert stored.date_created > 0


@pytest.mark.django_db
def test_tracks_come_back_in_insertion_order_with_increasing_positions(make_track):
    t1, t2, t3 = make_track(), make_track(), make_track()
    p = playlists.create_playlist("alice", "P")

    entries = [playlists.add_track_to_playlist(p.id, t.id) for t in (t1, t2, t3)]

    assert [e.position for e in entries] == [1, 2, 3]
    assert [t.id for t in playlists.get_playlist_tracks(p.id)] == [t1.id, t2.id, t3.id]


@pytest.mark.django_db
def test_same_track_can_be_added_twice(make_track):
    t = make_track()
    p = playlists.create_playlist("alice", "P")

    first = playlists.add_track_to_playlist(p.id, t.id)
    second = playlists.add_track_to_playlist(p.id, t.id)

    assert (first.position, second.position) == (1, 2)
    assert [x.id for x in playlists.get_playlist_tracks(p.id)] == [t.id, t.id]


@pytest.mark.django_db
def test_positions_are_per_playlist(make_track):
    t = make_track()
    a = playlists.create_playlist("alice", "A")
    b = playlists.create_playlist("alice", "B")

    playlists.add_track_to_playlist(a.id, t.id)
    playlists.add_track_to_playlist(a.id, t.id)
    entry = playlists.add_track_to_playlist(b.id, t.id)

    assert entry.position == 1


@pytest.mark.django_db
def test_add_to_unknown_playlist_raises_without_mutation(make_track):
    t = make_track()
    with pytest.raises(PlaylistNotFound):
        playlists.add_track_to_playlist("nope", t.id)
    assert PlaylistEntry.objects.count() == 0


@pytest.mark.django_db
def test_add_unknown_track_raises_without_mutation():
    p = playlists.create_playlist("alice", "P")
    with pytest.raises(TrackNotFound):
        playlists.add_track_to_playlist(p.id, "nope")
    assert PlaylistEntry.objects.count() == 0


@pytest.mark.django_db
def test_get_tracks_of_unknown_playlist_raises():
    with pytest.raises(PlaylistNotFound):
        playlists.get_playlist_tracks("nope")


@pytest.mark.django_db
def test_dangling_entries_are_skipped(make_track):
    t1, t2 = make_track(), make_track()
    p = playlists.create_playlist("alice", "P")
    playlists.add_track_to_playlist(p.id, t1.id)
    playlists.add_track_to_playlist(p.id, t2.id)

    # bypass the cascade to leave an entry pointing at nothing
    Track.objects.filter(pk=t1.id).delete()

    assert [t.id for t in playlists.get_playlist_tracks(p.id)] == [t2.id]
    assert PlaylistEntry.objects.filter(playlist_id=p.id).count() == 2


@pytest.mark.django_db
def test_next_position_defaults_to_one():
    p = playlists.create_playlist("alice", "Empty")
    assert playlists.next_position(p.id) == 1
