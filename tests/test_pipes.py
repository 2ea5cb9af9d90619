import random

import pytest

from core.errors import EmptyTrackError
from core.events import Event, EventQueue
from core.pipes import PipePair, PipeTrack
from settings import FREE_SPACE, SCREEN_W, SCREEN_H


def place(pair, x):
    pair.shift(x - pair.x)


def test_new_track_holds_one_pair_at_right_edge(rng):
    track = PipeTrack(rng)

    assert len(track) == 1
    assert track.active.top.x == SCREEN_W
    assert track.active.bottom.x == SCREEN_W
    assert track.active.top.y == 0
    assert track.active.bottom.height == SCREEN_H


def test_spawned_pairs_keep_gap_and_height_range():
    track = PipeTrack(random.Random(7))
    for _ in range(500):
        track.spawn()

    for pair in track.pairs:
        assert pair.bottom.y - pair.top.height == FREE_SPACE
        assert 100 <= pair.top.height < 300


def test_same_seed_gives_same_pipes():
    a = PipeTrack(random.Random(99))
    b = PipeTrack(random.Random(99))
    for _ in range(5):
        a.spawn()
        b.spawn()

    assert [p.top.height for p in a.pairs] == [p.top.height for p in b.pairs]


def test_advance_moves_both_pipes_of_every_pair(rng):
    track = PipeTrack(rng)
    track.spawn()

    track.advance(0.5)

    for pair in track.pairs:
        assert pair.top.x == pytest.approx(SCREEN_W - 150)
        assert pair.bottom.x == pair.top.x


def test_single_pair_past_spawn_line_requests_next_obstacle(rng):
    track = PipeTrack(rng)
    place(track.active, 95)

    assert track.check_lifecycle() == [Event.SPAWN_PIPE, Event.SPAWN_COIN, Event.UPDATE_SCORE]


def test_single_pair_before_spawn_line_is_quiet(rng):
    track = PipeTrack(rng)
    place(track.active, 101)

    assert track.check_lifecycle() == []


def test_second_pair_suppresses_spawn(rng):
    track = PipeTrack(rng)
    place(track.active, 95)
    track.spawn()

    assert track.check_lifecycle() == []


def test_oldest_pair_past_despawn_line_requests_removal(rng):
    track = PipeTrack(rng)
    place(track.active, -150)
    track.spawn()

    assert track.check_lifecycle() == [Event.DESPAWN_PIPE]


def test_lone_pair_past_despawn_line_also_requests_spawn(rng):
    track = PipeTrack(rng)
    place(track.active, -151)

    assert track.check_lifecycle() == [
        Event.DESPAWN_PIPE, Event.SPAWN_PIPE, Event.SPAWN_COIN, Event.UPDATE_SCORE,
    ]


def test_update_queues_lifecycle_events(rng):
    track = PipeTrack(rng)
    place(track.active, 101)
    queue = EventQueue()

    track.update(0.01, queue)   # 3 px → 98

    assert list(queue.drain()) == [Event.SPAWN_PIPE, Event.SPAWN_COIN, Event.UPDATE_SCORE]


def test_despawn_removes_oldest_first(rng):
    track = PipeTrack(rng)
    first = track.active
    second = track.spawn()

    assert track.despawn() is first
    assert track.active is second


def test_despawn_on_empty_track_is_an_error(rng):
    track = PipeTrack(rng)
    track.despawn()

    with pytest.raises(EmptyTrackError):
        track.despawn()


def test_spawn_gap_measures_oldest_to_newest(rng):
    track = PipeTrack(rng)
    place(track.active, 100)
    track.spawn()

    assert track.spawn_gap() == SCREEN_W - 100


def test_reset_leaves_one_fresh_pair(rng):
    track = PipeTrack(rng)
    place(track.active, -40)
    track.spawn()
    track.spawn()

    track.reset()

    assert len(track) == 1
    assert track.active.x == SCREEN_W


def test_pair_constructor_puts_bottom_below_gap():
    pair = PipePair.at(500, 120.0)

    assert pair.top.height == 120.0
    assert pair.bottom.y == 270.0
    assert pair.x == 500
