import random

import pytest

from core.coins import Coin, CoinTrack
from core.errors import EmptyTrackError
from core.events import Event, EventQueue
from settings import SCREEN_W, SCREEN_H


@pytest.fixture
def track(rng):
    return CoinTrack(rng)


def only_coin_at(track, x, y):
    track.coins[0].x = x
    track.coins[0].y = y
    return track.coins[0]


def test_new_track_holds_one_armed_coin(track):
    assert len(track) == 1
    assert track.armed
    assert 600 <= track.coins[0].x <= 1400
    assert 70 <= track.coins[0].y < SCREEN_H - 70


def test_bird_on_coin_collects_it_once(track, stats):
    only_coin_at(track, 5, 300)

    events = track.check_collision(5, 300, stats)

    assert events == [Event.DESPAWN_COIN]
    assert stats.coins_collected == 1
    assert track.armed is False


def test_disarmed_coin_cannot_be_collected_again(track, stats):
    only_coin_at(track, 5, 300)
    track.check_collision(5, 300, stats)

    for _ in range(10):
        assert track.check_collision(5, 300, stats) == []

    assert stats.coins_collected == 1


def test_coin_off_left_edge_is_missed(track, stats):
    only_coin_at(track, -41, 300)

    assert track.check_collision(200, 300, stats) == [Event.DESPAWN_COIN]
    assert stats.coins_collected == 0
    assert track.armed


def test_coin_out_of_reach_does_nothing(track, stats):
    only_coin_at(track, 800, 300)

    assert track.check_collision(200, 300, stats) == []
    assert stats.coins_collected == 0


def test_empty_track_does_nothing(track, stats):
    track.despawn()

    assert track.check_collision(200, 300, stats) == []


@pytest.mark.parametrize("px, py, inside", [
    (190, 290, True),     # top-left corner, inclusive
    (249, 349, True),
    (250, 300, False),    # right edge, exclusive
    (200, 350, False),    # bottom edge, exclusive
    (189, 300, False),
])
def test_pickup_box_edges(px, py, inside):
    assert Coin(200, 300).contains(px, py) is inside


def test_spawn_lands_in_the_lane_and_rearms(track, stats):
    only_coin_at(track, 5, 300)
    track.check_collision(5, 300, stats)
    assert not track.armed

    coin = track.spawn(1100)

    assert track.armed
    assert SCREEN_W + 1100 - 900 <= coin.x <= SCREEN_W + 1100 - 400
    assert 70 <= coin.y < SCREEN_H - 70


def test_only_oldest_coin_is_checked(track, stats):
    only_coin_at(track, 800, 300)
    second = track.spawn(1100)
    second.x, second.y = 200, 300

    assert track.check_collision(200, 300, stats) == []


def test_advance_scrolls_every_coin(track):
    track.spawn(1100)
    before = [c.x for c in track.coins]

    track.advance(0.1)

    assert [c.x for c in track.coins] == pytest.approx([x - 30 for x in before])


def test_update_queues_despawn_on_pickup(track, stats):
    only_coin_at(track, 203, 300)
    queue = EventQueue()

    track.update(0.01, 200, 300, stats, queue)

    assert list(queue.drain()) == [Event.DESPAWN_COIN]
    assert stats.coins_collected == 1


def test_despawn_on_empty_track_is_an_error(track):
    track.despawn()

    with pytest.raises(EmptyTrackError):
        track.despawn()


def test_same_seed_gives_same_coins():
    a = CoinTrack(random.Random(3))
    b = CoinTrack(random.Random(3))

    assert (a.coins[0].x, a.coins[0].y) == (b.coins[0].x, b.coins[0].y)
