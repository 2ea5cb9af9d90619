import random

import pytest

from core.controls import InputSnapshot
from core.errors import HighScoreError
from core.events import Event
from core.game import Game, PAUSE_BUTTON, PLAY_BUTTON, RETRY_BUTTON
from core.state import GameState
from core.stats import Stats
from settings import SCREEN_W

DT = 1 / 60
IDLE = InputSnapshot()


def click(rect):
    return InputSnapshot(click=rect.center)


@pytest.fixture
def game(stats):
    return Game(stats, random.Random(5))


@pytest.fixture
def playing(game):
    game.update(DT, click(PLAY_BUTTON))
    return game


def keep_bird_in_gap(game):
    game.bird.y = game.pipes.active.top.height + 60
    game.bird.velocity = 0.0


def test_starts_on_menu_with_world_frozen(game):
    x = game.pipes.active.x

    game.update(DT, IDLE)

    assert game.state is GameState.START_MENU
    assert game.pipes.active.x == x
    assert game.bg_offset < 0


def test_play_click_starts_a_run(game):
    game.update(DT, click(PLAY_BUTTON))

    assert game.state is GameState.PLAYING
    assert game.stats.score == 0
    assert len(game.pipes) == 1


def test_click_elsewhere_on_menu_does_nothing(game):
    game.update(DT, InputSnapshot(click=(5, 5)))

    assert game.state is GameState.START_MENU


def test_pause_button_ignored_on_menu(game):
    game.update(DT, click(PAUSE_BUTTON))

    assert game.state is GameState.START_MENU


def test_pause_freezes_and_resumes(playing):
    playing.update(DT, click(PAUSE_BUTTON))
    assert playing.state is GameState.PAUSED

    x, y = playing.pipes.active.x, playing.bird.y
    for _ in range(10):
        playing.update(DT, IDLE)
    assert (playing.pipes.active.x, playing.bird.y) == (x, y)

    playing.update(DT, click(PAUSE_BUTTON))
    assert playing.state is GameState.PLAYING


def test_long_run_scores_and_never_empties_the_track(playing, store):
    for _ in range(60 * 20):
        keep_bird_in_gap(playing)
        playing.update(DT, IDLE)
        assert playing.state is GameState.PLAYING
        assert len(playing.pipes) >= 1
        assert len(playing.events) == 0

    assert playing.stats.score >= 4
    assert playing.stats.high_score == playing.stats.score
    assert store.load() == playing.stats.score


def test_crash_ends_the_run_and_freezes_world(playing):
    playing.pipes.active.shift(150 - playing.pipes.active.x)
    playing.bird.y = 5

    playing.update(DT, IDLE)
    assert playing.state is GameState.GAME_OVER

    x = playing.pipes.active.x
    playing.update(DT, IDLE)
    assert playing.pipes.active.x == x


def test_pause_button_ignored_after_crash(playing):
    playing.state = GameState.GAME_OVER

    playing.update(DT, click(PAUSE_BUTTON))

    assert playing.state is GameState.GAME_OVER


def test_play_again_resets_run_and_drops_stale_coin(playing):
    playing.stats.record_pass()
    playing.state = GameState.GAME_OVER
    coins_before = len(playing.coins)

    playing.update(DT, click(RETRY_BUTTON))

    assert playing.state is GameState.PLAYING
    assert playing.stats.score == 0
    assert playing.stats.high_score == 1
    assert len(playing.pipes) == 1
    assert playing.pipes.active.x == SCREEN_W
    assert len(playing.coins) == coins_before - 1


def test_drain_dispatches_each_event(playing):
    playing.pipes.active.shift(100 - playing.pipes.active.x)
    playing.state = GameState.PAUSED
    coins_before = len(playing.coins)

    playing.events.push(Event.SPAWN_PIPE)
    playing.events.push(Event.SPAWN_COIN)
    playing.events.push(Event.UPDATE_SCORE)
    playing.update(DT, IDLE)

    assert len(playing.pipes) == 2
    assert len(playing.coins) == coins_before + 1
    newest = playing.coins.coins[-1]
    assert SCREEN_W + 1100 - 900 <= newest.x <= SCREEN_W + 1100 - 400
    assert playing.stats.score == 1
    assert len(playing.events) == 0

    playing.events.push(Event.DESPAWN_PIPE)
    playing.events.push(Event.DESPAWN_COIN)
    playing.update(DT, IDLE)

    assert len(playing.pipes) == 1
    assert len(playing.coins) == coins_before


def test_high_score_write_failure_propagates(broken_store):
    game = Game(Stats(broken_store), random.Random(5))
    game.events.push(Event.UPDATE_SCORE)

    with pytest.raises(HighScoreError):
        game.update(DT, IDLE)


def test_bird_animation_advances_every_tenth_of_a_second(playing):
    assert playing.bird_frame == 0

    playing.update(0.1, IDLE)
    assert playing.bird_frame == 1

    playing.bird_frame = 6
    playing.update(0.1, IDLE)
    assert playing.bird_frame == 0


def test_background_wraps_after_one_screen(game):
    for _ in range(8):
        game.update(1.0, IDLE)
    assert game.bg_offset == pytest.approx(-SCREEN_W)

    game.update(1.0, IDLE)
    assert game.bg_offset == 0.0
