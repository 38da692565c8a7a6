import math
import random

import pytest

from edgepaddle.world import (
    BALL_RADIUS,
    INITIAL_SPEED,
    PADDLE_LENGTH,
    PADDLE_THICKNESS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Controls,
    GameState,
    Rect,
    Side,
    random_angle,
)


class _FixedRandom:
    def __init__(self, draw):
        self.draw = draw

    def random(self):
        return 0.0

    def randrange(self, stop):
        return self.draw


def _state():
    return GameState(random.Random(1234))


def test_rect_overlap():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_rect_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))


def test_random_angle_midpoint():
    assert random_angle(90, 270, _FixedRandom(500)) == pytest.approx(180.0)


def test_random_angle_lower_bound():
    assert random_angle(-45, 45, _FixedRandom(0)) == -45


@pytest.mark.parametrize("low,high", [(90, 270), (-90, 90), (-45, 45), (135, 225)])
def test_random_angle_stays_in_range(low, high):
    rng = random.Random(7)
    for _ in range(200):
        value = random_angle(low, high, rng)
        assert low <= value < high


def test_initial_state():
    state = _state()
    assert (state.ball_x, state.ball_y) == (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)
    assert state.chosen_side is Side.TOP
    assert state.paddle_active
    assert state.speed == INITIAL_SPEED
    assert state.paddle_position == WINDOW_WIDTH / 2 + PADDLE_LENGTH / 2
    assert math.hypot(*state.velocity) == pytest.approx(1.0)


def test_choose_left_side_places_vertical_paddle():
    state = _state()
    state.choose_side(Side.LEFT)
    assert state.paddle_position == WINDOW_HEIGHT / 2 - PADDLE_LENGTH / 2
    assert state.paddle_rect() == Rect(0.0, state.paddle_position, PADDLE_THICKNESS, PADDLE_LENGTH)


def test_choose_bottom_side_places_horizontal_paddle():
    state = _state()
    state.choose_side(Side.BOTTOM)
    rect = state.paddle_rect()
    assert rect.top + rect.height == WINDOW_HEIGHT
    assert rect.width == PADDLE_LENGTH


def test_choose_none_raises():
    with pytest.raises(ValueError):
        _state().choose_side(Side.NONE)


def test_ball_rect_centred_on_ball():
    state = _state()
    rect = state.ball_rect()
    assert rect.left + BALL_RADIUS == state.ball_x
    assert rect.width == 2 * BALL_RADIUS


def test_step_accumulates_time_and_speed():
    state = _state()
    state.velocity = (1.0, 0.0)
    assert state.step(0.5) is None
    assert state.time_survived == pytest.approx(0.5)
    assert state.speed > INITIAL_SPEED
    assert state.ball_x > WINDOW_WIDTH / 2


def test_paddle_clamped_at_zero():
    state = _state()
    state.velocity = (0.0, 1.0)
    state.choose_side(Side.TOP)
    for _ in range(10):
        state.step(0.1, Controls(left=True))
    assert state.paddle_position == 0.0


def test_paddle_clamped_at_far_edge_on_vertical_side():
    state = _state()
    state.velocity = (1.0, 0.0)
    state.choose_side(Side.LEFT)
    for _ in range(10):
        state.step(0.1, Controls(down=True))
    assert state.paddle_position == WINDOW_HEIGHT - PADDLE_LENGTH


def test_leaving_window_ends_round():
    state = _state()
    state.velocity = (1.0, 0.0)
    state.ball_x = WINDOW_WIDTH - 1
    result = state.step(0.25)
    assert result == pytest.approx(0.25)
    assert state.chosen_side is Side.NONE
    assert not state.paddle_active
    assert state.speed == INITIAL_SPEED
    assert state.time_survived == 0.0
    assert (state.ball_x, state.ball_y) == (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)
    assert state.paddle_rect() is None


def test_hitting_paddle_changes_direction():
    state = _state()
    state.choose_side(Side.TOP)
    state.ball_x = state.paddle_position + PADDLE_LENGTH / 2
    state.ball_y = PADDLE_THICKNESS + 5
    state.velocity = (0.0, -1.0)
    state.step(0.001)
    assert state.velocity != (0.0, -1.0)
    assert math.hypot(*state.velocity) == pytest.approx(1.0)


def test_background_stays_in_byte_range():
    state = _state()
    state.velocity = (0.0, 0.0)
    for _ in range(100):
        state.step(1.0)
        assert all(0 <= channel < 256 for channel in state.background)