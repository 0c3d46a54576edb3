import random

import pytest

from pypong.ball import Ball


def test_default_size_is_ten_by_ten():
    ball = Ball(1, 2, 3, 4)
    assert (ball.width, ball.height) == (10, 10)


def test_move_with_zero_speed_keeps_position():
    ball = Ball(100, 200, -1, 2)
    ball.move(0)
    assert (ball.v_pos, ball.h_pos) == (100, 200)


@pytest.mark.parametrize("v_speed,h_speed", [(-1, 2), (2, -1), (1, 1), (-2, -2)])
def test_two_slow_moves_equal_one_double_speed_move(v_speed, h_speed):
    slow = Ball(300, 400, v_speed, h_speed)
    fast = Ball(300, 400, v_speed, h_speed)
    slow.move(1)
    slow.move(1)
    fast.move(2)
    assert (slow.v_pos, slow.h_pos) == (fast.v_pos, fast.h_pos)


def test_reversing_speed_returns_to_start():
    ball = Ball(50, 60, 2, -1)
    ball.move(3)
    assert (ball.v_pos, ball.h_pos) != (50, 60)
    ball.set_speed(-ball.v_speed, -ball.h_speed)
    ball.move(3)
    assert (ball.v_pos, ball.h_pos) == (50, 60)


def test_set_speed_replaces_both_components():
    ball = Ball(0, 0, 1, 1)
    ball.set_speed(-2, 7)
    assert (ball.v_speed, ball.h_speed) == (-2, 7)


def test_random_speed_values_come_from_allowed_sets():
    seen_h = set()
    seen_v = set()
    for seed in range(200):
        ball = Ball.with_random_speed(360, 510, random.Random(seed))
        assert (ball.v_pos, ball.h_pos) == (360, 510)
        seen_h.add(ball.h_speed)
        seen_v.add(ball.v_speed)
    assert seen_h == {-1, 1}
    assert seen_v == {-1, 1, -2, 2}


def test_random_speed_is_reproducible_with_same_seed():
    first = Ball.with_random_speed(10, 20, random.Random(42))
    second = Ball.with_random_speed(10, 20, random.Random(42))
    assert first == second