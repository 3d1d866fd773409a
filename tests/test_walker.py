"""Tests for the single random walker."""

import math

import numpy as np
import pytest

from walkpath import (
    Direction, InvalidArgument, MovePattern, Point, WalkConfig, Walker, WalkerType,
    walker_type_name,
)


class FixedSpeedWalker(Walker):
    """Walker whose speed draw is replaced by a constant."""

    def __init__(self, speed, total_steps, config=None):
        self._fixed_speed = speed
        super().__init__(total_steps, config)

    def sample_speed(self):
        return self._fixed_speed


def step_offsets(walker):
    path = walker.get_path()
    return [
        (path[i].point.x - path[i - 1].point.x, path[i].point.y - path[i - 1].point.y)
        for i in range(1, len(path))
    ]


def is_zero_or_speed(delta, speed):
    return abs(delta) < 1e-9 or abs(abs(delta) - speed) < 1e-9


class TestConstruction:

    def test_default_config(self):
        walker = Walker(100)
        walker.generate()
        assert walker.get_total_steps() == 100
        assert walker.get_config() == WalkConfig()

    def test_seed_positional_and_keyword(self):
        by_position = Walker(100, 42)
        by_keyword = Walker(100, seed=42)
        assert by_position.get_config().seed == 42
        assert by_keyword.get_config().seed == 42
        assert by_position.get_speed() == by_keyword.get_speed()

    def test_numpy_integer_seed(self):
        walker = Walker(10, np.int64(5))
        assert walker.get_config().seed == 5
        assert walker.get_speed() == Walker(10, 5).get_speed()

    def test_numpy_integer_steps(self):
        walker = Walker(np.int32(12), seed=3)
        walker.generate()
        assert walker.get_total_steps() == 12
        assert len(walker.get_path()) == 13

    @pytest.mark.parametrize("steps", [2.5, 3.0, "10", None, True])
    def test_non_integer_steps_rejected(self, steps):
        with pytest.raises(InvalidArgument):
            Walker(steps)

    def test_seed_keyword_overrides_config_seed(self):
        config = WalkConfig(seed=7, min_speed=2.0, max_speed=4.0)
        walker = Walker(10, config, seed=8)
        assert walker.get_config().seed == 8
        assert walker.get_config().min_speed == 2.0

    @pytest.mark.parametrize("steps", [0, -10])
    def test_non_positive_steps_rejected(self, steps):
        with pytest.raises(InvalidArgument):
            Walker(steps)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Walker(0)

    def test_speed_available_before_generate(self):
        config = WalkConfig(seed=1337, min_speed=2.0, max_speed=5.0)
        walker = Walker(50, config)
        assert 2.0 <= walker.get_speed() <= 5.0 * 1.025

    def test_empty_path_before_generate(self):
        walker = Walker(10)
        assert len(walker.get_path()) == 0
        assert walker.get_start_point() == Point()
        assert walker.get_end_point() == Point()

    def test_negative_seed_accepted(self):
        walker = Walker(10, seed=-1)
        walker.generate()
        assert len(walker.get_path()) == 11


class TestGeneration:

    @pytest.mark.parametrize("steps", [1, 2, 100, 257])
    def test_path_length(self, steps):
        walker = Walker(steps, seed=42)
        walker.generate()
        assert len(walker.get_path()) == steps + 1

    def test_start_and_end_are_path_ends(self):
        walker = Walker(100, seed=42)
        walker.generate()
        path = walker.get_path()
        assert walker.get_start_point() == path[0].point
        assert walker.get_end_point() == path[-1].point
        assert math.isfinite(walker.get_end_point().x)
        assert math.isfinite(walker.get_end_point().y)

    def test_steps_move_by_speed(self):
        walker = Walker(100, seed=42)
        walker.generate()
        speed = walker.get_speed()
        for dx, dy in step_offsets(walker):
            assert is_zero_or_speed(dx, speed)
            assert is_zero_or_speed(dy, speed)
            assert (dx, dy) != (0.0, 0.0)

    def test_z_carried_through(self):
        walker = Walker(20, seed=3)
        walker.generate()
        assert all(pose.point.z == 0.0 for pose in walker.get_path())

    def test_eight_direction_produces_diagonals(self):
        config = WalkConfig(seed=999, move_pattern=MovePattern.EIGHT_DIRECTION,
                            random_start=False)
        walker = Walker(1000, config)
        walker.generate()
        assert any(abs(dx) > 1e-9 and abs(dy) > 1e-9 for dx, dy in step_offsets(walker))

    def test_four_direction_moves_one_axis(self):
        config = WalkConfig(seed=888, move_pattern=MovePattern.FOUR_DIRECTION,
                            random_start=False)
        walker = Walker(500, config)
        walker.generate()
        speed = walker.get_speed()
        for dx, dy in step_offsets(walker):
            moved = [d for d in (dx, dy) if abs(d) > 1e-9]
            assert len(moved) == 1
            assert abs(abs(moved[0]) - speed) < 1e-9

    def test_four_direction_never_samples_diagonals(self):
        walker = Walker(10, WalkConfig(move_pattern=MovePattern.FOUR_DIRECTION))
        cardinals = {Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST}
        assert {walker.sample_direction() for _ in range(400)} == cardinals

    def test_eight_direction_samples_all(self):
        walker = Walker(10)
        assert {walker.sample_direction() for _ in range(800)} == set(Direction)

    def test_fixed_start_is_origin(self):
        walker = Walker(100, WalkConfig(seed=5, random_start=False))
        walker.generate()
        assert walker.get_start_point() == Point(0.0, 0.0, 0.0)

    def test_random_start_within_range(self):
        steps, factor = 100, 2.5
        bound = math.sqrt(steps) * factor
        for seed in range(20):
            walker = Walker(steps, WalkConfig(seed=seed, start_range_factor=factor))
            walker.generate()
            start = walker.get_start_point()
            assert -bound <= start.x <= bound
            assert -bound <= start.y <= bound

    def test_advance_offsets(self):
        walker = FixedSpeedWalker(2.0, 5)
        origin = Point(1.0, 1.0, 4.0)
        assert walker.advance(Direction.NORTH, origin) == Point(1.0, 3.0, 4.0)
        assert walker.advance(Direction.SOUTHWEST, origin) == Point(-1.0, -1.0, 4.0)
        assert walker.advance(Direction.EAST, origin) == Point(3.0, 1.0, 4.0)
        assert walker.advance(Direction.NORTHWEST, origin) == Point(-1.0, 3.0, 4.0)

    def test_regenerate_continues_stream(self):
        walker = Walker(100, seed=42)
        first = list(walker.generate())
        second = list(walker.generate())
        assert len(second) == 101
        assert first != second


class TestDeterminism:

    def test_same_seed_same_walk(self):
        config = WalkConfig(seed=12345)
        walker1 = Walker(50, config)
        walker2 = Walker(50, config)
        walker1.generate()
        walker2.generate()
        assert walker1.get_speed() == walker2.get_speed()
        assert walker1.get_path() == walker2.get_path()

    def test_different_seeds_differ(self):
        walker1 = Walker(50, 111)
        walker2 = Walker(50, 222)
        walker1.generate()
        walker2.generate()
        assert (walker1.get_speed() != walker2.get_speed()
                or walker1.get_end_point() != walker2.get_end_point())


class TestSpeed:

    def test_speed_bounds_across_seeds(self):
        for seed in range(200):
            walker = Walker(1, WalkConfig(seed=seed, min_speed=2.0, max_speed=5.0))
            assert 2.0 <= walker.get_speed() <= 5.0 * 1.025

    def test_superhuman_reachable(self):
        types = {Walker(1, seed=seed).get_walker_type() for seed in range(1000)}
        assert WalkerType.SUPERHUMAN in types


class TestClassification:

    CONFIG = WalkConfig(min_speed=1.0, max_speed=3.0)  # threshold 0.5

    @pytest.mark.parametrize("speed,expected", [
        (1.0, WalkerType.SLOW),
        (1.49, WalkerType.SLOW),
        (1.5, WalkerType.NORMAL),
        (2.49, WalkerType.NORMAL),
        (2.5, WalkerType.FAST),
        (3.0, WalkerType.FAST),
        (3.01, WalkerType.SUPERHUMAN),
        (3.075, WalkerType.SUPERHUMAN),
    ])
    def test_boundaries(self, speed, expected):
        walker = FixedSpeedWalker(speed, 10, self.CONFIG)
        assert walker.get_walker_type() == expected

    def test_zero_width_range(self):
        config = WalkConfig(min_speed=2.0, max_speed=2.0)
        assert FixedSpeedWalker(2.0, 10, config).get_walker_type() == WalkerType.FAST
        assert FixedSpeedWalker(2.01, 10, config).get_walker_type() == WalkerType.SUPERHUMAN

    def test_type_names(self):
        assert walker_type_name(WalkerType.SLOW) == "Slow Walker"
        assert walker_type_name(WalkerType.NORMAL) == "Normal Walker"
        assert walker_type_name(WalkerType.FAST) == "Fast Walker"
        assert walker_type_name(WalkerType.SUPERHUMAN) == "Superhuman"


class TestSetters:

    def test_set_seed_matches_fresh_walker(self):
        walker = Walker(30, seed=1)
        walker.generate()
        walker.set_seed(42)
        fresh = Walker(30, seed=42)
        assert walker.get_speed() == fresh.get_speed()
        walker.generate()
        fresh.generate()
        assert walker.get_path() == fresh.get_path()

    def test_set_speed_range_resamples_immediately(self):
        walker = Walker(30, seed=1)
        walker.set_speed_range(10.0, 20.0)
        assert 10.0 <= walker.get_speed() <= 20.0 * 1.025
        assert walker.get_config().min_speed == 10.0
        assert walker.get_config().max_speed == 20.0

    def test_set_speed_range_validates(self):
        walker = Walker(30)
        with pytest.raises(InvalidArgument):
            walker.set_speed_range(5.0, 1.0)
        assert walker.get_config().min_speed == 1.0

    def test_deferred_setters_leave_path_untouched(self):
        walker = Walker(50, seed=9)
        walker.generate()
        before = list(walker.get_path())
        speed = walker.get_speed()

        walker.set_move_pattern(MovePattern.FOUR_DIRECTION)
        walker.set_random_start(False)
        walker.set_start_range_factor(4.0)

        assert list(walker.get_path()) == before
        assert walker.get_speed() == speed

    def test_deferred_setters_apply_on_generate(self):
        walker = Walker(200, seed=9)
        walker.set_move_pattern(MovePattern.FOUR_DIRECTION)
        walker.set_random_start(False)
        walker.generate()
        assert walker.get_start_point() == Point(0.0, 0.0, 0.0)
        for dx, dy in step_offsets(walker):
            assert (abs(dx) > 1e-9) != (abs(dy) > 1e-9)

    def test_set_start_range_factor_zero_starts_at_origin(self):
        walker = Walker(100, seed=4)
        walker.set_start_range_factor(0.0)
        walker.generate()
        assert walker.get_start_point().x == 0.0
        assert walker.get_start_point().y == 0.0
