"""Single random walker with a seeded, self-owned random stream."""

import math
import numbers
from dataclasses import replace
from enum import Enum
from typing import Dict, Optional, Tuple, Union
import numpy as np

from ..config import MovePattern, WalkConfig
from ..errors import require_positive_count
from .geometry import Path, Point, Pose

# Extra headroom above max_speed; speeds landing there are "superhuman"
SUPERHUMAN_BONUS = 0.025

# Fraction of the speed range taken by the slow and fast tiers
TIER_FRACTION = 0.25


class Direction(Enum):
    """Compass directions, in draw order for the 8-direction pattern."""
    NORTH = "N"
    NORTHEAST = "NE"
    EAST = "E"
    SOUTHEAST = "SE"
    SOUTH = "S"
    SOUTHWEST = "SW"
    WEST = "W"
    NORTHWEST = "NW"


class WalkerType(Enum):
    """Speed tier of a walker relative to its configured range."""
    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"
    SUPERHUMAN = "superhuman"


# Per-axis unit offsets; scaled by speed, so diagonals move sqrt(2) * speed
DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.NORTHEAST: (1, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTHEAST: (1, -1),
    Direction.SOUTH: (0, -1),
    Direction.SOUTHWEST: (-1, -1),
    Direction.WEST: (-1, 0),
    Direction.NORTHWEST: (-1, 1),
}

PATTERN_DIRECTIONS: Dict[MovePattern, Tuple[Direction, ...]] = {
    MovePattern.EIGHT_DIRECTION: tuple(Direction),
    MovePattern.FOUR_DIRECTION: (
        Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST
    ),
}

_TYPE_NAMES = {
    WalkerType.SLOW: "Slow Walker",
    WalkerType.NORMAL: "Normal Walker",
    WalkerType.FAST: "Fast Walker",
    WalkerType.SUPERHUMAN: "Superhuman",
}


def walker_type_name(walker_type: WalkerType) -> str:
    """Human readable label for a speed tier."""
    return _TYPE_NAMES[walker_type]


class Walker:
    """
    Random walker moving at a constant speed on a 4- or 8-connected lattice.

    Every random draw comes from one numpy Generator seeded from
    ``config.seed``. The draw order is fixed:

    1. speed, at construction and after ``set_seed``/``set_speed_range``
    2. start x, start y (only when ``random_start`` is set), per ``generate()``
    3. one direction per step, per ``generate()``

    Speed is uniform on [min_speed, max_speed * (1 + SUPERHUMAN_BONUS)].
    """

    def __init__(self, total_steps: int,
                 config: Union[WalkConfig, int, None] = None,
                 seed: Optional[int] = None):
        total_steps = require_positive_count('total_steps', total_steps)

        if config is None:
            config = WalkConfig()
        elif isinstance(config, numbers.Integral):
            config = WalkConfig(seed=int(config))
        if seed is not None:
            config = config.with_seed(seed)

        self._total_steps = total_steps
        self._config = config
        self._path = Path()
        self._rng = self._make_rng(config.seed)
        self._speed = 0.0
        self._init_speed()

    @staticmethod
    def _make_rng(seed: int) -> np.random.Generator:
        # numpy rejects negative seeds; fold into the 32-bit seed space
        return np.random.default_rng(seed % 2**32)

    def _init_speed(self) -> None:
        self._speed = self.sample_speed()

    def sample_speed(self) -> float:
        """Draw a speed from the configured range plus superhuman headroom."""
        bonus = self._config.max_speed * SUPERHUMAN_BONUS
        return float(self._rng.uniform(self._config.min_speed,
                                       self._config.max_speed + bonus))

    def sample_start(self) -> Point:
        """Origin, or a uniform point in a square scaled by sqrt(total_steps)."""
        if not self._config.random_start:
            return Point(0.0, 0.0, 0.0)
        bound = math.sqrt(self._total_steps) * self._config.start_range_factor
        x = float(self._rng.uniform(-bound, bound))
        y = float(self._rng.uniform(-bound, bound))
        return Point(x, y, 0.0)

    def sample_direction(self) -> Direction:
        choices = PATTERN_DIRECTIONS[self._config.move_pattern]
        return choices[int(self._rng.integers(len(choices)))]

    def advance(self, direction: Direction, current: Point) -> Point:
        """Position after one step from ``current`` towards ``direction``."""
        dx, dy = DIRECTION_OFFSETS[direction]
        return Point(current.x + dx * self._speed,
                     current.y + dy * self._speed,
                     current.z)

    def generate(self) -> Path:
        """Rebuild the path, continuing the current random stream."""
        self._path.clear()
        current = self.sample_start()
        self._path.append(Pose(current))

        for _ in range(self._total_steps):
            current = self.advance(self.sample_direction(), current)
            self._path.append(Pose(current))

        return self._path

    # Accessors

    def get_path(self) -> Path:
        return self._path

    def get_speed(self) -> float:
        return self._speed

    def get_walker_type(self) -> WalkerType:
        """Classify current speed into a tier of [min_speed, max_speed]."""
        low, high = self._config.min_speed, self._config.max_speed
        threshold = (high - low) * TIER_FRACTION
        speed = self._speed

        if speed < low + threshold:
            return WalkerType.SLOW
        elif low + threshold <= speed < high - threshold:
            return WalkerType.NORMAL
        elif high - threshold <= speed <= high:
            return WalkerType.FAST
        return WalkerType.SUPERHUMAN

    def get_start_point(self) -> Point:
        if not self._path.waypoints:
            return Point()
        return self._path.waypoints[0].point

    def get_end_point(self) -> Point:
        if not self._path.waypoints:
            return Point()
        return self._path.waypoints[-1].point

    def get_total_steps(self) -> int:
        return self._total_steps

    def get_config(self) -> WalkConfig:
        return self._config

    # Setters. Seed and speed range resample the speed immediately; the rest
    # only apply from the next generate() call.

    def set_seed(self, seed: int) -> None:
        self._config = self._config.with_seed(seed)
        self._rng = self._make_rng(seed)
        self._init_speed()

    def set_speed_range(self, min_speed: float, max_speed: float) -> None:
        self._config = replace(self._config, min_speed=min_speed, max_speed=max_speed)
        self._init_speed()

    def set_move_pattern(self, pattern: MovePattern) -> None:
        self._config = replace(self._config, move_pattern=pattern)

    def set_random_start(self, random_start: bool) -> None:
        self._config = replace(self._config, random_start=random_start)

    def set_start_range_factor(self, factor: float) -> None:
        self._config = replace(self._config, start_range_factor=factor)

    def __repr__(self) -> str:
        return (f"Walker(steps={self._total_steps}, seed={self._config.seed}, "
                f"speed={self._speed:.3f}, type={self.get_walker_type().value})")
