"""Configuration dataclasses for random walk generation."""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from .errors import InvalidArgument


class MovePattern(Enum):
    """Set of directions a walker may pick from at each step."""
    FOUR_DIRECTION = "four"    # N, E, S, W
    EIGHT_DIRECTION = "eight"  # cardinals plus diagonals


@dataclass(frozen=True)
class WalkConfig:
    seed: int = 1337
    min_speed: float = 1.0
    max_speed: float = 3.0
    move_pattern: MovePattern = MovePattern.EIGHT_DIRECTION
    random_start: bool = True
    start_range_factor: float = 1.0  # multiplied by sqrt(steps)

    def __post_init__(self):
        for name in ('min_speed', 'max_speed', 'start_range_factor'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidArgument(f"{name} must be finite, got {value}")
        if self.min_speed < 0:
            raise InvalidArgument(f"min_speed must be non-negative, got {self.min_speed}")
        if self.min_speed > self.max_speed:
            raise InvalidArgument(
                f"min_speed ({self.min_speed}) must not exceed max_speed ({self.max_speed})"
            )
        if self.start_range_factor < 0:
            raise InvalidArgument(
                f"start_range_factor must be non-negative, got {self.start_range_factor}"
            )

    def with_seed(self, seed: int) -> "WalkConfig":
        """Copy of this config with a different seed."""
        return replace(self, seed=seed)


@dataclass
class RunConfig:
    """Settings for one command line run."""
    total_steps: int = 100
    num_walkers: int = 1
    walk: WalkConfig = field(default_factory=WalkConfig)

    # Export flags
    csv_enabled: bool = True
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))
