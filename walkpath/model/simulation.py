"""Multi-walker simulation sharing one base configuration."""

from collections import Counter
from dataclasses import replace
from typing import Dict, List, Optional, Tuple
import numpy as np

from ..config import WalkConfig
from ..errors import OutOfRange, require_positive_count
from .geometry import Box, Point, Pose, Size
from .walker import Walker, WalkerType


class Simulation:
    """
    Fixed set of independent walkers.

    Walker ``i`` is built with ``config.seed + i`` and otherwise the same
    configuration, so a base seed reproduces the whole population and every
    walker in it can be rebuilt on its own.
    """

    def __init__(self, total_steps: int, num_walkers: int,
                 config: Optional[WalkConfig] = None):
        total_steps = require_positive_count('total_steps', total_steps)
        num_walkers = require_positive_count('num_walkers', num_walkers)

        self._config = config if config is not None else WalkConfig()
        self._total_steps = total_steps

        # Seeds are fixed here, before any walker draws
        self._walkers: Tuple[Walker, ...] = tuple(
            Walker(total_steps, replace(self._config, seed=self._config.seed + i))
            for i in range(num_walkers)
        )

    def generate(self) -> None:
        """Generate every walker's path in index order."""
        for walker in self._walkers:
            walker.generate()

    def get_walkers(self) -> Tuple[Walker, ...]:
        return self._walkers

    def get_walker(self, index: int) -> Walker:
        if not 0 <= index < len(self._walkers):
            raise OutOfRange(f"walker index {index} out of range [0, {len(self._walkers)})")
        return self._walkers[index]

    def num_walkers(self) -> int:
        return len(self._walkers)

    def get_total_steps(self) -> int:
        return self._total_steps

    def get_config(self) -> WalkConfig:
        return self._config

    def get_bounds(self) -> Box:
        """
        Axis-aligned box around every waypoint of every walker.

        Computed from the current paths on each call. Returns the zero box
        at the origin when nothing has been generated yet.
        """
        arrays = [w.get_path().to_array() for w in self._walkers]
        arrays = [a for a in arrays if len(a)]
        if not arrays:
            return Box()

        points = np.vstack(arrays)
        min_x, min_y = points.min(axis=0)
        max_x, max_y = points.max(axis=0)

        center = Point(float(min_x + max_x) / 2.0, float(min_y + max_y) / 2.0, 0.0)
        dimensions = Size(float(max_x - min_x), float(max_y - min_y), 0.0)
        return Box(Pose(center), dimensions)

    def walker_type_counts(self) -> Dict[WalkerType, int]:
        """Number of walkers in each speed tier, all tiers present."""
        counts = Counter(w.get_walker_type() for w in self._walkers)
        return {t: counts.get(t, 0) for t in WalkerType}

    def to_csv_rows(self) -> List[Dict]:
        """Flatten all paths into one row per waypoint."""
        return [
            {
                "walker_id": walker_id,
                "step": step,
                "x": pose.point.x,
                "y": pose.point.y,
            }
            for walker_id, walker in enumerate(self._walkers)
            for step, pose in enumerate(walker.get_path())
        ]
