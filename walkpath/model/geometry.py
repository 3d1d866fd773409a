"""Pose, path and box value types shared with rendering and test code."""

from dataclasses import dataclass, field
from typing import Iterator, List
import numpy as np


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0  # unused by the walk, kept for 3D pose interop


@dataclass(frozen=True)
class Quaternion:
    """Orientation placeholder; the walk never rotates."""
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Pose:
    """A single waypoint."""
    point: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True)
class Size:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Box:
    """Axis-aligned box anchored at its centre."""
    pose: Pose = field(default_factory=Pose)
    size: Size = field(default_factory=Size)

    @property
    def min_x(self) -> float:
        return self.pose.point.x - self.size.x / 2.0

    @property
    def max_x(self) -> float:
        return self.pose.point.x + self.size.x / 2.0

    @property
    def min_y(self) -> float:
        return self.pose.point.y - self.size.y / 2.0

    @property
    def max_y(self) -> float:
        return self.pose.point.y + self.size.y / 2.0


@dataclass
class Path:
    """Ordered waypoints, start first."""
    waypoints: List[Pose] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Pose]:
        return iter(self.waypoints)

    def __getitem__(self, index: int) -> Pose:
        return self.waypoints[index]

    def append(self, pose: Pose) -> None:
        self.waypoints.append(pose)

    def clear(self) -> None:
        self.waypoints.clear()

    def to_array(self) -> np.ndarray:
        """Return x/y coordinates as an (n, 2) array."""
        if not self.waypoints:
            return np.empty((0, 2))
        return np.array([(p.point.x, p.point.y) for p in self.waypoints])
