"""Seeded random walk path generator."""

from .errors import InvalidArgument, OutOfRange
from .config import MovePattern, WalkConfig, RunConfig
from .model import (
    Point, Quaternion, Pose, Size, Box, Path,
    Direction, WalkerType, Walker, walker_type_name, Simulation,
)

__version__ = "0.1.0"

__all__ = [
    'InvalidArgument',
    'OutOfRange',
    'MovePattern',
    'WalkConfig',
    'RunConfig',
    'Point',
    'Quaternion',
    'Pose',
    'Size',
    'Box',
    'Path',
    'Direction',
    'WalkerType',
    'Walker',
    'walker_type_name',
    'Simulation',
]
