"""Model package for random walk path generation."""

from .geometry import Point, Quaternion, Pose, Size, Box, Path
from .walker import Direction, WalkerType, Walker, walker_type_name
from .simulation import Simulation

__all__ = [
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
