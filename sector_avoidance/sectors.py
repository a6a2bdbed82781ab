"""
Scan sample extraction.

Picks the five monitored beams out of a full LaserScan sweep and normalizes
"no return" readings to the sensor's maximum range.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

import numpy as np


class SectorRole(Enum):
    """Monitored directions, in decision priority order"""
    FRONT = 0        # 0 deg
    NEAR_LEFT = 1    # 30 deg
    FAR_LEFT = 2     # 60 deg
    FAR_RIGHT = 3    # 300 deg
    NEAR_RIGHT = 4   # 330 deg


class MalformedScanError(ValueError, IndexError):
    """Scan is too short to contain every monitored index."""

    def __init__(self, length: int, required: int):
        super().__init__(
            f"scan has {length} ranges, at least {required} required")
        self.length = length
        self.required = required


@dataclass(frozen=True)
class MonitoredSector:
    role: SectorRole
    index: int


@dataclass(frozen=True)
class SectorLayout:
    sectors: Tuple[MonitoredSector, ...]

    def __post_init__(self):
        roles = tuple(s.role for s in self.sectors)
        if roles != tuple(SectorRole):
            raise ValueError(
                f"layout must list sectors in order {[r.name for r in SectorRole]}")
        for s in self.sectors:
            if s.index < 0:
                raise ValueError(f"negative scan index for {s.role.name}: {s.index}")

    @classmethod
    def from_indices(cls, indices: Sequence[int]) -> 'SectorLayout':
        """Build a layout from five scan indices (front, 30, 60, 300, 330 order)."""
        indices = [int(i) for i in indices]
        if len(indices) != len(SectorRole):
            raise ValueError(
                f"expected {len(SectorRole)} sector indices, got {len(indices)}")
        return cls(tuple(MonitoredSector(role, idx)
                         for role, idx in zip(SectorRole, indices)))

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(s.index for s in self.sectors)

    @property
    def min_scan_length(self) -> int:
        return max(self.indices) + 1


DEFAULT_LAYOUT = SectorLayout.from_indices((0, 30, 60, 300, 330))


@dataclass(frozen=True)
class ScanSample:
    index: int
    distance: float


@dataclass(frozen=True)
class SectorReadings:
    samples: Tuple[ScanSample, ...]

    def __post_init__(self):
        if len(self.samples) != len(SectorRole):
            raise ValueError(
                f"expected {len(SectorRole)} samples, got {len(self.samples)}")

    @classmethod
    def from_distances(cls, front: float, near_left: float, far_left: float,
                       far_right: float, near_right: float,
                       layout: SectorLayout = DEFAULT_LAYOUT) -> 'SectorReadings':
        distances = (front, near_left, far_left, far_right, near_right)
        return cls(tuple(ScanSample(idx, float(d))
                         for idx, d in zip(layout.indices, distances)))

    def distance(self, role: SectorRole) -> float:
        return self.samples[role.value].distance

    def distances(self) -> Tuple[float, ...]:
        return tuple(s.distance for s in self.samples)

    @property
    def front(self) -> float:
        return self.distance(SectorRole.FRONT)

    @property
    def near_left(self) -> float:
        return self.distance(SectorRole.NEAR_LEFT)

    @property
    def far_left(self) -> float:
        return self.distance(SectorRole.FAR_LEFT)

    @property
    def far_right(self) -> float:
        return self.distance(SectorRole.FAR_RIGHT)

    @property
    def near_right(self) -> float:
        return self.distance(SectorRole.NEAR_RIGHT)


def extract_readings(ranges: Sequence[float], range_max: float,
                     layout: SectorLayout = DEFAULT_LAYOUT) -> SectorReadings:
    """
    Extract the monitored samples from a full scan.

    Args:
        ranges: LaserScan ranges, one reading per beam index
        range_max: Declared maximum range of the sensor
        layout: Which beam index feeds each sector

    Returns:
        SectorReadings in layout order, non-finite readings set to range_max

    Raises:
        MalformedScanError: scan shorter than layout.min_scan_length
    """
    scan = np.asarray(ranges, dtype=np.float64)
    if scan.ndim != 1 or scan.shape[0] < layout.min_scan_length:
        raise MalformedScanError(int(scan.size), layout.min_scan_length)

    idx = np.asarray(layout.indices, dtype=np.intp)
    picked = scan[idx]
    picked = np.where(np.isfinite(picked), picked, float(range_max))

    return SectorReadings(tuple(ScanSample(int(i), float(d))
                                for i, d in zip(idx, picked)))
