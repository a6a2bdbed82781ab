"""
Reactive obstacle avoidance from five LaserScan sectors.

The ROS node lives in sector_avoidance.avoid_obstacle_node and is not
imported here, so the core can be used without rclpy.
"""

from .sectors import (DEFAULT_LAYOUT, MalformedScanError, MonitoredSector, ScanSample,
                      SectorLayout, SectorReadings, SectorRole, extract_readings)
from .policy import (Behavior, Decision, PolicyConfig, SectorAvoidancePolicy,
                     VelocityCommand, classify, describe_command)
from .controller import AvoidanceController

__all__ = [
    'DEFAULT_LAYOUT',
    'MalformedScanError',
    'MonitoredSector',
    'ScanSample',
    'SectorLayout',
    'SectorReadings',
    'SectorRole',
    'extract_readings',
    'Behavior',
    'Decision',
    'PolicyConfig',
    'SectorAvoidancePolicy',
    'VelocityCommand',
    'classify',
    'describe_command',
    'AvoidanceController',
]
