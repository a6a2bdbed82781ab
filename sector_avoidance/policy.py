"""
Reactive sector avoidance policy.

Each scan is judged on its own: the first matching guard wins and the
result depends only on the five sector distances and the configuration.

Sign convention:
    positive linear  = forward
    positive angular = turn LEFT (counter-clockwise)
"""

import math
from dataclasses import dataclass
from enum import Enum, auto

from .sectors import SectorReadings


DEFAULT_THRESHOLD = 0.4      # [m] closer than this -> blocked
DEFAULT_FORWARD_SPEED = 0.2  # [m/s]
DEFAULT_TURN_RATE = 0.5      # [rad/s]


class Behavior(Enum):
    FRONT_BLOCKED_TURN_RIGHT = auto()  # right side fully clear
    FRONT_BLOCKED_TURN_LEFT = auto()   # left side fully clear
    FRONT_BLOCKED_SEARCH = auto()      # no side clear, rotate left in place
    LEFT_BLOCKED = auto()
    RIGHT_BLOCKED = auto()
    CLEAR = auto()


@dataclass(frozen=True)
class VelocityCommand:
    linear: float
    angular: float

    @classmethod
    def stop(cls) -> 'VelocityCommand':
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class PolicyConfig:
    threshold: float = DEFAULT_THRESHOLD
    forward_speed: float = DEFAULT_FORWARD_SPEED
    turn_rate: float = DEFAULT_TURN_RATE

    def __post_init__(self):
        for name in ('threshold', 'forward_speed', 'turn_rate'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise ValueError(f"{name} must be a finite value >= 0, got {value}")


@dataclass(frozen=True)
class Decision:
    behavior: Behavior
    command: VelocityCommand


def classify(readings: SectorReadings, threshold: float) -> Behavior:
    """
    Pick the behavior for one scan.

    Blocked checks use strict '<' and clear checks strict '>', so a sector
    sitting exactly on the threshold is neither blocked nor clear.
    """
    if readings.front < threshold:
        if readings.far_right > threshold and readings.near_right > threshold:
            return Behavior.FRONT_BLOCKED_TURN_RIGHT
        if readings.near_left > threshold and readings.far_left > threshold:
            return Behavior.FRONT_BLOCKED_TURN_LEFT
        return Behavior.FRONT_BLOCKED_SEARCH

    if readings.near_left < threshold or readings.far_left < threshold:
        return Behavior.LEFT_BLOCKED

    if readings.far_right < threshold or readings.near_right < threshold:
        return Behavior.RIGHT_BLOCKED

    return Behavior.CLEAR


class SectorAvoidancePolicy:
    """Maps SectorReadings to a VelocityCommand. Holds no mutable state."""

    def __init__(self, config: PolicyConfig = PolicyConfig()):
        self._config = config

    @property
    def config(self) -> PolicyConfig:
        return self._config

    def behavior_command(self, behavior: Behavior) -> VelocityCommand:
        turn = self._config.turn_rate
        if behavior is Behavior.CLEAR:
            return VelocityCommand(self._config.forward_speed, 0.0)
        if behavior in (Behavior.FRONT_BLOCKED_TURN_RIGHT, Behavior.LEFT_BLOCKED):
            return VelocityCommand(0.0, -turn)
        # Turn left, also the fallback when the front is boxed in
        return VelocityCommand(0.0, turn)

    def decide(self, readings: SectorReadings) -> Decision:
        behavior = classify(readings, self._config.threshold)
        return Decision(behavior, self.behavior_command(behavior))

    def command_for(self, readings: SectorReadings) -> VelocityCommand:
        return self.decide(readings).command


def describe_command(linear: float, angular: float) -> str:
    """Human readable motion for a (linear, angular) pair; positive angular = left."""
    if angular > 0.0:
        motion = "turn left"
    elif angular < 0.0:
        motion = "turn right"
    elif linear > 0.0:
        motion = "forward"
    elif linear < 0.0:
        motion = "backward"
    else:
        motion = "stop"
    return f"{motion} (linear.x: {linear:.2f}, angular.z: {angular:.2f})"
