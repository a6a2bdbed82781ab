"""
Transport-facing capabilities the controller depends on.

The ROS node provides both; tests provide in-memory fakes.
"""

from typing import Callable, Protocol, Sequence

from .policy import VelocityCommand


ScanCallback = Callable[[Sequence[float], float], object]


class ScanSource(Protocol):
    def subscribe(self, callback: ScanCallback) -> None:
        """Deliver (ranges, range_max) to callback for every scan received."""
        ...


class CommandSink(Protocol):
    def send(self, command: VelocityCommand) -> None:
        ...
