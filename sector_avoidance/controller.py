"""
Scan -> command glue, independent of any messaging runtime.
"""

import logging
from typing import Optional, Sequence

from .interfaces import CommandSink, ScanSource
from .policy import Behavior, Decision, SectorAvoidancePolicy, VelocityCommand
from .sectors import DEFAULT_LAYOUT, MalformedScanError, SectorLayout, extract_readings


class AvoidanceController:
    """
    Runs the policy once per scan and hands the command to the sink.

    A scan that is too short never reaches the policy. By default the
    robot is stopped for that cycle; with stop_on_malformed=False the
    cycle is skipped and nothing is sent.
    """

    def __init__(self, policy: SectorAvoidancePolicy, sink: CommandSink,
                 layout: SectorLayout = DEFAULT_LAYOUT, logger=None,
                 stop_on_malformed: bool = True):
        self.policy = policy
        self.sink = sink
        self.layout = layout
        self.stop_on_malformed = stop_on_malformed
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        # Only used to log behavior changes once
        self._last_behavior: Optional[Behavior] = None

    def attach(self, source: ScanSource) -> None:
        source.subscribe(self.on_scan)

    def on_scan(self, ranges: Sequence[float], range_max: float) -> Optional[Decision]:
        try:
            readings = extract_readings(ranges, range_max, self.layout)
        except MalformedScanError as e:
            if self.stop_on_malformed:
                self.logger.warning(f"Malformed scan ({e}) -> STOP")
                self.sink.send(VelocityCommand.stop())
            else:
                self.logger.warning(f"Malformed scan ({e}) -> skip cycle")
            self._last_behavior = None
            return None

        decision = self.policy.decide(readings)
        self.sink.send(decision.command)

        dists = ", ".join(f"{d:.2f}" for d in readings.distances())
        if decision.behavior is not self._last_behavior:
            self.logger.info(
                f"{decision.behavior.name}: linear={decision.command.linear:.2f} "
                f"angular={decision.command.angular:+.2f} [{dists}]")
        else:
            self.logger.debug(f"{decision.behavior.name} [{dists}]")
        self._last_behavior = decision.behavior
        return decision
