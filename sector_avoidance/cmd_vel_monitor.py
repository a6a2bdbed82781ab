#!/usr/bin/env python3
import time

import rclpy
from rclpy.node import Node
from geometry_msgs.msg import Twist

from .policy import describe_command


class CmdVelMonitor(Node):
    def __init__(self):
        super().__init__('cmd_vel_monitor')
        self.declare_parameter('cmd_vel_topic', 'cmd_vel')
        self.declare_parameter('log_period', 1.0)  # seconds between log lines

        self.cmd_vel_topic = self.get_parameter('cmd_vel_topic').value
        self.log_period = float(self.get_parameter('log_period').value)

        self.sub = self.create_subscription(
            Twist,
            self.cmd_vel_topic,
            self.cmd_vel_callback,
            10
        )
        self.last_log_time = 0.0
        self.get_logger().info(f"Monitoring {self.cmd_vel_topic} (logs throttled)")

    def cmd_vel_callback(self, msg: Twist):
        """
        Logs at most once per log_period, at DEBUG so launch output stays quiet.
        """
        now = time.time()
        if now - self.last_log_time > self.log_period:
            self.get_logger().debug(describe_command(msg.linear.x, msg.angular.z))
            self.last_log_time = now


def main(args=None):
    rclpy.init(args=args)
    node = CmdVelMonitor()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.try_shutdown()


if __name__ == '__main__':
    main()
