#!/usr/bin/env python3
import rclpy
from rclpy.node import Node
from rclpy.qos import qos_profile_sensor_data, qos_profile_system_default
from rcl_interfaces.msg import ParameterDescriptor
from sensor_msgs.msg import LaserScan
from geometry_msgs.msg import Twist

from .controller import AvoidanceController
from .policy import PolicyConfig, SectorAvoidancePolicy, VelocityCommand
from .sectors import DEFAULT_LAYOUT, SectorLayout


def command_to_twist(command: VelocityCommand) -> Twist:
    twist = Twist()
    twist.linear.x = float(command.linear)
    twist.angular.z = float(command.angular)
    return twist


class TwistPublisherSink:
    """CommandSink backed by a Twist publisher."""

    def __init__(self, publisher):
        self.publisher = publisher

    def send(self, command: VelocityCommand) -> None:
        self.publisher.publish(command_to_twist(command))


class RosScanSource:
    """ScanSource backed by a LaserScan subscription."""

    def __init__(self, node: Node, topic: str):
        self.node = node
        self.topic = topic
        self.subscription = None

    def subscribe(self, callback) -> None:
        def scan_callback(msg: LaserScan):
            callback(msg.ranges, msg.range_max)

        self.subscription = self.node.create_subscription(
            LaserScan, self.topic, scan_callback, qos_profile_sensor_data)


class AvoidObstacleNode(Node):
    def __init__(self):
        super().__init__('avoid_obstacle_node')

        # --- Parameters (read once, fixed for the node lifetime) ---
        read_only = ParameterDescriptor(read_only=True)
        self.declare_parameter('scan_topic', 'scan', descriptor=read_only)
        self.declare_parameter('cmd_vel_topic', 'cmd_vel', descriptor=read_only)
        self.declare_parameter('threshold_distance', 0.4, descriptor=read_only)  # closer than this -> blocked [m]
        self.declare_parameter('forward_speed', 0.2, descriptor=read_only)       # speed when path is clear [m/s]
        self.declare_parameter('turn_rate', 0.5, descriptor=read_only)           # in-place turn rate [rad/s]
        self.declare_parameter('sector_indices', list(DEFAULT_LAYOUT.indices), descriptor=read_only)
        self.declare_parameter('stop_on_malformed_scan', True, descriptor=read_only)

        self.scan_topic = self.get_parameter('scan_topic').value
        self.cmd_vel_topic = self.get_parameter('cmd_vel_topic').value
        config = PolicyConfig(
            threshold=float(self.get_parameter('threshold_distance').value),
            forward_speed=float(self.get_parameter('forward_speed').value),
            turn_rate=float(self.get_parameter('turn_rate').value),
        )
        layout = SectorLayout.from_indices(self.get_parameter('sector_indices').value)
        stop_on_malformed = bool(self.get_parameter('stop_on_malformed_scan').value)

        # --- Publisher / Subscriber ---
        self.pub_cmd = self.create_publisher(Twist, self.cmd_vel_topic, qos_profile_system_default)
        self.controller = AvoidanceController(
            SectorAvoidancePolicy(config),
            TwistPublisherSink(self.pub_cmd),
            layout=layout,
            logger=self.get_logger(),
            stop_on_malformed=stop_on_malformed,
        )
        self.scan_source = RosScanSource(self, self.scan_topic)
        self.controller.attach(self.scan_source)

        self.get_logger().info(f"Subscribe: {self.scan_topic} | Publish: {self.cmd_vel_topic}")
        self.get_logger().info(
            f"threshold={config.threshold:.2f} m, sectors={list(layout.indices)}")

    def destroy_node(self):
        self.get_logger().info("Avoid Obstacle node has been terminated")
        return super().destroy_node()


def main(args=None):
    rclpy.init(args=args)
    node = AvoidObstacleNode()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.try_shutdown()


if __name__ == '__main__':
    main()
