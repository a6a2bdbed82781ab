import pytest

rclpy = pytest.importorskip('rclpy')

from geometry_msgs.msg import Twist  # noqa: E402
from rclpy.parameter import Parameter  # noqa: E402

from sector_avoidance import avoid_obstacle_node  # noqa: E402
from sector_avoidance.avoid_obstacle_node import (AvoidObstacleNode, RosScanSource,  # noqa: E402
                                                  TwistPublisherSink, command_to_twist)
from sector_avoidance.policy import VelocityCommand  # noqa: E402


class FakePublisher:
    def __init__(self):
        self.published = []

    def publish(self, msg):
        self.published.append(msg)


class FakeNode:
    def __init__(self):
        self.calls = []

    def create_subscription(self, msg_type, topic, callback, qos):
        self.calls.append((msg_type, topic, callback, qos))
        return object()


class FakeScan:
    def __init__(self, ranges, range_max):
        self.ranges = ranges
        self.range_max = range_max


def test_command_to_twist_sets_only_linear_x_and_angular_z():
    twist = command_to_twist(VelocityCommand(0.2, -0.5))
    assert isinstance(twist, Twist)
    assert twist.linear.x == pytest.approx(0.2)
    assert twist.angular.z == pytest.approx(-0.5)
    assert (twist.linear.y, twist.linear.z) == (0.0, 0.0)
    assert (twist.angular.x, twist.angular.y) == (0.0, 0.0)


def test_twist_sink_publishes():
    pub = FakePublisher()
    TwistPublisherSink(pub).send(VelocityCommand.stop())
    assert len(pub.published) == 1
    assert pub.published[0].linear.x == 0.0


def test_scan_source_forwards_ranges_and_range_max():
    node = FakeNode()
    received = []
    RosScanSource(node, 'scan').subscribe(lambda r, m: received.append((r, m)))
    _, topic, callback, _ = node.calls[0]
    assert topic == 'scan'
    callback(FakeScan([1.0, 2.0], 3.5))
    assert received == [([1.0, 2.0], 3.5)]


@pytest.fixture
def ros_context():
    rclpy.init()
    yield
    rclpy.shutdown()


def test_node_declares_default_parameters(ros_context):
    node = AvoidObstacleNode()
    try:
        assert node.get_name() == 'avoid_obstacle_node'
        assert node.scan_topic == 'scan'
        assert node.cmd_vel_topic == 'cmd_vel'
        assert node.get_parameter('threshold_distance').value == pytest.approx(0.4)
        assert list(node.get_parameter('sector_indices').value) == [0, 30, 60, 300, 330]
        assert node.controller.policy.config.threshold == pytest.approx(0.4)
        assert node.controller.stop_on_malformed is True
    finally:
        node.destroy_node()


def test_node_publishes_for_scan(ros_context):
    node = AvoidObstacleNode()
    try:
        pub = FakePublisher()
        node.controller.sink = TwistPublisherSink(pub)
        ranges = [1.0] * 360
        ranges[0] = 0.2
        node.controller.on_scan(ranges, 3.5)
        assert pub.published[0].angular.z == pytest.approx(-0.5)
        assert pub.published[0].linear.x == 0.0
    finally:
        node.destroy_node()


@pytest.mark.parametrize('name, value', [
    ('threshold_distance', 1.0),
    ('forward_speed', 0.5),
    ('turn_rate', 1.0),
    ('sector_indices', [0, 45, 90, 270, 315]),
    ('stop_on_malformed_scan', False),
])
def test_parameters_cannot_change_after_startup(ros_context, name, value):
    node = AvoidObstacleNode()
    try:
        before = node.get_parameter(name).value
        result = node.set_parameters([Parameter(name, value=value)])[0]
        assert result.successful is False
        assert node.get_parameter(name).value == before
        assert node.controller.policy.config.threshold == pytest.approx(0.4)
    finally:
        node.destroy_node()


def test_main_exits_cleanly_when_interrupted_after_shutdown(monkeypatch):
    def interrupted_spin(node):
        # SIGINT handler has already shut the context down
        rclpy.try_shutdown()
        raise KeyboardInterrupt

    monkeypatch.setattr(avoid_obstacle_node.rclpy, 'spin', interrupted_spin)
    avoid_obstacle_node.main(args=[])
    assert not rclpy.ok()
