# sector_avoidance/launch/avoid_obstacle.launch.py
from launch import LaunchDescription
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue
from launch.substitutions import LaunchConfiguration
from launch.actions import DeclareLaunchArgument


def generate_launch_description():
    return LaunchDescription([
        DeclareLaunchArgument('scan_topic', default_value='scan'),
        DeclareLaunchArgument('cmd_vel_topic', default_value='cmd_vel'),
        DeclareLaunchArgument('threshold_distance', default_value='0.4'),
        DeclareLaunchArgument('forward_speed', default_value='0.2'),
        DeclareLaunchArgument('turn_rate', default_value='0.5'),
        Node(
            package='sector_avoidance',
            executable='avoid_obstacle_node',
            name='avoid_obstacle_node',
            parameters=[{
                'scan_topic': LaunchConfiguration('scan_topic'),
                'cmd_vel_topic': LaunchConfiguration('cmd_vel_topic'),
                'threshold_distance': ParameterValue(LaunchConfiguration('threshold_distance'), value_type=float),
                'forward_speed': ParameterValue(LaunchConfiguration('forward_speed'), value_type=float),
                'turn_rate': ParameterValue(LaunchConfiguration('turn_rate'), value_type=float),
            }],
            output='screen'
        )
    ])
