from glob import glob

from setuptools import setup

package_name = 'sector_avoidance'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', glob('launch/*.launch.py')),
    ],

    install_requires=['setuptools', 'numpy'],
    extras_require={
        'test': ['pytest'],
    },
    tests_require=['pytest'],
    zip_safe=True,
    maintainer='kadowaki',
    maintainer_email='kadowaki@todo.todo',
    description='Reactive LaserScan sector obstacle avoidance node',
    license='Apache License 2.0',
    entry_points={
        'console_scripts': [
            'avoid_obstacle_node = sector_avoidance.avoid_obstacle_node:main',
            'cmd_vel_monitor = sector_avoidance.cmd_vel_monitor:main',
        ],
    },
)
