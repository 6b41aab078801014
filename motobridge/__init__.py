"""Pose and quaternion conversion, calibration data, I/O rules and services, error reset and tool selection for a robot controller bridge."""

__version__ = "0.1.0"