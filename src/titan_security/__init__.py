"""Titan Security - simulated home security controller"""

__version__ = "2.0.0"
