"""
AutoWiringLifeCycle Enum

Defines whether a blueprint's instance is cached
"""

from enum import Enum


class AutoWiringLifeCycle(Enum):
    """Lifecycle of constructed objects"""
    SINGLETON = "SINGLETON"
    TRANSIENT = "TRANSIENT"
