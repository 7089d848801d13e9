"""
Core Package - Work Value Calculator
work_value/core/__init__.py

Core infrastructure: exceptions.
"""

from work_value.core.exceptions import (
    UnsupportedCommuteModeException,
    WorkValueException,
)

__all__ = [
    "UnsupportedCommuteModeException",
    "WorkValueException",
]
