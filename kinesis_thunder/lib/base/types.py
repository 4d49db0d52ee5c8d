from typing import TypeVar

ConfigType = TypeVar("ConfigType")
"""A module config dataclass"""

ExportsType = TypeVar("ExportsType")
"""A module exports dataclass"""
