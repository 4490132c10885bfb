"""Config API module."""

from .LogConfig import LogConfig
from .ReflinkConfig import ReflinkConfig
from .RenderConfig import RenderConfig

__all__ = ["LogConfig", "ReflinkConfig", "RenderConfig"]
