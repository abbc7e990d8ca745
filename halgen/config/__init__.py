"""Configuration models."""

from .GeneratorConfig import GeneratorConfig
from .LogConfig import LogConfig

__all__ = ["GeneratorConfig", "LogConfig"]
