"""Configuration management."""

from .global_config import KpConfig

__all__ = ["KpConfig"]
