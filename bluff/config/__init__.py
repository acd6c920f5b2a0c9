"""
Bluff Configuration.

Environment variables, settings, and logging configuration.
"""

from bluff.config.settings import Settings, configure_logging, get_settings, seed_random

__all__ = ["Settings", "configure_logging", "get_settings", "seed_random"]
