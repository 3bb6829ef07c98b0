"""
Configuration package.
"""

from mandataire.config.settings import MandataireConfig, get_settings, load_config

__all__ = ["MandataireConfig", "get_settings", "load_config"]
