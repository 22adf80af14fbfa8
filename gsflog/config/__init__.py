"""
Configuration module for the GSF combat log parser.
"""

from .settings import ParserSettings
from .loader import ConfigLoader, load_settings

__all__ = ["ParserSettings", "ConfigLoader", "load_settings"]
