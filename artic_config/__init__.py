"""
Configuration package.

Provides the environment-backed configuration used by the API client and
the terminal session.
"""
from .base import BaseConfiguration, ConfigurationError, load_configuration

__all__ = [
    'BaseConfiguration',
    'ConfigurationError',
    'load_configuration'
]
