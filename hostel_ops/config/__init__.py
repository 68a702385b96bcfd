"""
Configuration package for the hostel facility desk.

Exposes the cached environment settings used by the database, security,
logging and notification layers.
"""

from hostel_ops.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings']
