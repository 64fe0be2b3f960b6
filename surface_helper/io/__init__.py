"""
I/O Module: host interface and plugin log file.
"""

from .host_core import ObservatoryCore
from .plugin_log import (
    PLUGIN_LOGGER_NAME,
    PluginLogHandler,
    attach_plugin_log,
    detach_plugin_log,
)

__all__ = [
    'ObservatoryCore',
    'PLUGIN_LOGGER_NAME',
    'PluginLogHandler',
    'attach_plugin_log',
    'detach_plugin_log',
]
