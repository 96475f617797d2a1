"""Config – 12-factor settings and loaders.

Transport configuration lives beside each transport
(:class:`~mp_logger.transports.loki.LokiConfig`,
:class:`~mp_logger.transports.syslog.SyslogConfig`) and uses the same
:class:`Settings` base.
"""

from mp_logger.config.logger import LoggerSettings
from mp_logger.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from mp_logger.kernel.errors.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
