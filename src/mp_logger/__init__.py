"""
mp_logger – structured logging facade with reliable-delivery transports.

Import path convention::

    from mp_logger import Logger, Level
    from mp_logger.transports import ConsoleTransport, LokiTransport, SyslogTransport
    from mp_logger.config import LoggerSettings
    from mp_logger import create_logger
"""

from mp_logger.factory import create_logger, logger_from_env
from mp_logger.kernel import Level, LogEntry, Transport
from mp_logger.logger import Logger

__version__ = "0.1.0"
__all__ = ["Level", "LogEntry", "Logger", "Transport", "__version__", "create_logger", "logger_from_env"]
