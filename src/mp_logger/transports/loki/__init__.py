"""Loki transport – batched HTTP delivery to Grafana Loki."""
from mp_logger.transports.loki.config import PUSH_PATH, BasicAuth, LokiConfig
from mp_logger.transports.loki.transport import LokiState, LokiTransport

__all__ = ["BasicAuth", "LokiConfig", "LokiState", "LokiTransport", "PUSH_PATH"]
