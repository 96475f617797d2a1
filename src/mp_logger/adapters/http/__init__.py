"""HTTP adapter – async HTTP client wrapper."""
from mp_logger.adapters.http.client import HttpClient, HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
