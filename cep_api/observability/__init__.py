"""
Observability module.

Provides logging configuration, structured log helpers, correlation ID
tracking and HTTP request logging middleware.
"""

from cep_api.observability.correlation import get_correlation_id, set_correlation_id
from cep_api.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
