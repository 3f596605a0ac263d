"""websecure logging: port and structlog adapter."""

from websecure.logging.port import LoggingPort
from websecure.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
