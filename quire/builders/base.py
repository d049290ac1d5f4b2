#!/usr/bin/env python3
"""
base.py
-------------------
Base class for Quire builders.

Provides optional logger integration so concrete builders can log
without checking whether a logger was supplied.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from quire.core.logging_manager import QuireLogger, safe_logger


class BaseBuilder(ABC):
    """
    Abstract base class for builder implementations.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[QuireLogger] = None):
        self.logger = logger

    @abstractmethod
    def build(self) -> Any:
        """
        Execute the build process.

        Returns:
            Builder-specific statistics object
        """
        pass

    def _log_operation(self, operation: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_debug(message, details)

    def _log_info(self, message: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_info(message, details)

    def _log_warning(self, message: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_warning(message, details)

    def _log_error(self, error: Exception, context: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_error(error, context or {})
