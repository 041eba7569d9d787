"""Classification and reporting of fatal errors."""

import logging
import time
import traceback
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import (
    ConfigError, DocumentReadError, FetchError, MalformedDocumentError,
    OutputWriteError, RecordLookupError
)


class ErrorType(Enum):
    """Types of errors that can occur."""
    FILE_IO_ERROR = "file_io_error"
    PARSE_ERROR = "parse_error"
    LOOKUP_ERROR = "lookup_error"
    NETWORK_ERROR = "network_error"
    CONFIG_ERROR = "config_error"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Context information for an error."""
    error_type: ErrorType
    message: str
    timestamp: float
    operation: str
    item_id: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    exception: Optional[Exception] = None
    traceback: Optional[str] = None
    suggestion: Optional[str] = None


class ErrorHandler:
    """Reports fatal errors once, with a suggestion for the user.

    Every error is fatal: nothing is retried and no partial output is
    cleaned up.
    """

    SUGGESTIONS = {
        ErrorType.FILE_IO_ERROR: "Check that the path exists and that you have permission to read or write it.",
        ErrorType.PARSE_ERROR: "The input is not well-formed XML. Check that the download completed.",
        ErrorType.LOOKUP_ERROR: "The document is missing an expected GenBank element or qualifier.",
        ErrorType.NETWORK_ERROR: "Check your network connection, email and NCBI API key.",
        ErrorType.CONFIG_ERROR: "Fix the configuration file or unset PARSE_GB_XML_LOG_LEVEL. Use --generate-config for an example.",
        ErrorType.UNKNOWN: "Unexpected error. Re-run with --verbose for details."
    }

    def __init__(self, include_traceback: bool = False):
        """
        Initialize error handler.

        Args:
            include_traceback: Log the traceback along with the message
        """
        self.include_traceback = include_traceback
        self.logger = logging.getLogger('parse_gb_xml.error')
        self.error_history: List[ErrorContext] = []

    def handle_error(self,
                     error: Exception,
                     operation: str,
                     item_id: Optional[str] = None,
                     **kwargs) -> ErrorContext:
        """
        Classify and log an error.

        Args:
            error: The exception that occurred
            operation: The operation being performed
            item_id: Optional item identifier (file path, accession)
            **kwargs: Additional context data

        Returns:
            ErrorContext with error details and suggestion
        """
        error_type = self._classify_error(error)

        context = ErrorContext(
            error_type=error_type,
            message=str(error),
            timestamp=time.time(),
            operation=operation,
            item_id=item_id,
            details=kwargs,
            exception=error,
            traceback=traceback.format_exc() if self.include_traceback else None,
            suggestion=self.SUGGESTIONS[error_type]
        )

        self._log_error(context)
        self.error_history.append(context)

        return context

    def _classify_error(self, error: Exception) -> ErrorType:
        """Classify the error type based on exception."""
        if isinstance(error, (DocumentReadError, OutputWriteError, OSError)):
            return ErrorType.FILE_IO_ERROR

        if isinstance(error, MalformedDocumentError):
            return ErrorType.PARSE_ERROR

        if isinstance(error, RecordLookupError):
            return ErrorType.LOOKUP_ERROR

        if isinstance(error, ConfigError):
            return ErrorType.CONFIG_ERROR

        if isinstance(error, FetchError):
            return ErrorType.NETWORK_ERROR

        return ErrorType.UNKNOWN

    def _log_error(self, context: ErrorContext):
        """Log error with details."""
        log_message = f"{context.operation} - {context.error_type.value}: {context.message}"

        if context.item_id:
            log_message += f" (item: {context.item_id})"

        self.logger.critical(log_message)
        if context.traceback:
            self.logger.critical(f"Traceback:\n{context.traceback}")

        if context.suggestion:
            self.logger.info(f"Suggestion: {context.suggestion}")

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of errors for reporting."""
        by_type: Dict[str, int] = {}
        for error in self.error_history:
            error_type = error.error_type.value
            by_type[error_type] = by_type.get(error_type, 0) + 1

        recent_errors = []
        for error in self.error_history[-5:]:
            recent_errors.append({
                'type': error.error_type.value,
                'message': error.message,
                'operation': error.operation,
                'timestamp': datetime.fromtimestamp(error.timestamp).isoformat(),
                'suggestion': error.suggestion
            })

        return {
            'total_errors': len(self.error_history),
            'by_type': by_type,
            'recent_errors': recent_errors
        }


# Global error handler instance
_error_handler = None


def get_error_handler() -> ErrorHandler:
    """Get global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler


def setup_error_handler(**kwargs) -> ErrorHandler:
    """Setup error handler with custom configuration."""
    global _error_handler
    _error_handler = ErrorHandler(**kwargs)
    return _error_handler
