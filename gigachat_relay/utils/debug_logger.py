"""
Debug logging utility with timing support

Provides centralized debug logging with request timing and consistent formatting.
"""

import os
import time
from typing import Optional

from fastapi import Request


class DebugLogger:
    """Centralized debug logging with timing support"""

    def __init__(self):
        self.debug_enabled = os.getenv("DEBUG_LOGGING", "false").lower() == "true"

    def log(self,
            request_id: str,
            service: str,
            message: str,
            request: Optional[Request] = None,
            **kwargs) -> None:
        """
        Log a debug message with optional timing information

        Args:
            request_id: Unique request identifier
            service: Service/component name (e.g., 'ROUTE', 'TOKEN', 'RELAY')
            message: Debug message
            request: FastAPI request object for timing
            **kwargs: Additional context to include in log
        """
        if not self.debug_enabled:
            return

        elapsed_seconds = None
        if request is not None and hasattr(request.state, 'start_time'):
            elapsed_seconds = f"{time.perf_counter() - request.state.start_time:.3f}s"

        timing_part = f" [{elapsed_seconds}]" if elapsed_seconds else ""
        context_part = f" [{request_id}]" if request_id else ""

        context_str = ""
        if kwargs:
            context_str = " " + " ".join(f"{k}={v}" for k, v in kwargs.items())

        # Format: [DEBUG] [service] [timing] [request_id] message [context]
        print(f"[DEBUG] [{service}]{timing_part}{context_part} {message}{context_str}")

    def log_route(self, request_id: str, message: str, request: Optional[Request] = None, **kwargs):
        """Log a route-related debug message"""
        self.log(request_id, "ROUTE", message, request, **kwargs)

    def log_token(self, request_id: str, message: str, request: Optional[Request] = None, **kwargs):
        """Log a token acquisition debug message"""
        self.log(request_id, "TOKEN", message, request, **kwargs)

    def log_relay(self, request_id: str, message: str, request: Optional[Request] = None, **kwargs):
        """Log a chat relay debug message"""
        self.log(request_id, "RELAY", message, request, **kwargs)

    def log_timing(self, request_id: str, operation: str, duration_ms: float, **kwargs):
        """Log a specific timing measurement"""
        self.log(request_id, "TIMING", f"{operation} completed in {duration_ms:.3f}ms", **kwargs)


# Global debug logger instance
debug_logger = DebugLogger()
