"""Timing helpers for long-running scan stages."""

import time

from .logging import get_logger

logger = get_logger(__name__)


class PerformanceMonitor:
    """Context manager for timing operations."""

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.start_time = 0.0
        self.duration = 0.0

    def __enter__(self):
        self.start_time = time.time()
        logger.info(f"🚀 Starting {self.operation_name}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.time() - self.start_time
        if exc_type is None:
            logger.info(f"✅ {self.operation_name} completed in {self.duration:.2f}s")
        else:
            logger.error(f"❌ {self.operation_name} failed after {self.duration:.2f}s")
