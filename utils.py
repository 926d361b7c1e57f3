"""
Utility functions for the lazy list library

This module provides the exception types raised by list operations, logging
setup driven by the settings model, and helpers for measuring time and memory
of list operations.
"""

import gc
import logging
import time
import tracemalloc
from typing import Any, Dict, Optional

import models
from models import LazyListSettings

logger = logging.getLogger(__name__)


class LazyListError(Exception):
    """Base class for errors raised by list operations."""
    pass


class EmptyListError(LazyListError):
    """Raised when an operation needs at least one element."""
    pass


class IndexOutOfRangeError(LazyListError, IndexError):
    """Raised when an index falls outside 0..length-1."""
    pass


class TypeMismatchError(LazyListError, TypeError):
    """Raised when a list is compared with, or used as, a non-list value."""
    pass


def configure_logging(settings: Optional[LazyListSettings] = None) -> None:
    """Apply the configured level and format to the root logger"""
    settings = settings or models.get_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format, force=True)
    logger.debug(f"Logging configured at {settings.log_level}")


def configure(**overrides: Any) -> LazyListSettings:
    """Validate and activate new settings, then reconfigure logging"""
    settings = models.update_settings(**overrides)
    configure_logging(settings)
    logger.info(f"Settings updated: {overrides}")
    return settings


# Global performance tracking
_performance_metrics = {
    "operations": [],
    "total_time_ms": 0.0,
    "total_memory_mb": 0.0,
    "operation_count": 0,
    "lazy_results": 0,
    "forced_elements": 0
}


def is_lazy(value) -> bool:
    """True for a LazyList whose elements have not been produced yet"""
    return hasattr(value, "_ops") and hasattr(value, "_source")


def _record(performance_info: Dict[str, Any]) -> None:
    _performance_metrics["operations"].append(performance_info)
    _performance_metrics["total_time_ms"] += performance_info["execution_time_ms"]
    _performance_metrics["total_memory_mb"] += performance_info["memory_usage_mb"]
    _performance_metrics["operation_count"] += 1
    if performance_info.get("lazy"):
        _performance_metrics["lazy_results"] += 1
    _performance_metrics["forced_elements"] += performance_info.get("forced_elements", 0)


def measure_performance(operation_name: str, func, *args, force: bool = False, **kwargs) -> Dict[str, Any]:
    """
    Measure time and peak memory of a list operation.

    When the operation returns a LazyList, its length and number of pending
    operations are recorded. With ``force=True`` the returned list is also
    iterated inside the measurement, one element at a time without keeping
    them, so the peak reflects producing the elements and not storing them.
    """

    gc.collect()
    tracemalloc.start()
    baseline = tracemalloc.get_traced_memory()[0]

    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        lazy = is_lazy(result)

        forced = 0
        if force and lazy:
            for _ in result:
                forced += 1

        execution_time_ms = (time.perf_counter() - start_time) * 1000
        current, peak = tracemalloc.get_traced_memory()
        peak_bytes = max(peak - baseline, 0)

        performance_info = {
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak_bytes / 1024 / 1024,
            "peak_memory_bytes": peak_bytes,
            "success": True,
            "result": result,
            "result_size": len(result) if hasattr(result, "__len__") else None,
            "lazy": lazy,
            "pending_operations": len(result._ops) if lazy else None,
            "forced_elements": forced,
            "timestamp": time.time()
        }
        _record(performance_info)
        logger.debug(f"{operation_name} completed in {execution_time_ms:.3f}ms, peak {peak_bytes} bytes")
        return performance_info

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        current, peak = tracemalloc.get_traced_memory()
        peak_bytes = max(peak - baseline, 0)

        _record({
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak_bytes / 1024 / 1024,
            "peak_memory_bytes": peak_bytes,
            "success": False,
            "error": str(e),
            "timestamp": time.time()
        })
        logger.error(f"{operation_name} failed after {execution_time_ms:.3f}ms: {e}")
        raise

    finally:
        tracemalloc.stop()


def get_performance_summary() -> Dict[str, Any]:
    """Get summary of all performance metrics"""
    count = _performance_metrics["operation_count"]
    return {
        "total_operations": count,
        "total_time_ms": _performance_metrics["total_time_ms"],
        "total_memory_mb": _performance_metrics["total_memory_mb"],
        "avg_time_ms": _performance_metrics["total_time_ms"] / count if count else 0.0,
        "avg_memory_mb": _performance_metrics["total_memory_mb"] / count if count else 0.0,
        "lazy_results": _performance_metrics["lazy_results"],
        "forced_elements": _performance_metrics["forced_elements"]
    }


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": [],
        "total_time_ms": 0.0,
        "total_memory_mb": 0.0,
        "operation_count": 0,
        "lazy_results": 0,
        "forced_elements": 0
    }
