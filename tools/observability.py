"""Instrumentation for engine operations: payload validation, logs and counters."""

from __future__ import annotations

import inspect
import logging
import threading
import time
from dataclasses import asdict, dataclass
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from chromatic_app.logging_config import ensure_correlation_id, get_logger, log_event, redact_for_log

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


@dataclass
class OperationStats:
    calls: int = 0
    failures: int = 0
    rejected: int = 0
    total_ms: float = 0.0

    @property
    def mean_ms(self) -> float:
        completed = self.calls - self.failures - self.rejected
        return round(self.total_ms / completed, 2) if completed > 0 else 0.0


_STATS: Dict[str, OperationStats] = {}
_STATS_LOCK = threading.Lock()


def _record(operation: str, outcome: str, duration_ms: float = 0.0) -> None:
    with _STATS_LOCK:
        stats = _STATS.setdefault(operation, OperationStats())
        stats.calls += 1
        if outcome == "failed":
            stats.failures += 1
        elif outcome == "rejected":
            stats.rejected += 1
        else:
            stats.total_ms += duration_ms


def operation_stats() -> Dict[str, Dict[str, Any]]:
    """Snapshot of per-operation counters since process start (or last reset)."""

    with _STATS_LOCK:
        return {name: {**asdict(stats), "mean_ms": stats.mean_ms} for name, stats in _STATS.items()}


def reset_operation_stats() -> None:
    with _STATS_LOCK:
        _STATS.clear()


def _preview(arguments: Dict[str, Any], max_keys: int = 6) -> Dict[str, Any]:
    preview = dict(list(arguments.items())[:max_keys])
    if len(arguments) > max_keys:
        preview["truncated"] = True
    return redact_for_log(preview)


def instrument_operation(
    operation: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
    summarize: Callable[[R], Dict[str, Any]] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Validate the fields of ``input_model`` and log the lifecycle of each call.

    Arguments are bound to the wrapped signature first, so fields passed
    positionally are validated the same way as keywords. Arguments the model
    does not declare are passed through untouched. ``summarize`` turns the
    result into extra fields for the completion event.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            bound = signature.bind(*args, **kwargs)
            arguments = {key: value for key, value in bound.arguments.items() if key != "self"}

            if input_model is not None:
                declared = {key: value for key, value in arguments.items() if key in input_model.model_fields}
                try:
                    validated = input_model.model_validate(declared)
                except ValidationError as exc:
                    _record(operation, "rejected")
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "operation_validation_failed",
                        operation=operation,
                        correlation_id=correlation_id,
                        errors=exc.errors(include_url=False, include_context=False),
                    )
                    if on_validation_error:
                        return on_validation_error(exc)
                    raise
                for key in declared:
                    bound.arguments[key] = getattr(validated, key)

            log_event(
                LOGGER,
                logging.INFO,
                "operation_started",
                operation=operation,
                correlation_id=correlation_id,
                arguments=_preview(arguments),
            )
            start = time.perf_counter()
            try:
                result = func(*bound.args, **bound.kwargs)
            except Exception:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                _record(operation, "failed")
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "operation_failed",
                    operation=operation,
                    correlation_id=correlation_id,
                    duration_ms=duration_ms,
                    exc_info=True,
                )
                raise
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            _record(operation, "completed", duration_ms)
            log_event(
                LOGGER,
                logging.INFO,
                "operation_completed",
                operation=operation,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
                **(summarize(result) if summarize else {}),
            )
            return result

        return wrapper

    return decorator


__all__ = [
    "OperationStats",
    "instrument_operation",
    "operation_stats",
    "reset_operation_stats",
]
