"""
Utility decorators for logging and common portfolio checks.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from datetime import date
from typing import Any, TypeVar

from loguru import logger

from src.core.exceptions.valuation import UnknownInvestmentError

F = TypeVar("F", bound=Callable[..., Any])

_CONTEXT_PARAMS = (
    "name",
    "investment_name",
    "amount",
    "reference_rate",
    "investment_date",
    "nav_date",
    "target_date",
    "value",
)


def _bind_arguments(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> inspect.BoundArguments:
    """Bind call arguments to the function signature."""
    bound_args = inspect.signature(func).bind(*args, **kwargs)
    bound_args.apply_defaults()
    return bound_args


def _serialize_parameter_value(value: Any) -> Any:
    """Serialize parameter value for logging."""
    if isinstance(value, date):
        return value.isoformat()
    if hasattr(value, "value") and hasattr(value, "name"):
        return str(value.value)  # Handle enum values
    return value


def _extract_operation_context(bound_args: inspect.BoundArguments) -> dict[str, Any]:
    """Extract valuation context from function arguments."""
    return {
        param_name: _serialize_parameter_value(value)
        for param_name, value in bound_args.arguments.items()
        if param_name in _CONTEXT_PARAMS
    }


def _create_success_context(
    base_context: dict[str, Any], execution_time_ms: float, result: Any
) -> dict[str, Any]:
    """Create success logging context."""
    success_context = {
        **base_context,
        "success": True,
        "execution_time_ms": round(execution_time_ms, 2),
        "result_type": type(result).__name__,
    }

    if isinstance(result, bool | int | float | str):
        success_context["result"] = result

    return success_context


def _create_error_context(
    base_context: dict[str, Any], execution_time_ms: float, error: Exception
) -> dict[str, Any]:
    """Create error logging context."""
    return {
        **base_context,
        "success": False,
        "execution_time_ms": round(execution_time_ms, 2),
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


def _execute_with_logging(
    func: Callable[..., Any],
    context: dict[str, Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    """Execute function with start/finish/failure logging."""
    func_name = func.__name__
    log = logger.bind(**context)

    log.debug(f"Valuation operation started: {func_name}")
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        log.bind(**_create_error_context({}, execution_time_ms, e)).warning(
            f"Valuation operation failed: {func_name}: {e}"
        )
        raise

    execution_time_ms = (time.perf_counter() - start_time) * 1000
    log.bind(**_create_success_context({}, execution_time_ms, result)).debug(
        f"Valuation operation completed: {func_name}"
    )
    return result


def log_operations(func: F) -> F:
    """Decorator to log portfolio operations with correlation IDs."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        bound_args = _bind_arguments(func, args, kwargs)
        context = {
            "correlation_id": str(uuid.uuid4())[:8],
            **_extract_operation_context(bound_args),
        }
        return _execute_with_logging(func, context, args, kwargs)

    return wrapper  # type: ignore


def _check_investment_exists(
    args: tuple[Any, ...], kwargs: dict[str, Any], name_param: str, func: Callable[..., Any]
) -> None:
    """Check if the referenced investment exists before function execution."""
    bound_args = _bind_arguments(func, args, kwargs)

    self_obj = bound_args.arguments.get("self")
    name = bound_args.arguments.get(name_param)

    if self_obj is not None and hasattr(self_obj, "investments") and name not in self_obj.investments:
        raise UnknownInvestmentError(name)


def require_investment(
    name_param: str = "investment_name",
) -> Callable[[F], F]:
    """Decorator to ensure an investment exists before executing the function."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            _check_investment_exists(args, kwargs, name_param, func)
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
