"""
Validation decorators for rasterblur pipelines.

Provides reusable validation logic for parameter checking on builder methods.
The filter entry points themselves never reject values; only the fluent
builder validates up front.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

F = Callable[..., Any]


def _lookup(args: tuple, kwargs: dict, param_name: str, param_index: int) -> tuple[bool, Any]:
    """Find a parameter value in positional or keyword arguments."""
    if len(args) > param_index:
        return True, args[param_index]
    if param_name in kwargs:
        return True, kwargs[param_name]
    return False, None


def validate_range(
    min_val: float,
    max_val: float,
    param_name: str = "value",
    param_index: int = 1,
) -> Callable[[F], F]:
    """
    Decorator for validating numeric parameter ranges.

    Args:
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive)
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature (default: 1 = first arg after self)

    Returns:
        Decorated function with range validation

    Example:
        >>> @validate_range(0.0, 1.0, 'focus_y')
        ... def tilt_shift(self, focus_y: float) -> Self:
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _lookup(args, kwargs, param_name, param_index)
            if not found:
                # No value provided, let function handle it
                return func(*args, **kwargs)

            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(
                    f"{param_name} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )

            if not min_val <= value <= max_val:
                suggestion = ""
                if "center" in param_name or "focus" in param_name:
                    suggestion = " Use 0.0 for the top/left edge, 0.5 for the middle, 1.0 for the bottom/right edge."
                elif "threshold" in param_name:
                    suggestion = " Use 255 to disable the highlight boost."

                raise ValueError(
                    f"{param_name}={value} is outside valid range [{min_val}, {max_val}].{suggestion}"
                )

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_number(param_name: str = "value", param_index: int = 1) -> Callable[[F], F]:
    """
    Decorator for validating that a parameter is a real number.

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with type validation

    Example:
        >>> @validate_number('radius')
        ... def gaussian(self, radius: float = 5) -> Self:
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _lookup(args, kwargs, param_name, param_index)
            if found and (isinstance(value, bool) or not isinstance(value, (int, float))):
                raise TypeError(
                    f"{param_name} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_choices(
    valid_choices: set[str],
    param_name: str = "value",
    param_index: int = 1,
) -> Callable[[F], F]:
    """
    Decorator for validating parameter choices.

    Args:
        valid_choices: Set of valid string choices
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with choice validation

    Example:
        >>> @validate_choices({'spin', 'zoom'}, 'method', 2)
        ... def radial(self, amount: float, method: str = 'spin') -> Self:
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _lookup(args, kwargs, param_name, param_index)
            if found and value not in valid_choices:
                choices_str = ", ".join(sorted(valid_choices))
                raise ValueError(
                    f"{param_name}='{value}' is not valid. Valid options are: {choices_str}"
                )
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
