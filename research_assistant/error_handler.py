"""Error handling utilities for the research assistant."""

import logging
import traceback
from functools import wraps
from typing import Any, Callable, Optional, Type, TypeVar

from .exceptions import ResearchAssistantError, ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(exception_type: Type[ResearchAssistantError] = ResearchAssistantError):
    """Log failures of the wrapped call and re-raise them as our own errors.

    Errors from our hierarchy pass through unchanged; anything else is
    wrapped in ``exception_type`` with the original chained as the cause.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ResearchAssistantError as e:
                logger.error(f"{func.__name__} failed: {e.message}", extra={
                    'error_code': e.error_code,
                    'details': e.details,
                })
                raise
            except Exception as e:
                error_msg = f"Unexpected error in {func.__name__}: {str(e)}"
                logger.error(error_msg, extra={
                    'details': {'original_error': str(e)},
                    'traceback': traceback.format_exc()
                })
                raise exception_type(
                    message=error_msg,
                    details={'original_error': str(e), 'function': func.__name__}
                ) from e
        return wrapper
    return decorator


def log_error(error: Exception, context: str, details: Optional[dict] = None) -> None:
    """Log an error with its code and details merged into the record."""
    if isinstance(error, ResearchAssistantError):
        logger.error(f"{context}: {error.message}", extra={
            'error_code': error.error_code,
            'details': {**error.details, **(details or {})},
        })
    else:
        logger.error(f"{context}: {str(error)}", extra={
            'details': details or {},
            'traceback': traceback.format_exc()
        })


def safe_execute(
    func: Callable[[], T],
    context: str,
    default_return: Any = None,
    exception_type: Type[ResearchAssistantError] = ResearchAssistantError
) -> Any:
    """Run ``func`` and log instead of raising; returns ``default_return`` on failure."""
    try:
        return func()
    except ResearchAssistantError as e:
        log_error(e, context)
        return default_return
    except Exception as e:
        log_error(exception_type(
            message=f"Error in {context}: {str(e)}",
            details={'original_error': str(e)}
        ), context)
        return default_return


def validate_config(config_dict: dict, required_keys: list, context: str = "Configuration") -> None:
    """Raise ConfigurationError naming every required key that is unset."""
    missing_keys = [key for key in required_keys if config_dict.get(key) is None]

    if missing_keys:
        raise ConfigurationError(
            message=f"Missing required configuration keys: {', '.join(missing_keys)}",
            details={
                'missing_keys': missing_keys,
                'available_keys': list(config_dict.keys()),
                'context': context
            }
        )
