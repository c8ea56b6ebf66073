"""
Guarded invocation of user-supplied widget callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .logging_setup import get_logger


logger = get_logger("callbacks")


@dataclass(frozen=True)
class CallbackResult:
    """Outcome of a callback invocation: Ok, or Err with a reason."""
    ok: bool
    reason: Optional[str] = None
    exception: Optional[Exception] = None

    @classmethod
    def Ok(cls) -> CallbackResult:
        return cls(ok=True)

    @classmethod
    def Err(cls, reason: str, exception: Optional[Exception] = None) -> CallbackResult:
        return cls(ok=False, reason=reason, exception=exception)

    def __bool__(self) -> bool:
        return self.ok


def invoke_callback(callback: Optional[Callable[..., Any]], *args: Any) -> CallbackResult:
    """Call callback(*args) and report the outcome instead of raising."""
    if callback is None:
        return CallbackResult.Err("no callback")
    try:
        callback(*args)
    except Exception as e:
        return CallbackResult.Err(f"{type(e).__name__}: {e}", e)
    return CallbackResult.Ok()


def safe_callback(
    callback: Optional[Callable[..., Any]],
    *args: Any,
    context: str = "callback",
) -> bool:
    """Invoke a callback, logging any error it raised. Returns success."""
    result = invoke_callback(callback, *args)
    if result.exception is not None:
        logger.warning(
            "%s raised %s",
            context,
            result.reason,
            exc_info=(type(result.exception), result.exception, result.exception.__traceback__),
            extra={"event": "callback_error"},
        )
    return result.ok
