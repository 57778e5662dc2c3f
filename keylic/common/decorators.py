"""License decorators for function protection.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING, Any

from keylic.common.exceptions import LicenseManagementError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def requires_valid_license(
    manager: Any | Callable[[], Any] | str,
    error_message: str = "License is not valid",
    *,
    raise_exception: bool = True,
) -> Callable:
    """Decorator that runs the function only when the installed license verifies.

    Args:
        manager: Consumer manager, zero-argument callable returning one, or
            the name of an attribute holding one on ``self``
        error_message: Message logged when verification fails
        raise_exception: Whether to re-raise the verification error or
            return None

    Returns:
        Decorated function that only executes when ``verify()`` succeeds
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if isinstance(manager, str):
                if not args:
                    msg = f"Cannot get manager attribute '{manager}' without self"
                    raise ValueError(msg)
                resolved = getattr(args[0], manager)
            elif callable(manager) and not hasattr(manager, "verify"):
                resolved = manager()
            else:
                resolved = manager

            try:
                resolved.verify()
            except LicenseManagementError as err:
                logger.warning("%s: %s", error_message, err)
                if raise_exception:
                    raise
                return None
            return func(*args, **kwargs)

        return wrapper

    return decorator
