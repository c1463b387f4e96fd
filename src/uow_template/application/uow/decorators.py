"""Application UoW – transactional decorator."""
from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from uow_template.kernel.uow import Uow

F = TypeVar("F", bound=Callable[..., Any])


def transactional(uow_attribute: str = "_uow") -> Callable[[F], F]:
    """Decorator: run an async method inside a unit of work.

    The coordinator is looked up on ``self`` under *uow_attribute*. Without
    one, the method runs unwrapped and every ``mark_*`` auto-commits. When the
    coordinator already has an open unit of work, the call joins it.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            uow: Uow[Any] | None = getattr(self, uow_attribute, None)
            if uow is None or uow.is_working:
                return await func(self, *args, **kwargs)
            async with uow:
                return await func(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["transactional"]
