"""
core/recovery.py
-----------------

Error recovery for the request functions.

A failed call is offered to an ordered list of ``RecoveryStep`` pairs.
The first step whose predicate accepts the exception converts the
failure into a value by calling its handler.  When no step applies the
original exception object is re-raised unchanged.

If a handler raises, the new exception continues down the list, so an
``on_unauthorized`` handler that fails still reaches ``on_error``.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, List, NamedTuple, Optional, Sequence, Union

from use_api.core.errors import is_unauthorized

Handler = Callable[[Exception], Union[Any, Awaitable[Any]]]
Predicate = Callable[[Exception], bool]


def _any_error(exc: Exception) -> bool:
    return True


class RecoveryStep(NamedTuple):
    predicate: Predicate
    handler: Handler


class RecoveryChain:
    """Ordered ``(predicate, handler)`` pairs applied to a failure."""

    def __init__(self, steps: Sequence[RecoveryStep] = ()) -> None:
        self._steps = tuple(steps)

    @property
    def steps(self) -> Sequence[RecoveryStep]:
        return self._steps

    async def recover(self, exc: Exception) -> Any:
        """Return the value produced by the first matching handler.

        :raises Exception: ``exc`` itself when nothing matched, or the
            last exception raised by a handler.
        """
        error = exc
        for step in self._steps:
            if not step.predicate(error):
                continue
            try:
                result = step.handler(error)
                if inspect.isawaitable(result):
                    result = await result
                return result
            except Exception as handler_exc:
                error = handler_exc
        raise error


def build_recovery_chain(on_unauthorized: Optional[Handler] = None,
                         on_error: Optional[Handler] = None) -> RecoveryChain:
    """Build the two-stage chain used by :func:`use_api.create_client`.

    Stage A handles 401 responses when ``on_unauthorized`` is given;
    stage B handles everything left over when ``on_error`` is given.
    """
    steps: List[RecoveryStep] = []
    if on_unauthorized is not None:
        steps.append(RecoveryStep(is_unauthorized, on_unauthorized))
    if on_error is not None:
        steps.append(RecoveryStep(_any_error, on_error))
    return RecoveryChain(steps)
