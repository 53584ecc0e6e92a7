"""
Step abstractions.

A step is anything callable as ``step(exchange) -> exchange``: a plain
function, a lambda, a bound method or an instance of a class that
implements ``__call__``.  ``PipelineStep`` is an optional base class
for steps that want a stable name in logs and error messages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from conduit.pipeline.exchange import Exchange


@runtime_checkable
class Step(Protocol):
    """Structural protocol for a single pipeline step."""

    def __call__(self, exchange: Exchange) -> Exchange: ...


class PipelineStep(ABC):
    """
    Base class for named steps.

    Subclasses MUST implement:
        - process(exchange)   the actual transformation

    Subclasses SHOULD set:
        - name (str)          identifier used in logs and error records
        - description (str)   human-readable label
    """

    name: str = "unnamed_step"
    description: str = "No description"

    @abstractmethod
    def process(self, exchange: Exchange) -> Exchange:
        """
        Transform the exchange and return it.

        Raise to signal failure; call ``exchange.halt()`` to stop the
        pipeline without recording an error.
        """
        ...

    def __call__(self, exchange: Exchange) -> Exchange:
        return self.process(exchange)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


def step_name(step: object) -> str:
    """
    Best human-readable identifier for a step.

    Lookup order:
        1. The class name of a PipelineStep that kept the default name
        2. An explicit ``name`` attribute (PipelineStep and friends)
        3. ``__qualname__`` / ``__name__`` (functions, lambdas, methods)
        4. ``repr(step)``
    """
    name = getattr(step, "name", None)
    if isinstance(step, PipelineStep) and name == PipelineStep.name:
        return type(step).__name__
    if isinstance(name, str) and name:
        return name

    for attr in ("__qualname__", "__name__"):
        name = getattr(step, attr, None)
        if isinstance(name, str) and name:
            return name

    return repr(step)
