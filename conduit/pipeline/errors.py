"""
Exception hierarchy for the pipeline engine.

All pipeline exceptions inherit from PipelineError so callers can
catch broadly or narrowly as needed.  Each exception carries structured
context (step name, details) for logging/debugging.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from conduit.pipeline.step import Step, step_name as describe_step

if TYPE_CHECKING:
    from conduit.pipeline.exchange import Exchange


class PipelineError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(
        self,
        message: str,
        *,
        step_name: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.step_name = step_name
        self.details = details or {}
        super().__init__(message)


class StepFailedError(PipelineError):
    """
    A step raised while processing an exchange.

    One instance is built for every caught failure.  It is appended to
    ``exchange.errors`` and, when the pipeline bubbles errors, raised to
    the caller.  The step's exception is chained as ``__cause__`` from
    the start, so recorded failures keep their traceback chain too.

    Attributes:
        step: The step that failed.
        cause: The exception the step raised.
        exchange: The exchange the step was handed.  In bubble mode this
                  is the caller's only handle on the partial run.
    """

    def __init__(
        self,
        step: Step,
        cause: Exception,
        exchange: Exchange,
        *,
        step_name: str | None = None,
    ) -> None:
        name = step_name or describe_step(step)
        self.step = step
        self.cause = cause
        self.exchange = exchange
        self.__cause__ = cause
        super().__init__(
            f"An error occurred when processing pipe {name}: {cause}",
            step_name=name,
            details={"cause_type": type(cause).__name__},
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise for structured logs."""
        return {
            "step_name": self.step_name,
            "message": self.message,
            "cause_type": type(self.cause).__name__,
            "cause": str(self.cause),
        }
