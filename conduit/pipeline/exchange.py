"""
Exchange: mutable state object carried through every step.

This is the single source of truth for a pipeline run.  Each step
reads from and writes to the exchange and hands it back.  The engine
appends error records to it when a step fails and reads ``proceed``
after every step to decide whether the run continues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from conduit.pipeline.errors import StepFailedError


@dataclass(eq=False)
class Exchange:
    """
    Carries the in-flight value between pipeline steps.

    Attributes:
        value: The working payload.  ``None`` until a caller or a step
               sets it.
        proceed: ``False`` stops the pipeline after the current step.
        errors: Error records appended by the engine, in the order the
                failures happened.

    The mutators return the exchange itself so a step can be written as
    a single expression::

        pipeline.add_pipe(lambda ex: ex.set_value(ex.value + 1))
    """

    value: Any = None
    proceed: bool = True
    errors: list[StepFailedError] = field(default_factory=list)

    # ─── Fluent mutators ───────────────────────────────

    def set_value(self, value: Any) -> Exchange:
        self.value = value
        return self

    def set_proceed(self, proceed: bool) -> Exchange:
        self.proceed = proceed
        return self

    def halt(self) -> Exchange:
        """Ask the pipeline to stop after the current step."""
        self.proceed = False
        return self

    def add_error(self, error: StepFailedError) -> Exchange:
        self.errors.append(error)
        return self

    # ─── Read helpers ──────────────────────────────────

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def last_error(self) -> StepFailedError | None:
        return self.errors[-1] if self.errors else None

    def to_summary_dict(self) -> dict[str, Any]:
        """Compact summary for logging."""
        return {
            "value_type": type(self.value).__name__,
            "proceed": self.proceed,
            "error_count": len(self.errors),
            "failed_steps": [e.step_name for e in self.errors],
        }
