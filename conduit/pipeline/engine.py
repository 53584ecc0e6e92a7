"""
Pipeline: the orchestrator that runs steps sequentially.

Responsibilities:
    - Hold the ordered step list and the error policy flags
    - Apply each step to the exchange in insertion order
    - Record every step failure on the exchange
    - Bubble the first failure or absorb it, per policy
    - Stop as soon as ``exchange.proceed`` is false
    - Return a PipelineResult (``execute``) or the exchange (``run``)
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any, Iterable

from conduit.core.config import Settings
from conduit.core.config import settings as default_settings
from conduit.core.constants import (
    DEFAULT_BUBBLE_ERRORS,
    DEFAULT_CONTINUE_ON_ERROR,
    RunStatus,
)
from conduit.core.logging import get_logger
from conduit.pipeline.errors import StepFailedError
from conduit.pipeline.exchange import Exchange
from conduit.pipeline.step import Step, step_name

logger = get_logger(__name__)

_NO_INPUT = object()


@dataclass
class PipelineResult:
    """Final outcome of a pipeline execution."""

    exchange: Exchange
    status: RunStatus
    steps_run: int = 0
    total_steps: int = 0
    duration_ms: int = 0
    error: StepFailedError | None = None

    @property
    def ok(self) -> bool:
        """False only when a failure was bubbled."""
        return self.status != RunStatus.FAILED

    def unwrap(self) -> Exchange:
        """
        Return the exchange, or raise the bubbled failure.

        Each call raises with a fresh traceback, so calling it again does
        not stack frames onto the stored error.
        """
        if self.error is not None and self.status == RunStatus.FAILED:
            raise self.error.with_traceback(None)
        return self.exchange


class Pipeline:
    """
    Runs an ordered list of steps against an Exchange.

    Error policy:
        bubble_errors=True (default)
            The first step failure stops the run and is raised from
            ``run()`` as a StepFailedError.
        bubble_errors=False, continue_on_error=False
            The failure is recorded on ``exchange.errors`` and the run
            stops quietly.
        bubble_errors=False, continue_on_error=True
            The failure is recorded and the remaining steps still run.

    Usage::

        pipeline = (
            Pipeline()
            .add_pipe(load)
            .add_pipes([clean, enrich])
            .set_bubble_errors(False)
        )
        exchange = pipeline.run(raw_payload)
    """

    def __init__(
        self,
        pipes: Iterable[Step] | None = None,
        *,
        bubble_errors: bool = DEFAULT_BUBBLE_ERRORS,
        continue_on_error: bool = DEFAULT_CONTINUE_ON_ERROR,
    ) -> None:
        self.pipes: list[Step] = list(pipes) if pipes is not None else []
        self.bubble_errors = bubble_errors
        self.continue_on_error = continue_on_error
        self.pipeline_id = uuid.uuid4().hex[:12]

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        pipes: Iterable[Step] | None = None,
    ) -> Pipeline:
        """Build a pipeline whose error policy comes from Settings."""
        settings = settings or default_settings
        return cls(
            pipes,
            bubble_errors=settings.BUBBLE_ERRORS,
            continue_on_error=settings.CONTINUE_ON_ERROR,
        )

    def __len__(self) -> int:
        return len(self.pipes)

    def __repr__(self) -> str:
        return (
            f"Pipeline(pipes={[step_name(p) for p in self.pipes]}, "
            f"bubble_errors={self.bubble_errors}, "
            f"continue_on_error={self.continue_on_error})"
        )

    # ─── Builder ───────────────────────────────────────

    def add_pipe(self, pipe: Step) -> Pipeline:
        """Append one step to the end of the pipeline."""
        self.pipes.append(pipe)
        return self

    def add_pipes(self, pipes: Iterable[Step]) -> Pipeline:
        """Append several steps, in order, to the end of the pipeline."""
        self.pipes.extend(pipes)
        return self

    add_step = add_pipe
    add_steps = add_pipes

    def set_pipes(self, pipes: Iterable[Step]) -> Pipeline:
        """Replace the whole step list."""
        self.pipes = list(pipes)
        return self

    def set_bubble_errors(self, bubble_errors: bool) -> Pipeline:
        self.bubble_errors = bubble_errors
        return self

    def set_continue_on_error(self, continue_on_error: bool) -> Pipeline:
        """Only takes effect while ``bubble_errors`` is False."""
        self.continue_on_error = continue_on_error
        return self

    # ─── Execution ─────────────────────────────────────

    def run(self, payload: Any = _NO_INPUT) -> Exchange:
        """
        Run the pipeline and return the resulting exchange.

        Args:
            payload: Nothing, a raw value, or an Exchange.  A raw value is
                   placed into a new exchange; an Exchange is used as-is.

        Raises:
            StepFailedError: A step failed and ``bubble_errors`` is True.
        """
        return self.execute(payload).unwrap()

    def execute(self, payload: Any = _NO_INPUT) -> PipelineResult:
        """
        Run the pipeline and return a PipelineResult without raising
        for step failures.
        """
        exchange = self._to_exchange(payload)
        started = time.perf_counter()
        total_steps = len(self.pipes)

        log = logger.bind(
            pipeline_id=self.pipeline_id,
            total_steps=total_steps,
            bubble_errors=self.bubble_errors,
            continue_on_error=self.continue_on_error,
        )
        log.debug("Pipeline started")

        status = RunStatus.COMPLETED
        error: StepFailedError | None = None
        steps_run = 0

        # Steps appended mid-run take effect on the next run
        for index, pipe in enumerate(list(self.pipes)):
            steps_run = index + 1
            try:
                exchange = pipe(exchange)
            except Exception as exc:
                record = StepFailedError(pipe, exc, exchange)
                exchange.add_error(record)

                if self.bubble_errors:
                    log.error(
                        "Step failed, bubbling",
                        step_index=steps_run,
                        **record.to_dict(),
                    )
                    status = RunStatus.FAILED
                    error = record
                    break

                exchange.proceed = self.continue_on_error
                log.warning(
                    "Step failed, recorded on exchange",
                    step_index=steps_run,
                    continuing=self.continue_on_error,
                    **record.to_dict(),
                )

            if not exchange.proceed:
                log.info(
                    "Pipeline halted",
                    step_name=step_name(pipe),
                    step_index=steps_run,
                )
                status = RunStatus.HALTED
                break

        duration_ms = int((time.perf_counter() - started) * 1000)
        log.debug(
            "Pipeline finished",
            status=status,
            steps_run=steps_run,
            duration_ms=duration_ms,
            exchange=exchange.to_summary_dict(),
        )

        return PipelineResult(
            exchange=exchange,
            status=status,
            steps_run=steps_run,
            total_steps=total_steps,
            duration_ms=duration_ms,
            error=error,
        )

    @staticmethod
    def _to_exchange(payload: Any) -> Exchange:
        if payload is _NO_INPUT:
            return Exchange()
        if isinstance(payload, Exchange):
            return payload
        return Exchange(value=payload)
