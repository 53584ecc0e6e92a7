"""
Pipeline engine: sequential step runner with a configurable error policy.

This package provides the Pipeline that pushes an Exchange through an
ordered list of steps, recording step failures on the exchange and
either raising or absorbing them.
"""

from conduit.pipeline.engine import Pipeline, PipelineResult
from conduit.pipeline.errors import PipelineError, StepFailedError
from conduit.pipeline.exchange import Exchange
from conduit.pipeline.step import PipelineStep, Step, step_name

__all__ = [
    "Pipeline",
    "PipelineResult",
    "Exchange",
    "Step",
    "PipelineStep",
    "step_name",
    "PipelineError",
    "StepFailedError",
]
