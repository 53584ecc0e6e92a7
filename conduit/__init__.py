"""conduit: a minimal sequential processing pipeline."""

from conduit.core.constants import RunStatus
from conduit.pipeline import (
    Exchange,
    Pipeline,
    PipelineError,
    PipelineResult,
    PipelineStep,
    Step,
    StepFailedError,
)

__version__ = "0.1.0"

__all__ = [
    "Pipeline",
    "PipelineResult",
    "Exchange",
    "Step",
    "PipelineStep",
    "PipelineError",
    "StepFailedError",
    "RunStatus",
]
