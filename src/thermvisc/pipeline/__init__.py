"""Pipeline modules.

- orchestrator: Logging setup and single-batch entry point
- processor: Stage sequencing for one batch
- outcome: Terminal run result
"""

from thermvisc.pipeline.orchestrator import BatchOrchestrator
from thermvisc.pipeline.processor import BatchProcessor
from thermvisc.pipeline.outcome import RunOutcome

__all__ = [
    "BatchOrchestrator",
    "BatchProcessor",
    "RunOutcome",
]
