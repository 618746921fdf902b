"""Generation run domain exports."""

from .generation_run_use_case import GenerationRunError, execute_generation_run
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationRunError",
    "execute_generation_run",
]
