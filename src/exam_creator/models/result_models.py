"""
Pydantic model for the outcome of one generate action.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from exam_creator.models.exam_models import Exam


class GenerationResult(BaseModel):
    """Outcome of submitting the exam form."""
    status: Literal["ok", "validation_error", "generation_error", "rejected"] = Field(
        description="'ok', 'validation_error', 'generation_error' or 'rejected' (request already in flight)"
    )
    exam: Optional[Exam] = Field(
        default=None,
        description="Generated exam when status is 'ok'"
    )
    message: Optional[str] = Field(
        default=None,
        description="User-facing error message"
    )
    raw_text: Optional[str] = Field(
        default=None,
        description="Raw service reply kept for the debug view"
    )
    warnings: List[str] = Field(
        default_factory=list,
        description="Consistency warnings about a generated exam"
    )

    @property
    def ok(self) -> bool:
        return self.status == "ok"
