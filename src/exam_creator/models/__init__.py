"""
Data models for exam generation and consistency checking.
"""

from exam_creator.models.exam_models import (
    ExamFormData,
    ExamChoices,
    ExamItem,
    TOSEntry,
    Exam,
)
from exam_creator.models.result_models import GenerationResult
from exam_creator.models.validation_models import (
    ConsistencyIssue,
    ExamConsistencyReport,
)

__all__ = [
    "ExamFormData",
    "ExamChoices",
    "ExamItem",
    "TOSEntry",
    "Exam",
    "GenerationResult",
    "ConsistencyIssue",
    "ExamConsistencyReport",
]
