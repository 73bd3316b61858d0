"""
Core functionality for exam generation, formatting and session state.
"""

from exam_creator.core.form_state import FormStateHolder
from exam_creator.core.generator import ExamGenerator
from exam_creator.core.session import AppState, ExamSession

__all__ = [
    "FormStateHolder",
    "ExamGenerator",
    "AppState",
    "ExamSession",
]
