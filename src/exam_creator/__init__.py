"""
Exam Creator (Simple).

A Python package for generating multiple-choice exams with a
Table of Specification (TOS) using Google Gemini.
"""

__version__ = "1.0.0"
__author__ = "Exam Creator Development Team"

from exam_creator.core.generator import ExamGenerator
from exam_creator.core.session import ExamSession

__all__ = [
    "ExamGenerator",
    "ExamSession",
]
