"""
Exceptions raised while collecting, generating and sharing an exam.
"""
from typing import Optional

from exam_creator import config


class ExamCreatorError(Exception):
    """Base class for Exam Creator errors."""


class ExamValidationError(ExamCreatorError):
    """Form input is not complete enough to request an exam."""

    def __init__(self, message: str = config.TOPIC_REQUIRED_MESSAGE):
        super().__init__(message)
        self.message = message


class GenerationError(ExamCreatorError):
    """
    The exam could not be generated.

    ``message`` is safe to show to users. ``raw_text`` holds the service
    reply (when one was received) for the debug view.
    """

    def __init__(
        self,
        message: str = config.GENERATION_FAILED_MESSAGE,
        raw_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.raw_text = raw_text


class ClipboardError(ExamCreatorError):
    """Text could not be handed to the clipboard."""
