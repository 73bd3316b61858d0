"""
Exam Session state machine.

One session per browser tab: IDLE -> GENERATING -> READY | FAILED.
READY and FAILED go back to GENERATING on a new valid submit, or to IDLE
on clear. Only one request is in flight at a time; submits while
GENERATING are rejected without contacting the service.
"""
from enum import Enum
from typing import Callable, List, Optional, Any

from exam_creator import config
from exam_creator.core.form_state import FormStateHolder
from exam_creator.core.formatter import format_exam_text, format_tos_text
from exam_creator.core.validator import check_exam_consistency
from exam_creator.errors import ExamValidationError, GenerationError
from exam_creator.models.exam_models import Exam
from exam_creator.models.result_models import GenerationResult


class AppState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


def _default_generator_factory():
    from exam_creator.core.generator import ExamGenerator
    return ExamGenerator()


class ExamSession:
    """Own the form, the current exam and the error/debug output."""

    def __init__(self, generator_factory: Optional[Callable[[], Any]] = None):
        """
        Args:
            generator_factory: Zero-argument callable returning an object with
                ``generate_exam(form)``. Called on the first submit.
        """
        self.form = FormStateHolder()
        self.state = AppState.IDLE
        self.exam: Optional[Exam] = None
        self.error_message: Optional[str] = None
        self.raw_output: Optional[str] = None
        self.warnings: List[str] = []
        self._generator_factory = generator_factory or _default_generator_factory
        self._generator = None

    @property
    def is_generating(self) -> bool:
        return self.state == AppState.GENERATING

    def _get_generator(self):
        if self._generator is None:
            self._generator = self._generator_factory()
        return self._generator

    def submit(self) -> GenerationResult:
        """
        Request an exam for the current form values.

        Returns:
            GenerationResult describing the outcome. The session fields
            (state, exam, error_message, raw_output, warnings) are updated
            to match.
        """
        if self.is_generating:
            return GenerationResult(status="rejected")

        form = self.form.freeze()
        if not form.topic.strip():
            self.error_message = config.TOPIC_REQUIRED_MESSAGE
            return GenerationResult(status="validation_error", message=self.error_message)

        self.error_message = None
        self.exam = None
        self.raw_output = None
        self.warnings = []
        self.state = AppState.GENERATING

        try:
            exam = self._get_generator().generate_exam(form)
        except ExamValidationError as e:
            self.state = AppState.IDLE
            self.error_message = e.message
            return GenerationResult(status="validation_error", message=e.message)
        except GenerationError as e:
            print(f"✗ Exam generation failed: {e.__cause__ or e}")
            return self._fail(e.raw_text)
        except Exception as e:
            print(f"✗ Exam generation failed: {e}")
            return self._fail(None)

        self.exam = exam
        self.warnings = check_exam_consistency(exam, form).warnings()
        self.state = AppState.READY
        return GenerationResult(status="ok", exam=exam, warnings=self.warnings)

    def _fail(self, raw_text: Optional[str]) -> GenerationResult:
        self.state = AppState.FAILED
        self.error_message = config.GENERATION_FAILED_MESSAGE
        self.raw_output = raw_text
        return GenerationResult(
            status="generation_error",
            message=self.error_message,
            raw_text=raw_text
        )

    def clear(self) -> None:
        """Reset the form and drop the exam, error and debug output."""
        if self.is_generating:
            return
        self.form.reset()
        self.exam = None
        self.error_message = None
        self.raw_output = None
        self.warnings = []
        self.state = AppState.IDLE

    def exam_text(self) -> str:
        return format_exam_text(self.exam)

    def tos_text(self) -> str:
        return format_tos_text(self.exam)
