"""
Integration tests for the exam session state machine (session.py).

Tests cover:
- State transitions Idle -> Generating -> Ready / Failed
- Validation errors that never reach the service
- Raw reply retention for the debug view
- Rejection of submits while a request is in flight
- Clear
"""
import pytest
from unittest.mock import Mock

from exam_creator import config
from exam_creator.core.session import AppState, ExamSession
from exam_creator.errors import GenerationError


def _session_with(generator) -> ExamSession:
    return ExamSession(generator_factory=lambda: generator)


@pytest.mark.integration
class TestSessionSubmit:
    """Test submitting the form."""

    def test_starts_idle(self):
        session = ExamSession(generator_factory=Mock())

        assert session.state == AppState.IDLE
        assert session.exam is None
        assert session.error_message is None
        assert session.raw_output is None

    def test_submit_success(self, stub_generator, sample_exam):
        session = _session_with(stub_generator)
        session.form.update("topic", "Photosynthesis")
        session.form.update("itemCount", 5)

        result = session.submit()

        assert result.ok
        assert result.exam == sample_exam
        assert session.state == AppState.READY
        assert session.exam == sample_exam
        assert session.error_message is None
        assert session.warnings == []

    def test_submit_passes_form_snapshot(self, stub_generator):
        session = _session_with(stub_generator)
        session.form.update("topic", "Fractions")
        session.form.update("gradeLevel", "Grade 5")
        session.form.update("language", "English")

        session.submit()

        form = stub_generator.generate_exam.call_args.args[0]
        assert form.topic == "Fractions"
        assert form.grade_level == "Grade 5"
        assert form.language == "English"
        assert form is not session.form.data

    def test_submit_reports_consistency_warnings(self, stub_generator):
        session = _session_with(stub_generator)
        session.form.update("topic", "Photosynthesis")
        session.form.update("itemCount", 20)

        result = session.submit()

        assert result.ok
        assert "Expected 20 items but the exam has 5" in session.warnings
        assert result.warnings == session.warnings

    @pytest.mark.parametrize("topic", ["", "   ", "\t\n"])
    def test_blank_topic_never_calls_service(self, topic):
        factory = Mock()
        session = ExamSession(generator_factory=factory)
        session.form.update("topic", topic)

        result = session.submit()

        assert result.status == "validation_error"
        assert result.message == config.TOPIC_REQUIRED_MESSAGE
        assert session.error_message == config.TOPIC_REQUIRED_MESSAGE
        assert session.state == AppState.IDLE
        factory.assert_not_called()

    def test_generation_failure_keeps_raw_text(self):
        generator = Mock()
        generator.generate_exam = Mock(
            side_effect=GenerationError(raw_text="malformed-json-fragment")
        )
        session = _session_with(generator)
        session.form.update("topic", "Photosynthesis")

        result = session.submit()

        assert result.status == "generation_error"
        assert session.state == AppState.FAILED
        assert session.error_message == config.GENERATION_FAILED_MESSAGE
        assert session.raw_output == "malformed-json-fragment"
        assert "malformed-json-fragment" not in session.error_message
        assert session.exam is None

    def test_network_failure_has_no_debug_text(self):
        generator = Mock()
        generator.generate_exam = Mock(side_effect=GenerationError())
        session = _session_with(generator)
        session.form.update("topic", "Photosynthesis")

        session.submit()

        assert session.state == AppState.FAILED
        assert session.raw_output is None

    def test_generator_setup_failure(self):
        def broken_factory():
            raise ValueError("Missing key inputs argument!")

        session = ExamSession(generator_factory=broken_factory)
        session.form.update("topic", "Photosynthesis")

        result = session.submit()

        assert result.status == "generation_error"
        assert session.state == AppState.FAILED

    def test_resubmit_after_failure(self, sample_exam):
        generator = Mock()
        generator.generate_exam = Mock(
            side_effect=[GenerationError(raw_text="oops"), sample_exam]
        )
        session = _session_with(generator)
        session.form.update("topic", "Photosynthesis")

        session.submit()
        session.submit()

        assert session.state == AppState.READY
        assert session.raw_output is None
        assert session.error_message is None
        assert session.exam == sample_exam

    def test_no_second_call_while_generating(self, sample_exam):
        generator = Mock()
        session = _session_with(generator)
        session.form.update("topic", "Photosynthesis")
        nested_results = []

        def generate(form):
            assert session.state == AppState.GENERATING
            assert session.is_generating
            nested_results.append(session.submit())
            return sample_exam

        generator.generate_exam = Mock(side_effect=generate)

        session.submit()

        assert generator.generate_exam.call_count == 1
        assert nested_results[0].status == "rejected"
        assert session.state == AppState.READY


@pytest.mark.integration
class TestSessionClear:
    """Test clearing the session."""

    def test_clear_restores_defaults(self, stub_generator):
        session = _session_with(stub_generator)
        session.form.update("topic", "Photosynthesis")
        session.form.update("gradeLevel", "Grade 8")
        session.form.update("itemCount", 45)
        session.form.update("language", "English")
        session.submit()

        session.clear()

        assert session.state == AppState.IDLE
        assert session.exam is None
        assert session.error_message is None
        assert session.raw_output is None
        assert session.warnings == []
        assert session.form.data.topic == ""
        assert session.form.data.grade_level == "Grade 4"
        assert session.form.data.item_count == 20
        assert session.form.data.language == "Tagalog"
        assert session.form.data.question_type == "Multiple Choice"

    def test_clear_after_failure(self):
        generator = Mock()
        generator.generate_exam = Mock(side_effect=GenerationError(raw_text="bad"))
        session = _session_with(generator)
        session.form.update("topic", "Photosynthesis")
        session.submit()

        session.clear()

        assert session.state == AppState.IDLE
        assert session.raw_output is None
        assert session.error_message is None

    def test_text_views(self, stub_generator):
        session = _session_with(stub_generator)

        assert session.exam_text() == ""
        assert session.tos_text() == ""

        session.form.update("topic", "Photosynthesis")
        session.submit()

        assert session.exam_text().startswith("Photosynthesis Quiz\n\n")
        assert session.tos_text().startswith("Table of Specification: Photosynthesis Quiz\n")
