"""
Pytest configuration and shared fixtures for Exam Creator tests.

This module provides reusable fixtures for the exam models, the form
state and a mocked Gemini client.
"""
import tempfile
from pathlib import Path
from typing import List
from unittest.mock import Mock, MagicMock

import pytest

from exam_creator.models.exam_models import (
    ExamFormData, ExamChoices, ExamItem, TOSEntry, Exam
)


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


# ============================================================================
# ENVIRONMENT FIXTURES
# ============================================================================

@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    test_api_key = "test-gemini-api-key-12345"
    monkeypatch.setenv("GEMINI_API_KEY", test_api_key)
    monkeypatch.delenv("EXAM_CREATOR_MODEL", raising=False)
    return {"GEMINI_API_KEY": test_api_key}


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment with no API key set."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("EXAM_CREATOR_MODEL", raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_cwd(temp_dir, monkeypatch):
    """Run the test from an empty directory so no stray .env is loaded."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


# ============================================================================
# MODEL FIXTURES
# ============================================================================

@pytest.fixture
def sample_form() -> ExamFormData:
    """Create a sample ExamFormData instance."""
    return ExamFormData(
        topic="Photosynthesis",
        grade_level="Grade 6",
        item_count=5,
        language="English",
    )


@pytest.fixture
def sample_items() -> List[ExamItem]:
    """Create five sample exam items."""
    questions = [
        ("What do plants need to make food?", "C"),
        ("Which part of the leaf absorbs sunlight?", "A"),
        ("What gas do plants release during photosynthesis?", "B"),
        ("Where does photosynthesis mainly happen?", "D"),
        ("What is the food made by plants called?", "A"),
    ]
    return [
        ExamItem(
            no=index,
            question=question,
            choices=ExamChoices(
                A=f"Choice A{index}",
                B=f"Choice B{index}",
                C=f"Choice C{index}",
                D=f"Choice D{index}",
            ),
            answer=answer,
            rationale=f"Rationale for item {index}.",
        )
        for index, (question, answer) in enumerate(questions, start=1)
    ]


@pytest.fixture
def sample_tos() -> List[TOSEntry]:
    """Create a sample Table of Specification covering five items."""
    return [
        TOSEntry(competency="Identify the needs of plants", num_items=2,
                 percentage="40%", item_placement="1-2"),
        TOSEntry(competency="Describe the process of photosynthesis", num_items=3,
                 percentage="60%", item_placement="3-5"),
    ]


@pytest.fixture
def sample_exam(sample_tos, sample_items) -> Exam:
    """Create a sample Exam instance."""
    return Exam(
        title="Photosynthesis Quiz",
        instructions="Read each question carefully and choose the letter of the best answer.",
        tos=sample_tos,
        items=sample_items,
    )


@pytest.fixture
def sample_exam_json(sample_exam) -> str:
    """Sample exam serialized the way Gemini returns it (camelCase keys)."""
    return sample_exam.model_dump_json(by_alias=True)


# ============================================================================
# MOCK GOOGLE AI API FIXTURES
# ============================================================================

@pytest.fixture
def mock_genai_client():
    """Create a mock Google GenAI client."""
    client = MagicMock()
    client.models = MagicMock()
    client.models.generate_content = MagicMock()
    return client


@pytest.fixture
def mock_generate_response(sample_exam_json):
    """Create a mock API response for exam generation."""
    mock_response = Mock()
    mock_response.text = sample_exam_json
    return mock_response


@pytest.fixture
def stub_generator(sample_exam):
    """Generator stand-in returning the sample exam."""
    generator = Mock()
    generator.generate_exam = Mock(return_value=sample_exam)
    return generator
