"""
Exam Generator for Exam Creator.

Sends the exam form to Gemini with a structured JSON output schema and
parses the reply into an Exam.

Features:
- Prompt built from every form field (topic, grade, items, language, type)
- Structured output constrained to the Exam JSON schema
- Tolerates replies wrapped in a ```json fenced block
- Keeps the raw reply on failure for the debug view
"""
import argparse
import json
import os
import re
import sys
from typing import Optional, Any

from google import genai
from google.genai import errors as genai_errors
from pydantic import ValidationError

from exam_creator import config
from exam_creator.core.formatter import format_exam_text, format_tos_text
from exam_creator.core.form_state import FormStateHolder
from exam_creator.errors import ExamValidationError, GenerationError
from exam_creator.models.exam_models import Exam, ExamFormData
from exam_creator.utils.env_loader import load_env

_FENCED_JSON = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def build_prompt(form: ExamFormData) -> str:
    """Build the generation prompt from the form values."""
    return config.DEFAULT_PROMPT_TEMPLATE.format(
        topic=form.topic.strip(),
        grade_level=form.grade_level,
        item_count=form.item_count,
        language=form.language,
        question_type=form.question_type,
    )


def parse_exam_response(text: Optional[str]) -> Exam:
    """
    Parse a service reply into an Exam.

    Args:
        text: Reply text, plain JSON or JSON inside a fenced code block

    Returns:
        Parsed Exam

    Raises:
        GenerationError: If the text is empty or does not match the Exam schema
    """
    if text is None or not text.strip():
        raise GenerationError(raw_text=text)

    payload = text.strip()
    try:
        return Exam.model_validate_json(payload)
    except ValidationError as e:
        last_error = e

    # Fall back to a ```json block, for replies that wrap the JSON in prose
    fenced = _FENCED_JSON.search(payload)
    if fenced:
        try:
            return Exam.model_validate_json(fenced.group(1).strip())
        except ValidationError as e:
            last_error = e

    raise GenerationError(raw_text=text) from last_error


class ExamGenerator:
    """Generate exams with Table of Specification using Gemini."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        system_instruction: Optional[str] = None,
        client: Optional[Any] = None
    ):
        """
        Initialize the exam generator.

        Args:
            api_key: Google AI API key. If not provided, uses GEMINI_API_KEY environment variable.
            model_name: Name of the Gemini model to use. If not provided, uses
                EXAM_CREATOR_MODEL or config.MODEL_NAME
            system_instruction: Custom system instruction. If not provided, uses config.SYSTEM_INSTRUCTION
            client: Pre-built genai client, mainly for tests.
        """
        # Load environment variables
        load_env()

        if api_key:
            os.environ[config.API_KEY_ENV_VAR] = api_key

        self.client = client or genai.Client(api_key=api_key)
        self.model_name = (
            model_name or os.environ.get(config.MODEL_ENV_VAR) or config.MODEL_NAME
        )
        self.system_instruction = system_instruction or config.SYSTEM_INSTRUCTION

    def generate_exam(self, form: ExamFormData) -> Exam:
        """
        Generate an exam for the given form values.

        Args:
            form: Exam parameters

        Returns:
            Exam parsed from the structured reply

        Raises:
            ExamValidationError: If the topic is blank (no request is sent)
            GenerationError: If the request fails or the reply cannot be parsed
        """
        if not form.topic.strip():
            raise ExamValidationError()

        generation_config = {
            "response_mime_type": "application/json",
            "response_json_schema": Exam.model_json_schema(),
            "system_instruction": self.system_instruction,
        }

        print(f"Generating exam using {self.model_name}...")
        print(f"  Topic: {form.topic.strip()} | {form.grade_level} | "
              f"{form.item_count} items | {form.language}")

        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=build_prompt(form),
                config=generation_config
            )
        except genai_errors.APIError as e:
            raw_text = None
            if e.details:
                raw_text = json.dumps(e.details, indent=2, ensure_ascii=False, default=str)
            raise GenerationError(raw_text=raw_text) from e
        except Exception as e:
            # Transport errors carry no reply text to show
            raise GenerationError() from e

        exam = parse_exam_response(getattr(response, "text", None))

        print(f"✓ Exam generated successfully! ({len(exam.items)} items)\n")
        return exam


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-creator",
        description="Generate a multiple-choice exam with a Table of Specification."
    )
    parser.add_argument("topic", help="Topic of the exam, e.g. Photosynthesis")
    parser.add_argument("--grade", default=config.DEFAULT_GRADE_LEVEL,
                        choices=config.GRADE_LEVELS, help="Grade level")
    parser.add_argument("--items", default=str(config.DEFAULT_ITEM_COUNT),
                        help="Number of items (clamped to 5-50)")
    parser.add_argument("--language", default=config.DEFAULT_LANGUAGE,
                        choices=config.LANGUAGES, help="Exam language")
    parser.add_argument("--model", default=None, help="Gemini model name")
    return parser


def main(argv: Optional[list] = None) -> int:
    """Generate one exam from the command line and print both text views."""
    args = build_arg_parser().parse_args(argv)

    print("="*70)
    print("EXAM CREATOR (Simple)")
    print("="*70 + "\n")

    # Load environment variables first
    load_env()

    api_key = os.environ.get(config.API_KEY_ENV_VAR)
    if not api_key:
        print(f"ERROR: {config.API_KEY_ENV_VAR} environment variable not set.")
        print(f"Please set it using: export {config.API_KEY_ENV_VAR}='your-api-key'")
        return 1

    form = FormStateHolder()
    form.update("topic", args.topic)
    form.update("gradeLevel", args.grade)
    form.update("itemCount", args.items)
    form.update("language", args.language)

    try:
        generator = ExamGenerator(model_name=args.model)
        exam = generator.generate_exam(form.freeze())
    except ExamValidationError as e:
        print(f"\n✗ ERROR: {e.message}")
        return 2
    except GenerationError as e:
        print(f"\n✗ ERROR: {e.message}")
        if e.__cause__ is not None:
            print(f"  Cause: {e.__cause__}")
        if e.raw_text:
            print("\nDebug Data:")
            print(e.raw_text)
        return 1

    print(format_tos_text(exam))
    print("="*70 + "\n")
    print(format_exam_text(exam))
    return 0


if __name__ == "__main__":
    sys.exit(main())
