"""
Pydantic models for exam form input and structured exam output.
"""
from typing import List, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field

GradeLevel = Literal[
    "Grade 1", "Grade 2", "Grade 3", "Grade 4",
    "Grade 5", "Grade 6", "Grade 7", "Grade 8",
    "Grade 9", "Grade 10", "Grade 11", "Grade 12",
]
Language = Literal["Tagalog", "English"]
ChoiceKey = Literal["A", "B", "C", "D"]


class ExamFormData(BaseModel):
    """Parameters entered by the teacher on the exam form."""
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    topic: str = Field(default="", description="Topic the exam covers")
    grade_level: GradeLevel = Field(
        default="Grade 4", alias="gradeLevel",
        description="Grade level of the learners")
    item_count: int = Field(
        default=20, ge=5, le=50, alias="itemCount",
        description="Number of exam items (5-50)")
    language: Language = Field(
        default="Tagalog", description="Language the exam is written in")
    question_type: Literal["Multiple Choice"] = Field(
        default="Multiple Choice", alias="questionType",
        description="Type of exam items")


class ExamChoices(BaseModel):
    """The four labeled choices of an exam item."""
    A: str = Field(description="Choice A")
    B: str = Field(description="Choice B")
    C: str = Field(description="Choice C")
    D: str = Field(description="Choice D")

    def as_pairs(self) -> List[Tuple[str, str]]:
        return [("A", self.A), ("B", self.B), ("C", self.C), ("D", self.D)]


class ExamItem(BaseModel):
    """Represents a single multiple-choice item."""
    no: int = Field(description="Item number, starting at 1")
    question: str = Field(description="The question text")
    choices: ExamChoices = Field(description="Choices A to D")
    answer: ChoiceKey = Field(
        description="Letter of the correct choice: 'A', 'B', 'C' or 'D'")
    rationale: str = Field(
        description="Short explanation of why the answer is correct")


class TOSEntry(BaseModel):
    """One competency row of the Table of Specification."""
    model_config = ConfigDict(populate_by_name=True)

    competency: str = Field(description="Learning competency being assessed")
    num_items: int = Field(
        alias="numItems", description="Number of items for this competency")
    percentage: str = Field(
        description="Share of the whole exam, e.g. '25%'")
    item_placement: str = Field(
        alias="itemPlacement",
        description="Item numbers covering this competency, e.g. '1-5'")


class Exam(BaseModel):
    """Complete generated exam with its Table of Specification."""
    title: str = Field(description="Exam title")
    instructions: str = Field(description="General instructions for learners")
    tos: List[TOSEntry] = Field(
        description="Table of Specification, one row per competency")
    items: List[ExamItem] = Field(description="Exam items in order")
