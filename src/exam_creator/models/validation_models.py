"""
Pydantic models for exam consistency checking.
"""
from typing import List, Literal
from pydantic import BaseModel, Field


class ConsistencyIssue(BaseModel):
    """Represents a consistency issue found in a generated exam."""
    severity: Literal["major", "minor"] = Field(
        description="Severity level: 'major' or 'minor'"
    )
    issue_type: Literal[
        "item_count_mismatch",
        "tos_total_mismatch",
        "numbering_gap",
        "duplicate_choices",
    ] = Field(
        description="Type of issue: 'item_count_mismatch', 'tos_total_mismatch', 'numbering_gap', 'duplicate_choices'"
    )
    description: str = Field(
        description="Detailed description of the issue found"
    )


class ExamConsistencyReport(BaseModel):
    """Consistency report for one generated exam."""
    expected_items: int = Field(
        description="Number of items the exam was expected to contain"
    )
    actual_items: int = Field(
        description="Number of items the exam actually contains"
    )
    tos_total: int = Field(
        description="Sum of item counts across the Table of Specification"
    )
    issues: List[ConsistencyIssue] = Field(
        default_factory=list,
        description="List of issues found during the check"
    )

    @property
    def is_consistent(self) -> bool:
        return not self.issues

    def warnings(self) -> List[str]:
        """Issue descriptions, major issues first."""
        ordered = sorted(self.issues, key=lambda i: 0 if i.severity == "major" else 1)
        return [issue.description for issue in ordered]
