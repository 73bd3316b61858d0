"""
Exam Consistency Checker.

Generated exams are accepted as long as they match the Exam schema. The
checks here cover the invariants the schema cannot express and report
them as warnings instead of rejecting the exam:

- the number of items matches the requested item count
- the Table of Specification item counts add up to the item count
- items are numbered 1..N in order
- no item repeats the same choice text
"""
from typing import List, Optional

from exam_creator.models.exam_models import Exam, ExamFormData
from exam_creator.models.validation_models import ConsistencyIssue, ExamConsistencyReport


def _duplicate_choice_issues(exam: Exam) -> List[ConsistencyIssue]:
    issues = []
    for item in exam.items:
        texts = [choice.strip().casefold() for _, choice in item.choices.as_pairs()]
        if len(set(texts)) < len(texts):
            issues.append(ConsistencyIssue(
                severity="minor",
                issue_type="duplicate_choices",
                description=f"Item {item.no} repeats the same choice text"
            ))
    return issues


def check_exam_consistency(
    exam: Exam,
    form: Optional[ExamFormData] = None
) -> ExamConsistencyReport:
    """
    Check a generated exam against the request that produced it.

    Args:
        exam: Generated exam
        form: Form values the exam was requested with. Without it the
            item list length is used as the expected count.

    Returns:
        ExamConsistencyReport listing every issue found
    """
    actual_items = len(exam.items)
    expected_items = form.item_count if form is not None else actual_items
    tos_total = sum(entry.num_items for entry in exam.tos)

    issues = []
    if actual_items != expected_items:
        issues.append(ConsistencyIssue(
            severity="major",
            issue_type="item_count_mismatch",
            description=f"Expected {expected_items} items but the exam has {actual_items}"
        ))

    if tos_total != expected_items:
        issues.append(ConsistencyIssue(
            severity="minor",
            issue_type="tos_total_mismatch",
            description=f"Table of Specification covers {tos_total} items, expected {expected_items}"
        ))

    numbers = [item.no for item in exam.items]
    if numbers != list(range(1, actual_items + 1)):
        issues.append(ConsistencyIssue(
            severity="minor",
            issue_type="numbering_gap",
            description="Items are not numbered consecutively starting at 1"
        ))

    issues.extend(_duplicate_choice_issues(exam))

    return ExamConsistencyReport(
        expected_items=expected_items,
        actual_items=actual_items,
        tos_total=tos_total,
        issues=issues
    )
