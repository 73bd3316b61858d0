"""
Plain-text and print-ready renderings of a generated exam.
"""
from html import escape
from typing import Optional

from exam_creator import config
from exam_creator.models.exam_models import Exam


def format_exam_text(exam: Optional[Exam]) -> str:
    """Question sheet as plain text, ready for the clipboard."""
    if exam is None:
        return ""

    text = [f"{exam.title}\n\n{exam.instructions}\n\n"]
    for item in exam.items:
        text.append(f"{item.no}. {item.question}\n")
        for key, choice in item.choices.as_pairs():
            text.append(f"   {key}. {choice}\n")
        text.append("\n")
    return "".join(text)


def format_tos_text(exam: Optional[Exam]) -> str:
    """Table of Specification as pipe-separated plain text."""
    if exam is None:
        return ""

    text = [
        f"Table of Specification: {exam.title}\n\n",
        f"{config.TOS_COLUMN_HEADER}\n",
        f"{config.TOS_SEPARATOR}\n",
    ]
    for entry in exam.tos:
        text.append(
            f"{entry.competency} | {entry.num_items} | {entry.percentage} | {entry.item_placement}\n"
        )
    return "".join(text)


PRINT_STYLES = """
@page { size: A4; margin: 18mm 16mm; }
body { font-family: "Times New Roman", serif; font-size: 12pt; color: #000; }
.exam-sheet { max-width: 178mm; margin: 0 auto; }
.exam-header { text-align: center; margin-bottom: 12pt; }
.exam-header h1 { font-size: 16pt; margin: 0 0 6pt 0; }
.learner-info { display: flex; justify-content: space-between; margin: 8pt 0 12pt 0; }
.tos-table { width: 100%; border-collapse: collapse; margin-bottom: 16pt; }
.tos-table th, .tos-table td { border: 1px solid #000; padding: 4pt 6pt; }
.tos-table th { background: #eee; }
.tos-table td.num { text-align: center; }
.exam-item { break-inside: avoid; margin-bottom: 10pt; }
.choices { list-style: none; margin: 4pt 0 0 18pt; padding: 0; }
.answer-key { break-before: page; }
.answer-key li { margin-bottom: 6pt; }
"""


def _render_tos_table(exam: Exam) -> str:
    rows = []
    for entry in exam.tos:
        rows.append(
            "<tr>"
            f"<td>{escape(entry.competency)}</td>"
            f"<td class=\"num\">{entry.num_items}</td>"
            f"<td class=\"num\">{escape(entry.percentage)}</td>"
            f"<td class=\"num\">{escape(entry.item_placement)}</td>"
            "</tr>"
        )
    total = sum(entry.num_items for entry in exam.tos)
    rows.append(
        "<tr class=\"total\">"
        "<td><strong>Total</strong></td>"
        f"<td class=\"num\"><strong>{total}</strong></td>"
        "<td class=\"num\"><strong>100%</strong></td>"
        "<td></td>"
        "</tr>"
    )
    return (
        "<section class=\"tos\">"
        "<h2>Table of Specification</h2>"
        "<table class=\"tos-table\">"
        "<thead><tr><th>Competency</th><th>Items</th><th>%</th><th>Placement</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
        "</section>"
    )


def _render_items(exam: Exam) -> str:
    blocks = []
    for item in exam.items:
        choices = "".join(
            f"<li><strong>{key}.</strong> {escape(choice)}</li>"
            for key, choice in item.choices.as_pairs()
        )
        blocks.append(
            "<div class=\"exam-item\">"
            f"<p><strong>{item.no}.</strong> {escape(item.question)}</p>"
            f"<ul class=\"choices\">{choices}</ul>"
            "</div>"
        )
    return f"<section class=\"items\">{''.join(blocks)}</section>"


def _render_answer_key(exam: Exam) -> str:
    entries = "".join(
        f"<li><strong>{item.no}. {item.answer}</strong> - {escape(item.rationale)}</li>"
        for item in exam.items
    )
    return (
        "<section class=\"answer-key\">"
        "<h2>Answer Key</h2>"
        f"<ol class=\"key\" style=\"list-style: none; padding: 0;\">{entries}</ol>"
        "</section>"
    )


def render_print_html(exam: Optional[Exam]) -> str:
    """
    Print-ready A4 layout of the exam.

    Contains the exam header with learner info lines, the Table of
    Specification with a totals row, the numbered items and a page-broken
    answer key with rationales. All generated text is HTML-escaped.
    """
    if exam is None:
        return ""

    return (
        f"<style>{PRINT_STYLES}</style>"
        "<div class=\"exam-sheet\">"
        "<header class=\"exam-header\">"
        f"<h1>{escape(exam.title)}</h1>"
        "<div class=\"learner-info\">"
        "<span>Name: ______________________</span>"
        "<span>Section: ____________</span>"
        "<span>Date: ____________</span>"
        "<span>Score: ______</span>"
        "</div>"
        f"<p class=\"instructions\"><em>{escape(exam.instructions)}</em></p>"
        "</header>"
        f"{_render_tos_table(exam)}"
        f"{_render_items(exam)}"
        f"{_render_answer_key(exam)}"
        "</div>"
    )
