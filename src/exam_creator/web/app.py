"""
Exam Creator (Simple) - Streamlit browser form.

Run with:
    streamlit run src/exam_creator/web/app.py
"""
import streamlit as st
import streamlit.components.v1 as components

from exam_creator import config
from exam_creator.core.formatter import render_print_html
from exam_creator.core.session import ExamSession
from exam_creator.errors import ClipboardError
from exam_creator.web.browser_actions import build_copy_script, build_print_script

SESSION_KEY = "exam_session"

# Hide the Streamlit chrome and the form when printing
PRINT_ONLY_CSS = """
<style>
@media print {
  [data-testid="stSidebar"], [data-testid="stHeader"], [data-testid="stToolbar"],
  .no-print { display: none !important; }
}
</style>
"""


def _widget_key(field: str) -> str:
    return f"form_{field}"


def _sync_widgets(session: ExamSession) -> None:
    data = session.form.data
    st.session_state[_widget_key("topic")] = data.topic
    st.session_state[_widget_key("gradeLevel")] = data.grade_level
    st.session_state[_widget_key("itemCount")] = data.item_count
    st.session_state[_widget_key("language")] = data.language


def get_session() -> ExamSession:
    if SESSION_KEY not in st.session_state:
        session = ExamSession()
        st.session_state[SESSION_KEY] = session
        _sync_widgets(session)
    return st.session_state[SESSION_KEY]


def _on_field_change(field: str) -> None:
    session = get_session()
    session.form.update(field, st.session_state[_widget_key(field)])
    if field == "itemCount":
        st.session_state[_widget_key(field)] = session.form.data.item_count


def _on_clear() -> None:
    session = get_session()
    session.clear()
    _sync_widgets(session)


def _copy(text: str) -> None:
    try:
        components.html(build_copy_script(text), height=0)
    except ClipboardError as e:
        st.toast(f"{config.COPY_FAILED_MESSAGE} {e}")


def render_sidebar(session: ExamSession) -> bool:
    """Render the form and actions. Returns True when Generate was clicked."""
    with st.sidebar:
        st.header("Exam Details")
        st.text_input(
            "Topic",
            key=_widget_key("topic"),
            placeholder="e.g., Photosynthesis...",
            on_change=_on_field_change,
            args=("topic",),
        )
        st.selectbox(
            "Grade Level",
            options=config.GRADE_LEVELS,
            key=_widget_key("gradeLevel"),
            on_change=_on_field_change,
            args=("gradeLevel",),
        )
        st.number_input(
            f"Items ({config.MIN_ITEM_COUNT}-{config.MAX_ITEM_COUNT})",
            min_value=config.MIN_ITEM_COUNT,
            max_value=config.MAX_ITEM_COUNT,
            step=1,
            key=_widget_key("itemCount"),
            on_change=_on_field_change,
            args=("itemCount",),
        )
        st.selectbox(
            "Language",
            options=config.LANGUAGES,
            key=_widget_key("language"),
            on_change=_on_field_change,
            args=("language",),
        )

        if session.error_message:
            st.error(session.error_message)

        # submit() runs inside this script run and rejects re-entry while GENERATING
        generate_clicked = st.button(
            "Generate Exam",
            key="generate",
            type="primary",
            width="stretch",
        )
        st.button("Clear All", key="clear", on_click=_on_clear, width="stretch")

        if session.exam is not None:
            st.divider()
            if st.button("Print / Save PDF", key="print", width="stretch"):
                components.html(build_print_script(), height=0)
            if st.button("Copy TOS", key="copy_tos", width="stretch"):
                _copy(session.tos_text())
            if st.button("Copy Questions", key="copy_questions", width="stretch"):
                _copy(session.exam_text())

    return generate_clicked


def render_main(session: ExamSession) -> None:
    if session.exam is None:
        st.markdown(
            "<div class=\"no-print\" style=\"text-align:center; padding:4rem 1rem; "
            "border:4px dashed #e2e8f0; border-radius:1.5rem;\">"
            "<h3>Ready to create?</h3>"
            "<p>Just fill in the topic and grade level to generate a complete exam pack.</p>"
            "</div>",
            unsafe_allow_html=True,
        )
    else:
        for warning in session.warnings:
            st.warning(warning)
        st.html(render_print_html(session.exam))

    if session.raw_output:
        with st.expander("Debug Data", expanded=False):
            st.code(session.raw_output, language=None)


def main() -> None:
    st.set_page_config(page_title="Exam Creator (Simple)", layout="wide")
    st.markdown(PRINT_ONLY_CSS, unsafe_allow_html=True)
    st.markdown(
        "<div class=\"no-print\" style=\"text-align:center;\">"
        "<h1>Exam Creator <span style=\"color:#2563eb;\">(Simple)</span></h1>"
        "<p>A4 Bond Paper Ready &bull; Table of Specification Included</p>"
        "</div>",
        unsafe_allow_html=True,
    )

    session = get_session()
    generate_clicked = render_sidebar(session)

    if generate_clicked:
        grade = session.form.data.grade_level
        with st.container():
            st.markdown("**Drafting Exam & Table of Specification...**")
            with st.spinner(f"Our AI is designing items for {grade}"):
                session.submit()
        st.rerun()

    render_main(session)


main()
