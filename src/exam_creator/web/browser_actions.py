"""
Browser-side clipboard and print actions.

Streamlit renders these snippets inside a component iframe, so both
actions target the parent window that holds the exam preview.
"""
import json

from exam_creator import config
from exam_creator.errors import ClipboardError


def build_copy_script(text: str) -> str:
    """
    HTML snippet that writes ``text`` to the clipboard and alerts the result.

    Raises:
        ClipboardError: If there is nothing to copy
    """
    if not text:
        raise ClipboardError("Nothing to copy yet. Generate an exam first.")

    # "</script>" inside the text must not close the tag
    payload = json.dumps(text).replace("</", "<\\/")
    success = json.dumps(config.COPY_SUCCESS_MESSAGE)
    failure = json.dumps(config.COPY_FAILED_MESSAGE)
    return f"""<script>
(function () {{
  const text = {payload};
  const target = (window.parent && window.parent.navigator.clipboard) ? window.parent : window;
  target.navigator.clipboard.writeText(text)
    .then(function () {{ target.alert({success}); }})
    .catch(function () {{ target.alert({failure}); }});
}})();
</script>"""


def build_print_script() -> str:
    """HTML snippet that opens the browser print dialog for the page."""
    return """<script>
(function () {
  const target = window.parent || window;
  target.print();
})();
</script>"""
