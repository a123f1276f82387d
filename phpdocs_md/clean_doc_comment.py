"""Utility for stripping comment delimiters from a raw doc comment."""

import re

COMMENT_OPEN_RE = re.compile(r"^\s*/\*+")
COMMENT_CLOSE_RE = re.compile(r"\*+/\s*$")
LINE_MARKER_RE = re.compile(r"^\s*\*(?:[ \t]|$)")


def clean_doc_comment(comment: str | None) -> str:
    """Remove ``/**``, ``*/`` and the leading ``*`` marker of every line.

    Whitespace after the marker is kept so that indented example code survives.
    """
    if not comment:
        return ""
    text = COMMENT_OPEN_RE.sub("", comment.strip())
    text = COMMENT_CLOSE_RE.sub("", text)
    lines = [LINE_MARKER_RE.sub("", line) for line in text.splitlines()]
    return "\n".join(lines).strip().strip("*")
