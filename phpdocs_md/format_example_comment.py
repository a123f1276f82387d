"""Logic for turning an @example block into a fenced code block."""

import re

from phpdocs_md.md_codeblock import md_codeblock

CODE_TAG_RE = re.compile(r"<code[^>]*>(.*?)</code>", re.DOTALL | re.IGNORECASE)


def strip_code_tags(example: str) -> str:
    """Return the content of the first <code> element, or the text unchanged."""
    m = CODE_TAG_RE.search(example)
    return m.group(1) if m else example


def format_example_comment(example: str) -> str:
    """Dedent an example and fence it, guessing the language.

    The first line has already lost its indentation to trimming, so only the
    following lines are dedented.
    """
    lines = strip_code_tags(example).strip("\n").splitlines()
    if len(lines) > 1:
        indents = [len(ln) - len(ln.lstrip()) for ln in lines[1:] if ln.strip()]
        cut = min(indents) if indents else 0
        lines = [lines[0].strip()] + [ln[cut:] for ln in lines[1:]]
    code = "\n".join(lines).strip()

    lang = ""
    if "<?php" in code:
        lang = "php"
    elif "var " in code and "</" not in code:
        lang = "js"
    return md_codeblock(lang, code)
