"""Logic for parsing PHPDoc comment blocks into a map of tags."""

import re
from typing import Any

from phpdocs_md.clean_doc_comment import clean_doc_comment
from phpdocs_md.sanitize_declaration import sanitize_declaration

URL_RE = re.compile(r"^https?://")

DESCRIPTION = "description"
EXAMPLE = "example"
PARAM = "param"
SEE = "see"


class TagParser:
    """Turns a raw doc comment into a ParsedTagMap (a plain dict).

    Lines are scanned with a "current tag" cursor that starts on
    ``description``. Plain lines extend the current tag, ``@param`` and
    ``@see`` lines are parsed into structured entries without moving the
    cursor, and any other ``@tag`` moves it. ``@example`` content keeps its raw line layout.
    """

    def __init__(self, native_classes: set[str] | None = None) -> None:
        """Initialize the parser with the built-in classes left unqualified."""
        self.native_classes = native_classes or set()

    def parse(
        self,
        raw_comment: str | None,
        namespace: str = "",
        imports: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Parse a raw comment declared inside ``namespace``."""
        current_tag = DESCRIPTION
        tags: dict[str, Any] = {DESCRIPTION: ""}

        for raw_line in clean_doc_comment(raw_comment).splitlines():
            line = raw_line if current_tag == EXAMPLE else raw_line.strip()
            words = line.split()
            if not words:
                if current_tag == EXAMPLE and tags[EXAMPLE]:
                    tags[EXAMPLE] += "\n"
                continue

            first = words[0]
            if not first.startswith("@"):
                joiner = "\n" if current_tag == EXAMPLE else " "
                tags[current_tag] += joiner + line
            elif first == "@" + PARAM:
                param = self._parse_param(words, namespace, imports)
                if param is not None:
                    tags.setdefault(PARAM, {})[param["name"]] = param
            elif first == "@" + SEE:
                see = self._parse_see(words)
                if see:
                    tags.setdefault(SEE, []).append(see)
            else:
                current_tag = first[1:]
                value = " ".join(words[1:])
                existing = tags.get(current_tag) or ""
                if existing and value:
                    joiner = "\n" if current_tag == EXAMPLE else " "
                    value = existing + joiner + value
                tags[current_tag] = value or existing

        return self._trim(tags)

    def _parse_param(
        self,
        words: list[str],
        namespace: str,
        imports: dict[str, str] | None,
    ) -> dict[str, Any] | None:
        """Parse ``@param [Type] $name [description]``; None when unparsable."""
        if len(words) > 1 and words[1].lstrip("&.").startswith("$"):
            type_, name, rest = "mixed", words[1], words[2:]
        elif len(words) > 2:
            type_, name, rest = words[1], words[2], words[3:]
        else:
            return None

        name, _, default = name.lstrip("&.").partition("=")
        if not name:
            return None

        return {
            "name": name,
            "type": sanitize_declaration(
                type_,
                namespace,
                imports=imports,
                native_classes=self.native_classes,
            ),
            "description": " ".join(rest),
            "default": default or None,
        }

    def _parse_see(self, words: list[str]) -> str | None:
        """Parse ``@see`` into a Markdown link, an autolink or a verbatim reference."""
        rest = words[1:]
        if not rest:
            return None
        if URL_RE.match(rest[0]):
            if len(rest) > 1:
                return f"[{' '.join(rest[1:])}]({rest[0]})"
            return f"<{rest[0]}>"
        return " ".join(rest)

    def _trim(self, tags: dict[str, Any]) -> dict[str, Any]:
        """Trim every scalar value and every string inside list or map values."""
        for name, value in tags.items():
            if isinstance(value, str):
                tags[name] = value.strip()
            elif isinstance(value, list):
                tags[name] = [v.strip() if isinstance(v, str) else v for v in value]
            elif isinstance(value, dict):
                for entry in value.values():
                    for key, sub in entry.items():
                        if isinstance(sub, str):
                            entry[key] = sub.strip()
        return tags
