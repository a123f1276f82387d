"""Read-only accessors over a parsed tag map."""

import re
from typing import Any

INHERIT_DOC_RE = re.compile(r"\{@inheritdoc\}", re.IGNORECASE)


class DocInfo:
    """Wraps a ParsedTagMap and exposes the values entities need."""

    def __init__(self, tags: dict[str, Any]) -> None:
        """Store the parsed tags."""
        self.tags = tags

    @property
    def description(self) -> str:
        """Return the description with any {@inheritDoc} marker removed."""
        return INHERIT_DOC_RE.sub("", self.tags.get("description", "")).strip()

    @property
    def example(self) -> str:
        """Return the raw example block."""
        return self.tags.get("example", "")

    @property
    def see(self) -> list[str]:
        """Return the ordered list of @see entries."""
        return list(self.tags.get("see", []))

    @property
    def parameters(self) -> dict[str, dict[str, Any]]:
        """Return documented parameters keyed by their $name."""
        return self.tags.get("param", {})

    @property
    def return_type(self) -> str:
        """Return the type named by @return, or an empty string."""
        words = self.tags.get("return", "").split()
        return words[0] if words else ""

    @property
    def deprecated(self) -> bool:
        """Return True when a @deprecated tag is present."""
        return "deprecated" in self.tags

    @property
    def deprecation_message(self) -> str:
        """Return the free text of the @deprecated tag."""
        return self.tags.get("deprecated", "")

    @property
    def internal(self) -> bool:
        """Return True when an @internal tag is present."""
        return "internal" in self.tags

    @property
    def ignored(self) -> bool:
        """Return True when an @ignore tag is present."""
        return "ignore" in self.tags

    @property
    def inherits_doc(self) -> bool:
        """Return True for @inheritDoc tags or {@inheritDoc} in the description."""
        if any(k.lower() == "inheritdoc" for k in self.tags):
            return True
        return bool(INHERIT_DOC_RE.search(self.tags.get("description", "")))
