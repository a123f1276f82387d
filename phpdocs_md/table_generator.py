"""Render contract shared by every member table generator."""

from abc import ABC, abstractmethod

from phpdocs_md.entities import FunctionEntity
from phpdocs_md.format_example_comment import format_example_comment
from phpdocs_md.type_names import class_base_name


def format_type(type_declaration: str | None) -> str:
    """Render union separators as ``/`` so the type is safe inside a table cell."""
    return (type_declaration or "").replace("|", "/")


def escape_cell(text: str) -> str:
    """Flatten prose onto one line and escape table pipes."""
    return " ".join(text.split()).replace("|", "\\|")


def visibility_badge(func: FunctionEntity) -> str:
    """Return the visibility followed by static/final markers."""
    parts = [func.visibility]
    if func.static:
        parts.append("static")
    if func.final:
        parts.append("final")
    return " ".join(parts)


class TableGenerator(ABC):
    """Builds the member table of one class at a time.

    Call ``open_table()`` per class, ``add_func()`` per member in declaration
    order, then ``get_table()``.
    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self.full_class_name = ""
        self.rows: list[list[str]] = []
        self.examples: dict[str, str] = {}
        self.include_see = False
        self.abstraction_declared = True
        self.examples_appended = True

    def open_table(self) -> None:
        """Start a new table, discarding rows of the previous class."""
        self.full_class_name = ""
        self.rows = []
        self.examples = {}
        self.include_see = False

    def declare_abstraction(self, toggle: bool) -> None:
        """Toggle the ``abstract`` marker (off for interfaces)."""
        self.abstraction_declared = toggle

    def append_examples(self, toggle: bool) -> None:
        """Toggle member examples below the table."""
        self.examples_appended = toggle

    @abstractmethod
    def add_func(self, func: FunctionEntity, include_see: bool = False) -> str:
        """Add one member row and return it as Markdown."""

    @abstractmethod
    def get_table(self) -> str:
        """Return the finished table, followed by member examples."""

    def _remember(self, func: FunctionEntity, include_see: bool) -> None:
        self.full_class_name = func.class_name
        self.include_see = self.include_see or include_see
        if func.example:
            self.examples[func.name] = func.example

    def _render_examples(self) -> str:
        if not self.examples_appended or not self.examples:
            return ""
        class_name = class_base_name(self.full_class_name)
        blocks = [
            f"###### Examples of {class_name}::{name}()\n{format_example_comment(ex)}"
            for name, ex in self.examples.items()
        ]
        return "\n" + "\n".join(blocks)

    def _see_cell(self, func: FunctionEntity) -> str:
        return "<br />".join(escape_cell(s) for s in func.see)
