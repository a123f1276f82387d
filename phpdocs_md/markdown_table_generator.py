"""Default two-column member table."""

from phpdocs_md.entities import FunctionEntity
from phpdocs_md.md_table import md_table
from phpdocs_md.table_generator import (
    TableGenerator,
    escape_cell,
    format_type,
    visibility_badge,
)


class MarkdownTableGenerator(TableGenerator):
    """Renders ``| Visibility | Function |`` rows with inline HTML emphasis.

    Types are wrapped in ``<em>`` so the document's link pass can find them.
    """

    def add_func(self, func: FunctionEntity, include_see: bool = False) -> str:
        """Add one member row and return it as Markdown."""
        self._remember(func, include_see)

        sig = "<strong>"
        if self.abstraction_declared and func.abstract:
            sig += "abstract "
        sig += func.name + "("
        if func.has_params:
            params = []
            for p in func.params:
                default = f"={p.default}" if p.default is not None else ""
                params.append(
                    f"<em>{format_type(p.type)}</em> <strong>{p.name}{default}</strong>"
                )
            sig += "</strong>" + ", ".join(params) + "<strong>)</strong>"
        else:
            sig += ")</strong>"
        if func.return_type:
            sig += f" : <em>{format_type(func.return_type)}</em>"

        if func.deprecated:
            note = "DEPRECATED"
            if func.deprecation_message:
                note += " - " + func.deprecation_message
            sig = f"<strike>{sig}</strike><br /><em>{note}</em>"
        elif func.description:
            sig += f"<br /><em>{func.description}</em>"

        row = [visibility_badge(func), escape_cell(sig)]
        if include_see:
            row.append(self._see_cell(func))
        self.rows.append(row)
        return "| " + " | ".join(row) + " |"

    def get_table(self) -> str:
        """Return the finished table, followed by member examples."""
        headers = ["Visibility", "Function"]
        if self.include_see:
            headers.append("See")
        return md_table(headers, self.rows) + self._render_examples()
