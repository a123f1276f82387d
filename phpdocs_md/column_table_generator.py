"""Member table with one column per signature part."""

from phpdocs_md.entities import FunctionEntity
from phpdocs_md.md_table import md_table
from phpdocs_md.table_generator import (
    TableGenerator,
    escape_cell,
    format_type,
    visibility_badge,
)


class ColumnTableGenerator(TableGenerator):
    """Renders visibility, name, parameters, return type and description columns."""

    def add_func(self, func: FunctionEntity, include_see: bool = False) -> str:
        """Add one member row and return it as Markdown."""
        self._remember(func, include_see)

        name = func.name
        if self.abstraction_declared and func.abstract:
            name = "abstract " + name
        params = ", ".join(
            f"<em>{format_type(p.type)}</em> {p.name}"
            + (f"={p.default}" if p.default is not None else "")
            for p in func.params
        )
        returns = f"<em>{format_type(func.return_type)}</em>" if func.return_type else ""

        if func.deprecated:
            name = f"<strike>{name}</strike>"
            description = "<em>DEPRECATED"
            if func.deprecation_message:
                description += " - " + func.deprecation_message
            description += "</em>"
        else:
            description = func.description

        row = [
            visibility_badge(func),
            f"<strong>{name}</strong>",
            escape_cell(params),
            escape_cell(returns),
            escape_cell(description),
        ]
        if include_see:
            row.append(self._see_cell(func))
        self.rows.append(row)
        return "| " + " | ".join(row) + " |"

    def get_table(self) -> str:
        """Return the finished table, followed by member examples."""
        headers = ["Visibility", "Name", "Parameters", "Returns", "Description"]
        if self.include_see:
            headers.append("See")
        return md_table(headers, self.rows) + self._render_examples()
