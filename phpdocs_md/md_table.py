"""Utility for generating Markdown tables."""


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; rows shorter than the header are padded."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend(
        "| " + " | ".join(r + [""] * (len(headers) - len(r))) + " |" for r in rows
    )
    return "\n".join(out)
