"""Typed options for one documentation run."""

import re
from dataclasses import dataclass, field
from typing import Any

from phpdocs_md.document_assembler import DEFAULT_EXTERNAL_URL_TEMPLATE
from phpdocs_md.load_config import DEFAULT_VISIBILITY
from phpdocs_md.type_names import normalize_native_classes


def split_list(value: str | list[str] | None) -> list[str]:
    """Split a comma-separated option into trimmed, non-empty items."""
    if value is None:
        return []
    items = value if isinstance(value, list) else re.split(r"\s*,\s*", value)
    return [str(i).strip() for i in items if str(i).strip()]


@dataclass
class GeneratorOptions:
    """Resolved settings: config file values overridden by CLI flags."""

    visibility: list[str] = field(default_factory=lambda: list(DEFAULT_VISIBILITY))
    method_regex: str | None = None
    include_see: bool = False
    no_internal: bool = False
    table_generator: str = "default"
    ignore: list[str] = field(default_factory=list)
    native_classes: set[str] = field(default_factory=set)
    external_url_template: str = DEFAULT_EXTERNAL_URL_TEMPLATE
    guess_return_type: bool = True

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "GeneratorOptions":
        """Build options from a merged configuration dictionary."""
        return cls(
            visibility=split_list(config.get("visibility")) or list(DEFAULT_VISIBILITY),
            method_regex=config.get("method_regex") or None,
            include_see=bool(config.get("include_see")),
            no_internal=bool(config.get("no_internal")),
            table_generator=str(config.get("table_generator") or "default"),
            ignore=split_list(config.get("ignore")),
            native_classes=normalize_native_classes(config.get("native_classes")),
            external_url_template=str(
                config.get("external_url_template") or DEFAULT_EXTERNAL_URL_TEMPLATE
            ),
            guess_return_type=bool(config.get("guess_return_type", True)),
        )
