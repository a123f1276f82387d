"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from phpdocs_md.deep_merge import deep_merge
from phpdocs_md.document_assembler import DEFAULT_EXTERNAL_URL_TEMPLATE
from phpdocs_md.type_names import DEFAULT_NATIVE_CLASSES

DEFAULT_VISIBILITY = ["public", "protected", "abstract", "final"]

DEFAULT_CONFIG: dict[str, Any] = {
    "visibility": DEFAULT_VISIBILITY,
    "method_regex": None,
    "include_see": False,
    "no_internal": False,
    "table_generator": "default",
    "ignore": [],
    "native_classes": DEFAULT_NATIVE_CLASSES,
    "external_url_template": DEFAULT_EXTERNAL_URL_TEMPLATE,
    "guess_return_type": True,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises FileNotFoundError when an explicit path does not exist.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        config = deep_merge(config, user_config)
    return config
