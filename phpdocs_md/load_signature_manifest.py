"""Logic for loading raw type signatures from a YAML manifest."""

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from phpdocs_md.raw_signature import RawMember, RawParam, RawSignature
from phpdocs_md.type_names import namespace_of_name, sanitize_class_name

MANIFEST_HEADER = "### PHPDocsMD:Signatures"


def is_signature_manifest(path: Path) -> bool:
    """Check if a YAML file starts with the signature manifest header."""
    if path.suffix.lower() not in (".yml", ".yaml"):
        return False
    with path.open(encoding="utf-8", errors="replace") as f:
        return f.readline().startswith(MANIFEST_HEADER)


def strip_manifest_header(text: str) -> str:
    """Remove the manifest header line from the content."""
    lines = text.splitlines()
    if lines and lines[0].startswith(MANIFEST_HEADER):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def load_signature_manifest(path: Path) -> list[RawSignature]:
    """Load and parse a signature manifest.

    Raises ValueError when the document does not hold a ``types`` list.
    """
    doc = yaml.safe_load(strip_manifest_header(path.read_text(encoding="utf-8"))) or {}
    types = doc.get("types") if isinstance(doc, dict) else None
    if not isinstance(types, list):
        msg = f"Signature manifest without a 'types' list: {path}"
        raise ValueError(msg)
    return [_build_signature(t, path) for t in types if isinstance(t, dict) and t.get("name")]


def _build_signature(data: dict[str, Any], path: Path) -> RawSignature:
    name = sanitize_class_name(str(data["name"]))
    extends = data.get("extends")
    return RawSignature(
        name=name,
        kind=str(data.get("kind") or "class").lower(),
        namespace=namespace_of_name(name),
        raw_comment=str(data.get("comment") or ""),
        extends=sanitize_class_name(str(extends)) if extends else None,
        implements=[sanitize_class_name(str(i)) for i in data.get("implements") or []],
        modifiers=[str(m).lower() for m in data.get("modifiers") or []],
        members=[_build_member(m) for m in data.get("members") or [] if m.get("name")],
        imports={str(k): str(v) for k, v in (data.get("imports") or {}).items()},
        file=path,
    )


def _build_member(data: dict[str, Any]) -> RawMember:
    return RawMember(
        name=str(data["name"]),
        raw_comment=str(data.get("comment") or ""),
        modifiers=[str(m).lower() for m in data.get("modifiers") or []],
        params=[_build_param(p) for p in data.get("params") or []],
        native_return_type=_optional_str(data.get("return_type")),
    )


def _build_param(data: dict[str, Any] | str) -> RawParam:
    if isinstance(data, str):
        data = {"name": data}
    name = str(data.get("name") or "")
    if not name.startswith("$"):
        name = "$" + name
    return RawParam(
        name=name,
        native_type=_optional_str(data.get("type")),
        default=_optional_str(data.get("default")),
    )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
