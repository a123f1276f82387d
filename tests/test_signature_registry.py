"""Tests for signature loading, manifests and directory discovery."""

from pathlib import Path

import pytest

from phpdocs_md.errors import UnknownTypeError
from phpdocs_md.find_classes_in_dir import find_classes_in_dir
from phpdocs_md.iter_source_files import iter_source_files, should_ignore_directory
from phpdocs_md.load_signature_manifest import (
    MANIFEST_HEADER,
    is_signature_manifest,
    load_signature_manifest,
    strip_manifest_header,
)
from phpdocs_md.raw_signature import RawSignature
from phpdocs_md.signature_registry import SignatureRegistry

MANIFEST = f"""{MANIFEST_HEADER}
types:
  - name: \\Acme\\Widget
    kind: class
    comment: "/** A widget. */"
    extends: Acme\\Base
    implements: [Countable]
    modifiers: [Final]
    imports:
      Helper: Vendor\\Helper
    members:
      - name: render
        comment: "/** Renders. */"
        modifiers: [public]
        return_type: string
        params:
          - name: $mode
            type: int
            default: 1
          - flag
      - name: toggle
        params:
          - name: enabled
            default: false
"""


def write(path: Path, text: str) -> Path:
    """Write a file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_load_signature_manifest(tmp_path: Path) -> None:
    """Verify that a manifest is read into raw signatures."""
    path = write(tmp_path / "sigs.yml", MANIFEST)
    assert is_signature_manifest(path)
    (widget,) = load_signature_manifest(path)
    assert widget.name == "Acme\\Widget"
    assert widget.namespace == "Acme"
    assert widget.extends == "Acme\\Base"
    assert widget.implements == ["Countable"]
    assert widget.modifiers == ["final"]
    assert widget.imports == {"Helper": "Vendor\\Helper"}
    assert widget.file == path

    render, toggle = widget.members
    assert render.native_return_type == "string"
    assert [(p.name, p.native_type, p.default) for p in render.params] == [
        ("$mode", "int", "1"),
        ("$flag", None, None),
    ]
    assert toggle.params[0].name == "$enabled"
    assert toggle.params[0].default == "false"


def test_manifest_header_detection(tmp_path: Path) -> None:
    """Verify that only YAML files with the header are manifests."""
    plain = write(tmp_path / "config.yml", "visibility: [public]\n")
    assert not is_signature_manifest(plain)
    assert not is_signature_manifest(write(tmp_path / "a.txt", MANIFEST))
    assert strip_manifest_header("a: 1") == "a: 1"
    assert strip_manifest_header(MANIFEST).startswith("types:")


def test_manifest_without_types(tmp_path: Path) -> None:
    """Verify that a manifest without a types list is rejected."""
    path = write(tmp_path / "bad.yml", f"{MANIFEST_HEADER}\nname: x\n")
    with pytest.raises(ValueError, match="types"):
        load_signature_manifest(path)


def test_registry_lookup_is_case_insensitive() -> None:
    """Verify lookups by any spelling and the unknown-name error."""
    registry = SignatureRegistry()
    registry.add(RawSignature("Acme\\Widget", "class"))
    assert registry.has("\\acme\\WIDGET")
    assert registry.get("acme\\widget").name == "Acme\\Widget"
    assert registry.names() == ["Acme\\Widget"]
    with pytest.raises(UnknownTypeError) as exc:
        registry.get("\\Acme\\Gadget")
    assert exc.value.name == "Acme\\Gadget"


def test_registry_first_declaration_wins(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a duplicate declaration from another file is ignored with a warning."""
    registry = SignatureRegistry()
    registry.add(RawSignature("A", "class", raw_comment="first", file=tmp_path / "a.php"))
    registry.add(RawSignature("A", "class", raw_comment="second", file=tmp_path / "b.php"))
    assert registry.get("A").raw_comment == "first"
    assert "Duplicate declaration of A" in caplog.text


def test_registry_skips_malformed_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that unreadable sources are logged and skipped."""
    registry = SignatureRegistry()
    bad = write(tmp_path / "bad.yml", f"{MANIFEST_HEADER}\ntypes: [\n")
    assert registry.load_file(bad) == []
    assert registry.load_file(tmp_path / "missing.php") == []
    assert "Skipping unreadable source" in caplog.text


def test_should_ignore_directory() -> None:
    """Verify suffix matching of ignored directory names."""
    assert should_ignore_directory("vendor", ["vendor"])
    assert should_ignore_directory("old-vendor", ["vendor"])
    assert not should_ignore_directory("src", ["vendor", " "])


def test_iter_source_files(tmp_path: Path) -> None:
    """Verify walking order and skipped entries."""
    write(tmp_path / "b" / "Two.php", "<?php")
    write(tmp_path / "a" / "One.php", "<?php")
    write(tmp_path / "a" / "notes.md", "x")
    write(tmp_path / ".git" / "Hidden.php", "<?php")
    write(tmp_path / "vendor" / "Skip.php", "<?php")
    write(tmp_path / "sigs.yaml", MANIFEST)
    files = [p.relative_to(tmp_path).as_posix() for p in iter_source_files(tmp_path, ["vendor"])]
    assert files == ["a/One.php", "b/Two.php", "sigs.yaml"]


def test_find_classes_in_dir(tmp_path: Path) -> None:
    """Verify that discovered names are grouped and sorted by namespace."""
    write(tmp_path / "b" / "Two.php", "<?php\nnamespace Zeta;\nclass Two {}\n")
    write(
        tmp_path / "a" / "One.php",
        "<?php\nnamespace Alpha;\ninterface One {}\nclass OneImpl implements One {}\n",
    )
    write(tmp_path / "vendor" / "Skip.php", "<?php\nclass Skip {}\n")
    registry = SignatureRegistry()
    collection = find_classes_in_dir(tmp_path, registry, ["vendor"])
    assert collection == {
        "Alpha": ["Alpha\\One", "Alpha\\OneImpl"],
        "Zeta": ["Zeta\\Two"],
    }
    assert list(collection) == ["Alpha", "Zeta"]
    assert registry.get("Alpha\\OneImpl").implements == ["Alpha\\One"]
    assert not registry.has("Skip")
