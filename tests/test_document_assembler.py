"""Tests for assembling the cross-linked Markdown document."""

from pathlib import Path

import pytest

from phpdocs_md.class_resolver import ClassResolver
from phpdocs_md.document_assembler import DocumentAssembler
from phpdocs_md.errors import NoMatchingTypesError
from phpdocs_md.find_classes_in_dir import find_classes_in_dir
from phpdocs_md.load_config import DEFAULT_VISIBILITY
from phpdocs_md.markdown_table_generator import MarkdownTableGenerator
from phpdocs_md.php_source_scanner import PhpSourceScanner
from phpdocs_md.signature_registry import SignatureRegistry
from phpdocs_md.type_names import DEFAULT_NATIVE_CLASSES, normalize_native_classes


def make_assembler(
    registry: SignatureRegistry, **kwargs: bool
) -> DocumentAssembler:
    """Build an assembler with the default filters and table generator."""
    resolver = ClassResolver(
        registry,
        visibility_filter=DEFAULT_VISIBILITY,
        native_classes=normalize_native_classes(DEFAULT_NATIVE_CLASSES),
    )
    return DocumentAssembler(resolver, MarkdownTableGenerator(), **kwargs)


def registry_from(source: str) -> SignatureRegistry:
    """Scan PHP source into a fresh registry."""
    registry = SignatureRegistry()
    for signature in PhpSourceScanner().scan(source):
        registry.add(signature)
    return registry


def test_directory_with_parent_and_child(tmp_path: Path) -> None:
    """Verify the table of contents and the parent link in the child's footer."""
    (tmp_path / "A.php").write_text(
        "<?php\n/** Child class. */\nclass A extends B {\n"
        "    /** @return B */\n    public function parent() {}\n}\n",
        encoding="utf-8",
    )
    (tmp_path / "B.php").write_text("<?php\nclass B {}\n", encoding="utf-8")
    registry = SignatureRegistry()
    collection = find_classes_in_dir(tmp_path, registry)
    markdown = make_assembler(registry).assemble(collection)

    assert markdown.startswith(
        "## Table of contents\n\n- [A](#class-a)\n- [B](#class-b)\n"
    )
    assert '<hr /><a id="class-a"></a>\n\n### Class: A\n\n> Child class.' in markdown
    assert "*This class extends [B](#class-b)*" in markdown
    assert "<em>[B](#class-b)</em>" in markdown
    assert markdown.count("This class extends") == 1
    assert "This class implements" not in markdown
    assert markdown.endswith("\n")


def test_single_class_has_no_toc() -> None:
    """Verify that requesting one class omits the TOC and the section rule."""
    registry = registry_from("<?php\nclass Solo { public function run() {} }\n")
    markdown = make_assembler(registry).assemble(
        {"": ["Solo"]}, requesting_one_class=True
    )
    assert markdown.startswith("### Class: Solo\n")
    assert "Table of contents" not in markdown
    assert "<hr />" not in markdown
    assert "| public | <strong>run()</strong> : <em>void</em> |" in markdown


def test_deprecated_class_and_member() -> None:
    """Verify the deprecation banner and the struck-through member row."""
    registry = registry_from(
        """<?php
/**
 * Old calculator.
 * @deprecated gone
 */
class Calc {
    /**
     * Adds two numbers.
     * @param int $a
     * @param int $b
     * @return int
     * @deprecated use add2 instead
     */
    public function add($a, $b) {}
}
"""
    )
    markdown = make_assembler(registry).assemble({"": ["Calc"]})
    assert "### <del>Class: Calc</del>\n\n> **DEPRECATED** gone" in markdown
    assert "Old calculator." not in markdown
    assert "<strike><strong>add(</strong><em>int</em> <strong>$a</strong>" in markdown
    assert "<em>DEPRECATED - use add2 instead</em>" in markdown


def test_footers_for_unknown_parent_and_interfaces() -> None:
    """Verify footers for undocumented parents and implemented interfaces."""
    registry = registry_from(
        "<?php\ninterface Shape {}\nclass Box extends External implements Shape, "
        "\\Countable {}\n"
    )
    markdown = make_assembler(registry).assemble({"": ["Shape", "Box"]})
    assert "*This class extends External*" in markdown
    assert (
        "*This class implements [Shape](#interface-shape), Countable*" in markdown
    )
    assert "- [Shape (interface)](#interface-shape)" in markdown


def test_native_classes_link_externally() -> None:
    """Verify that built-in classes in signatures link to the PHP manual."""
    registry = registry_from(
        """<?php
namespace Acme;
class Clock {
    /**
     * @param \\DateTimeZone $tz
     * @return \\DateTime
     */
    public function now($tz) {}
}
"""
    )
    markdown = make_assembler(registry).assemble({"Acme": ["Acme\\Clock"]})
    assert (
        "<em>[DateTimeZone](https://php.net/manual/en/class.datetimezone.php)</em>"
        in markdown
    )
    assert "<em>[DateTime](https://php.net/manual/en/class.datetime.php)</em>" in markdown


def test_ignored_and_internal_classes() -> None:
    """Verify that @ignore always hides a class and @internal only on request."""
    source = (
        "<?php\n/** @ignore */\nclass Hidden {}\n/** @internal */\nclass Inner {}\n"
        "class Shown {\n    /** @internal */\n    public function secret() {}\n"
        "    public function open() {}\n}\n"
    )
    names = {"": ["Hidden", "Inner", "Shown"]}

    markdown = make_assembler(registry_from(source)).assemble(names)
    assert "Hidden" not in markdown
    assert "### Class: Inner" in markdown
    assert "secret(" in markdown

    markdown = make_assembler(registry_from(source), no_internal=True).assemble(names)
    assert "Inner" not in markdown
    assert "secret(" not in markdown
    assert "open(" in markdown


def test_nothing_left_to_document() -> None:
    """Verify that an empty result raises NoMatchingTypesError."""
    registry = registry_from("<?php\n/** @ignore */\nclass Hidden {}\n")
    with pytest.raises(NoMatchingTypesError):
        make_assembler(registry).assemble({"": ["Hidden"]})
    with pytest.raises(NoMatchingTypesError):
        make_assembler(registry).assemble({})


def test_anchor_collisions_are_suffixed() -> None:
    """Verify that colliding slugs get numeric suffixes in document order."""
    registry = registry_from(
        "<?php\nnamespace Foo { class Bar {} }\nnamespace { class Foo_Bar {} }\n"
    )
    markdown = make_assembler(registry).assemble({"": ["Foo\\Bar", "Foo_Bar"]})
    assert "- [Foo\\Bar](#class-foo-bar)" in markdown
    assert "- [Foo_Bar](#class-foo-bar-2)" in markdown
    assert '<a id="class-foo-bar-2"></a>' in markdown


def test_see_and_example_sections() -> None:
    """Verify class @see references and the class example block."""
    registry = registry_from(
        """<?php
/**
 * Tool.
 * @see https://example.com/docs Docs
 * @example
 *   $t = new Tool();
 */
class Tool {}
"""
    )
    markdown = make_assembler(registry, include_see=True).assemble({"": ["Tool"]})
    assert "See [Docs](https://example.com/docs)<br />" in markdown
    assert "###### Example\n```\n$t = new Tool();\n```" in markdown

    markdown = make_assembler(registry).assemble({"": ["Tool"]})
    assert "See [Docs]" not in markdown


def test_external_url() -> None:
    """Verify the external URL template for built-in classes."""
    assembler = make_assembler(SignatureRegistry())
    assert assembler.external_url("ArrayObject") == (
        "https://php.net/manual/en/class.arrayobject.php"
    )


def test_nullable_types_are_linked() -> None:
    """Verify that nullable parameter and return types get their links."""
    registry = registry_from(
        r"""<?php
namespace Acme;
class Foo {
    public function at(?Bar $b): ?\DateTime {}
}
class Bar {}
"""
    )
    markdown = make_assembler(registry).assemble({"Acme": ["Acme\\Foo", "Acme\\Bar"]})
    assert "<em>?[Acme\\Bar](#class-acme-bar)</em> <strong>$b</strong>" in markdown
    assert (
        " : <em>?[DateTime](https://php.net/manual/en/class.datetime.php)</em>"
        in markdown
    )
