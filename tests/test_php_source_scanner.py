"""Tests for the PHP declaration scanner."""

from phpdocs_md.php_source_scanner import PhpSourceScanner, tokenize

SHAPES = r"""<?php

namespace Acme\Shapes;

use Acme\Contracts\Drawable;
use Vendor\Color as Paint;

// class NotReal {}

/**
 * A circle.
 */
final class Circle extends Shape implements Drawable, \Countable
{
    const SIDES = 0;
    private float $radius = 1.0;

    /**
     * Create a circle.
     * @param float $radius The radius
     */
    public function __construct(float $radius = 1.0, private ?Paint $color = null)
    {
        $this->radius = $radius;
        $f = function () { return '}'; };
    }

    public static function unit(): static
    {
        return new static(1);
    }

    abstract protected function area(): float;

    private function &internalRef(array &$items, string ...$names): Paint|int|null {}
}

interface Drawable2 extends Drawable, \JsonSerializable
{
    public function draw(Paint $canvas): void;
}
"""


def test_tokenize_drops_comments_and_whitespace() -> None:
    """Verify that only significant tokens are produced."""
    tokens = tokenize("<?php // note\n/** Doc. */ $a = 'x'; # hash\n")
    assert [t.kind for t in tokens] == ["doc", "variable", "punct", "string", "punct"]


def test_scan_declarations() -> None:
    """Verify that both declarations are found with qualified names."""
    signatures = PhpSourceScanner().scan(SHAPES)
    assert [s.name for s in signatures] == [
        "Acme\\Shapes\\Circle",
        "Acme\\Shapes\\Drawable2",
    ]


def test_scan_class_header() -> None:
    """Verify kind, modifiers, parents, imports and doc comment of a class."""
    circle = PhpSourceScanner().scan(SHAPES)[0]
    assert circle.kind == "class"
    assert circle.namespace == "Acme\\Shapes"
    assert circle.modifiers == ["final"]
    assert circle.extends == "Acme\\Shapes\\Shape"
    assert circle.implements == ["Acme\\Contracts\\Drawable", "Countable"]
    assert circle.imports == {
        "Drawable": "Acme\\Contracts\\Drawable",
        "Paint": "Vendor\\Color",
    }
    assert "A circle." in circle.raw_comment


def test_scan_methods() -> None:
    """Verify that methods are read and properties, constants and bodies skipped."""
    circle = PhpSourceScanner().scan(SHAPES)[0]
    assert [m.name for m in circle.members] == [
        "__construct",
        "unit",
        "area",
        "internalRef",
    ]
    ctor, unit, area, ref = circle.members
    assert "Create a circle." in ctor.raw_comment
    assert ctor.modifiers == ["public"]
    assert ctor.native_return_type is None
    assert unit.modifiers == ["public", "static"]
    assert unit.native_return_type == "static"
    assert unit.raw_comment == ""
    assert area.modifiers == ["abstract", "protected"]
    assert area.native_return_type == "float"
    assert ref.native_return_type == "\\Vendor\\Color|int|null"


def test_scan_params() -> None:
    """Verify parameter names, declared types and default values."""
    circle = PhpSourceScanner().scan(SHAPES)[0]
    ctor, _, _, ref = circle.members
    assert [(p.name, p.native_type, p.default) for p in ctor.params] == [
        ("$radius", "float", "1.0"),
        ("$color", "?\\Vendor\\Color", "null"),
    ]
    assert ctor.params[0].has_default
    assert [(p.name, p.native_type) for p in ref.params] == [
        ("$items", "array"),
        ("$names", "string"),
    ]


def test_scan_interface() -> None:
    """Verify that interface parents are recorded as implemented interfaces."""
    iface = PhpSourceScanner().scan(SHAPES)[1]
    assert iface.kind == "interface"
    assert iface.extends is None
    assert iface.implements == ["Acme\\Contracts\\Drawable", "JsonSerializable"]
    draw = iface.members[0]
    assert draw.params[0].native_type == "\\Vendor\\Color"
    assert draw.native_return_type == "void"


def test_scan_global_namespace_and_group_use() -> None:
    """Verify group imports and declarations outside any namespace."""
    source = r"""<?php
use Acme\{Foo, Bar as Baz};

$name = Foo::class;

function helper() { return new class {}; }

/** A. */
abstract class A extends Baz {}
"""
    signatures = PhpSourceScanner().scan(source)
    assert len(signatures) == 1
    a = signatures[0]
    assert a.name == "A"
    assert a.namespace == ""
    assert a.modifiers == ["abstract"]
    assert a.extends == "Acme\\Bar"
    assert a.imports == {"Foo": "Acme\\Foo", "Baz": "Acme\\Bar"}


def test_scan_enum_and_trait() -> None:
    """Verify that enums become final classes and traits keep their kind."""
    source = r"""<?php
namespace App;

enum Suit: string implements HasLabel
{
    case Hearts = 'H';

    public function label(): string { return ucfirst($this->name); }
}

trait Greets
{
    public function hello() {}
}
"""
    suit, greets = PhpSourceScanner().scan(source)
    assert suit.kind == "class"
    assert suit.modifiers == ["final"]
    assert suit.implements == ["App\\HasLabel"]
    assert [m.name for m in suit.members] == ["label"]
    assert greets.kind == "trait"
    assert [m.name for m in greets.members] == ["hello"]
