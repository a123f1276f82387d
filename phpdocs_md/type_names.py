"""Helpers for classifying and normalizing PHP type names."""

NAMESPACE_SEPARATOR = "\\"

# Scalars and pseudo types that never name a class.
NATIVE_TYPES = frozenset(
    {
        "mixed",
        "string",
        "int",
        "float",
        "integer",
        "number",
        "bool",
        "boolean",
        "object",
        "false",
        "true",
        "null",
        "array",
        "void",
        "callable",
        "resource",
        "self",
        "parent",
        "static",
        "$this",
        "iterable",
        "never",
        "double",
        "scalar",
    }
)

DEFAULT_NATIVE_CLASSES = [
    "stdClass",
    "ArrayAccess",
    "ArrayIterator",
    "ArrayObject",
    "BackedEnum",
    "Closure",
    "Countable",
    "DateInterval",
    "DatePeriod",
    "DateTime",
    "DateTimeImmutable",
    "DateTimeInterface",
    "DateTimeZone",
    "DOMDocument",
    "DOMElement",
    "DOMNode",
    "Error",
    "ErrorException",
    "ArgumentCountError",
    "ArithmeticError",
    "DivisionByZeroError",
    "TypeError",
    "ValueError",
    "Exception",
    "BadFunctionCallException",
    "BadMethodCallException",
    "DomainException",
    "InvalidArgumentException",
    "LengthException",
    "LogicException",
    "OutOfBoundsException",
    "OutOfRangeException",
    "OverflowException",
    "RangeException",
    "RuntimeException",
    "UnderflowException",
    "UnexpectedValueException",
    "Fiber",
    "Generator",
    "Iterator",
    "IteratorAggregate",
    "JsonSerializable",
    "PDO",
    "PDOStatement",
    "ReflectionClass",
    "Serializable",
    "SimpleXMLElement",
    "SplFileInfo",
    "SplObjectStorage",
    "SplQueue",
    "SplStack",
    "Stringable",
    "Throwable",
    "Traversable",
    "UnitEnum",
    "WeakMap",
]


def sanitize_class_name(name: str) -> str:
    """Strip surrounding whitespace and namespace separators from a class name."""
    return name.strip().strip(NAMESPACE_SEPARATOR)


def class_base_name(name: str) -> str:
    """Return the last segment of a namespace-qualified name."""
    return sanitize_class_name(name).split(NAMESPACE_SEPARATOR)[-1]


def namespace_of_name(name: str) -> str:
    """Return the namespace part of a namespace-qualified name."""
    parts = sanitize_class_name(name).split(NAMESPACE_SEPARATOR)
    return NAMESPACE_SEPARATOR.join(parts[:-1])


def is_class_reference(type_declaration: str) -> bool:
    """Check if a single type declaration refers to a class rather than a scalar."""
    t = type_declaration.strip()
    if not t or any(c in t for c in " <>{}(),"):
        return False
    return t.lower().lstrip("?").rstrip("[]") not in NATIVE_TYPES


def is_native_class(type_declaration: str, native_classes: set[str]) -> bool:
    """Check if a type declaration names one of the PHP built-in classes.

    ``native_classes`` must hold lower-cased names.
    """
    if not is_class_reference(type_declaration):
        return False
    bare = type_declaration.strip().lstrip("?").replace("[]", "")
    return sanitize_class_name(bare).lower() in native_classes


def normalize_native_classes(names: list[str] | None) -> set[str]:
    """Lower-case a configured list of built-in class names for lookups."""
    return {sanitize_class_name(n).lower() for n in (names or [])}
