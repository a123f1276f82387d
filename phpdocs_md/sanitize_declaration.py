"""Logic for qualifying documented type declarations against a namespace."""

from phpdocs_md.type_names import (
    NAMESPACE_SEPARATOR,
    is_class_reference,
    is_native_class,
)


def sanitize_declaration(
    declaration: str,
    namespace: str,
    *,
    imports: dict[str, str] | None = None,
    native_classes: set[str] | None = None,
) -> str:
    """Qualify every class name of a union type declaration.

    ``Foo|int`` in namespace ``Acme`` becomes ``Acme\\Foo|int``. Fully qualified
    names lose their leading backslash, names already containing a separator,
    scalar types and built-in classes are left alone, and names whose first
    segment is a ``use`` alias are expanded through the import.
    """
    imports = imports or {}
    native_classes = native_classes or set()
    parts = [
        _sanitize_part(p, namespace, imports, native_classes)
        for p in declaration.split("|")
    ]
    return "|".join(parts)


def _sanitize_part(
    part: str,
    namespace: str,
    imports: dict[str, str],
    native_classes: set[str],
) -> str:
    p = part.strip()
    prefix = ""
    if p.startswith("?"):
        prefix, p = "?", p[1:]
    suffix = ""
    while p.endswith("[]"):
        suffix += "[]"
        p = p[:-2]

    if not p or not is_class_reference(p):
        return prefix + p + suffix

    if p.startswith(NAMESPACE_SEPARATOR):
        p = p.lstrip(NAMESPACE_SEPARATOR)
    elif is_native_class(p, native_classes):
        pass
    else:
        head, _, rest = p.partition(NAMESPACE_SEPARATOR)
        if head in imports:
            p = imports[head] + (NAMESPACE_SEPARATOR + rest if rest else "")
        elif NAMESPACE_SEPARATOR not in p and namespace:
            p = namespace.strip(NAMESPACE_SEPARATOR) + NAMESPACE_SEPARATOR + p

    return prefix + p + suffix
