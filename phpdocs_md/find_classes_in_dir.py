"""Logic for discovering documentable types in a source directory."""

from pathlib import Path

from phpdocs_md.signature_registry import SignatureRegistry


def find_classes_in_dir(
    directory: Path,
    registry: SignatureRegistry,
    ignores: list[str] | None = None,
) -> dict[str, list[str]]:
    """Load a directory into ``registry`` and group its type names by namespace.

    Groups are sorted by namespace; names keep file and declaration order.
    """
    collection: dict[str, list[str]] = {}
    for signature in registry.load_path(directory, ignores):
        names = collection.setdefault(signature.namespace, [])
        if signature.name not in names:
            names.append(signature.name)
    return dict(sorted(collection.items()))
