"""Logic for walking a source tree in a stable order."""

from collections.abc import Iterator
from pathlib import Path

from phpdocs_md.load_signature_manifest import is_signature_manifest


def should_ignore_directory(dir_name: str, ignores: list[str]) -> bool:
    """Check if a directory name ends with one of the ignore patterns."""
    return any(p.strip() and dir_name.endswith(p.strip()) for p in ignores)


def iter_source_files(directory: Path, ignores: list[str] | None = None) -> Iterator[Path]:
    """Yield PHP files and signature manifests below ``directory``.

    Entries are visited in name order; symlinks, hidden directories and
    ignored directories are skipped.
    """
    ignores = ignores or []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_symlink():
            continue
        if entry.is_dir():
            if entry.name.startswith(".") or should_ignore_directory(entry.name, ignores):
                continue
            yield from iter_source_files(entry, ignores)
        elif entry.suffix.lower() == ".php" or is_signature_manifest(entry):
            yield entry
