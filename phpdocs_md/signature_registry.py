"""Logic for indexing raw type signatures by name."""

import logging
from pathlib import Path

import yaml  # type: ignore[import-untyped]

from phpdocs_md.errors import UnknownTypeError
from phpdocs_md.iter_source_files import iter_source_files
from phpdocs_md.load_signature_manifest import load_signature_manifest
from phpdocs_md.php_source_scanner import PhpSourceScanner
from phpdocs_md.raw_signature import RawSignature
from phpdocs_md.type_names import sanitize_class_name

logger = logging.getLogger(__name__)


class SignatureRegistry:
    """Read-only source of raw signatures, looked up case-insensitively."""

    def __init__(self, scanner: PhpSourceScanner | None = None) -> None:
        """Initialize an empty registry."""
        self.scanner = scanner or PhpSourceScanner()
        self._signatures: dict[str, RawSignature] = {}

    def add(self, signature: RawSignature) -> None:
        """Register a signature; the first declaration of a name wins."""
        key = signature.name.lower()
        existing = self._signatures.get(key)
        if existing is not None:
            if existing.file != signature.file:
                logger.warning(
                    "Duplicate declaration of %s in %s, keeping %s",
                    signature.name,
                    signature.file,
                    existing.file,
                )
            return
        self._signatures[key] = signature

    def has(self, name: str) -> bool:
        """Check if a type with this name is loaded."""
        return sanitize_class_name(name).lower() in self._signatures

    def get(self, name: str) -> RawSignature:
        """Return the signature for ``name`` or raise UnknownTypeError."""
        signature = self._signatures.get(sanitize_class_name(name).lower())
        if signature is None:
            raise UnknownTypeError(sanitize_class_name(name))
        return signature

    def names(self) -> list[str]:
        """Return every loaded name in load order."""
        return [s.name for s in self._signatures.values()]

    def load_file(self, path: Path) -> list[RawSignature]:
        """Load a PHP file or signature manifest; malformed files are skipped."""
        try:
            if path.suffix.lower() in (".yml", ".yaml"):
                signatures = load_signature_manifest(path)
            else:
                signatures = self.scanner.scan_file(path)
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            logger.warning("Skipping unreadable source %s: %s", path, e)
            return []

        for signature in signatures:
            self.add(signature)
        logger.debug("Loaded %d declarations from %s", len(signatures), path)
        return signatures

    def load_path(self, path: Path, ignores: list[str] | None = None) -> list[RawSignature]:
        """Load a file or every source file of a directory tree."""
        if not path.is_dir():
            return self.load_file(path)
        signatures: list[RawSignature] = []
        for f in iter_source_files(path, ignores):
            signatures.extend(self.load_file(f))
        return signatures
