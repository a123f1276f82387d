"""Utility for guessing an undocumented return type from a method name."""

MIXED_PREFIXES = ("get", "load", "fetch", "find", "create")
BOOL_PREFIXES = ("is", "can", "has", "have", "should")


def guess_return_type(name: str) -> str:
    """Guess ``mixed`` for getters, ``bool`` for predicates, else ``void``."""
    if name.startswith(MIXED_PREFIXES):
        return "mixed"
    if name.startswith(BOOL_PREFIXES):
        return "bool"
    return "void"
