"""Data models for raw, introspected type declarations."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RawParam:
    """A parameter as declared in a method signature."""

    name: str  # with the leading "$"
    native_type: str | None = None
    default: str | None = None  # source text of the default value

    @property
    def has_default(self) -> bool:
        """Return True when the parameter declares a default value."""
        return self.default is not None


@dataclass
class RawMember:
    """A method as declared in a type body."""

    name: str
    raw_comment: str = ""
    modifiers: list[str] = field(default_factory=list)
    params: list[RawParam] = field(default_factory=list)
    native_return_type: str | None = None


@dataclass
class RawSignature:
    """Represents one class, interface or trait declaration."""

    name: str  # namespace-qualified, no leading backslash
    kind: str  # class/interface/trait
    namespace: str = ""
    raw_comment: str = ""
    extends: str | None = None
    implements: list[str] = field(default_factory=list)
    modifiers: list[str] = field(default_factory=list)  # abstract/final
    members: list[RawMember] = field(default_factory=list)
    imports: dict[str, str] = field(default_factory=dict)  # alias -> FQN
    file: Path | None = None
