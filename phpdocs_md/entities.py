"""Data models for parsed classes, functions and parameters."""

from dataclasses import dataclass, field

from phpdocs_md.header_slug import header_slug
from phpdocs_md.type_names import namespace_of_name

DEFAULT_TITLE_FORMAT = "%label%: %name% %extra%"
TOC_TITLE_FORMAT = "%name% %extra%"

KIND_LABELS = {"class": "Class", "interface": "Interface", "trait": "Trait"}


@dataclass
class CodeEntity:
    """Fields shared by every documented entity."""

    name: str = ""
    description: str = ""
    example: str = ""
    see: list[str] = field(default_factory=list)
    deprecated: bool = False
    deprecation_message: str = ""
    internal: bool = False


@dataclass
class ParamEntity:
    """Represents one parameter of a documented function."""

    name: str
    type: str = "mixed"
    description: str = ""
    default: str | None = None
    native_class_type: str | None = None


@dataclass
class FunctionEntity(CodeEntity):
    """Represents a documented method, owned by exactly one class."""

    class_name: str = ""
    params: list[ParamEntity] = field(default_factory=list)
    return_type: str | None = None
    visibility: str = "public"
    abstract: bool = False
    final: bool = False
    static: bool = False
    returns_native_class: bool = False

    @property
    def has_params(self) -> bool:
        """Return True when the function takes parameters."""
        return bool(self.params)

    @property
    def modifiers(self) -> set[str]:
        """Return the visibility plus any abstract/final/static modifier."""
        mods = {self.visibility}
        if self.abstract:
            mods.add("abstract")
        if self.final:
            mods.add("final")
        if self.static:
            mods.add("static")
        return mods


@dataclass
class ClassEntity(CodeEntity):
    """Represents a documented class, interface or trait."""

    kind: str = "class"
    extends: str | None = None
    interfaces: list[str] = field(default_factory=list)
    abstract: bool = False
    final: bool = False
    ignore: bool = False
    functions: list[FunctionEntity] = field(default_factory=list)

    @property
    def namespace(self) -> str:
        """Return the namespace the class is declared in."""
        return namespace_of_name(self.name)

    @property
    def is_interface(self) -> bool:
        """Return True for interfaces."""
        return self.kind == "interface"

    @property
    def is_trait(self) -> bool:
        """Return True for traits."""
        return self.kind == "trait"

    def generate_title(self, fmt: str = DEFAULT_TITLE_FORMAT) -> str:
        """Render a title from a format using %label%, %name% and %extra%."""
        label = KIND_LABELS.get(self.kind, "Class")
        if "%label%" in fmt:
            extra = "(abstract)" if self.abstract and not self.is_interface else ""
        elif self.is_interface:
            extra = "(interface)"
        elif self.abstract:
            extra = "(abstract)"
        else:
            extra = ""
        title = (
            fmt.replace("%label%", label)
            .replace("%name%", self.name)
            .replace("%extra%", extra)
        )
        return title.strip()

    def generate_anchor(self) -> str:
        """Return the anchor slug for this class section."""
        return header_slug(self.generate_title())
