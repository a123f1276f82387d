"""Logic for turning raw type signatures into memoized class entities."""

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from phpdocs_md.apply_info_to_entity import apply_info_to_entity
from phpdocs_md.doc_info import DocInfo
from phpdocs_md.entities import ClassEntity, FunctionEntity, ParamEntity
from phpdocs_md.function_finder import FunctionFinder
from phpdocs_md.guess_return_type import guess_return_type
from phpdocs_md.sanitize_declaration import sanitize_declaration
from phpdocs_md.tag_parser import TagParser
from phpdocs_md.type_names import is_native_class, sanitize_class_name

if TYPE_CHECKING:
    from phpdocs_md.raw_signature import RawMember, RawSignature
    from phpdocs_md.signature_registry import SignatureRegistry

logger = logging.getLogger(__name__)

VISIBILITIES = ("public", "protected", "private")


class ClassResolver:
    """Resolves type names into ClassEntity objects, parsing each name once per run."""

    def __init__(
        self,
        registry: "SignatureRegistry",
        *,
        visibility_filter: Iterable[str] | None = None,
        method_regex: str | None = None,
        native_classes: set[str] | None = None,
        guess_return_types: bool = True,
    ) -> None:
        """Initialize the resolver with its signature source and member filters."""
        self.registry = registry
        self.visibility_filter = set(visibility_filter) if visibility_filter else None
        self.method_regex = re.compile(method_regex) if method_regex else None
        self.native_classes = native_classes or set()
        self.guess_return_types = guess_return_types
        self.parser = TagParser(self.native_classes)
        self.finder = FunctionFinder(self)
        self._cache: dict[str, ClassEntity] = {}
        self._resolving: set[str] = set()

    def resolve(self, class_name: str) -> ClassEntity:
        """Return the entity for ``class_name``, building it on first use.

        Raises UnknownTypeError when the name is not a loaded type.
        """
        key = sanitize_class_name(class_name).lower()
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        raw = self.registry.get(class_name)
        self._resolving.add(key)
        try:
            entity = self._create_class_entity(raw)
        finally:
            self._resolving.discard(key)
        self._cache[key] = entity
        logger.debug("Resolved %s with %d members", entity.name, len(entity.functions))
        return entity

    def is_resolving(self, class_name: str) -> bool:
        """Return True while ``class_name`` is being built (inheritance cycles)."""
        return sanitize_class_name(class_name).lower() in self._resolving

    def native_class_of(self, type_declaration: str | None) -> str | None:
        """Return the first built-in class named by a union type, if any."""
        if not type_declaration:
            return None
        for part in type_declaration.split("|"):
            if is_native_class(part, self.native_classes):
                return sanitize_class_name(part.strip().lstrip("?").replace("[]", ""))
        return None

    def _create_class_entity(self, raw: "RawSignature") -> ClassEntity:
        info = DocInfo(self.parser.parse(raw.raw_comment, raw.namespace, raw.imports))
        entity = ClassEntity(
            kind=raw.kind,
            extends=sanitize_class_name(raw.extends) if raw.extends else None,
            interfaces=[sanitize_class_name(i) for i in raw.implements],
            abstract="abstract" in raw.modifiers,
            final="final" in raw.modifiers,
            ignore=info.ignored,
        )
        apply_info_to_entity(info, raw.name, entity)

        for member in raw.members:
            modifiers = self._member_modifiers(raw, member)
            if not self._should_include(member.name, modifiers):
                continue
            member_info = DocInfo(
                self.parser.parse(member.raw_comment, raw.namespace, raw.imports)
            )
            if member_info.ignored:
                continue
            entity.functions.append(
                self._create_function_entity(raw, entity, member, modifiers, member_info)
            )
        return entity

    def _member_modifiers(self, raw: "RawSignature", member: "RawMember") -> set[str]:
        """Return the member's modifiers; interface members are public and abstract."""
        modifiers = {m.lower() for m in member.modifiers}
        if raw.kind == "interface":
            modifiers.add("abstract")
        if not modifiers.intersection(VISIBILITIES):
            modifiers.add("public")
        return modifiers

    def _should_include(self, name: str, modifiers: set[str]) -> bool:
        if self.visibility_filter is not None and not (
            modifiers & self.visibility_filter
        ):
            return False
        return not (self.method_regex and not self.method_regex.search(name))

    def _create_function_entity(
        self,
        raw: "RawSignature",
        class_entity: ClassEntity,
        member: "RawMember",
        modifiers: set[str],
        info: DocInfo,
    ) -> FunctionEntity:
        inherited = None
        if info.inherits_doc:
            candidates = list(class_entity.interfaces)
            if class_entity.extends:
                candidates.append(class_entity.extends)
            inherited = self.finder.find_in_classes(member.name, candidates)
            if inherited is None:
                logger.debug(
                    "No inherited docs found for %s::%s", class_entity.name, member.name
                )

        func = FunctionEntity(class_name=class_entity.name)
        apply_info_to_entity(info, member.name, func)
        func.visibility = next((v for v in VISIBILITIES if v in modifiers), "public")
        func.abstract = "abstract" in modifiers
        func.final = "final" in modifiers
        func.static = "static" in modifiers

        if inherited is not None:
            func.description = func.description or inherited.description
            func.example = func.example or inherited.example
            func.see = func.see or list(inherited.see)
            if inherited.deprecated and not func.deprecated:
                func.deprecated = True
                func.deprecation_message = inherited.deprecation_message

        func.params = self._create_params(raw, member, info.parameters, inherited)
        func.return_type = self._return_type(raw, member, info, inherited)
        func.returns_native_class = self.native_class_of(func.return_type) is not None
        return func

    def _create_params(
        self,
        raw: "RawSignature",
        member: "RawMember",
        doc_params: dict[str, dict[str, Any]],
        inherited: FunctionEntity | None,
    ) -> list[ParamEntity]:
        """Merge signature parameters with their docs; docs win on type."""
        inherited_params = {p.name: p for p in inherited.params} if inherited else {}
        params: list[ParamEntity] = []

        for rp in member.params:
            native = (
                sanitize_declaration(
                    rp.native_type,
                    raw.namespace,
                    imports=raw.imports,
                    native_classes=self.native_classes,
                )
                if rp.native_type
                else None
            )
            docs = doc_params.get(rp.name)
            if docs is not None:
                type_ = docs["type"]
                if type_ == "mixed" and native:
                    type_ = native
                description = docs["description"]
            elif rp.name in inherited_params:
                type_ = inherited_params[rp.name].type
                description = inherited_params[rp.name].description
            else:
                type_ = native or "mixed"
                description = ""
            params.append(
                ParamEntity(
                    name=rp.name,
                    type=type_,
                    description=description,
                    default=rp.default,
                    native_class_type=self.native_class_of(type_),
                )
            )

        if not member.params:
            for docs in doc_params.values():
                params.append(
                    ParamEntity(
                        name=docs["name"],
                        type=docs["type"],
                        description=docs["description"],
                        default=docs["default"],
                        native_class_type=self.native_class_of(docs["type"]),
                    )
                )
        return params

    def _return_type(
        self,
        raw: "RawSignature",
        member: "RawMember",
        info: DocInfo,
        inherited: FunctionEntity | None,
    ) -> str | None:
        """Pick the documented, inherited, declared or guessed return type."""
        if info.return_type:
            declared = info.return_type
        elif inherited is not None and inherited.return_type:
            return inherited.return_type
        elif member.native_return_type:
            declared = member.native_return_type
        elif self.guess_return_types:
            return guess_return_type(member.name)
        else:
            return None
        return sanitize_declaration(
            declared,
            raw.namespace,
            imports=raw.imports,
            native_classes=self.native_classes,
        )
