"""Logic for assembling the final Markdown document."""

import logging
from collections.abc import Iterable, Mapping

from phpdocs_md.class_resolver import ClassResolver
from phpdocs_md.entities import TOC_TITLE_FORMAT, ClassEntity
from phpdocs_md.errors import NoMatchingTypesError
from phpdocs_md.format_example_comment import format_example_comment
from phpdocs_md.rewrite_class_links import rewrite_class_links
from phpdocs_md.table_generator import TableGenerator

logger = logging.getLogger(__name__)

DEFAULT_EXTERNAL_URL_TEMPLATE = "https://php.net/manual/en/class.{name}.php"


class DocumentAssembler:
    """Renders every requested class into one cross-linked Markdown document."""

    def __init__(
        self,
        resolver: ClassResolver,
        table_generator: TableGenerator,
        *,
        include_see: bool = False,
        no_internal: bool = False,
        external_url_template: str = DEFAULT_EXTERNAL_URL_TEMPLATE,
    ) -> None:
        """Initialize the assembler with its resolver, renderer and output options."""
        self.resolver = resolver
        self.table_generator = table_generator
        self.include_see = include_see
        self.no_internal = no_internal
        self.external_url_template = external_url_template

    def assemble(
        self,
        collection: Mapping[str, list[str]] | Iterable[list[str]],
        *,
        requesting_one_class: bool = False,
    ) -> str:
        """Render the classes of ``collection`` (groups of names) in order.

        Raises NoMatchingTypesError when nothing is left after filtering.
        """
        groups = collection.values() if isinstance(collection, Mapping) else collection
        classes = self._collect(groups)
        if not classes:
            msg = "No classes found"
            raise NoMatchingTypesError(msg)

        anchors = self._assign_anchors(classes)
        class_links = {c.name: "#" + anchors[c.name] for c in classes}

        toc: list[str] = []
        body: list[str] = []
        for c in classes:
            toc.append(f"- [{c.generate_title(TOC_TITLE_FORMAT)}](#{anchors[c.name]})")
            table = self._render_table(c, class_links)
            body.append(
                self._render_class(c, table, anchors, single=requesting_one_class)
            )

        parts: list[str] = []
        if not requesting_one_class:
            parts += ["## Table of contents", "", *toc, ""]
        parts.append(rewrite_class_links("\n".join(body), class_links))
        return "\n".join(parts).rstrip() + "\n"

    def external_url(self, type_name: str) -> str:
        """Return the external reference URL of a built-in class."""
        slug = type_name.replace("[]", "").replace("\\", "").lower()
        return self.external_url_template.format(name=slug)

    def _collect(self, groups: Iterable[list[str]]) -> list[ClassEntity]:
        """Resolve names in order, dropping ignored, internal and repeated classes."""
        classes: list[ClassEntity] = []
        seen: set[str] = set()
        for names in groups:
            for name in names:
                c = self.resolver.resolve(name)
                if c.ignore or (self.no_internal and c.internal):
                    logger.info("Skipping %s", c.name)
                    continue
                if c.name in seen:
                    continue
                seen.add(c.name)
                classes.append(c)
        return classes

    def _assign_anchors(self, classes: list[ClassEntity]) -> dict[str, str]:
        """Give every class its anchor, suffixing -2, -3... on slug collisions."""
        anchors: dict[str, str] = {}
        used: set[str] = set()
        for c in classes:
            base = c.generate_anchor()
            anchor = base
            n = 2
            while anchor in used:
                anchor = f"{base}-{n}"
                n += 1
            used.add(anchor)
            anchors[c.name] = anchor
        return anchors

    def _render_table(self, c: ClassEntity, class_links: dict[str, str]) -> str:
        """Render the member table, collecting links to built-in classes."""
        gen = self.table_generator
        gen.open_table()
        gen.declare_abstraction(not c.is_interface)
        for func in c.functions:
            if self.no_internal and func.internal:
                continue
            native = self.resolver.native_class_of(func.return_type)
            if native:
                class_links.setdefault(native, self.external_url(native))
            for p in func.params:
                if p.native_class_type:
                    class_links.setdefault(
                        p.native_class_type, self.external_url(p.native_class_type)
                    )
            gen.add_func(func, self.include_see)
        return gen.get_table()

    def _render_class(
        self,
        c: ClassEntity,
        table: str,
        anchors: dict[str, str],
        *,
        single: bool,
    ) -> str:
        parts: list[str] = []
        if not single:
            parts += [f'<hr /><a id="{anchors[c.name]}"></a>', ""]

        if c.deprecated:
            parts += [
                f"### <del>{c.generate_title()}</del>",
                "",
                f"> **DEPRECATED** {c.deprecation_message}".rstrip(),
                "",
            ]
        else:
            parts += [f"### {c.generate_title()}", ""]
            if c.description:
                parts += [f"> {c.description}", ""]

        if self.include_see and c.see:
            parts += [f"See {see}<br />" for see in c.see]
            parts.append("")

        if c.example:
            parts += ["###### Example", format_example_comment(c.example), ""]

        if table:
            parts += [table, ""]

        if c.extends:
            parts += [f"*This class extends {_link(c.extends, anchors)}*", ""]

        if c.interfaces:
            names = ", ".join(_link(i, anchors) for i in c.interfaces)
            parts += [f"*This class implements {names}*", ""]

        return "\n".join(parts).rstrip() + "\n"


def _link(name: str, anchors: dict[str, str]) -> str:
    """Link a type to its section when it is documented in this run."""
    anchor = anchors.get(name) or next(
        (a for n, a in anchors.items() if n.lower() == name.lower()), None
    )
    return f"[{name}](#{anchor})" if anchor else name
