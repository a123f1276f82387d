"""Logic for finding a method in a class or along its parent chain."""

import logging
from typing import TYPE_CHECKING

from phpdocs_md.errors import UnknownTypeError

if TYPE_CHECKING:
    from phpdocs_md.class_resolver import ClassResolver
    from phpdocs_md.entities import FunctionEntity

logger = logging.getLogger(__name__)


class FunctionFinder:
    """Looks up inherited members through the class resolver cache."""

    def __init__(self, resolver: "ClassResolver") -> None:
        """Initialize the finder with the resolver used to load classes."""
        self.resolver = resolver

    def find_in_classes(
        self, method_name: str, classes: list[str]
    ) -> "FunctionEntity | None":
        """Return the first match across ``classes``, tried in the given order."""
        for class_name in classes:
            func = self.find(method_name, class_name)
            if func is not None:
                return func
        return None

    def find(self, method_name: str, class_name: str | None) -> "FunctionEntity | None":
        """Scan one class, then its parent chain. Interfaces are not searched."""
        seen: set[str] = set()
        while class_name and class_name not in seen:
            seen.add(class_name)
            if self.resolver.is_resolving(class_name):
                return None
            try:
                class_entity = self.resolver.resolve(class_name)
            except UnknownTypeError:
                logger.debug("Stopping lookup of %s at unknown %s", method_name, class_name)
                return None
            for func in class_entity.functions:
                if func.name == method_name:
                    return func
            class_name = class_entity.extends
        return None
