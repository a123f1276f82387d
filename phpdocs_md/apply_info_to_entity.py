"""Logic for copying parsed doc metadata onto an entity."""

from phpdocs_md.doc_info import DocInfo
from phpdocs_md.entities import CodeEntity


def apply_info_to_entity(info: DocInfo, name: str, entity: CodeEntity) -> None:
    """Populate name, prose and flags of ``entity`` from ``info``.

    A bare ``@deprecated`` marks the entity deprecated with an empty message.
    Documented types are not checked against the signature.
    """
    entity.name = name
    entity.description = info.description
    entity.example = info.example
    entity.see = info.see
    entity.internal = info.internal
    entity.deprecated = info.deprecated
    entity.deprecation_message = info.deprecation_message
