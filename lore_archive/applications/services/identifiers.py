import uuid

from lore_archive.domain.exceptions import InvalidIdentifierError


def parse_id(raw: str, entity: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise InvalidIdentifierError(entity)
