from typing import Annotated, Dict, List, Union

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from lore_archive.domain.ports.repositories.book_repository import BookRepository
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_book_repository import SQLAlchemyBookRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_character_repository import (
    SQLAlchemyCharacterRepository,
)
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_poi_repository import SQLAlchemyPoiRepository
from lore_archive.infrastructure.adapters.repositories.sqlalchemy_species_repository import (
    SQLAlchemySpeciesRepository,
)
from lore_archive.infrastructure.config.settings import Settings
from lore_archive.infrastructure.persistence.database import get_session


def get_settings() -> Settings:
    return Settings()


def get_query_params(request: Request) -> Dict[str, Union[str, List[str]]]:
    """Raw query parameters; a repeated parameter becomes a list of its values"""
    params: Dict[str, Union[str, List[str]]] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        params[key] = values[0] if len(values) == 1 else values
    return params


def get_max_page_limit(settings: Annotated[Settings, Depends(get_settings)]) -> int:
    return settings.MAX_PAGE_LIMIT


def get_book_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> BookRepository:
    return SQLAlchemyBookRepository(session)


def get_character_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> CharacterRepository:
    return SQLAlchemyCharacterRepository(session)


def get_poi_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> PoiRepository:
    return SQLAlchemyPoiRepository(session)


def get_species_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> SpeciesRepository:
    return SQLAlchemySpeciesRepository(session)
