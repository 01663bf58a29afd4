from contextlib import asynccontextmanager

from fastapi import FastAPI

from lore_archive.infrastructure.config.settings import Settings
from lore_archive.infrastructure.logging.logger import Logger, setup_logging
from lore_archive.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from lore_archive.presentation.error_handlers import register_exception_handlers
from lore_archive.presentation.routers import books, characters, health, pois, species

setup_logging()
logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    if Settings().AUTO_CREATE_TABLES:
        await create_tables(engine)
    logger.info("Lore archive started")
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Lore Archive", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(books.router)
app.include_router(characters.router)
app.include_router(pois.router)
app.include_router(species.router)
