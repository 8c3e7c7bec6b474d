from datetime import timedelta
from typing import Optional
from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


def create_engine(config=ApplicationConfig) -> AsyncEngine:
    """
    Build the pooled engine for the message store.

    When DB_SCHEMA is set, unqualified table names are rendered under that
    schema through SQLAlchemy's schema_translate_map.
    """
    engine = create_async_engine(
        config.DB_URI,
        echo=config.DB_ECHO,
        pool_size=config.DB_POOL_SIZE,
        pool_pre_ping=True,
        future=True,
    )
    if config.DB_SCHEMA:
        engine = engine.execution_options(schema_translate_map={None: config.DB_SCHEMA})
    return engine


# PostgreSQL engine
engine = create_engine(ApplicationConfig)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    # One session per request, closed even when the handler raises
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_health_window() -> timedelta:
    return timedelta(minutes=ApplicationConfig.NODE_HEALTH_WINDOW_MINUTES)


def get_max_page_size() -> int:
    return ApplicationConfig.MAX_PAGE_SIZE


def get_default_page_size() -> int:
    return ApplicationConfig.DEFAULT_PAGE_SIZE


def get_page_size(
    page_size: Optional[int] = Query(None, description="Rows per page"),
    default_page_size: int = Depends(get_default_page_size),
) -> int:
    # Explicit values, including invalid ones, are passed through for validation
    return page_size if page_size is not None else default_page_size
