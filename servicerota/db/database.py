from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from servicerota.core.config import settings


def _engine_options(url: str) -> dict:
    # sqlite connections are handed between the threadpool and the request thread
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


class Base(DeclarativeBase):
    pass
