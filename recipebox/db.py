from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import Config

CONFIG = Config()

connect_args = {}
if CONFIG.database_url.startswith("sqlite"):
    # sessions are handed to FastAPI's threadpool
    connect_args = {"check_same_thread": False}

engine = create_engine(CONFIG.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    # models must be imported so their tables are registered on Base
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
