# eshop_product/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from eshop_product.utils.settings import DATABASE_URL
from eshop_product.utils.logging import get_logger

logger = get_logger(__name__)

# sqlite needs this to be shared across the threadpool
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


def get_db():
    """Request-scoped session, closed on every exit path."""
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    # models have to be imported before create_all so they land in Base.metadata
    from eshop_product.data import models  # noqa: F401

    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
