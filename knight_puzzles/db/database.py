"""Generate database session"""

from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from knight_puzzles.core.config import get_settings
from knight_puzzles.db.schema import Base

engine = create_engine(get_settings().database_url)
SessionLocal = sessionmaker(bind=engine)


def init_db(bind: Optional[Engine] = None) -> None:
    """Ensure all tables are created (on the configured engine, unless another one is given)"""
    Base.metadata.create_all(bind=bind if bind is not None else engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
