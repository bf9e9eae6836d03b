import os
import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL")

if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable is not set in .env file")

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # SQLite connections are shared across the request threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(
    DATABASE_URL,
    # Connection pool settings
    pool_pre_ping=True,        # Verify connections before using
    pool_recycle=1800,          # Recycle connections after 30 minutes
    echo=False,                 # Don't log SQL queries (set True for debugging)
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    Dependency to get a SQLAlchemy session.
    Used with FastAPI Depends() for automatic session management.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create missing tables. Runs once at application startup."""
    from models import Base

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")


def close_db():
    """Release every pooled connection. Runs once at application shutdown."""
    engine.dispose()
    logger.info("Database pool disposed")
