"""
Database connection and setup
Postgres in production, SQLite for local development and tests
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from core.config import DATABASE_URL, logger


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # Sessions are opened in the threadpool and used on the event loop
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 10,
        "max_overflow": 20,
    }


# Create SQLAlchemy engine
engine = create_engine(DATABASE_URL, echo=False, **_engine_kwargs(DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for ORM models
Base = declarative_base()


def get_db():
    """
    Dependency for FastAPI routes to get database session
    Usage:
        @router.post("/items")
        def create_item(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database tables
    Call this on application startup
    """
    # Register models on Base.metadata before create_all
    from models.waitlist import WaitlistSignup  # noqa: F401

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info(f"[db] Schema ready on {target.url.render_as_string(hide_password=True)}")
