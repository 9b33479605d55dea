from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from .config import settings
import logging

logger = logging.getLogger(__name__)

engine_kwargs = {}
if "sqlite" in settings.DATABASE_URL:
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    # in-memory база живет в одном соединении, его делят все потоки
    if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

# Создаем движок базы данных
engine = create_engine(settings.DATABASE_URL, **engine_kwargs)

# Создаем фабрику сессий
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовый класс для моделей
Base = declarative_base()


def init_database():
    """Создает таблицы для всех зарегистрированных моделей"""
    logger.info("Initializing database...")

    # модели должны быть импортированы до create_all
    from ..models import auth, event, flight_schedule  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables are ready")


# Dependency для получения сессии БД
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
