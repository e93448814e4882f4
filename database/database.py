import logging
from typing import Dict, Optional, Tuple

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import DatabaseConfig, get_config

logger = logging.getLogger(__name__)

# One pooled engine per distinct database config
_engines: Dict[Tuple, Engine] = {}


def _engine_key(db_config: DatabaseConfig) -> Tuple:
    return (db_config.url, db_config.pool_size, db_config.max_overflow, db_config.echo)


def get_engine(db_config: Optional[DatabaseConfig] = None) -> Engine:
    """Process-wide pooled engine for the given database config (defaults to get_config().database)."""
    db_config = db_config or get_config().database
    key = _engine_key(db_config)

    engine = _engines.get(key)
    if engine is None:
        logger.info(f"Creating database engine (pool_size={db_config.pool_size}, max_overflow={db_config.max_overflow})")
        engine = create_engine(
            db_config.url,
            pool_pre_ping=True,  # Verify connections before using
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            echo=db_config.echo,
        )
        _engines[key] = engine
    return engine


def get_session_factory(db_config: Optional[DatabaseConfig] = None) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(db_config))


def dispose_engine() -> None:
    """Close every pooled connection. Safe to call when no engine was created."""
    while _engines:
        _, engine = _engines.popitem()
        engine.dispose()
        logger.info("Database engine disposed")
