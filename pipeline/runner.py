"""Compatibility pipeline runner module.

Runs one compute-and-store invocation for a subject. Used by both main.py
and the web application.
"""

import time
import logging
from typing import Optional
from dataclasses import dataclass

from sqlalchemy.orm import sessionmaker

from core.config_loader import AppConfig, get_config
from core.compatibility import MatchingEngine, ResultWriter
from database.database import get_session_factory
from database.exceptions import NotFoundError, StorageError
from database.uow import compatibility_uow


logger = logging.getLogger(__name__)


@dataclass
class CompatibilityRunResult:
    """Result of running the compatibility pipeline for one subject."""
    success: bool
    subject_id: str
    matches_count: int = 0
    saved_count: int = 0
    error: Optional[str] = None
    execution_time: float = 0.0


def compute_and_store_compatibility(
    subject_id: str,
    config: Optional[AppConfig] = None,
    session_factory: Optional[sessionmaker] = None
) -> CompatibilityRunResult:
    """Compute compatibilities for a subject and persist the qualifying ones.

    Scan and write share one unit of work: a failed chunk rolls back every
    row written by this invocation. Errors are logged and reported in the
    returned result, never raised.

    Args:
        subject_id: User to compute compatibilities for
        config: Application config (defaults to get_config()); its database
            section selects the pooled engine
        session_factory: Optional sessionmaker overriding the pooled default

    Returns:
        CompatibilityRunResult with counts and any error message
    """
    config = config or get_config()
    start = time.time()
    results = []

    logger.info(f"Starting compatibility run for {subject_id}")

    try:
        factory = session_factory or get_session_factory(config.database)
        with compatibility_uow(factory) as uow:
            engine = MatchingEngine(uow.answers, uow.users, config.matching)
            results = engine.find_matches(subject_id)

            writer = ResultWriter(uow.compatibilities, chunk_size=config.matching.chunk_size)
            saved = writer.persist(results)

    except NotFoundError as e:
        logger.warning(f"Skipping compatibility run: {e}")
        return CompatibilityRunResult(
            success=False,
            subject_id=subject_id,
            error=str(e),
            execution_time=time.time() - start
        )
    except StorageError as e:
        logger.error(f"Compatibility run for {subject_id} failed, nothing was written: {e}")
        return CompatibilityRunResult(
            success=False,
            subject_id=subject_id,
            matches_count=len(results),
            error=str(e),
            execution_time=time.time() - start
        )
    except Exception as e:
        logger.exception(f"Unexpected error in compatibility run for {subject_id}")
        return CompatibilityRunResult(
            success=False,
            subject_id=subject_id,
            matches_count=len(results),
            error=str(e),
            execution_time=time.time() - start
        )

    elapsed = time.time() - start
    logger.info(f"Compatibility run for {subject_id} complete: {len(results)} matches, {saved} saved in {elapsed:.2f}s")

    return CompatibilityRunResult(
        success=True,
        subject_id=subject_id,
        matches_count=len(results),
        saved_count=saved,
        execution_time=elapsed
    )
