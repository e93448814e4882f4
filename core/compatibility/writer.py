"""
Chunked persistence of compatibility results.
"""
import logging
from typing import Iterator, Sequence

from core.compatibility.models import CompatibilityResult

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 10


def chunked(results: Sequence[CompatibilityResult], size: int) -> Iterator[Sequence[CompatibilityResult]]:
    """Consecutive slices of at most `size` items; the last may be shorter."""
    if size < 1:
        raise ValueError(f"chunk size must be positive, got {size}")
    for start in range(0, len(results), size):
        yield results[start:start + size]


class ResultWriter:
    """
    Writes results through a repository exposing insert_many(), one statement per chunk.

    Fails fast: the first failing chunk raises StorageError and later chunks
    are not attempted. Already-inserted chunks are left to the surrounding
    unit of work to roll back.
    """

    def __init__(self, repo, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.repo = repo
        self.chunk_size = chunk_size

    def persist(self, results: Sequence[CompatibilityResult]) -> int:
        if not results:
            logger.debug("No compatibility results to persist")
            return 0

        written = 0
        chunks = 0
        for chunk in chunked(results, self.chunk_size):
            written += self.repo.insert_many(chunk)
            chunks += 1

        logger.info(f"Persisted {written} compatibility results in {chunks} chunks")
        return written
