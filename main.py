import sys
import logging
import argparse

from database.init_db import init_db
from pipeline.runner import compute_and_store_compatibility

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_once(user_id: str) -> int:
    """Run one compatibility invocation synchronously; returns a process exit code."""
    result = compute_and_store_compatibility(user_id)
    if not result.success:
        logger.error(f"Run for {user_id} did not complete: {result.error}")
        return 1

    logger.info(f"Run for {user_id}: {result.matches_count} matches, {result.saved_count} saved in {result.execution_time:.2f}s")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Compatibility Main Driver")
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('serve', help='Start the HTTP trigger server')

    run_parser = subparsers.add_parser('run', help='Compute and store compatibilities for one user')
    run_parser.add_argument('--user-id', required=True, help='Subject user identifier')

    subparsers.add_parser('init-db', help='Create tables (waits for the database to come up)')

    args = parser.parse_args(argv)

    if args.command == 'serve':
        from web.backend.app import main as serve
        serve()
        return 0

    if args.command == 'run':
        return run_once(args.user_id)

    if args.command == 'init-db':
        init_db()
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
