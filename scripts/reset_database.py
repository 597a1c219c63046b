# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Reset the database: delete every session, attendance row, task, message,
feedback and non-TechHead account. TechHead accounts are kept.

Usage:  DATABASE_URL=... python scripts/reset_database.py --yes
"""
import argparse
import sys

from debsoc.core.config import Settings
from debsoc.core.database import create_db_engine, init_schema, reset_data
from debsoc.core.logging import configure_logging, get_logger

logger = get_logger("reset_database")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    args = parser.parse_args(argv)

    config = Settings()
    configure_logging(config)
    if not args.yes:
        answer = input(f"Delete all data in {config.DATABASE_URL}? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            logger.info("Reset aborted")
            return 1

    engine = create_db_engine(config)
    try:
        init_schema(engine)
        counts = reset_data(engine)
    finally:
        engine.dispose()
    logger.info("Reset complete: %d rows deleted", sum(counts.values()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
