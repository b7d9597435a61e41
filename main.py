import logging
import os
import sys
import uuid
import argparse

from sqlalchemy.exc import SQLAlchemyError

from core.config_loader import load_config
from core.matcher import MatchEngine

logger = logging.getLogger(__name__)


def generate_for_profile(profile_id: str) -> int:
    """Run the match engine for one profile. Returns the process exit code."""
    from database.uow import volunteer_uow

    try:
        profile_uuid = uuid.UUID(profile_id)
    except ValueError:
        logger.error(f"Invalid profile id: {profile_id}")
        return 1

    try:
        with volunteer_uow() as repo:
            profile = repo.get_profile(profile_uuid)
            if profile is None:
                logger.error(f"Profile {profile_id} not found")
                return 1

            result = MatchEngine(repo).generate_matches(profile)
    except SQLAlchemyError as e:
        logger.exception(f"Database error while generating matches for {profile_id}: {e}")
        return 1

    if not result.ok:
        logger.error(f"Match generation failed for profile {profile_id}: {result.error}")
        return 1

    logger.info(f"Profile {profile_id}: {result.written} matches from {result.evaluated} opportunities")
    for scored in result.matches:
        logger.info(f"  {scored.opportunity_id}: {scored.score} ({', '.join(scored.reasons)})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Volunteer opportunity matching")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("init-db", help="Create database tables")

    generate = subparsers.add_parser("generate", help="Generate matches for a profile")
    generate.add_argument("--profile-id", required=True, help="Profile UUID")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    # Configure logging
    logging.basicConfig(
        level=config.logging.level,
        format=config.logging.format
    )

    # database.database builds its engine from DATABASE_URL on import
    os.environ.setdefault("DATABASE_URL", config.database.url)

    if args.command == "init-db":
        from database.init_db import init_db
        init_db()
        return 0

    return generate_for_profile(args.profile_id)


if __name__ == "__main__":
    sys.exit(main())
