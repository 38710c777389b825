"""Clinical users CLI entry point."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from clinical_users import __version__
from clinical_users.config import Settings, get_settings
from clinical_users.database import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from clinical_users.exceptions import ClinicalUsersError
from clinical_users.observability import configure_logging, initialize_logfire
from clinical_users.testing import FixtureOrchestrator

logger = logging.getLogger(__name__)


def _orchestrator(settings: Settings) -> FixtureOrchestrator:
    engine = create_engine_from_config(settings.database)
    initialize_logfire(settings, engine)
    init_db(engine)
    return FixtureOrchestrator(create_session_factory(engine), settings.fixtures)


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create the schema in the configured database."""
    settings = get_settings()
    engine = create_engine_from_config(settings.database)
    init_db(engine)
    print(f"Schema ready at {engine.url.render_as_string(hide_password=True)}")
    return 0


def cmd_seed(args: argparse.Namespace) -> int:
    """Seed the integration-test data graph."""
    orchestrator = _orchestrator(get_settings())
    orchestrator.set_up()
    print(f"Seeded roles: {', '.join(sorted(orchestrator.roles))}")
    print(f"Seeded users: {', '.join(sorted(orchestrator.users))}")
    return 0


def cmd_teardown(args: argparse.Namespace) -> int:
    """Remove seeded users and roles."""
    orchestrator = _orchestrator(get_settings())
    orchestrator.tear_down()
    print("Removed test users and roles")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    settings = get_settings()
    print(f"Environment: {settings.environment}")
    print(f"Database: {settings.database.url}")
    print(f"Fixture organization: {settings.fixtures.organization}")
    print(f"Password hash: {settings.fixtures.password_hash_algorithm}")
    print(f"Data Directory: {settings.data_dir}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Clinical user service: schema and test-data tooling",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"clinical-users {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser("init-db", help="Create database tables")
    parser_init.set_defaults(func=cmd_init_db)

    parser_seed = subparsers.add_parser("seed", help="Seed integration-test data")
    parser_seed.set_defaults(func=cmd_seed)

    parser_teardown = subparsers.add_parser(
        "teardown", help="Remove seeded users and roles"
    )
    parser_teardown.set_defaults(func=cmd_teardown)

    parser_config = subparsers.add_parser("config", help="Display merged configuration")
    parser_config.set_defaults(func=cmd_config)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    configure_logging(get_settings())
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return args.func(args)
    except (ClinicalUsersError, SQLAlchemyError) as e:
        logger.error(f"Command {args.command} failed: {e}", exc_info=args.debug)
        print(f"\nFailed: {e}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
