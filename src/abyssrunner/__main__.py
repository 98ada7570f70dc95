from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from abyssrunner.app.game_app import GameApp
from abyssrunner.config import GameConfig, load_config
from abyssrunner.domain.campaign import DEFAULT_CAMPAIGN
from abyssrunner.infra.exceptions import ConfigError, LevelDecodeError
from abyssrunner.infra.level_files import load_campaign_from_path
from abyssrunner.logging_config import setup_logging

logger = logging.getLogger("abyssrunner")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="abyssrunner", description="Maze runner with orbiting hazards.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file.")
    parser.add_argument("--levels", type=Path, default=None, help="Path to a JSON level pack.")
    parser.add_argument("--log-level", default=None, help="Overrides the configured log level.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        if args.log_level:
            try:
                config = GameConfig.model_validate({**config.model_dump(), "log_level": args.log_level})
            except ValidationError as e:
                raise ConfigError(f"Invalid --log-level {args.log_level!r}: {e}") from e
        setup_logging(config.log_level, args.log_file)

        campaign = DEFAULT_CAMPAIGN
        if args.levels is not None:
            campaign = load_campaign_from_path(args.levels)
            logger.info("loaded %d levels from %s", len(campaign), args.levels)
    except (ConfigError, LevelDecodeError) as e:
        print(f"abyssrunner: {e}", file=sys.stderr)
        return 2

    GameApp(campaign=campaign, config=config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
