"""Check that the greeting configuration resolves before deploying."""

from __future__ import annotations

import argparse
from pathlib import Path

from app.application.use_cases.load_greeting_configuration import (
    SECRET_KEYS,
    describe_greeting_configuration,
    load_greeting_configuration,
)
from app.config import Settings
from app.domain.errors import ConfigurationError
from app.infrastructure.config_sources import build_config_sources


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the configuration check."""

    parser = argparse.ArgumentParser(
        description="Verify that every greeting configuration key can be resolved.",
    )
    parser.add_argument(
        "--config-file",
        type=Path,
        default=None,
        help="Properties file to read instead of CONFIG_FILE",
    )
    parser.add_argument(
        "--secrets-dir",
        type=Path,
        default=None,
        help="Directory of mounted secret files to read instead of SECRETS_DIR",
    )
    parser.add_argument(
        "--profile",
        default=None,
        help="Configuration profile to activate instead of PROFILE",
    )
    return parser.parse_args()


def main() -> None:
    """Print where each key is resolved from and fail when any is missing."""

    args = parse_args()

    overrides = {
        name: value
        for name, value in (
            ("config_file", args.config_file),
            ("secrets_dir", args.secrets_dir),
            ("profile", args.profile),
        )
        if value is not None
    }
    settings = Settings(**overrides)

    try:
        sources = build_config_sources(settings)
        origins = describe_greeting_configuration(sources)
        for key, origin in origins.items():
            marker = " (secret)" if key in SECRET_KEYS else ""
            print(f"  {key}{marker}: {origin or 'MISSING'}")
        load_greeting_configuration(sources)
    except ConfigurationError as exc:
        raise SystemExit(f"Configuration check failed: {exc}") from exc

    print("Configuration check passed.")


if __name__ == "__main__":
    main()
