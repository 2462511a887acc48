#!/usr/bin/env python3
"""Interactive prompt that writes the identity record used by the BFHL API."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from app.settings.identity import IdentityRecord, config_file_path, save_identity

LOGGER = logging.getLogger("setup_identity")

PROMPTS = {
    "full_name": "Enter your full name (e.g., John Doe): ",
    "birth_date": "Enter your birth date (DDMMYYYY format, e.g., 17091999): ",
    "email": "Enter your email address: ",
    "roll_number": "Enter your college roll number: ",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Collect identity details for the BFHL API."
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the JSON config (defaults to USER_CONFIG_FILE or user-config.json).",
    )
    return parser.parse_args(argv)


def prompt_identity(ask: Callable[[str], str] = input) -> IdentityRecord:
    """Ask for every identity field and validate the answers.

    Raises :class:`pydantic.ValidationError` when any answer is rejected.
    """
    answers = {field: ask(prompt).strip() for field, prompt in PROMPTS.items()}
    return IdentityRecord.model_validate(answers)


def main(argv: list[str] | None = None, ask: Callable[[str], str] = input) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = parse_args(argv)

    LOGGER.info("BFHL API Setup - Enter Your Details")
    try:
        record = prompt_identity(ask)
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            LOGGER.error("%s: %s", field, error["msg"])
        return 1

    path = save_identity(record, args.output or config_file_path())
    LOGGER.info("Configuration saved to %s", path)
    LOGGER.info("   Name: %s", record.full_name)
    LOGGER.info("   Birth Date: %s", record.birth_date)
    LOGGER.info("   Email: %s", record.email)
    LOGGER.info("   Roll Number: %s", record.roll_number)
    LOGGER.info("   User ID: %s", record.user_id)
    LOGGER.info("You can now start the server with: python -m app.main")
    return 0


if __name__ == "__main__":
    sys.exit(main())
