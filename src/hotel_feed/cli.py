"""Command-line entry point.

Prints three lines: the validation result for the hotels document, the
validation result for the error document, and the JSON conversion of the
hotels document. Locations come from ``HOTELS_*`` environment variables.
"""
from __future__ import annotations

import logging

from hotel_feed.config.settings import Settings
from hotel_feed.core.logging import configure_logging
from hotel_feed.hotels import hotels_to_json
from hotel_feed.services import DocumentClient
from hotel_feed.validation import validate

logger = logging.getLogger(__name__)


def run(settings: Settings) -> list[str]:
    with DocumentClient(**settings.client_options()) as client:
        lines = [
            validate(settings.xml_url, settings.xsd_url, client=client),
            validate(settings.xml_error_url, settings.xsd_url, client=client),
            hotels_to_json(settings.xml_url, client=client),
        ]
    return lines


def main() -> None:
    settings = Settings()
    settings.ensure_directories()
    configure_logging(settings.log_level, settings.log_dir)
    logger.info("Validating %s and %s against %s", settings.xml_url, settings.xml_error_url, settings.xsd_url)

    for line in run(settings):
        print(line)


if __name__ == "__main__":
    main()
