"""Composition root for the user switcher helpers.

Builds the StringLookupPort implementation from the centralized settings
and offers a logging setup for applications that host the helpers.
"""

import logging
import sys
from functools import lru_cache

from user_switcher.application.ports import StringLookupPort
from user_switcher.infrastructure.resources import (
    DEFAULT_STRING_TABLE,
    CatalogStringLookup,
    StringTable,
)
from user_switcher_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure application logging.

    Replaces the root logger's handlers, so only an application entry
    point should call this. Sets up logging with:
    - Console output with timestamps and module names
    - Configurable log level (from settings)
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("user_switcher").setLevel(log_level)


logger = logging.getLogger(__name__)


def create_string_lookup(settings: Settings | None = None) -> StringLookupPort:
    """Build the string lookup configured by ``settings``.

    Strings from ``settings.strings_file`` are layered over the bundled
    defaults. Logging configuration is left to the calling application.
    """
    if settings is None:
        settings = get_settings()

    table = DEFAULT_STRING_TABLE
    if settings.strings_file is not None:
        logger.info("Loading string table from %s", settings.strings_file)
        table = table.merged_with(StringTable.from_json_file(settings.strings_file))

    lookup = CatalogStringLookup(
        table=table,
        locale=settings.locale,
        fallback_locale=settings.fallback_locale,
    )
    logger.debug(
        "String lookup ready (locale=%s, fallback=%s, locales=%s)",
        settings.locale,
        settings.fallback_locale,
        lookup.available_locales,
    )
    return lookup
