"""Tests for the composition root."""

import json
import logging

import pytest

from user_switcher.domain.resources import STRING_ADD_USER, STRING_GUEST_NAME
from user_switcher.infrastructure.resources import CatalogStringLookup
from user_switcher.presentation.factory import configure_logging, create_string_lookup
from user_switcher_config import Settings


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    level = root.level
    package_level = logging.getLogger("user_switcher").level
    configure_logging.cache_clear()
    yield
    configure_logging.cache_clear()
    # basicConfig installs a plain StreamHandler; pytest's own handlers are subclasses
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("user_switcher").setLevel(package_level)


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_uses_configured_level(self, monkeypatch):
        monkeypatch.setenv("USER_SWITCHER_LOG_LEVEL", "debug")

        configure_logging()

        assert logging.getLogger("user_switcher").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("USER_SWITCHER_LOG_LEVEL", "chatty")

        configure_logging()

        assert logging.getLogger("user_switcher").level == logging.INFO


@pytest.mark.usefixtures("restore_logging")
class TestCreateStringLookup:
    """Test cases for create_string_lookup."""

    def test_default_settings(self):
        lookup = create_string_lookup(Settings())

        assert isinstance(lookup, CatalogStringLookup)
        assert lookup.get_string(STRING_GUEST_NAME) == "Guest"

    def test_keeps_host_logging_configuration(self, tmp_path):
        """Building a lookup leaves the application's root handlers alone."""
        root = logging.getLogger()
        host_handler = logging.FileHandler(tmp_path / "app.log")
        root.addHandler(host_handler)
        level = root.level
        try:
            create_string_lookup(Settings())

            assert host_handler in root.handlers
            assert root.level == level
        finally:
            root.removeHandler(host_handler)
            host_handler.close()

    def test_reads_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("USER_SWITCHER_LOCALE", "fr")

        lookup = create_string_lookup()

        assert lookup.locale == "fr"
        # No French table, so English is used
        assert lookup.get_string(STRING_ADD_USER) == "Add user"

    def test_strings_file_is_merged_over_defaults(self, tmp_path):
        path = tmp_path / "strings.json"
        path.write_text(
            json.dumps(
                {
                    "locales": {
                        "en": {STRING_GUEST_NAME.qualified_name: "Visitor"},
                        "de": {STRING_ADD_USER.qualified_name: "Nutzer hinzufügen"},
                    }
                },
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
        settings = Settings(strings_file=path, locale="de")

        lookup = create_string_lookup(settings)

        assert lookup.available_locales == ["de", "en"]
        assert lookup.get_string(STRING_ADD_USER) == "Nutzer hinzufügen"
        assert lookup.get_string(STRING_GUEST_NAME) == "Visitor"
