"""Tests for the settings loader."""

import os

import pytest

from config_xml_reader.shared import SettingsConfig
from config_xml_reader.shared.errors import StructuralMismatchError
from config_xml_reader.settings import (
    IllegalConfigurationError,
    Settings,
    SettingsNotLoadedError,
    extract_entries,
    load_settings,
)
from config_xml_reader.api import load_string

WEB_CONFIG = """<?xml version="1.0"?>
<configuration>
  <appSettings>
    <add key="AppURL" value="http://remote.example.com"/>
    <add key="Env" value="Production"/>
    <add key="Incomplete"/>
    <remove key="Ignored" value="x"/>
  </appSettings>
  <connectionStrings>
    <Add Name="Main" ConnectionString="Server=db;Database=shop"/>
  </connectionStrings>
  <system.web>
    <add key="NotASetting" value="x"/>
  </system.web>
</configuration>
"""


@pytest.fixture
def content_root(tmp_path):
    app_dir = tmp_path / "shop"
    app_dir.mkdir()
    (app_dir / "web.config").write_text(WEB_CONFIG)
    return app_dir


class TestExtractEntries:
    """Test extraction of key/value entries from a tree."""

    def test_known_sections_only(self):
        entries = extract_entries(load_string(WEB_CONFIG))

        assert entries == [
            ("AppURL", "http://remote.example.com"),
            ("Env", "Production"),
            ("Main", "Server=db;Database=shop"),
        ]

    def test_wrong_root_raises(self):
        with pytest.raises(IllegalConfigurationError, match="expected <configuration>"):
            extract_entries(load_string("<settings/>"))

    def test_root_name_is_case_insensitive(self):
        assert extract_entries(load_string("<Configuration/>")) == []

    def test_custom_sections(self):
        config = SettingsConfig(sections={"features": ("name", "enabled")})
        root = load_string(
            '<configuration><features><add name="beta" enabled="true"/></features></configuration>'
        )

        assert extract_entries(root, config) == [("beta", "true")]


class TestLoadSettings:
    """Test the single-file convenience loader."""

    def test_returns_dictionary(self, content_root):
        settings = load_settings(content_root / "web.config")

        assert settings == {
            "AppURL": "http://remote.example.com",
            "Env": "Production",
            "Main": "Server=db;Database=shop",
        }

    def test_malformed_file_raises(self, tmp_path):
        path = tmp_path / "web.config"
        path.write_text("<configuration><appSettings></configuration>")

        with pytest.raises(StructuralMismatchError):
            load_settings(path)


class TestSettings:
    """Test the consolidated settings object."""

    def test_setup_reads_config_file(self, content_root):
        settings = Settings(environ={}).setup(str(content_root))

        assert settings.get("Main") == "Server=db;Database=shop"
        assert settings.app_url == "http://remote.example.com"
        assert settings.env == "Production"
        assert settings.debug is False

    def test_setup_defaults(self, content_root):
        settings = Settings(environ={}).setup(str(content_root) + os.sep)

        assert settings.content_root == str(content_root)
        assert settings.web_root == str(content_root) + os.sep + "wwwroot"
        assert settings.app_name == "shop"
        assert settings.get("LogFile") == "shop.log"
        assert settings.get("NewLine") == os.linesep

    def test_explicit_roots_and_log_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "test.xml").write_text(WEB_CONFIG)

        settings = Settings(environ={}).setup(".", "test.xml", "web", "app")

        assert settings.content_root == "."
        assert settings.web_root == "web"
        assert settings.app_name == "app"
        assert settings.app_url.startswith("http://r")
        assert settings.log_file == "." + os.sep + "Logs" + os.sep + "app.log"

    def test_missing_config_file_is_not_an_error(self, tmp_path):
        settings = Settings(environ={}).setup(str(tmp_path))

        assert settings.get("AppURL") is None
        assert settings.env == "Development"
        assert settings.debug is True

    def test_env_from_environment_variable(self, tmp_path):
        settings = Settings(environ={"ASPNETCORE_ENVIRONMENT": "Staging"}).setup(str(tmp_path))

        assert settings.env == "Staging"

    def test_environment_fallback_is_cached(self, tmp_path):
        environ = {"DATA_DIR": "/var/data"}
        settings = Settings(environ=environ).setup(str(tmp_path))

        assert settings.get("DATA_DIR") == "/var/data"
        environ["DATA_DIR"] = "/changed"
        assert settings.get("DATA_DIR") == "/var/data"
        assert "DATA_DIR" in settings

    def test_environment_fallback_can_be_disabled(self, tmp_path):
        config = SettingsConfig(environment_fallback=False)
        settings = Settings(config, environ={"DATA_DIR": "/var/data"}).setup(str(tmp_path))

        assert settings.get("DATA_DIR") is None

    def test_set_replaces_value(self, tmp_path):
        settings = Settings(environ={}).setup(str(tmp_path))

        settings.set("Key", "one")
        settings.set("Key", "two")

        assert settings.get("Key") == "two"
        assert settings.get(None) is None

    def test_illegal_root_raises(self, tmp_path):
        (tmp_path / "web.config").write_text("<settings/>")

        with pytest.raises(IllegalConfigurationError):
            Settings(environ={}).setup(str(tmp_path))

    def test_content_root_required(self):
        with pytest.raises(ValueError, match="content_root cannot be None"):
            Settings(environ={}).setup(None)

    def test_use_before_setup_raises(self):
        with pytest.raises(SettingsNotLoadedError, match="setup"):
            Settings(environ={}).get("Key")

    def test_debug_config(self, content_root):
        settings = Settings(environ={}).setup(str(content_root))

        rendered = settings.debug_config()

        assert "Main: Server=db;Database=shop" in rendered
        assert "AppName: shop" in rendered
