"""Application settings read from a configuration markup file.

A ``Settings`` object merges three sources: values set in code, ``add``
entries from the recognised sections of a configuration file, and process
environment variables, which are consulted only for keys not otherwise set.
"""

import os
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from config_xml_reader.api import load
from config_xml_reader.shared import (
    ConfigError,
    ReaderConfig,
    SettingsConfig,
    get_logger,
)
from config_xml_reader.tree import XmlFileNode

PathLike = Union[str, Path]


class IllegalConfigurationError(ConfigError):
    """The configuration file's root element is not the expected one."""


class SettingsNotLoadedError(ConfigError):
    """A ``Settings`` object was used before ``setup()`` was called."""


def extract_entries(
    root: XmlFileNode,
    config: Optional[SettingsConfig] = None,
    source: str = "<tree>"
) -> List[Tuple[str, str]]:
    """Collect key/value pairs from the entry nodes of every known section.

    Entries missing either the key or the value attribute are skipped.

    Raises:
        IllegalConfigurationError: the root is not named ``config.root_name``
    """
    config = config or SettingsConfig()
    if not root.matches(config.root_name):
        raise IllegalConfigurationError(
            f"Illegal configuration file {source}: root element is <{root.name}>, "
            f"expected <{config.root_name}>"
        )

    entries: List[Tuple[str, str]] = []
    for section in root.children:
        attribute_names = config.section_attributes(section.name)
        if attribute_names is None:
            continue
        key_name, value_name = attribute_names
        for entry in section.find_children(config.entry_name):
            key = entry.get_attribute(key_name)
            value = entry.get_attribute(value_name)
            if key is not None and value is not None:
                entries.append((key, value))
    return entries


def load_settings(
    file_path: PathLike,
    config: Optional[SettingsConfig] = None,
    reader_config: Optional[ReaderConfig] = None
) -> Dict[str, str]:
    """Read the settings entries of one file into a dictionary.

    Later entries replace earlier ones with the same key.
    """
    root = load(file_path, reader_config)
    return dict(extract_entries(root, config, str(file_path)))


class Settings:
    """Consolidated application settings.

    Example:
        >>> settings = Settings().setup("/srv/shop")
        >>> settings.app_name
        'shop'
        >>> settings.get("ConnectionString")
    """

    def __init__(
        self,
        config: Optional[SettingsConfig] = None,
        reader_config: Optional[ReaderConfig] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> None:
        self.config = config or SettingsConfig()
        self.reader_config = reader_config or ReaderConfig()
        self._environ = os.environ if environ is None else environ
        self._settings: Optional[Dict[str, Optional[str]]] = None
        self._logger = get_logger(__name__, self.reader_config.correlation_id, "settings")

    def setup(
        self,
        content_root: Optional[str],
        config_file: Optional[str] = None,
        web_root: Optional[str] = None,
        app_name: Optional[str] = None
    ) -> "Settings":
        """Load settings for the application rooted at ``content_root``.

        Args:
            content_root: Folder containing the application
            config_file: Name of the configuration file under ``content_root``
            web_root: Folder of static files (defaults to ``content_root/wwwroot``)
            app_name: Application name (defaults to the last folder of ``content_root``)

        Returns:
            self, to allow chaining
        """
        if content_root is None:
            raise ValueError("content_root cannot be None")

        content_root = _strip_delimiter(content_root)
        config_file = config_file or self.config.config_file
        if web_root is None:
            web_root = content_root + os.sep + "wwwroot"
        if app_name is None:
            app_name = _last_path_segment(content_root)

        self._settings = {}
        self.set("NewLine", os.linesep)
        self.content_root = content_root
        self.web_root = _strip_delimiter(web_root)
        self.app_name = app_name

        self.read_config(content_root + os.sep + config_file)

        # Resolve and remember the environment name
        _ = self.env
        if self.get("LogFile") is None:
            self.set("LogFile", f"{app_name or 'app'}.log")
        return self

    def read_config(self, file_path: PathLike) -> None:
        """Merge the entries of a configuration file; a missing file is ignored."""
        self._require_setup()
        if not Path(file_path).is_file():
            self._logger.info("No configuration file", extra={"file_path": str(file_path)})
            return

        root = load(file_path, self.reader_config)
        entries = extract_entries(root, self.config, str(file_path))
        for key, value in entries:
            self.set(key, value)
        self._logger.info(
            "Configuration file read",
            extra={"file_path": str(file_path), "entry_count": len(entries)}
        )

    def set(self, key: str, value: Optional[str]) -> None:
        """Add or replace a setting."""
        self._require_setup()[key] = value

    def get(self, key: Optional[str]) -> Optional[str]:
        """Return a setting, falling back to the environment.

        Values found in the environment are remembered so later changes to the
        environment do not affect this object.
        """
        settings = self._require_setup()
        if key is None:
            return None
        if key in settings:
            return settings[key]
        if self.config.environment_fallback and key in self._environ:
            value = self._environ[key]
            settings[key] = value
            return value
        return None

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def items(self) -> Iterator[Tuple[str, Optional[str]]]:
        return iter(list(self._require_setup().items()))

    def debug_config(self) -> str:
        """Render every setting as ``key: value`` separated by commas."""
        return ", ".join(f"{key}: {value}" for key, value in self.items())

    @property
    def content_root(self) -> Optional[str]:
        return self.get("ContentRoot")

    @content_root.setter
    def content_root(self, value: Optional[str]) -> None:
        self.set("ContentRoot", value)

    @property
    def web_root(self) -> Optional[str]:
        return self.get("WebRoot")

    @web_root.setter
    def web_root(self, value: Optional[str]) -> None:
        self.set("WebRoot", value)

    @property
    def app_name(self) -> Optional[str]:
        return self.get("AppName")

    @app_name.setter
    def app_name(self, value: Optional[str]) -> None:
        self.set("AppName", value)

    @property
    def app_url(self) -> Optional[str]:
        return self.get("AppURL")

    @app_url.setter
    def app_url(self, value: Optional[str]) -> None:
        self.set("AppURL", value)

    @property
    def env(self) -> str:
        """Environment name: Development, Test, Staging or Production."""
        env = self.get("Env")
        if env is None:
            env = self.get(self.config.environment_variable) or self.config.default_env
            self.set("Env", env)
        return env

    @env.setter
    def env(self, value: str) -> None:
        self.set("Env", value)

    @property
    def debug(self) -> bool:
        return self.env == "Development"

    @property
    def log_file(self) -> str:
        """Full path of the log file under the ``Logs`` folder of the content root."""
        return os.sep.join(
            [self.content_root or "", self.config.log_folder, self.get("LogFile") or ""]
        )

    def _require_setup(self) -> Dict[str, Optional[str]]:
        if self._settings is None:
            raise SettingsNotLoadedError(
                "Settings.setup() must be called before settings can be used"
            )
        return self._settings


def _strip_delimiter(path: str) -> str:
    if path.endswith(os.sep) and len(path) > 1:
        return path[:-1]
    return path


def _last_path_segment(path: str) -> Optional[str]:
    index = path.rfind(os.sep)
    if index <= 0:
        return None
    return path[index + 1:] or None
