import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Union

from pydantic import ValidationError

from ..data_models import WebHeadSettings


def _xdg_config_home() -> Path:
    value = os.environ.get('XDG_CONFIG_HOME', '')
    if value and os.path.isabs(value):
        return Path(value)
    return Path.home() / '.config'


CONFIG_DIR = _xdg_config_home() / 'webhead'
DEFAULT_SETTINGS_FILE = CONFIG_DIR / 'settings.json'

logger = logging.getLogger(__name__)

class ConfigLoader:
    def __init__(self, settings_file: Union[str, Path] = DEFAULT_SETTINGS_FILE):
        """
        Initializes the ConfigLoader.

        Args:
            settings_file (Union[str, Path], optional): Path to the settings JSON file.
                                                        Defaults to '~/.config/webhead/settings.json'.
        """
        self.settings_file: Path = Path(settings_file).expanduser()
        self.settings: Dict[str, Any] = self._load_json(self.settings_file, default_value={})

        if not isinstance(self.settings, dict):
            logger.warning(f"Settings file '{self.settings_file}' does not hold a JSON object. Using empty settings.")
            self.settings = {}

    def _load_json(self, file_path: Path, default_value: Dict) -> Any:
        """
        Loads a JSON file.

        Args:
            file_path (Path): The path to the JSON file.
            default_value (Dict): The default value to return if loading fails.

        Returns:
            Any: The loaded JSON data or the default value.
        """
        if not file_path.exists():
            logger.debug(f"Configuration file not found: {file_path}")
            return default_value
        if not file_path.is_file():
            logger.error(f"Configuration path is not a file: {file_path}")
            return default_value

        try:
            with file_path.open('r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Successfully loaded JSON from {file_path}")
                return data
        except json.JSONDecodeError as e:
            logger.error(f"Could not decode JSON from {file_path}: {e}")
            return default_value
        except OSError as e:
            logger.error(f"Could not read {file_path}: {e}")
            return default_value

    def get_settings(self) -> Dict[str, Any]:
        """Returns all loaded settings."""
        return self.settings

    def get_setting(self, path_str: str, default: Any = None) -> Any:
        """
        Retrieves a setting value using a dot-separated path.

        Args:
            path_str (str): Dot-separated path to the setting (e.g., "logging.level").
            default (Any, optional): Default value if the setting is not found. Defaults to None.

        Returns:
            Any: The setting value or the default.
        """
        if not path_str:
            return self.settings
        keys = path_str.split('.')
        current_level = self.settings
        for key in keys:
            if not isinstance(current_level, dict):
                # Path leads to a non-dict item before all keys are consumed
                logger.warning(f"Invalid path '{path_str}' at key '{key}'. Expected a dictionary, found {type(current_level)}.")
                return default
            if key not in current_level:
                logger.debug(f"Setting '{path_str}' not found. Returning default: {default}")
                return default
            current_level = current_level[key]
        return current_level

    def get_logging_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a specific setting from the 'logging' block."""
        return self.get_setting(f'logging.{setting_name}', default)

    def get_webhead_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a specific setting from the 'webhead' block."""
        return self.get_setting(f'webhead.{setting_name}', default)

    def get_webhead_settings(self) -> WebHeadSettings:
        """Returns the 'webhead' block validated as WebHeadSettings, defaults on invalid input."""
        block = self.get_setting('webhead', {})
        if not isinstance(block, dict):
            logger.warning(f"'webhead' settings block is not an object: {block!r}")
            return WebHeadSettings()
        try:
            return WebHeadSettings.model_validate(block)
        except ValidationError as e:
            logger.error(f"Invalid 'webhead' settings in {self.settings_file}: {e}")
            return WebHeadSettings()
