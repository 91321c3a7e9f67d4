import yaml
from pathlib import Path
from typing import Union


def load_config(config_path: Union[str, Path, None], default_config: dict) -> dict:
    config = default_config.copy()
    if config_path is None:
        return config

    full_path = Path(config_path).expanduser()
    if not full_path.exists():
        raise FileNotFoundError(f"Config file at '{full_path}' path not found")

    with open(full_path, "r", encoding="utf-8") as f:
        try:
            file_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML config: {e}")

    if not isinstance(file_config, dict):
        raise ValueError(f"Config at '{full_path}' must be a mapping")

    config.update(file_config)
    validate_config(config)
    return config


def validate_config(config: dict) -> None:
    if "SETTINGS_FILES" in config:
        settings_files = config["SETTINGS_FILES"]
        if (
            not isinstance(settings_files, list)
            or not settings_files
            or not all(isinstance(name, str) and name for name in settings_files)
        ):
            raise ValueError("SETTINGS_FILES must be a non-empty list of file names")

    for key in ("WRAPPER", "FALLBACK_COMMAND"):
        if key in config and not (isinstance(config[key], str) and config[key]):
            raise ValueError(f"{key} must be a non-empty string")
