import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import structlog

from common.cli import forwarded_args
from common.config import load_config
from common.logging import setup_logging, setup_pre_logging
from gw.constants import (
    GRADLE_BIN,
    SETTINGS_FILE,
    SETTINGS_FILE_KTS,
    WRAPPER_NAME,
    install_interrupt_shim,
)
from gw.executor import execute
from gw.locator import locate_root, resolve_wrapper

CONFIG_ENV_VAR = "GW_CONFIG"

DEFAULT_CONFIG = {
    "SETTINGS_FILES": [SETTINGS_FILE, SETTINGS_FILE_KTS],
    "WRAPPER": WRAPPER_NAME,
    "FALLBACK_COMMAND": GRADLE_BIN,
    "LOG_FILE": None,
    "LOG_LEVEL": "INFO",
}


def run(origin: Path, argv: Sequence[str], config: dict) -> int:
    log = structlog.get_logger()
    settings_files = config["SETTINGS_FILES"]

    try:
        project_dir = locate_root(origin, settings_files)
    except OSError as e:
        log.error("Failed to list contents!", error=str(e))
        return 1

    if project_dir is None:
        log.error(f"Did not find {' or '.join(settings_files)} file!")
        return 1

    try:
        command = resolve_wrapper(
            origin, wrapper_name=config["WRAPPER"], fallback=config["FALLBACK_COMMAND"]
        )
    except OSError as e:
        log.error("Failed to list contents!", error=str(e))
        return 1

    return execute(command, project_dir, argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    install_interrupt_shim()
    setup_pre_logging()
    log = structlog.get_logger()

    try:
        origin = Path.cwd()
    except OSError as e:
        log.error("Current directory is not accessible", error=str(e))
        sys.exit(1)

    args = forwarded_args(argv)

    try:
        config = load_config(
            default_config=DEFAULT_CONFIG, config_path=os.environ.get(CONFIG_ENV_VAR)
        )
    except (FileNotFoundError, ValueError) as e:
        log.error("Config error", error=str(e))
        sys.exit(1)

    try:
        setup_logging(config.get("LOG_FILE"), config.get("LOG_LEVEL", "INFO"))
    except (OSError, ValueError) as e:
        log.error("Logger reconfiguration error", error=str(e))
        sys.exit(1)

    log = structlog.get_logger()
    log.debug("Config loaded", config=config, origin=str(origin))

    try:
        exit_code = run(origin, args, config)
    except KeyboardInterrupt:
        log.error("Execution interrupted by user")
        sys.exit(130)
    except Exception:
        log.exception("Unexpected error")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
