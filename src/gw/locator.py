from pathlib import Path
from typing import Iterable, Optional, Union

import structlog

from common.paths import find_dir_containing, name_matcher
from gw.constants import GRADLE_BIN, SETTINGS_FILE, SETTINGS_FILE_KTS, WRAPPER_NAME

log = structlog.get_logger()

is_settings_file = name_matcher(SETTINGS_FILE, SETTINGS_FILE_KTS)
is_wrapper = name_matcher(WRAPPER_NAME)


def locate_root(
    origin: Path, settings_files: Optional[Iterable[str]] = None
) -> Optional[Path]:
    """
    Find the nearest ancestor of `origin` (itself included) holding a settings file.
    """
    matches = name_matcher(*settings_files) if settings_files else is_settings_file
    root = find_dir_containing(origin, matches)
    if root is not None:
        log.debug("Project root found", root=str(root))
    return root


def resolve_wrapper(
    origin: Path, wrapper_name: str = WRAPPER_NAME, fallback: str = GRADLE_BIN
) -> Union[Path, str]:
    """
    Return the nearest wrapper script above `origin`, or the bare `fallback`
    command name to be looked up on PATH.
    """
    wrapper_dir = find_dir_containing(origin, name_matcher(wrapper_name))
    if wrapper_dir is None:
        log.warning(f"Did not find {wrapper_name} wrapper! Trying {fallback} from $PATH")
        return fallback
    return wrapper_dir / wrapper_name
