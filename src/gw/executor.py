import subprocess
from pathlib import Path
from typing import Sequence, Union

import structlog

from gw.constants import PROJECT_DIR_FLAG

log = structlog.get_logger()


def build_args(project_dir: Path, argv: Sequence[str]) -> list[str]:
    return [PROJECT_DIR_FLAG, str(project_dir), *argv]


def execute(
    command: Union[Path, str], project_dir: Path, argv: Sequence[str]
) -> int:
    """
    Run `command` from `project_dir` and return its exit code.

    A child that died without an exit code, or could not be started at all, yields 1.
    """
    args = build_args(project_dir, argv)
    print(
        f"Executing {command} {' '.join(args)} from directory {project_dir}",
        flush=True,
    )

    try:
        proc = subprocess.Popen([str(command), *args], cwd=project_dir)
    except OSError as e:
        log.error(f"Failed {e}")
        return 1

    returncode = wait_for(proc)

    # negative return codes mean the child was killed by a signal
    if returncode < 0:
        log.warning("Delegate terminated by signal", signal=-returncode)
        return 1
    return returncode


def wait_for(proc: subprocess.Popen) -> int:
    # Ctrl-C hits the whole process group; the child decides how to stop
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            log.info("Interrupt received, waiting for delegate to finish")
