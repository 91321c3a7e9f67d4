import os
import signal

SETTINGS_FILE = "settings.gradle"
SETTINGS_FILE_KTS = "settings.gradle.kts"
GRADLE_BIN = "gradle"
PROJECT_DIR_FLAG = "--project-dir"

IS_WINDOWS = os.name == "nt"
WRAPPER_NAME = "gradlew.bat" if IS_WINDOWS else "gradlew"

# cmd.exe asks "Terminate batch job (Y/N)?" on Ctrl-C; the parent must survive to let the child ask
IGNORE_INTERRUPT = IS_WINDOWS


def install_interrupt_shim() -> None:
    if IGNORE_INTERRUPT:
        signal.signal(signal.SIGINT, lambda signum, frame: None)
