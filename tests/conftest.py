# tests/conftest.py
import os
import stat
from pathlib import Path

import pytest

FAKE_WRAPPER = """#!/bin/sh
echo "fake wrapper cwd=$(pwd)"
echo "fake wrapper args=$*"
for arg in "$@"; do
    if [ "$arg" = "tasks" ]; then
        echo "Tasks runnable from root project"
    fi
    if [ "$arg" = "non-existent-task" ]; then
        echo "Task 'non-existent-task' not found in root project" >&2
        exit 3
    fi
done
exit 0
"""

FAKE_GLOBAL_GRADLE = """#!/bin/sh
echo "This is global gradle. You made it!"
echo "fake gradle args=$*"
exit 0
"""


def write_script(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch):
    # keep a developer's own config out of the tests
    monkeypatch.delenv("GW_CONFIG", raising=False)


@pytest.fixture
def project_factory(tmp_path):
    """Create `proj/<settings>` with `proj/src/main/java`, optionally with a wrapper"""

    def make(settings: str = "settings.gradle.kts", wrapper: bool = True) -> Path:
        project = tmp_path.resolve() / "proj"
        (project / "src" / "main" / "java").mkdir(parents=True)
        (project / settings).write_text('rootProject.name = "proj"\n', encoding="utf-8")
        if wrapper:
            write_script(project / wrapper_name(), FAKE_WRAPPER)
        return project

    return make


def wrapper_name() -> str:
    return "gradlew.bat" if os.name == "nt" else "gradlew"
