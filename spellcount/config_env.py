"""Load ``.env`` files and tidy the path-valued variables they set."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from dotenv import find_dotenv, load_dotenv

PATH_VARS = ("SPELLCOUNT_CONFIG",)


def _candidates(cwd: Path) -> List[Path]:
    files = []
    base = find_dotenv(".env", usecwd=True)
    if base:
        files.append(Path(base))
    files.append(cwd / ".env.local")
    if os.getenv("PYTEST_CURRENT_TEST"):
        files.append(cwd / ".env.test")
    return [f for f in files if f.exists()]


def _normalize_path(name: str) -> None:
    raw = os.getenv(name)
    if not raw:
        return
    path = Path(raw).expanduser()
    try:
        path = path.resolve()
    except OSError:
        pass
    os.environ[name] = str(path)


def load_env() -> List[Path]:
    """Load .env files without overriding the process env; return the files read."""
    loaded = _candidates(Path.cwd())
    for env_file in loaded:
        load_dotenv(env_file, override=False)
    for name in PATH_VARS:
        _normalize_path(name)
    return loaded
