from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_PATH = PROJECT_ROOT / ".env"


def load_env(path: Path | None = None) -> None:
    """Load ``.env`` from the project root without overriding the real environment."""
    load_dotenv(path or ENV_PATH)


def project_path(value: str) -> Path:
    """Resolve a relative path against the project root, not the working directory."""
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path
