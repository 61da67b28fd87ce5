"""Environment configuration for chart-colour.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if given).
  3. .env file found walking up from cwd, stopping at a .git boundary.

Recognised variables:
  CHART_COLOUR_THEME  path to a JSON theme used when neither --theme nor
                      the chart file supplies one.
"""

import os
from pathlib import Path

THEME_ENV = 'CHART_COLOUR_THEME'


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git root."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value / KEY="value" lines -> dict. Comments and malformed lines are skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the file that was loaded, or None.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value
    return path


def theme_path_from_env() -> str | None:
    """The configured default theme file, if any."""
    value = os.environ.get(THEME_ENV, '').strip()
    return value or None
