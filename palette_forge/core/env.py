"""Configuration for palette-forge: .env loading and PALETTE_FORGE_* settings.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings:
  PALETTE_FORGE_FORMAT   default display format (hex, rgb, hsl, hsb, cmyk)
  PALETTE_FORGE_HARMONY  default harmony mode (a rule name or 'random')
  PALETTE_FORGE_SEED     integer seed for the random source
"""

import os
from pathlib import Path

ENV_PREFIX = 'PALETTE_FORGE_'

DEFAULTS: dict[str, str] = {
    'FORMAT': 'hex',
    'HARMONY': 'random',
    'SEED': '',
}


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Blank lines, comments and lines without '=' are skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Fill os.environ from a .env file for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def get_setting(name: str) -> str:
    """Value of PALETTE_FORGE_<name>, falling back to the built-in default."""
    key = name.upper()
    return os.environ.get(ENV_PREFIX + key) or DEFAULTS.get(key, '')


def get_seed() -> int | None:
    """PALETTE_FORGE_SEED as an int, or None when unset or not a number."""
    raw = get_setting('SEED').strip()
    try:
        return int(raw) if raw else None
    except ValueError:
        return None
