"""Load settings.yaml and merge it with command-line overrides."""

from pathlib import Path

import yaml

PROJECT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_SETTINGS_PATH = PROJECT_DIR / "config" / "settings.yaml"

DEFAULTS = {
    "board_size": 7,
    "database_path": "data/gomoku.db",
    "log_moves": False,
    "seed": None,
}


def resolve_project_path(path):
    """Resolve a repo-relative path when invoked from outside `Gomoku_Console/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path=None):
    """
    Read settings YAML. An explicit path must exist; the bundled default may be missing.
    Unknown keys are kept so callers can extend the file.
    """
    if path is None:
        if not DEFAULT_SETTINGS_PATH.exists():
            return dict(DEFAULTS)
        path = DEFAULT_SETTINGS_PATH
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"settings file {path} must contain a mapping")
    settings = dict(DEFAULTS)
    settings.update(loaded)
    return settings


def merge_args(settings, args):
    """CLI values win over settings; settings win over defaults."""
    merged = dict(settings)
    if args.board_size is not None:
        merged["board_size"] = args.board_size
    if args.database_path is not None:
        merged["database_path"] = args.database_path
    if args.seed is not None:
        merged["seed"] = args.seed
    if args.log_moves:
        merged["log_moves"] = True
    return merged
