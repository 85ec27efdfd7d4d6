"""Configuration management for agencyos."""

import os
from pathlib import Path
from typing import Any

import yaml

from .models import NamedEntity


DEFAULT_CONFIG = {
    "chroma_path": "~/.agencyos/chroma",
    "collection": "framework_chunks",
    "embedding_model": "intfloat/e5-large-v2",
    "claude_model": "claude-sonnet-4-20250514",
    "chunking": {"max_chunk_size": 1000, "overlap": 100},
    "search": {"threshold": 0.7, "limit": 5, "max_frameworks": 3},
    "highlight": {"mention_class": "mention", "tag_class": "tag"},
}

# Directory file sections and the entity kind each one holds
DIRECTORY_SECTIONS = {"clients": "client", "projects": "project", "content": "content"}


def _find_config_file() -> Path | None:
    """Look for config.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "config.yaml",
        Path.cwd() / "config.yaml",
        Path.home() / ".agencyos" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = _copy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            file_cfg = yaml.safe_load(f) or {}
        _deep_merge(cfg, file_cfg)

    # Env overrides
    if api_key := os.environ.get("ANTHROPIC_API_KEY"):
        cfg["claude_api_key"] = api_key
    if chroma_path := os.environ.get("AGENCYOS_CHROMA_PATH"):
        cfg["chroma_path"] = chroma_path

    cfg["chroma_path"] = str(Path(cfg["chroma_path"]).expanduser().resolve())

    return cfg


def load_directory(path: str | Path) -> dict[str, list[NamedEntity] | None]:
    """Load the clients/projects/content lookup lists from a YAML file.

    Sections missing from the file come back as None so callers can tell
    "not searched" apart from "searched, nothing there".
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    directory: dict[str, list[NamedEntity] | None] = {}
    for section, kind in DIRECTORY_SECTIONS.items():
        records = data.get(section)
        if records is None:
            directory[section] = None
            continue
        directory[section] = [NamedEntity.from_record(r, kind) for r in records]
    return directory


def _copy(cfg: dict) -> dict:
    return {k: _copy(v) if isinstance(v, dict) else v for k, v in cfg.items()}


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
