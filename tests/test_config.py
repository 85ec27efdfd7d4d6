"""Tests for configuration and directory loading."""

import tempfile
from pathlib import Path

from agencyos.config import DEFAULT_CONFIG, load_config, load_directory


def test_load_config_merges_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        cfg_file = Path(tmpdir) / "config.yaml"
        cfg_file.write_text("chunking:\n  max_chunk_size: 500\nchroma_path: " + tmpdir + "/chroma\n")
        cfg = load_config(cfg_file)

    assert cfg["chunking"] == {"max_chunk_size": 500, "overlap": 100}
    assert cfg["chroma_path"].endswith("chroma")
    assert DEFAULT_CONFIG["chunking"]["max_chunk_size"] == 1000


def test_load_config_env_overrides(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setenv("AGENCYOS_CHROMA_PATH", "/tmp/agencyos-chroma")
    cfg = load_config("/nonexistent/config.yaml")
    assert cfg["claude_api_key"] == "sk-test"
    assert cfg["chroma_path"] == str(Path("/tmp/agencyos-chroma").resolve())


def test_load_directory():
    with tempfile.NamedTemporaryFile(suffix=".yaml", mode="w", delete=False) as f:
        f.write(
            "clients:\n  - {id: 1, name: Acme}\n"
            "content:\n  - {id: c1, title: Spring Newsletter}\n"
        )
        f.flush()
        directory = load_directory(f.name)

    assert directory["clients"][0].id == "1"
    assert directory["clients"][0].kind == "client"
    assert directory["content"][0].name == "Spring Newsletter"
    assert directory["projects"] is None
