"""Pytest configuration and fixtures for file-kit tests."""

import io
import zipfile
from pathlib import Path

import orjson
import pytest


@pytest.fixture(autouse=True)
def isolated_config_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point FILE_KIT_CONFIG_DIR at an empty temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("FILE_KIT_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("FILE_KIT_LOG_LEVEL", raising=False)
    return config_dir


def make_zip(entries: dict[str, bytes]) -> bytes:
    """Build an in-memory zip archive from a name -> content mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def resources(tmp_path: Path) -> Path:
    """Create the sample resource tree used across tests.

    Layout:
        sample.txt       "Hello"
        sample.json      {"title": "Hello"}
        path/a.json      {"title": "a"}
        path/b.json      {"title": "b"}

    """
    root = tmp_path / "resources"
    (root / "path").mkdir(parents=True)
    (root / "sample.txt").write_text("Hello", encoding="utf-8")
    (root / "sample.json").write_bytes(orjson.dumps({"title": "Hello"}))
    (root / "path" / "a.json").write_bytes(orjson.dumps({"title": "a"}))
    (root / "path" / "b.json").write_bytes(orjson.dumps({"title": "b"}))
    return root


@pytest.fixture
def archive_bytes() -> bytes:
    """Zip archive holding path/a.json and sample.txt."""
    return make_zip(
        {
            "path/a.json": orjson.dumps({"title": "a"}),
            "sample.txt": b"Hello",
        }
    )


@pytest.fixture
def archive_file(tmp_path: Path, archive_bytes: bytes) -> Path:
    """Write archive_bytes to compress.zip on disk."""
    path = tmp_path / "compress.zip"
    path.write_bytes(archive_bytes)
    return path
