"""Tests for the async filesystem wrappers."""

import glob
from pathlib import Path
from unittest.mock import AsyncMock, patch

import orjson
import pytest

from file_kit.fs import (
    copy,
    exists,
    mkdir,
    mkdir_recursive,
    read_file,
    read_json_file,
    read_json_files_from_path,
    read_text_file,
    remove,
    remove_recursive,
    write_json_file,
    write_text_file,
    write_text_file_recursive,
)


class TestExists:
    """Test exists() existence checks."""

    @pytest.mark.asyncio
    async def test_existing_file(self, resources: Path) -> None:
        assert await exists(resources / "sample.txt") is True

    @pytest.mark.asyncio
    async def test_existing_directory(self, resources: Path) -> None:
        assert await exists(resources / "path") is True

    @pytest.mark.asyncio
    async def test_missing_path(self, tmp_path: Path) -> None:
        assert await exists(tmp_path / "missing") is False

    @pytest.mark.asyncio
    async def test_accepts_string_path(self, resources: Path) -> None:
        assert await exists(str(resources / "sample.json")) is True

    @pytest.mark.asyncio
    async def test_permission_error_is_reraised(self, tmp_path: Path) -> None:
        """Errors other than "not found" reach the caller."""
        with (
            patch(
                "aiofiles.os.stat",
                new=AsyncMock(side_effect=PermissionError("denied")),
            ),
            pytest.raises(PermissionError),
        ):
            await exists(tmp_path / "locked")


class TestDirectories:
    """Test mkdir, mkdir_recursive, remove and remove_recursive."""

    @pytest.mark.asyncio
    async def test_mkdir_creates_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "single"
        await mkdir(target)
        assert target.is_dir()

    @pytest.mark.asyncio
    async def test_mkdir_is_not_idempotent(self, tmp_path: Path) -> None:
        target = tmp_path / "single"
        await mkdir(target)
        with pytest.raises(FileExistsError):
            await mkdir(target)

    @pytest.mark.asyncio
    async def test_mkdir_requires_parent(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await mkdir(tmp_path / "missing" / "child")

    @pytest.mark.asyncio
    async def test_mkdir_recursive_creates_parents(
        self, tmp_path: Path
    ) -> None:
        target = tmp_path / "a" / "b" / "c"
        await mkdir_recursive(target)
        assert target.is_dir()

    @pytest.mark.asyncio
    async def test_mkdir_recursive_is_idempotent(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"
        await mkdir_recursive(target)
        await mkdir_recursive(target)
        assert target.is_dir()

    @pytest.mark.asyncio
    async def test_remove_file(self, resources: Path) -> None:
        target = resources / "sample.txt"
        await remove(target)
        assert await exists(target) is False

    @pytest.mark.asyncio
    async def test_remove_empty_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "empty"
        target.mkdir()
        await remove(target)
        assert not target.exists()

    @pytest.mark.asyncio
    async def test_remove_non_empty_directory_fails(
        self, resources: Path
    ) -> None:
        with pytest.raises(OSError):  # noqa: PT011
            await remove(resources / "path")
        assert (resources / "path" / "a.json").exists()

    @pytest.mark.asyncio
    async def test_remove_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await remove(tmp_path / "missing")

    @pytest.mark.asyncio
    async def test_remove_recursive_directory(self, resources: Path) -> None:
        await remove_recursive(resources)
        assert await exists(resources) is False

    @pytest.mark.asyncio
    async def test_remove_recursive_file(self, resources: Path) -> None:
        target = resources / "sample.json"
        await remove_recursive(target)
        assert not target.exists()

    @pytest.mark.asyncio
    async def test_remove_recursive_missing_raises(
        self, tmp_path: Path
    ) -> None:
        with pytest.raises(FileNotFoundError):
            await remove_recursive(tmp_path / "missing")

    @pytest.mark.asyncio
    async def test_remove_recursive_leaves_symlink_target(
        self, resources: Path, tmp_path: Path
    ) -> None:
        """A symlink to a directory is unlinked, not followed."""
        link = tmp_path / "link"
        link.symlink_to(resources / "path", target_is_directory=True)

        await remove_recursive(link)

        assert not link.exists()
        assert (resources / "path" / "a.json").exists()


class TestRead:
    """Test read_file, read_text_file and read_json_file."""

    @pytest.mark.asyncio
    async def test_read_file_returns_bytes(self, resources: Path) -> None:
        assert await read_file(resources / "sample.txt") == b"Hello"

    @pytest.mark.asyncio
    async def test_read_text_file(self, resources: Path) -> None:
        assert await read_text_file(resources / "sample.txt") == "Hello"

    @pytest.mark.asyncio
    async def test_read_text_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await read_text_file(tmp_path / "missing.txt")

    @pytest.mark.asyncio
    async def test_read_json_file(self, resources: Path) -> None:
        obj = await read_json_file(resources / "sample.json")
        assert obj["title"] == "Hello"

    @pytest.mark.asyncio
    async def test_read_json_file_invalid(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(orjson.JSONDecodeError):
            await read_json_file(bad)

    @pytest.mark.asyncio
    async def test_invalid_json_is_a_value_error(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):  # noqa: PT011
            await read_json_file(bad)


class TestReadJsonFilesFromPath:
    """Test glob-based batch JSON loading."""

    @pytest.mark.asyncio
    async def test_reads_all_matches(self, resources: Path) -> None:
        objs = await read_json_files_from_path(f"{resources}/path/*.json")
        assert sorted(obj["title"] for obj in objs) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_follows_filesystem_iteration_order(
        self, resources: Path
    ) -> None:
        pattern = f"{resources}/path/*.json"
        expected = [
            orjson.loads(Path(match).read_bytes())
            for match in glob.glob(pattern)
        ]
        assert await read_json_files_from_path(pattern) == expected

    @pytest.mark.asyncio
    async def test_order_is_reproducible(self, resources: Path) -> None:
        pattern = f"{resources}/path/*.json"
        first = await read_json_files_from_path(pattern)
        second = await read_json_files_from_path(pattern)
        assert first == second

    @pytest.mark.asyncio
    async def test_double_star_matches_nested(self, resources: Path) -> None:
        nested = resources / "path" / "nested"
        nested.mkdir()
        (nested / "c.json").write_bytes(orjson.dumps({"title": "c"}))

        objs = await read_json_files_from_path(
            resources / "path" / "**" / "*.json"
        )

        assert sorted(obj["title"] for obj in objs) == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_no_matches_returns_empty_list(
        self, tmp_path: Path
    ) -> None:
        assert await read_json_files_from_path(f"{tmp_path}/*.json") == []

    @pytest.mark.asyncio
    async def test_parse_failure_propagates(self, resources: Path) -> None:
        (resources / "path" / "broken.json").write_text(
            "[1,", encoding="utf-8"
        )
        with pytest.raises(orjson.JSONDecodeError):
            await read_json_files_from_path(f"{resources}/path/*.json")


class TestWrite:
    """Test write_text_file, write_text_file_recursive, write_json_file."""

    @pytest.mark.asyncio
    async def test_write_then_read_text(self, tmp_path: Path) -> None:
        target = tmp_path / "write.txt"
        await write_text_file(target, "Write")
        assert await read_text_file(target) == "Write"

    @pytest.mark.asyncio
    async def test_write_replaces_contents(self, tmp_path: Path) -> None:
        target = tmp_path / "write.txt"
        target.write_text("a much longer original text", encoding="utf-8")
        await write_text_file(target, "short")
        assert target.read_text(encoding="utf-8") == "short"

    @pytest.mark.asyncio
    async def test_write_without_create_requires_file(
        self, tmp_path: Path
    ) -> None:
        target = tmp_path / "absent.txt"
        with pytest.raises(FileNotFoundError):
            await write_text_file(target, "x", create=False)
        assert not target.exists()

    @pytest.mark.asyncio
    async def test_write_without_create_truncates(
        self, tmp_path: Path
    ) -> None:
        target = tmp_path / "present.txt"
        target.write_text("original contents", encoding="utf-8")
        await write_text_file(target, "new", create=False)
        assert target.read_text(encoding="utf-8") == "new"

    @pytest.mark.asyncio
    async def test_write_does_not_create_parents(
        self, tmp_path: Path
    ) -> None:
        with pytest.raises(FileNotFoundError):
            await write_text_file(tmp_path / "missing" / "f.txt", "x")

    @pytest.mark.asyncio
    async def test_write_recursive_creates_file(self, tmp_path: Path) -> None:
        target = tmp_path / "created.txt"
        await write_text_file_recursive(target, "Write")
        assert target.read_text(encoding="utf-8") == "Write"

    @pytest.mark.asyncio
    async def test_write_recursive_does_not_create_parents(
        self, tmp_path: Path
    ) -> None:
        with pytest.raises(FileNotFoundError):
            await write_text_file_recursive(
                tmp_path / "missing" / "f.txt", "x"
            )

    @pytest.mark.asyncio
    async def test_write_then_read_json(self, tmp_path: Path) -> None:
        target = tmp_path / "write.json"
        await write_json_file(target, {"title": "Write"})
        obj = await read_json_file(target)
        assert obj["title"] == "Write"

    @pytest.mark.asyncio
    async def test_write_json_is_compact(self, tmp_path: Path) -> None:
        target = tmp_path / "write.json"
        await write_json_file(target, {"title": "Write", "n": [1, 2]})
        assert target.read_text(encoding="utf-8") == (
            '{"title":"Write","n":[1,2]}'
        )

    @pytest.mark.asyncio
    async def test_write_json_pretty(self, tmp_path: Path) -> None:
        target = tmp_path / "pretty.json"
        await write_json_file(target, {"title": "Write"}, pretty=True)
        assert target.read_text(encoding="utf-8") == (
            '{\n  "title": "Write"\n}'
        )

    @pytest.mark.asyncio
    async def test_write_json_rejects_unserializable(
        self, tmp_path: Path
    ) -> None:
        with pytest.raises(TypeError):
            await write_json_file(tmp_path / "x.json", {"bad": object()})


class TestCopy:
    """Test copy() for files and directory trees."""

    @pytest.mark.asyncio
    async def test_copy_directory(self, resources: Path) -> None:
        destination = resources / "copy"
        await copy(resources / "path", destination)

        source_objs = await read_json_files_from_path(
            f"{resources}/path/*.json"
        )
        copied_objs = await read_json_files_from_path(
            f"{destination}/*.json"
        )
        assert sorted(o["title"] for o in copied_objs) == sorted(
            o["title"] for o in source_objs
        )

    @pytest.mark.asyncio
    async def test_copy_file(self, resources: Path, tmp_path: Path) -> None:
        destination = tmp_path / "copied.txt"
        await copy(resources / "sample.txt", destination)
        assert destination.read_text(encoding="utf-8") == "Hello"

    @pytest.mark.asyncio
    async def test_copy_directory_onto_existing_fails(
        self, resources: Path, tmp_path: Path
    ) -> None:
        destination = tmp_path / "exists"
        destination.mkdir()
        with pytest.raises(FileExistsError):
            await copy(resources / "path", destination)

    @pytest.mark.asyncio
    async def test_copy_file_onto_existing_fails(
        self, resources: Path
    ) -> None:
        with pytest.raises(FileExistsError):
            await copy(resources / "sample.txt", resources / "sample.json")
        assert (resources / "sample.json").read_bytes() == orjson.dumps(
            {"title": "Hello"}
        )

    @pytest.mark.asyncio
    async def test_copy_missing_source(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await copy(tmp_path / "missing", tmp_path / "dest")
