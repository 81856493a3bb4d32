"""Tests for JsonStoreRepository (loading, validation, reload and caching)."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from loresearch.infrastructure.exceptions import (
    StoreFormatError,
    StoreNotFoundError,
    StoreReadError,
)
from loresearch.infrastructure.persistence.repositories import JsonStoreRepository


async def test_loads_entities_in_document_order(write_store: Callable[..., Path]) -> None:
    path = write_store({"Zed": {"a": "1"}, "Amy": {"b": "2"}, "Max": {"c": {"d": "3"}}})
    store = await JsonStoreRepository(path).get_store()
    assert list(store) == ["Zed", "Amy", "Max"]
    assert store["Max"] == {"c": {"d": "3"}}


async def test_utf8_document(write_store: Callable[..., Path]) -> None:
    path = write_store({"小明": {"description": "勇敢的猫主人"}})
    store = await JsonStoreRepository(path).get_store()
    assert store == {"小明": {"description": "勇敢的猫主人"}}


async def test_missing_file(tmp_path: Path) -> None:
    repo = JsonStoreRepository(tmp_path / "missing.json")
    with pytest.raises(StoreNotFoundError) as exc_info:
        await repo.get_store()
    assert exc_info.value.details["path"].endswith("missing.json")


async def test_path_is_directory(tmp_path: Path) -> None:
    with pytest.raises(StoreReadError):
        await JsonStoreRepository(tmp_path).get_store()


async def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreFormatError, match="Malformed"):
        await JsonStoreRepository(path).get_store()


async def test_deeply_nested_document(tmp_path: Path) -> None:
    depth = 200_000
    path = tmp_path / "deep.json"
    path.write_text('{"a": ' + "[" * depth + "]" * depth + "}", encoding="utf-8")
    with pytest.raises(StoreFormatError) as exc_info:
        await JsonStoreRepository(path).get_store()
    assert "nested too deeply" in exc_info.value.details["reason"]


@pytest.mark.parametrize("document", [[{"a": "b"}], "text", 3, None])
async def test_top_level_must_be_object(
    write_store: Callable[..., Path], document: Any
) -> None:
    path = write_store(document)
    with pytest.raises(StoreFormatError) as exc_info:
        await JsonStoreRepository(path).get_store()
    assert "top-level" in exc_info.value.details["reason"]


async def test_non_object_entities_dropped(write_store: Callable[..., Path]) -> None:
    path = write_store({"Ok": {"a": "b"}, "Text": "c", "List": ["d"], "Null": None})
    store = await JsonStoreRepository(path).get_store()
    assert list(store) == ["Ok"]


async def test_reload_on_request_sees_edits(write_store: Callable[..., Path]) -> None:
    path = write_store({"A": {"x": "1"}})
    repo = JsonStoreRepository(path, reload_on_request=True)
    first = await repo.get_store()
    path.write_text(json.dumps({"B": {"y": "2"}}), encoding="utf-8")
    second = await repo.get_store()
    assert list(first) == ["A"]
    assert list(second) == ["B"]


async def test_cached_until_invalidated(write_store: Callable[..., Path]) -> None:
    path = write_store({"A": {"x": "1"}})
    repo = JsonStoreRepository(path, reload_on_request=False)
    first = await repo.get_store()
    path.write_text(json.dumps({"B": {"y": "2"}}), encoding="utf-8")
    assert await repo.get_store() is first
    repo.invalidate()
    assert list(await repo.get_store()) == ["B"]


async def test_failed_load_is_not_cached(tmp_path: Path) -> None:
    path = tmp_path / "later.json"
    repo = JsonStoreRepository(path, reload_on_request=False)
    with pytest.raises(StoreNotFoundError):
        await repo.get_store()
    path.write_text(json.dumps({"A": {"x": "1"}}), encoding="utf-8")
    assert list(await repo.get_store()) == ["A"]
