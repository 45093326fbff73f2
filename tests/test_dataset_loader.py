import json
import logging
import os
from pathlib import Path

import pytest

from cardcatalog.config import Settings
from cardcatalog.models.catalog import Empty, Ready
from cardcatalog.models.errors import DatasetParseError, SourceUnavailableError
from cardcatalog.services.catalog_store import CatalogStore
from cardcatalog.services.dataset_loader import (
    http_date,
    load_cards,
    load_sets,
    read_records,
    reload_catalog,
)


class TestReadRecords:
    def test_returns_records_in_source_order(self, data_dir: Path, sample_cards: list[dict]) -> None:
        records = read_records(data_dir / "cards.json")

        assert records == sample_cards

    def test_file_not_found_raises(self, tmp_path: Path) -> None:
        """Missing file raises SourceUnavailableError."""
        with pytest.raises(SourceUnavailableError):
            read_records(tmp_path / "nonexistent.json")

    def test_malformed_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "corrupted.json"
        path.write_text("{ invalid json }", encoding="utf-8")

        with pytest.raises(DatasetParseError, match="Malformed JSON"):
            read_records(path)

    def test_non_array_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"id": "A1-001"}), encoding="utf-8")

        with pytest.raises(DatasetParseError, match="Expected a JSON array"):
            read_records(path)

    def test_non_object_record_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "mixed.json"
        path.write_text(json.dumps([{"id": "A1-001"}, "A1-002"]), encoding="utf-8")

        with pytest.raises(DatasetParseError, match="Record 1"):
            read_records(path)

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"id":"A1-001","name":"\xff\xfe"}]')

        with pytest.raises(DatasetParseError, match="Malformed JSON"):
            read_records(path)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_constants_raise(self, tmp_path: Path, constant: str) -> None:
        path = tmp_path / "prices.json"
        path.write_text(f'[{{"id": "A1-001", "price": {constant}}}]', encoding="utf-8")

        with pytest.raises(DatasetParseError, match=constant):
            read_records(path)

    def test_deeply_nested_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "nested.json"
        path.write_text("[" * 100_000 + "]" * 100_000, encoding="utf-8")

        with pytest.raises(DatasetParseError):
            read_records(path)

    def test_empty_array_is_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")

        assert read_records(path) == []


class TestHttpDate:
    def test_formats_epoch(self) -> None:
        assert http_date(0) == "Thu, 01 Jan 1970 00:00:00 GMT"

    def test_formats_known_timestamp(self) -> None:
        assert http_date(1_700_000_000) == "Tue, 14 Nov 2023 22:13:20 GMT"


class TestLoadCards:
    async def test_success_populates_store(
        self, store: CatalogStore, data_dir: Path, sample_cards: list[dict]
    ) -> None:
        assert await load_cards(store, data_dir / "cards.json") is True

        slot = store.cards
        assert isinstance(slot, Ready)
        assert list(slot.dataset.cards) == sample_cards

    async def test_marker_matches_source_mtime(self, store: CatalogStore, data_dir: Path) -> None:
        path = data_dir / "cards.json"
        os.utime(path, (1_700_000_000, 1_700_000_000))

        await load_cards(store, path)

        assert store.cards.dataset.last_modified == "Tue, 14 Nov 2023 22:13:20 GMT"

    async def test_missing_file_returns_false(self, store: CatalogStore, tmp_path: Path) -> None:
        assert await load_cards(store, tmp_path / "missing.json") is False
        assert isinstance(store.cards, Empty)

    async def test_failure_keeps_previous_dataset(
        self, store: CatalogStore, data_dir: Path, sample_cards: list[dict]
    ) -> None:
        path = data_dir / "cards.json"
        await load_cards(store, path)
        previous = store.cards

        path.write_text("not json", encoding="utf-8")
        assert await load_cards(store, path) is False

        assert store.cards is previous
        assert list(store.cards.dataset.cards) == sample_cards

    @pytest.mark.parametrize(
        "content",
        [b'[{"id":"A1-001","name":"\xff\xfe"}]', b'[{"id":"A1-001","price":NaN}]'],
    )
    async def test_undecodable_source_keeps_previous_dataset(
        self, store: CatalogStore, data_dir: Path, sample_cards: list[dict], content: bytes
    ) -> None:
        path = data_dir / "cards.json"
        await load_cards(store, path)

        path.write_bytes(content)
        assert await load_cards(store, path) is False

        assert list(store.cards.dataset.cards) == sample_cards

    async def test_success_logs_count(
        self, store: CatalogStore, data_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="cardcatalog.services.dataset_loader"):
            await load_cards(store, data_dir / "cards.json")

        assert "Loaded 3 cards" in caplog.text

    async def test_failure_logs_error(
        self, store: CatalogStore, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="cardcatalog.services.dataset_loader"):
            await load_cards(store, tmp_path / "missing.json")

        assert "Failed to load cards" in caplog.text


class TestLoadSets:
    async def test_success_populates_store(
        self, store: CatalogStore, data_dir: Path, sample_sets: list[dict]
    ) -> None:
        assert await load_sets(store, data_dir / "sets.json") is True
        assert list(store.sets.dataset.sets) == sample_sets

    async def test_malformed_file_returns_false(self, store: CatalogStore, tmp_path: Path) -> None:
        path = tmp_path / "sets.json"
        path.write_text("[{", encoding="utf-8")

        assert await load_sets(store, path) is False
        assert isinstance(store.sets, Empty)


class TestReloadCatalog:
    async def test_reloads_both(self, store: CatalogStore, test_settings: Settings) -> None:
        result = await reload_catalog(store, test_settings)

        assert result.succeeded
        assert isinstance(store.cards, Ready)
        assert isinstance(store.sets, Ready)

    async def test_sets_still_load_when_cards_fail(
        self, store: CatalogStore, test_settings: Settings
    ) -> None:
        test_settings.cards_path.unlink()

        result = await reload_catalog(store, test_settings)

        assert not result.succeeded
        assert result.cards_loaded is False
        assert result.sets_loaded is True
        assert isinstance(store.sets, Ready)
