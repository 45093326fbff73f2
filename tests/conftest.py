import json
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from cardcatalog.config import Settings, get_settings
from cardcatalog.main import app
from cardcatalog.services.catalog_store import CatalogStore, get_catalog_store
from cardcatalog.services.dataset_loader import reload_catalog


@pytest.fixture
def sample_cards() -> list[dict]:
    """Sample card records spanning two sets."""
    return [
        {"id": "A1-001", "name": "Foo"},
        {"id": "A1-002", "name": "Bar"},
        {"id": "B2-001", "name": "Baz"},
    ]


@pytest.fixture
def sample_sets() -> list[dict]:
    """Sample set records."""
    return [
        {"id": "A1", "name": "Alpha", "image": "aW1hZ2U="},
        {"id": "B2", "name": "Beta", "image": "aW1hZ2Uy"},
    ]


@pytest.fixture
def data_dir(tmp_path: Path, sample_cards: list[dict], sample_sets: list[dict]) -> Path:
    """Directory holding cards.json and sets.json."""
    (tmp_path / "cards.json").write_text(json.dumps(sample_cards), encoding="utf-8")
    (tmp_path / "sets.json").write_text(json.dumps(sample_sets), encoding="utf-8")
    return tmp_path


@pytest.fixture
def test_settings(data_dir: Path) -> Settings:
    return Settings(data_dir=data_dir)


@pytest.fixture
def store() -> CatalogStore:
    """A fresh, empty store."""
    return CatalogStore()


@pytest.fixture
async def loaded_store(store: CatalogStore, test_settings: Settings) -> CatalogStore:
    """A store populated from the sample sources."""
    result = await reload_catalog(store, test_settings)
    assert result.succeeded
    return store


@pytest.fixture
async def client(store: CatalogStore, test_settings: Settings):
    """Provide an async test client bound to an isolated store and settings."""
    app.dependency_overrides[get_catalog_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def loaded_client(loaded_store: CatalogStore, client: AsyncClient) -> AsyncClient:
    """Test client whose store already holds the sample catalog."""
    return client
