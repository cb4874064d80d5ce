import json

import pytest

from core.catalog import CatalogStore, parse_catalog


@pytest.fixture
def catalog_document() -> dict:
    return {
        "countries": [
            {
                "name": "Italy",
                "cities": [
                    {"name": "Rome", "description": "The eternal city.", "imageUrl": "rome.jpg"},
                    {"name": "Milan", "description": "Fashion and finance.", "imageUrl": "milan.jpg"},
                ],
            },
            {
                "name": "Japan",
                "cities": [
                    {"name": "Tokyo", "description": "Neon lights and old temples.", "imageUrl": "tokyo.jpg"},
                ],
            },
            {
                "name": "Brazil",
                "cities": [
                    {"name": "Beachwood", "description": "A quiet town.", "imageUrl": ""},
                ],
            },
        ],
        "temples": [
            {
                "name": "Angkor Wat",
                "description": "The largest religious monument in the country.",
                "imageUrl": "angkor.jpg",
            },
            {"name": "Taj Mahal", "description": "A symbol of love.", "imageUrl": "taj.jpg"},
        ],
        "beaches": [
            {"name": "Copacabana", "description": "Famous stretch of sand in Rio.", "imageUrl": "copa.jpg"},
            {"name": "Bora Bora", "description": "Turquoise lagoon.", "imageUrl": "bora.jpg"},
        ],
    }


@pytest.fixture
def sample_catalog(catalog_document):
    return parse_catalog(catalog_document)


@pytest.fixture
def catalog_file(tmp_path, catalog_document):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_document), encoding="utf-8")
    return path


@pytest.fixture
def loaded_store(catalog_file) -> CatalogStore:
    store = CatalogStore(source=str(catalog_file))
    store.load()
    return store
