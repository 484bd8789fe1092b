from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote pizzahub seja importavel durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pizzahub.core import config as core_config  # noqa: E402

SEED = {
    "pizzahub": [
        {"id": "1", "name": "Downtown", "address": "12 Main Street"},
        {"id": "2", "name": "Riverside", "address": "88 River Road"},
    ],
    "pizzas": [
        {"id": "p1", "shopId": "1", "type": "veg", "name": "Margherita"},
        {"id": "p2", "shopId": "1", "type": "non-veg", "name": "Pepperoni"},
        {"id": "p3", "shopId": "2", "type": "veg", "name": "Funghi"},
    ],
    "beverages": [
        {"id": "b1", "pizzaId": "p1", "name": "Lemonade"},
        {"id": "b2", "pizzaId": "p2", "name": "Cola"},
    ],
    "orders": [
        {"id": "o1", "pizzaId": "p1", "quantity": "2", "status": "placed"},
    ],
}


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Aponta o store JSON para um arquivo temporario com dados de exemplo."""
    path = tmp_path / "db.json"
    path.write_text(json.dumps(SEED, indent=2), encoding="utf-8")
    monkeypatch.setenv("PIZZAHUB_DATA_FILE", str(path))
    monkeypatch.setenv("STORAGE_BACKEND", "json")
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(data_file):
    from fastapi.testclient import TestClient

    from pizzahub.app import create_app

    return TestClient(create_app())


def read_db(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))
