from __future__ import annotations

import asyncio
import json

import pytest

from schemas import Product
from ui_catalog import CatalogStore


def make_product(pid: int, **overrides) -> dict:
    data = {
        "id": pid,
        "name": f"Product {pid}",
        "brand": "Acme",
        "category": "skincare",
        "description": f"Description of product {pid}",
        "image": f"img/{pid}.png",
    }
    data.update(overrides)
    return data


def load_catalog(tmp_path, records: list[dict]) -> CatalogStore:
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": records}), encoding="utf-8")
    store = CatalogStore(path)
    asyncio.run(store.load())
    return store


class RecordingRenderer:
    """Keeps every view model it was asked to draw."""

    def __init__(self) -> None:
        self.grids = []
        self.selections = []
        self.chats = []
        self.controls = []
        self.cleared = 0

    def render_grid(self, view) -> None:
        self.grids.append(view)

    def render_selection(self, view) -> None:
        self.selections.append(view)

    def render_chat(self, view) -> None:
        self.chats.append(view)

    def render_controls(self, view) -> None:
        self.controls.append(view)

    def clear_input(self) -> None:
        self.cleared += 1


class FakeClient:
    """Stands in for WorkerClient. Each queued item is a reply or an exception."""

    def __init__(self, *replies) -> None:
        self.replies = list(replies)
        self.calls: list[list] = []

    async def send(self, messages):
        self.calls.append(list(messages))
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            return await reply()
        return reply


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def twenty_products() -> list[dict]:
    return [make_product(i) for i in range(1, 21)]


@pytest.fixture
def sample_products() -> list[Product]:
    return [
        Product(id=1, name="Hydra Serum", brand="Lumen", category="skincare", description="Hyaluronic boost"),
        Product(id=2, name="Gentle Cleanser", brand="Pure", category="cleanser", description="Foaming wash"),
        Product(id=3, name="Night Cream", brand="Lumen", category="skincare", description="Retinol repair"),
        Product(id=4, name="Volume Shampoo", brand="Mane", category="haircare", description="Adds body"),
    ]
