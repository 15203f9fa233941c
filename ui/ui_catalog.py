from __future__ import annotations

import asyncio
import json
from pathlib import Path

import requests
import structlog

from schemas import CatalogDocument, Product

logger = structlog.get_logger()


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def read_catalog_document(source: str | Path, timeout_s: float = 10.0) -> CatalogDocument:
    """Read `{"products": [...]}` from a local file or an http(s) URL."""
    src = str(source)
    if _is_url(src):
        resp = requests.get(src, timeout=timeout_s)
        resp.raise_for_status()
        data = resp.json()
    else:
        data = json.loads(Path(src).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("catalog document must be a JSON object")
    return CatalogDocument.model_validate(data)


def filter_products(products: list[Product], category: str | None, query: str | None) -> list[Product]:
    category = category or ""
    needle = (query or "").strip().lower()
    out: list[Product] = []
    for p in products:
        if category and p.category != category:
            continue
        if needle:
            hay = f"{p.name} {p.brand} {p.description}".lower()
            if needle not in hay:
                continue
        out.append(p)
    return out


class CatalogStore:
    def __init__(self, source: str | Path, timeout_s: float = 10.0) -> None:
        self.source = source
        self.timeout_s = timeout_s
        self.products: list[Product] = []
        self.load_failed = False
        self._by_id: dict[int, Product] = {}

    async def load(self) -> list[Product]:
        try:
            doc = await asyncio.to_thread(read_catalog_document, self.source, self.timeout_s)
        except (OSError, ValueError, requests.RequestException) as exc:
            logger.error("catalog_load_failed", source=str(self.source), error=str(exc))
            self.products = []
            self._by_id = {}
            self.load_failed = True
            return self.products

        self.products = list(doc.products)
        self._by_id = {p.id: p for p in self.products}
        self.load_failed = False
        logger.info("catalog_loaded", source=str(self.source), count=len(self.products))
        return self.products

    def get(self, product_id: int) -> Product | None:
        return self._by_id.get(product_id)

    def resolve(self, ids) -> list[Product]:
        return [p for p in (self._by_id.get(i) for i in ids) if p is not None]

    def categories(self) -> list[str]:
        seen: list[str] = []
        for p in self.products:
            if p.category and p.category not in seen:
                seen.append(p.category)
        return seen

    def filter(self, category: str | None, query: str | None) -> list[Product]:
        return filter_products(self.products, category, query)
