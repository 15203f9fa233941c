"""End-to-end tests of the session wiring (ui/ui_session.py) with a recording renderer."""

import asyncio
import json

import ui_prompt as prompts
from conftest import FakeClient, make_product
from ui_catalog import CatalogStore
from ui_prefs_io import SelectionStore
from ui_session import Session
from view_models import LOAD_FAILED_MESSAGE, NO_MATCHES_MESSAGE, NO_SELECTION_MESSAGE


def _session(tmp_path, renderer, records, client=None, stored=None):
    catalog_path = tmp_path / "products.json"
    if records is not None:
        catalog_path.write_text(json.dumps({"products": records}), encoding="utf-8")
    store = SelectionStore(tmp_path / "data" / "selection.json")
    if stored is not None:
        store.save(stored)
    session = Session(
        renderer=renderer,
        catalog=CatalogStore(catalog_path),
        store=store,
        client=client or FakeClient(),
    )
    asyncio.run(session.start())
    return session


class TestStart:
    def test_initial_render_and_greeting(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products)
        assert len(renderer.grids[-1].cards) == 9
        assert renderer.grids[-1].show_more_visible is True
        assert renderer.selections[-1].chips == []
        assert renderer.controls[-1].copy_enabled is False
        assert [b.content for b in renderer.chats[-1].bubbles] == [prompts.GREETING]
        assert session.selection.ids == []

    def test_restores_persisted_selection(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products, stored=[3, 1])
        assert session.selection.ids == [3, 1]
        assert [c.id for c in renderer.selections[-1].chips] == [3, 1]
        assert {c.id for c in renderer.grids[-1].cards if c.selected} == {1, 3}

    def test_prunes_stale_ids_and_writes_back(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products, stored=[3, 404, 1])
        assert session.selection.ids == [3, 1]
        assert session.store.load() == [3, 1]

    def test_load_failure_shows_placeholder_and_keeps_storage(self, tmp_path, renderer):
        session = _session(tmp_path, renderer, None, stored=[3])
        grid = renderer.grids[-1]
        assert grid.placeholder == LOAD_FAILED_MESSAGE
        assert grid.show_more_visible is False
        assert session.store.load() == [3]
        assert renderer.selections[-1].chips == []
        assert renderer.selections[-1].placeholder == NO_SELECTION_MESSAGE


class TestDualInvalidation:
    def test_toggle_rerenders_grid_and_selection(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products)
        grids, selections = len(renderer.grids), len(renderer.selections)

        session.on_toggle_product(2)

        assert len(renderer.grids) == grids + 1
        assert len(renderer.selections) == selections + 1
        assert [c.id for c in renderer.grids[-1].cards if c.selected] == [2]
        assert [c.id for c in renderer.selections[-1].chips] == [2]

    def test_remove_chip_rerenders_both(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products, stored=[2])
        grids, selections = len(renderer.grids), len(renderer.selections)

        session.on_remove_chip(2)

        assert len(renderer.grids) == grids + 1
        assert len(renderer.selections) == selections + 1
        assert not any(c.selected for c in renderer.grids[-1].cards)
        assert renderer.selections[-1].placeholder is not None

    def test_clear_all_rerenders_both_and_persists(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products, stored=[1, 2, 3])
        grids, selections = len(renderer.grids), len(renderer.selections)

        session.on_clear_all()

        assert len(renderer.grids) == grids + 1
        assert len(renderer.selections) == selections + 1
        assert session.store.load() == []

    def test_select_a_then_b_then_remove_a(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products)
        session.on_toggle_product(4)
        session.on_toggle_product(7)
        session.on_remove_chip(4)
        assert [c.id for c in renderer.selections[-1].chips] == [7]
        assert session.store.load() == [7]


class TestBrowsing:
    def test_show_more_scenario(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products)
        session.on_show_more()
        assert len(renderer.grids[-1].cards) == 18
        assert renderer.grids[-1].show_more_visible is True
        session.on_show_more()
        assert len(renderer.grids[-1].cards) == 20
        assert renderer.grids[-1].show_more_visible is False

    def test_search_resets_cursor(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products)
        session.on_show_more()
        session.on_search("product 1")
        assert session.pager.reveal_count == 9
        # "Product 1" and "Product 10".."Product 19"
        assert renderer.grids[-1].total == 11
        assert len(renderer.grids[-1].cards) == 9

    def test_category_with_no_matches(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products)
        session.on_category("fragrance")
        assert renderer.grids[-1].placeholder == NO_MATCHES_MESSAGE
        assert renderer.grids[-1].show_more_visible is False

    def test_expanded_details_survive_selection_changes(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products)
        session.on_toggle_details(5)
        session.on_toggle_product(1)
        expanded = [c.id for c in renderer.grids[-1].cards if c.expanded]
        assert expanded == [5]


class TestConversation:
    def test_generate_then_copy(self, tmp_path, renderer, twenty_products):
        client = FakeClient("Step 1: cleanse")
        session = _session(tmp_path, renderer, twenty_products, client=client, stored=[1])
        asyncio.run(session.on_generate())

        assert renderer.controls[-1].copy_enabled is True
        assert renderer.controls[-1].generate_enabled is True
        assert any(not c.generate_enabled for c in renderer.controls)
        assert renderer.chats[-1].bubbles[-1].content == "Step 1: cleanse"
        assert session.copy_routine() == "Step 1: cleanse"

    def test_generate_with_empty_selection(self, tmp_path, renderer, twenty_products):
        client = FakeClient()
        session = _session(tmp_path, renderer, twenty_products, client=client)
        asyncio.run(session.on_generate())
        assert client.calls == []
        assert [b.content for b in renderer.chats[-1].bubbles] == [prompts.GREETING, prompts.EMPTY_SELECTION_MESSAGE]

    def test_chat_clears_input(self, tmp_path, renderer, twenty_products):
        session = _session(tmp_path, renderer, twenty_products, client=FakeClient("reply"))
        asyncio.run(session.on_chat("hello"))
        assert renderer.cleared == 1
        assert [b.role for b in renderer.chats[-1].bubbles] == ["assistant", "user", "assistant"]
