from __future__ import annotations

from typing import Protocol

import structlog

import view_models as vm
from chat_controller import ConversationController
from ui_catalog import CatalogStore
from ui_pager import PagerController
from ui_prefs_io import SelectionStore
from ui_selection import SelectionModel
from ui_transcript import Transcript
from worker_client import WorkerClient

logger = structlog.get_logger()


class Renderer(Protocol):
    def render_grid(self, view: vm.GridView) -> None: ...

    def render_selection(self, view: vm.SelectionView) -> None: ...

    def render_chat(self, view: vm.ChatView) -> None: ...

    def render_controls(self, view: vm.ControlsView) -> None: ...

    def clear_input(self) -> None: ...


class Session:
    """All mutable state of one app run, plus the event entry points."""

    def __init__(
        self,
        *,
        renderer: Renderer,
        catalog: CatalogStore,
        store: SelectionStore,
        client: WorkerClient,
        page_size: int = 9,
        context_turns: int = 12,
    ) -> None:
        self.renderer = renderer
        self.catalog = catalog
        self.store = store
        self.selection = SelectionModel(store)
        self.pager = PagerController(page_size=page_size)
        self.transcript = Transcript()
        self.conversation = ConversationController(
            catalog=catalog,
            selection=self.selection,
            transcript=self.transcript,
            client=client,
            context_turns=context_turns,
            render_chat=self.render_chat,
            render_controls=self.render_controls,
            clear_input=renderer.clear_input,
        )
        self.selection.subscribe(self._on_selection_changed)

    async def start(self) -> None:
        await self.catalog.load()
        stored = self.store.load()
        if self.catalog.load_failed:
            self.selection.replace(stored)
        else:
            live = [i for i in stored if self.catalog.get(i) is not None]
            self.selection.replace(live)
            if live != stored:
                logger.info("selection_pruned", dropped=len(stored) - len(live))
                self.selection.persist()
        self.render_all()
        self.conversation.greet()

    # rendering

    def render_grid(self) -> None:
        self.renderer.render_grid(vm.project_grid(self.catalog, self.pager, self.selection))

    def render_selection(self) -> None:
        self.renderer.render_selection(vm.project_selection(self.catalog, self.selection))

    def render_chat(self) -> None:
        self.renderer.render_chat(vm.project_chat(self.transcript))

    def render_controls(self) -> None:
        self.renderer.render_controls(
            vm.project_controls(self.conversation.mode, self.conversation.last_routine)
        )

    def render_all(self) -> None:
        self.render_grid()
        self.render_selection()
        self.render_chat()
        self.render_controls()

    def _on_selection_changed(self) -> None:
        self.render_grid()
        self.render_selection()

    # events

    def on_search(self, text: str) -> None:
        self.pager.set_query(text)
        self.render_grid()

    def on_category(self, value: str | None) -> None:
        self.pager.set_category(value)
        self.render_grid()

    def on_show_more(self) -> None:
        self.pager.show_more()
        self.render_grid()

    def on_toggle_product(self, product_id: int) -> None:
        self.selection.toggle(product_id)

    def on_toggle_details(self, product_id: int) -> None:
        self.pager.toggle_expanded(product_id)
        self.render_grid()

    def on_remove_chip(self, product_id: int) -> None:
        self.selection.remove(product_id)

    def on_clear_all(self) -> None:
        self.selection.clear()

    async def on_generate(self) -> None:
        await self.conversation.generate_routine()

    async def on_chat(self, text: str) -> None:
        await self.conversation.send_chat(text)

    def copy_routine(self) -> str | None:
        return self.conversation.copy_routine()
