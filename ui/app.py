#!/usr/bin/env python3
import flet as ft
import structlog

import ui_config as cfg
import ui_logging
import ui_shell
import ui_style as style
import view_catalog
import view_chat
import view_selection
from ui_catalog import CatalogStore
from ui_flet import Debouncer, safe_update
from ui_prefs_io import SelectionStore
from ui_session import Session
from view_models import ChatView, ControlsView, GridView, SelectionView
from worker_client import WorkerClient

logger = structlog.get_logger()

ALL_CATEGORIES = "All categories"


class FletRenderer:
    """Draws view models into the flet controls owned by `main`."""

    def __init__(self, *, grid_row, show_more_button, selection_list, chat_list, input_field,
                 generate_button, generate_label, generate_spinner, copy_button,
                 on_toggle, on_details, on_remove) -> None:
        self.grid_row = grid_row
        self.show_more_button = show_more_button
        self.selection_list = selection_list
        self.chat_list = chat_list
        self.input_field = input_field
        self.generate_button = generate_button
        self.generate_label = generate_label
        self.generate_spinner = generate_spinner
        self.copy_button = copy_button
        self._on_toggle = on_toggle
        self._on_details = on_details
        self._on_remove = on_remove

    def render_grid(self, view: GridView) -> None:
        self.grid_row.controls = view_catalog.build_grid_controls(
            view=view, on_toggle=self._on_toggle, on_details=self._on_details
        )
        self.show_more_button.visible = view.show_more_visible
        safe_update(self.grid_row)
        safe_update(self.show_more_button)

    def render_selection(self, view: SelectionView) -> None:
        self.selection_list.controls = view_selection.build_selection_controls(view=view, on_remove=self._on_remove)
        safe_update(self.selection_list)

    def render_chat(self, view: ChatView) -> None:
        self.chat_list.controls = view_chat.build_chat_bubbles(view)
        self.chat_list.auto_scroll = view.scroll_to_end
        safe_update(self.chat_list)

    def render_controls(self, view: ControlsView) -> None:
        self.generate_button.disabled = not view.generate_enabled
        self.generate_label.value = view.generate_label
        self.generate_spinner.visible = view.spinner_visible
        self.copy_button.disabled = not view.copy_enabled
        safe_update(self.generate_button)
        safe_update(self.copy_button)

    def clear_input(self) -> None:
        self.input_field.value = ""
        safe_update(self.input_field)


async def main(page: ft.Page):
    ui_logging.configure_logging()

    page.title = cfg.APP_TITLE
    page.bgcolor = style.BG
    page.padding = 0
    page.theme_mode = ft.ThemeMode.LIGHT

    session: Session | None = None

    def show_snack(message, color=style.ACCENT):
        page.open(ft.SnackBar(ft.Text(message, color=style.SURFACE), bgcolor=color))

    # handlers (async so every state change runs on the event loop)

    async def on_toggle(e):
        session.on_toggle_product(int(e.control.data))

    async def on_details(e):
        session.on_toggle_details(int(e.control.data))

    async def on_remove(e):
        session.on_remove_chip(int(e.control.data))

    search_debounce = Debouncer(lambda value: session.on_search(value), cfg.SEARCH_DEBOUNCE_MS)

    async def on_search_change(e):
        search_debounce(e.control.value or "")

    async def on_category_change(e):
        value = e.control.value or ""
        session.on_category("" if value == ALL_CATEGORIES else value)

    async def on_show_more(_):
        session.on_show_more()

    async def on_generate(_):
        await session.on_generate()

    async def on_send(_):
        await session.on_chat(input_field.value or "")

    async def on_copy(_):
        text_to_copy = session.copy_routine()
        if not text_to_copy:
            show_snack("No generated routine available to copy.", style.WARNING)
            return
        try:
            page.set_clipboard(text_to_copy)
        except Exception as exc:
            logger.warning("clipboard_copy_failed", error=str(exc))
            show_snack("Could not copy to clipboard. You can select the routine text and copy manually.", style.DANGER)
            return
        show_snack("Routine copied to clipboard.", style.SUCCESS)

    def confirm_clear_all(_):
        def close_dialog(_=None):
            page.close(dlg)

        def do_clear(_=None):
            close_dialog()
            session.on_clear_all()

        dlg = ft.AlertDialog(
            modal=True,
            title=ft.Text("Clear selection"),
            content=ft.Text("Clear all selected products?"),
            actions=[
                ft.TextButton("Cancel", on_click=close_dialog),
                ft.ElevatedButton(
                    "Clear",
                    on_click=do_clear,
                    style=ft.ButtonStyle(bgcolor=style.DANGER, color=style.SURFACE),
                ),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        page.open(dlg)

    # controls

    search_field = ft.TextField(
        hint_text="Search products",
        prefix_icon=ft.Icons.SEARCH,
        expand=True,
        on_change=on_search_change,
    )
    category_dropdown = ft.Dropdown(
        value=ALL_CATEGORIES,
        options=[ft.dropdown.Option(ALL_CATEGORIES)],
        width=220,
        on_change=on_category_change,
    )
    grid_row = ft.Row(wrap=True, spacing=12, run_spacing=12)
    product_grid = ft.Column([grid_row], scroll=ft.ScrollMode.AUTO, expand=True)
    show_more_button = ft.OutlinedButton("Show more", visible=False, on_click=on_show_more)

    selection_list = ft.Row(wrap=True, spacing=8, run_spacing=8)
    generate_label = ft.Text("Generate Routine")
    generate_spinner = ft.ProgressRing(width=14, height=14, stroke_width=2, visible=False)
    generate_button = ft.ElevatedButton(
        content=ft.Row([generate_spinner, generate_label], spacing=8, tight=True),
        on_click=on_generate,
        style=ft.ButtonStyle(bgcolor=style.ACCENT, color=style.SURFACE),
    )
    copy_button = ft.OutlinedButton("Copy routine", icon=ft.Icons.COPY, disabled=True, on_click=on_copy)
    clear_button = ft.TextButton("Clear all", icon=ft.Icons.DELETE_OUTLINE, on_click=confirm_clear_all)

    chat_list = ft.ListView(expand=True, spacing=10, padding=4, auto_scroll=True)
    input_field = ft.TextField(
        hint_text="Ask a follow-up question",
        expand=True,
        shift_enter=True,
        on_submit=on_send,
    )
    send_button = ft.IconButton(icon=ft.Icons.SEND, tooltip="Send", on_click=on_send)
    chat_tab = view_chat.build_chat_tab(
        chat_scroller=chat_list,
        composer=ft.Row([input_field, send_button], spacing=8),
    )

    renderer = FletRenderer(
        grid_row=grid_row,
        show_more_button=show_more_button,
        selection_list=selection_list,
        chat_list=chat_list,
        input_field=input_field,
        generate_button=generate_button,
        generate_label=generate_label,
        generate_spinner=generate_spinner,
        copy_button=copy_button,
        on_toggle=on_toggle,
        on_details=on_details,
        on_remove=on_remove,
    )
    session = Session(
        renderer=renderer,
        catalog=CatalogStore(cfg.CATALOG_SOURCE, timeout_s=cfg.CATALOG_TIMEOUT_S),
        store=SelectionStore(cfg.SELECTION_FILE, key=cfg.SELECTION_KEY),
        client=WorkerClient(cfg.WORKER_URL, timeout_s=cfg.WORKER_TIMEOUT_S),
        page_size=cfg.PAGE_SIZE,
        context_turns=cfg.CHAT_CONTEXT_TURNS,
    )

    page.add(
        ui_shell.build_shell(
            app_title=cfg.APP_TITLE,
            sidebar_width=cfg.SIDEBAR_WIDTH,
            chat_height=cfg.CHAT_HEIGHT,
            search_field=search_field,
            category_dropdown=category_dropdown,
            product_grid=product_grid,
            show_more_button=show_more_button,
            selection_list=selection_list,
            generate_button=generate_button,
            copy_button=copy_button,
            clear_button=clear_button,
            chat_tab=chat_tab,
        )
    )

    await session.start()

    category_dropdown.options = [ft.dropdown.Option(ALL_CATEGORIES)] + [
        ft.dropdown.Option(c) for c in session.catalog.categories()
    ]
    category_dropdown.update()
    logger.info("app_started", products=len(session.catalog.products), selected=len(session.selection))


def run() -> None:
    ft.app(target=main)


if __name__ == "__main__":
    run()
