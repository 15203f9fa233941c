import flet as ft

import ui_style as style


def _panel(*, title: str, content: ft.Control, expand=False) -> ft.Control:
    return ft.Container(
        padding=14,
        bgcolor=style.SURFACE,
        border=ft.border.all(1, style.BORDER),
        border_radius=14,
        expand=expand,
        content=ft.Column(
            [
                ft.Text(title, size=13, weight=ft.FontWeight.W_700, color=style.TEXT_MUTED),
                content,
            ],
            spacing=10,
            expand=expand,
        ),
    )


def build_shell(
    *,
    app_title: str,
    sidebar_width: int,
    chat_height: int,
    search_field: ft.Control,
    category_dropdown: ft.Control,
    product_grid: ft.Control,
    show_more_button: ft.Control,
    selection_list: ft.Control,
    generate_button: ft.Control,
    copy_button: ft.Control,
    clear_button: ft.Control,
    chat_tab: ft.Control,
) -> ft.Control:
    browse = ft.Column(
        [
            ft.Text(app_title, size=24, weight=ft.FontWeight.W_700, color=style.TEXT_PRIMARY),
            ft.Row([search_field, category_dropdown], spacing=12),
            ft.Container(content=product_grid, expand=True),
            ft.Row([show_more_button], alignment=ft.MainAxisAlignment.CENTER),
        ],
        expand=True,
        spacing=12,
    )

    sidebar = ft.Container(
        width=sidebar_width,
        content=ft.Column(
            [
                _panel(
                    title="Selected products",
                    content=ft.Column(
                        [
                            selection_list,
                            ft.Row([generate_button, copy_button, clear_button], spacing=8, wrap=True),
                        ],
                        spacing=10,
                    ),
                ),
                ft.Container(
                    height=chat_height,
                    expand=True,
                    content=_panel(title="Chat", content=chat_tab, expand=True),
                ),
            ],
            spacing=12,
            expand=True,
        ),
    )

    return ft.Container(
        expand=True,
        padding=16,
        bgcolor=style.BG,
        content=ft.Row([browse, sidebar], expand=True, spacing=16, vertical_alignment=ft.CrossAxisAlignment.START),
    )
