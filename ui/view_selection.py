import flet as ft

import ui_style as style
from view_models import SelectionView


def build_selection_controls(*, view: SelectionView, on_remove) -> list[ft.Control]:
    if view.placeholder:
        return [ft.Text(view.placeholder, size=12, color=style.TEXT_MUTED)]
    return [
        ft.Container(
            data=chip.id,
            padding=ft.padding.symmetric(horizontal=10, vertical=6),
            bgcolor=style.SURFACE,
            border=ft.border.all(1, style.BORDER),
            border_radius=999,
            content=ft.Row(
                [
                    ft.Image(src=chip.image, width=28, height=28, fit=ft.ImageFit.CONTAIN),
                    ft.Column(
                        [
                            ft.Text(chip.name, size=12, weight=ft.FontWeight.W_600, color=style.TEXT_PRIMARY),
                            ft.Text(chip.brand, size=11, color=style.TEXT_MUTED),
                        ],
                        spacing=0,
                        tight=True,
                    ),
                    ft.IconButton(
                        icon=ft.Icons.CLOSE,
                        icon_size=16,
                        tooltip=f"Remove {chip.name}",
                        data=chip.id,
                        on_click=on_remove,
                    ),
                ],
                spacing=8,
                tight=True,
            ),
        )
        for chip in view.chips
    ]
