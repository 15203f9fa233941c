import flet as ft

import ui_style as style
from view_models import CardView, GridView


def _placeholder(message: str) -> ft.Control:
    return ft.Container(
        padding=24,
        alignment=ft.alignment.center,
        content=ft.Text(message, size=14, color=style.TEXT_MUTED),
    )


def build_product_card(*, card: CardView, on_toggle, on_details) -> ft.Control:
    details_button = ft.TextButton(
        "Hide details" if card.expanded else "Details",
        data=card.id,
        on_click=on_details,
    )
    body = [
        ft.Text(card.name, size=14, weight=ft.FontWeight.W_700, color=style.TEXT_PRIMARY),
        ft.Text(card.brand, size=12, color=style.TEXT_MUTED),
        ft.Row([details_button], spacing=0),
    ]
    if card.expanded:
        body.append(ft.Text(card.description, size=12, color=style.TEXT_PRIMARY, selectable=True))

    badge = ft.Icon(ft.Icons.CHECK_CIRCLE, color=style.ACCENT, size=20) if card.selected else ft.Container(width=20)

    return ft.Container(
        data=card.id,
        width=220,
        padding=12,
        bgcolor=style.ACCENT_SOFT if card.selected else style.SURFACE,
        border=ft.border.all(2 if card.selected else 1, style.card_border(card.selected)),
        border_radius=12,
        ink=True,
        on_click=on_toggle,
        tooltip="Deselect" if card.selected else "Select",
        content=ft.Column(
            [
                ft.Row(
                    [
                        ft.Image(src=card.image, width=96, height=96, fit=ft.ImageFit.CONTAIN),
                        badge,
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    vertical_alignment=ft.CrossAxisAlignment.START,
                ),
                *body,
            ],
            spacing=4,
        ),
    )


def build_grid_controls(*, view: GridView, on_toggle, on_details) -> list[ft.Control]:
    if view.placeholder:
        return [_placeholder(view.placeholder)]
    return [build_product_card(card=c, on_toggle=on_toggle, on_details=on_details) for c in view.cards]
