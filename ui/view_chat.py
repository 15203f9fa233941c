import flet as ft

import ui_style as style
from view_models import ChatView


def build_chat_tab(*, chat_scroller: ft.Control, composer: ft.Control) -> ft.Control:
    return ft.Column(
        [
            ft.Container(content=chat_scroller, expand=True),
            composer,
        ],
        expand=True,
        spacing=8,
    )


def build_chat_bubbles(view: ChatView) -> list[ft.Control]:
    out: list[ft.Control] = []
    for bubble in view.bubbles:
        is_user = bubble.role == "user"
        if bubble.transient:
            body = ft.Row(
                [ft.ProgressRing(width=14, height=14, stroke_width=2), ft.Text(bubble.content, italic=True, color=style.TEXT_MUTED)],
                spacing=8,
                tight=True,
            )
        elif is_user:
            body = ft.Text(bubble.content, color=style.TEXT_PRIMARY, selectable=True)
        else:
            body = ft.Markdown(bubble.content, selectable=True, extension_set=ft.MarkdownExtensionSet.GITHUB_WEB)
        out.append(
            ft.Row(
                [
                    ft.Container(
                        padding=12,
                        bgcolor=style.bubble_color(bubble.role, bubble.transient),
                        border=ft.border.all(1, style.BORDER),
                        border_radius=12,
                        content=body,
                        width=520,
                    )
                ],
                alignment=ft.MainAxisAlignment.END if is_user else ft.MainAxisAlignment.START,
            )
        )
    return out
