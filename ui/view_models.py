"""Pure projections from session state to view models.

The flet builders in view_catalog / view_selection / view_chat only ever
draw these; every redraw recomputes them from scratch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from schemas import Product
from ui_catalog import CatalogStore
from ui_pager import PagerController
from ui_selection import SelectionModel
from ui_transcript import Transcript


LOAD_FAILED_MESSAGE = "Failed to load products."
NO_MATCHES_MESSAGE = "No matching products."
NO_SELECTION_MESSAGE = "No products selected yet."

GENERATE_LABEL = "Generate Routine"
GENERATING_LABEL = "Generating…"


class UiMode(Enum):
    IDLE = "idle"
    GENERATING_ROUTINE = "generating_routine"


@dataclass(frozen=True)
class CardView:
    id: int
    name: str
    brand: str
    image: str
    description: str
    selected: bool
    expanded: bool


@dataclass(frozen=True)
class GridView:
    cards: list[CardView] = field(default_factory=list)
    placeholder: str | None = None
    show_more_visible: bool = False
    total: int = 0


@dataclass(frozen=True)
class ChipView:
    id: int
    name: str
    brand: str
    image: str


@dataclass(frozen=True)
class SelectionView:
    chips: list[ChipView] = field(default_factory=list)
    placeholder: str | None = None


@dataclass(frozen=True)
class BubbleView:
    id: str
    role: str
    content: str
    transient: bool


@dataclass(frozen=True)
class ChatView:
    bubbles: list[BubbleView] = field(default_factory=list)
    scroll_to_end: bool = True


@dataclass(frozen=True)
class ControlsView:
    generate_enabled: bool
    generate_label: str
    spinner_visible: bool
    copy_enabled: bool


def _card(p: Product, selection: SelectionModel, pager: PagerController) -> CardView:
    return CardView(
        id=p.id,
        name=p.name,
        brand=p.brand,
        image=p.image,
        description=p.description,
        selected=selection.contains(p.id),
        expanded=pager.is_expanded(p.id),
    )


def project_grid(catalog: CatalogStore, pager: PagerController, selection: SelectionModel) -> GridView:
    if catalog.load_failed:
        return GridView(placeholder=LOAD_FAILED_MESSAGE)

    state = pager.state
    filtered = catalog.filter(state.category, state.search_query)
    if not filtered:
        pager.reset()
        return GridView(placeholder=NO_MATCHES_MESSAGE)

    return GridView(
        cards=[_card(p, selection, pager) for p in pager.visible(filtered)],
        show_more_visible=pager.has_more(filtered),
        total=len(filtered),
    )


def project_selection(catalog: CatalogStore, selection: SelectionModel) -> SelectionView:
    chips = [
        ChipView(id=p.id, name=p.name, brand=p.brand, image=p.image)
        for p in catalog.resolve(selection.ids)
    ]
    if not chips:
        return SelectionView(placeholder=NO_SELECTION_MESSAGE)
    return SelectionView(chips=chips)


def project_chat(transcript: Transcript) -> ChatView:
    return ChatView(
        bubbles=[
            BubbleView(id=t.id, role=t.role, content=t.content, transient=t.transient)
            for t in transcript
        ]
    )


def project_controls(mode: UiMode, last_routine: str) -> ControlsView:
    generating = mode is UiMode.GENERATING_ROUTINE
    return ControlsView(
        generate_enabled=not generating,
        generate_label=GENERATING_LABEL if generating else GENERATE_LABEL,
        spinner_visible=generating,
        copy_enabled=bool(last_routine),
    )
