from __future__ import annotations

from dataclasses import dataclass, field

PAGE_SIZE = 9


@dataclass
class ViewState:
    search_query: str = ""
    category: str = ""
    reveal_count: int = PAGE_SIZE
    expanded_ids: set[int] = field(default_factory=set)


class PagerController:
    """Reveal-count cursor over the filtered catalog.

    Filter edits reset the cursor to one page; "show more" grows it by a page
    and never clamps it. Clamping happens only when slicing.
    """

    def __init__(self, state: ViewState | None = None, page_size: int = PAGE_SIZE) -> None:
        self.page_size = page_size
        self.state = state or ViewState(reveal_count=page_size)

    @property
    def reveal_count(self) -> int:
        return self.state.reveal_count

    def reset(self) -> None:
        self.state.reveal_count = self.page_size

    def set_query(self, text: str) -> None:
        self.state.search_query = text or ""
        self.reset()

    def set_category(self, value: str | None) -> None:
        self.state.category = value or ""
        self.reset()

    def show_more(self) -> int:
        self.state.reveal_count += self.page_size
        return self.state.reveal_count

    def visible(self, filtered: list) -> list:
        return filtered[: min(self.state.reveal_count, len(filtered))]

    def has_more(self, filtered: list) -> bool:
        return self.state.reveal_count < len(filtered)

    def toggle_expanded(self, product_id: int) -> bool:
        expanded = self.state.expanded_ids
        if product_id in expanded:
            expanded.discard(product_id)
            return False
        expanded.add(product_id)
        return True

    def is_expanded(self, product_id: int) -> bool:
        return product_id in self.state.expanded_ids
