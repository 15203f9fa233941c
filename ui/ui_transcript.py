from __future__ import annotations

from schemas import ChatMessage, Turn


class Transcript:
    """Chat log. Append-only apart from transient placeholder turns."""

    def __init__(self) -> None:
        self._turns: list[Turn] = []

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self):
        return iter(list(self._turns))

    @property
    def turns(self) -> list[Turn]:
        return list(self._turns)

    def last(self) -> Turn | None:
        return self._turns[-1] if self._turns else None

    def append(self, role: str, content: str, transient: bool = False) -> Turn:
        turn = Turn(role=role, content=content, transient=transient)
        self._turns.append(turn)
        return turn

    def remove_transient(self, turn_id: str) -> bool:
        """Drop the transient turn with `turn_id`.

        The common case is popping the last turn; a chat reply that landed in
        the meantime leaves the placeholder further up, and it is removed
        from there instead.
        """
        last = self.last()
        if last is not None and last.id == turn_id and last.transient:
            self._turns.pop()
            return True
        for idx, turn in enumerate(self._turns):
            if turn.id == turn_id and turn.transient:
                del self._turns[idx]
                return True
        return False

    def context_window(self, size: int) -> list[ChatMessage]:
        durable = [t for t in self._turns if not t.transient]
        if size <= 0:
            return []
        return [t.as_message() for t in durable[-size:]]
