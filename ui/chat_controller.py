from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import structlog

import ui_prompt as prompts
from ui_catalog import CatalogStore
from ui_selection import SelectionModel
from ui_transcript import Transcript
from view_models import UiMode
from worker_client import GenerationError, WorkerClient

logger = structlog.get_logger()


def _noop() -> None:
    return None


@dataclass
class ConversationController:
    catalog: CatalogStore
    selection: SelectionModel
    transcript: Transcript
    client: WorkerClient
    context_turns: int = 12

    render_chat: Callable[[], None] = _noop
    render_controls: Callable[[], None] = _noop
    clear_input: Callable[[], None] = _noop

    mode: UiMode = UiMode.IDLE
    last_routine: str = ""

    @property
    def routine_in_flight(self) -> bool:
        return self.mode is UiMode.GENERATING_ROUTINE

    def greet(self) -> None:
        self.transcript.append("assistant", prompts.GREETING)
        self.render_chat()

    async def generate_routine(self) -> None:
        if self.routine_in_flight:
            logger.info("routine_request_ignored", reason="already_in_flight")
            return

        products = self.catalog.resolve(self.selection.ids)
        if not products:
            self.transcript.append("assistant", prompts.EMPTY_SELECTION_MESSAGE)
            self.render_chat()
            return

        messages = prompts.build_routine_messages(products)
        placeholder = self.transcript.append("assistant", prompts.GENERATING_MESSAGE, transient=True)
        self.mode = UiMode.GENERATING_ROUTINE
        self.render_chat()
        self.render_controls()

        logger.info("routine_requested", products=len(products))
        try:
            text = await self.client.send(messages)
        except GenerationError as exc:
            self.transcript.remove_transient(placeholder.id)
            self.transcript.append("assistant", prompts.ROUTINE_FAILED_MESSAGE)
            logger.warning("routine_failed", kind=exc.kind)
        except Exception:
            self.transcript.remove_transient(placeholder.id)
            self.transcript.append("assistant", prompts.ROUTINE_FAILED_MESSAGE)
            logger.exception("routine_failed", kind="unexpected")
        else:
            self.transcript.remove_transient(placeholder.id)
            self.last_routine = text.strip()
            self.transcript.append("assistant", self.last_routine)
            logger.info("routine_generated", chars=len(self.last_routine))
        finally:
            self.mode = UiMode.IDLE
            self.render_chat()
            self.render_controls()

    async def send_chat(self, text: str | None) -> None:
        text = (text or "").strip()
        if not text:
            return

        self.transcript.append("user", text)
        self.render_chat()
        self.clear_input()

        messages = self.transcript.context_window(self.context_turns)
        try:
            reply = await self.client.send(messages)
        except GenerationError as exc:
            self.transcript.append("assistant", prompts.CHAT_FAILED_MESSAGE)
            logger.warning("chat_failed", kind=exc.kind)
        except Exception:
            self.transcript.append("assistant", prompts.CHAT_FAILED_MESSAGE)
            logger.exception("chat_failed", kind="unexpected")
        else:
            self.transcript.append("assistant", reply.strip())
        self.render_chat()

    def copy_routine(self) -> str | None:
        return self.last_routine or None
