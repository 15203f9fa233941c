import asyncio

import structlog

logger = structlog.get_logger()


class Debouncer:
    """Run `fn` once input has been quiet for `wait_ms`. Must be called on the event loop."""

    def __init__(self, fn, wait_ms: int = 200) -> None:
        self._fn = fn
        self._wait_s = max(0, wait_ms) / 1000
        self._task: asyncio.Task | None = None

    def __call__(self, *args) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(*args))

    async def _run(self, *args) -> None:
        await asyncio.sleep(self._wait_s)
        try:
            self._fn(*args)
        except Exception:
            logger.exception("debounced_call_failed")


def safe_update(control) -> None:
    if getattr(control, "page", None) is not None:
        control.update()
