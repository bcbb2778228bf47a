"""Client-side poller for the latest-comments widget."""

import asyncio
from typing import Any, Awaitable, Callable, Sequence

import logfire

from gallery.config import FeedSettings
from gallery.domain.model import Comment

FetchLatest = Callable[[int], Awaitable[Sequence[Comment]]]


class FeedPoller:
    """Refreshes a snapshot of the newest comments on a fixed interval.

    Polling runs only while the widget is shown. Each successful poll
    replaces ``items`` wholesale; a failed poll keeps the previous items,
    records the error and retries on the next tick.
    """

    def __init__(
        self,
        fetch_latest: FetchLatest,
        limit: int = 10,
        interval: float = 30.0,
        on_update: Callable[[tuple[Comment, ...]], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        """Initialize the poller.

        Args:
            fetch_latest: Fetches up to ``limit`` newest comments
            limit: Number of comments to request per poll
            interval: Seconds between polls
            on_update: Called with every new snapshot
            on_error: Called with every failed poll's exception
        """
        self._fetch_latest = fetch_latest
        self.limit = limit
        self.interval = interval
        self.on_update = on_update
        self.on_error = on_error

        self._items: tuple[Comment, ...] = ()
        self.error: str | None = None
        self.loading = False
        self._task: asyncio.Task | None = None

    @classmethod
    def from_settings(
        cls, fetch_latest: FetchLatest, settings: FeedSettings, **kwargs
    ) -> "FeedPoller":
        return cls(
            fetch_latest,
            limit=settings.widget_limit,
            interval=settings.poll_interval_seconds,
            **kwargs,
        )

    @property
    def items(self) -> tuple[Comment, ...]:
        return self._items

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def poll_once(self) -> bool:
        """Fetch one snapshot.

        Returns:
            True if ``items`` was replaced, False if the fetch failed
        """
        self.loading = True
        try:
            items = tuple(await self._fetch_latest(self.limit))
        except Exception as e:
            self.error = str(e) or type(e).__name__
            logfire.warn("Latest comments poll failed", error=self.error)
            self._notify(self.on_error, e, "on_error")
            return False
        finally:
            self.loading = False

        self._items = items
        self.error = None
        self._notify(self.on_update, items, "on_update")
        return True

    def _notify(self, callback: Callable[[Any], None] | None, value: Any, name: str) -> None:
        # A failing listener must not stop the polling loop
        if callback is None:
            return
        try:
            callback(value)
        except Exception:
            logfire.exception("Latest comments listener failed", listener=name)

    async def _run(self) -> None:
        while True:
            await self.poll_once()
            await asyncio.sleep(self.interval)

    def show(self) -> None:
        """Start polling: one poll right away, then every ``interval``."""
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logfire.info("Latest comments polling started", interval=self.interval)

    async def hide(self) -> None:
        """Stop polling; an in-flight fetch is cancelled and discarded."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception:
            logfire.exception("Latest comments polling had stopped with an error")
        self.loading = False
        logfire.info("Latest comments polling stopped")

    async def aclose(self) -> None:
        await self.hide()

    async def __aenter__(self) -> "FeedPoller":
        self.show()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
