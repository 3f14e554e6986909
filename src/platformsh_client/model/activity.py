"""Activities: background tasks started by long-running operations."""

import logging
import time
from collections.abc import Callable

from platformsh_client.errors import ActivityTimeoutError
from platformsh_client.model.resource import Resource

logger = logging.getLogger(__name__)

STATE_COMPLETE = "complete"

RESULT_SUCCESS = "success"


class Activity(Resource):
    """An asynchronous task on the server, e.g. a branch or a backup."""

    @property
    def id(self) -> str:
        return self.get_property("id")

    @property
    def state(self) -> str | None:
        return self._data.get("state")

    @property
    def result(self) -> str | None:
        """``success`` or ``failure`` once complete, None before."""
        return self._data.get("result")

    def is_complete(self) -> bool:
        return self.state == STATE_COMPLETE

    def is_successful(self) -> bool:
        return self.is_complete() and self.result == RESULT_SUCCESS

    def get_completion_percent(self) -> int:
        return int(self._data.get("completion_percent") or 0)

    def get_description(self) -> str:
        return self._data.get("description") or self._data.get("type", "")

    def wait(
        self,
        poll_interval: float = 1.0,
        timeout: float | None = None,
        on_poll: Callable[["Activity"], None] | None = None,
    ) -> None:
        """Block until the activity is complete, refreshing it periodically.

        Args:
            poll_interval: Seconds between refreshes
            timeout: Give up after this many seconds; None waits indefinitely
            on_poll: Called with the activity after each refresh

        Raises:
            ActivityTimeoutError: If the timeout expires first.
        """
        started = time.monotonic()
        while not self.is_complete():
            elapsed = time.monotonic() - started
            if timeout is not None and elapsed >= timeout:
                raise ActivityTimeoutError(
                    f"Activity {self._data.get('id')} not complete after {timeout}s",
                    activity_id=self._data.get("id"),
                )
            time.sleep(poll_interval)
            self.refresh()
            logger.debug(f"Activity {self._data.get('id')}: {self.state} ({self.get_completion_percent()}%)")
            if on_poll is not None:
                on_poll(self)
