"""In-memory editing surface holding the live document markup"""

import logging
from typing import Callable


logger = logging.getLogger(__name__)

UpdateCallback = Callable[[str], None]


class EditingSurface:
    """Holds the current markup and notifies subscribers of user edits.

    replace() is a programmatic load and does not notify; apply_edit() stands
    in for an edit made by the user and does.
    """

    def __init__(self, markup: str = "") -> None:
        self._markup = markup
        self._subscribers: list[UpdateCallback] = []

    def get_snapshot(self) -> str:
        return self._markup

    def replace(self, markup: str) -> None:
        self._markup = markup

    def apply_edit(self, markup: str) -> None:
        self._markup = markup
        for callback in list(self._subscribers):
            callback(markup)

    def subscribe(self, callback: UpdateCallback) -> Callable[[], None]:
        """Register callback for edits; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe
