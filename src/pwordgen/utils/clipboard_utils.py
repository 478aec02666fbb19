import asyncio
import logging
from typing import Protocol

import pyperclip

from pwordgen.config.config_pwordgen import *
from pwordgen.config.logging_config import timestamp
from pwordgen.utils.pipeline import DerivedState

logger = logging.getLogger(__name__)


class ClipboardPort(Protocol):
    async def write_text(self, text: str) -> None: ...


class PyperclipClipboard:
    """
    System clipboard backed by pyperclip.

    The copy runs in a worker thread so a slow clipboard backend does not
    block the event loop. `pyperclip.PyperclipException` is raised when no
    clipboard mechanism is available.
    """

    async def write_text(self, text: str) -> None:
        await asyncio.to_thread(pyperclip.copy, text)


class ClipboardController:
    """
    Copies the current password and raises `copy_success` for a short time.

    Only one reset timer exists at a time. A new successful copy cancels
    the pending reset and starts the window again.
    """

    def __init__(self,
                 state: DerivedState,
                 clipboard: ClipboardPort,
                 delay: float = COPY_SUCCESS_TIMEOUT) -> None:
        self.state = state
        self.clipboard = clipboard
        self.delay = delay
        self._reset_handle: asyncio.TimerHandle | None = None

    @property
    def can_copy(self) -> bool:
        """Copying is offered only while there is a password."""
        return bool(self.state.password)

    async def copy(self) -> None:
        """
        Copy the current password to the clipboard.

        Side Effects:
            Writes to the clipboard.
            Sets `copy_success` and schedules its reset after `delay` seconds.

        Clipboard failures are logged and leave the state unchanged.
        """
        password = self.state.password
        if not password:
            logger.debug("Nothing to copy")
            return

        try:
            await self.clipboard.write_text(password)
        except Exception as e:
            logger.error(
                f"[{timestamp()}] "
                f"Failed to copy to clipboard: {e}\n"
            )
            return

        self.cancel()
        self.state.copy_success = True
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.delay, self._reset)

    def cancel(self) -> None:
        """Drop a pending reset, if any."""
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _reset(self) -> None:
        self._reset_handle = None
        self.state.copy_success = False
