from typing import List, Protocol

from pwordgen.config.config_pwordgen import BASE_URL


class LocationPort(Protocol):
    """Access to the address bar of the page hosting the generator."""

    @property
    def url(self) -> str: ...

    def replace(self, url: str) -> None:
        """Swap the current address without creating a history entry."""
        ...


class MemoryLocation:
    """
    In-process address bar.

    Keeps the current URL and every value it was replaced with, so the
    terminal front end can print a shareable link and tests can inspect
    what was written.
    """

    def __init__(self, url: str = BASE_URL) -> None:
        self._url = url
        self.replaced: List[str] = []

    @property
    def url(self) -> str:
        return self._url

    def replace(self, url: str) -> None:
        self._url = url
        self.replaced.append(url)

    def __repr__(self):
        return f"MemoryLocation(url={self._url!r}, replaced={len(self.replaced)})"
