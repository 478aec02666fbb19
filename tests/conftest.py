import pytest

from pwordgen.utils.location import MemoryLocation


class FakeClipboard:
    """Records every text written to it."""

    def __init__(self):
        self.copied = []

    async def write_text(self, text):
        self.copied.append(text)


class FailingClipboard:
    async def write_text(self, text):
        raise RuntimeError("clipboard unavailable")


class CountingGenerator:
    """Generator stand-in returning 'x' * length and counting calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, projection):
        self.calls.append(projection)
        return "x" * projection.length


@pytest.fixture
def location():
    return MemoryLocation("https://pwordgen.com/")


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def failing_clipboard():
    return FailingClipboard()


@pytest.fixture
def generator():
    return CountingGenerator()
