from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Callable, List

from pwordgen.config.config_pwordgen import OPTION_DEFAULTS


@dataclass(frozen=True)
class PasswordOptions:
    """
    One complete set of password options.

    Instances are immutable snapshots. The current snapshot for a session
    lives in `OptionsModel`; changing an option produces a new snapshot.
    Values are not range checked here. Links are validated by the URL
    codec and impossible combinations are rejected by the generator.
    """
    length: int = OPTION_DEFAULTS["length"]
    include_upper: bool = OPTION_DEFAULTS["include_upper"]
    include_lower: bool = OPTION_DEFAULTS["include_lower"]
    include_digits: bool = OPTION_DEFAULTS["include_digits"]
    include_symbols: bool = OPTION_DEFAULTS["include_symbols"]
    custom_chars: str = OPTION_DEFAULTS["custom_chars"]
    exclude_similar: bool = OPTION_DEFAULTS["exclude_similar"]
    exclude: str = OPTION_DEFAULTS["exclude"]
    require_each_selected_class: bool = OPTION_DEFAULTS["require_each_selected_class"]


DEFAULT_OPTIONS = PasswordOptions()


def default_options() -> PasswordOptions:
    """Return the default option record."""
    return DEFAULT_OPTIONS


Subscriber = Callable[[PasswordOptions], None]


class OptionsModel:
    """
    Holds the session's current `PasswordOptions` and notifies subscribers
    with every new snapshot.

    Several changes made inside `batch()` are reported once, when the
    outermost batch exits.
    """

    def __init__(self, initial: PasswordOptions | None = None) -> None:
        self._snapshot = initial or default_options()
        self._subscribers: List[Subscriber] = []
        self._batch_depth = 0
        self._batch_start: PasswordOptions | None = None

    @property
    def snapshot(self) -> PasswordOptions:
        return self._snapshot

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register `callback` to receive each new snapshot.

        Returns:
            A function that removes the subscription again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def update(self, **changes) -> PasswordOptions:
        """
        Change one or more fields and publish the resulting snapshot.

        Raises:
            TypeError: If a keyword is not a `PasswordOptions` field.
        """
        return self.replace(replace(self._snapshot, **changes))

    def replace(self, options: PasswordOptions) -> PasswordOptions:
        previous = self._snapshot
        self._snapshot = options
        if self._batch_depth == 0 and options != previous:
            self._notify()
        return options

    @contextmanager
    def batch(self):
        """
        Group changes into one notification.

        If the block raises, the snapshot is rolled back to what it was
        when this block was entered and nothing is published for it.
        """
        entry = self._snapshot
        if self._batch_depth == 0:
            self._batch_start = entry
        self._batch_depth += 1
        clean = False
        try:
            yield self
            clean = True
        finally:
            self._batch_depth -= 1
            if not clean:
                self._snapshot = entry
            if self._batch_depth == 0:
                start, self._batch_start = self._batch_start, None
                if clean and self._snapshot != start:
                    self._notify()

    def _notify(self) -> None:
        snapshot = self._snapshot
        for callback in list(self._subscribers):
            callback(snapshot)
