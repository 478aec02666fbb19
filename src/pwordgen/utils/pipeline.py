import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from pwordgen.config.config_pwordgen import *
from pwordgen.config.logging_config import timestamp
from pwordgen.utils.options import OptionsModel, PasswordOptions
from pwordgen.utils.location import LocationPort
from pwordgen.utils.password_generator import (
    OptionsProjection,
    project,
    generate_password,
    estimate_entropy_bits,
)
from pwordgen.utils.url_codec import url_with_options

logger = logging.getLogger(__name__)

Generator = Callable[[OptionsProjection], str]
Estimator = Callable[[OptionsProjection], float]


class GenerationStatus(Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(slots=True)
class DerivedState:
    """
    Values computed from the current options.

    Written by `RegenerationPipeline` (password, error, entropy, status)
    and `ClipboardController` (copy_success). Everything else only reads it.
    """
    password: str = ""
    error: str = ""
    entropy_bits: float = 0.0
    entropy_descriptor: str = "Weak"
    copy_success: bool = False
    status: GenerationStatus = GenerationStatus.PENDING

    def __repr__(self):
        return (
            f"DerivedState(password=<hidden>, "
            f"error={self.error!r}, "
            f"entropy_bits={self.entropy_bits:.1f}, "
            f"entropy_descriptor={self.entropy_descriptor!r}, "
            f"copy_success={self.copy_success}, "
            f"status={self.status.value})"
        )


def entropy_descriptor(bits: float) -> str:
    """Label an entropy estimate as Strong, Moderate or Weak."""
    if bits >= ENTROPY_STRONG:
        return "Strong"
    if bits >= ENTROPY_MODERATE:
        return "Moderate"
    return "Weak"


def error_message(err: BaseException) -> str:
    """Human-readable text for a generator fault."""
    message = str(err).strip()
    return message or GENERATE_ERROR_FALLBACK


class RegenerationPipeline:
    """
    Recomputes the password and its entropy whenever the options change.

    Each pass settles as a success (password set, error cleared, address
    replaced with the encoded options) or a failure (password cleared,
    error set, address left at the last successful configuration).
    Faults raised by the generator, the estimator or the link update
    never leave `run`.
    """

    def __init__(self,
                 model: OptionsModel,
                 location: LocationPort,
                 state: DerivedState | None = None,
                 generator: Generator = generate_password,
                 estimator: Estimator = estimate_entropy_bits) -> None:
        self.model = model
        self.location = location
        self.state = state if state is not None else DerivedState()
        self.generator = generator
        self.estimator = estimator

        self._unsubscribe: Callable[[], None] | None = None
        self._running = False
        self._rerun = False

    def start(self) -> DerivedState:
        """Follow the model's snapshots and run a first pass."""
        if self._unsubscribe is None:
            self._unsubscribe = self.model.subscribe(self._on_options)
        return self.run()

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def regenerate(self) -> DerivedState:
        """Generate a new password for the unchanged options."""
        return self.run()

    def _on_options(self, _snapshot: PasswordOptions) -> None:
        self.run()

    def run(self, options: PasswordOptions | None = None) -> DerivedState:
        """
        Run one regeneration pass.

        A pass requested while another one is executing (for example by a
        subscriber changing the options again) is not nested. The current
        pass finishes, then one more pass runs with the latest snapshot.

        Args:
            options: Snapshot to generate for. Defaults to the model's
                current snapshot.

        Returns:
            The updated derived state.
        """
        if self._running:
            self._rerun = True
            return self.state

        self._running = True
        try:
            self._pass(options if options is not None else self.model.snapshot)
            while self._rerun:
                self._rerun = False
                self._pass(self.model.snapshot)
        finally:
            self._running = False
            self._rerun = False
        return self.state

    def _pass(self, options: PasswordOptions) -> None:
        state = self.state
        state.status = GenerationStatus.PENDING
        projection = project(options)

        # Entropy is shown even when generation fails
        try:
            bits = float(self.estimator(projection))
        except Exception as e:
            logger.debug(f"Entropy estimate failed: {e}")
            bits = 0.0
        state.entropy_bits = bits
        state.entropy_descriptor = entropy_descriptor(bits)

        try:
            password = self.generator(projection)
        except Exception as e:
            state.password = ""
            state.error = error_message(e)
            state.status = GenerationStatus.FAILURE
            logger.info(f"Password generation failed: {state.error}")
            return

        state.password = password
        state.error = ""
        state.status = GenerationStatus.SUCCESS

        # The password stands even if the link cannot be written
        try:
            self.location.replace(url_with_options(self.location.url, options))
        except Exception as e:
            logger.error(f"[{timestamp()}] Could not update link: {e}\n")
