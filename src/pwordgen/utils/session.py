import logging

from pwordgen.config.config_pwordgen import COPY_SUCCESS_TIMEOUT
from pwordgen.utils.options import OptionsModel
from pwordgen.utils.location import LocationPort
from pwordgen.utils.url_codec import decode, query_from_url
from pwordgen.utils.password_generator import generate_password, estimate_entropy_bits
from pwordgen.utils.pipeline import DerivedState, RegenerationPipeline, Generator, Estimator
from pwordgen.utils.clipboard_utils import ClipboardController, ClipboardPort, PyperclipClipboard

logger = logging.getLogger(__name__)


class PasswordSession:
    """
    Everything one generator page needs: the options, the derived state,
    the regeneration pipeline and the clipboard controller.

    Call `initialize` once to load the options from the address and
    produce the first password.
    """

    def __init__(self,
                 location: LocationPort,
                 clipboard: ClipboardPort | None = None,
                 generator: Generator = generate_password,
                 estimator: Estimator = estimate_entropy_bits,
                 copy_delay: float = COPY_SUCCESS_TIMEOUT) -> None:
        self.location = location
        self.model = OptionsModel()
        self.state = DerivedState()
        self.pipeline = RegenerationPipeline(
            self.model, location, self.state,
            generator=generator, estimator=estimator,
        )
        self.clipboard = ClipboardController(
            self.state,
            clipboard if clipboard is not None else PyperclipClipboard(),
            delay=copy_delay,
        )
        self._initialized = False

    @property
    def options(self):
        return self.model.snapshot

    def initialize(self) -> DerivedState:
        """
        Seed the options from the current address and run the first pass.

        The first pass always runs, even when the address has no
        parameters. Later calls do nothing.
        """
        if self._initialized:
            logger.warning("Session already initialized")
            return self.state
        self._initialized = True

        # Pipeline is not subscribed yet, so seeding does not trigger a pass
        self.model.replace(decode(query_from_url(self.location.url)))
        return self.pipeline.start()

    def update(self, **changes) -> DerivedState:
        self.model.update(**changes)
        return self.state

    def regenerate(self) -> DerivedState:
        return self.pipeline.regenerate()

    async def copy(self) -> None:
        await self.clipboard.copy()

    def close(self) -> None:
        self.clipboard.cancel()
        self.pipeline.stop()
