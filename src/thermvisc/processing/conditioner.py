import logging
from typing import Iterable, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from thermvisc.schemas.internal import InternalConfig

__all__ = ['SignalConditioner']

logger = logging.getLogger(__name__)


class SignalConditioner:
    """Affine gain/offset correction applied per sample as it streams in."""

    def __init__(self, config: "InternalConfig"):
        self.gain = config.conditioning.gain
        self.offset = config.conditioning.offset

        logger.info("SignalConditioner initialized: gain=%s, offset=%s",
                    self.gain, self.offset)

    def condition(self, raw_value: float) -> float:
        """Return ``raw_value * gain + offset``."""
        return raw_value * self.gain + self.offset

    def condition_stream(self, raw_values: Iterable[float]) -> Iterator[float]:
        """Condition samples lazily, one at a time, as the source yields them."""
        for raw_value in raw_values:
            yield self.condition(raw_value)
