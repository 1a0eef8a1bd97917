"""Budget window notation: "250ms", "30s", "10 m", "1h", "1d"."""
import re

from src.constants import DURATION_UNITS

_DURATION = re.compile(r"^\s*(?P<amount>\d+)\s*(?P<unit>ms|s|m|h|d)\s*$")


def parse_duration(value: str) -> float:
    """Return the window length in seconds. Raises ValueError on bad notation."""
    match _DURATION.match(value):
        case None:
            raise ValueError(f"Invalid duration: {value!r}")
        case m:
            seconds = int(m.group("amount")) * DURATION_UNITS[m.group("unit")]
    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return seconds
