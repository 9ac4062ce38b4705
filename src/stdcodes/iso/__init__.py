"""ISO code registries and ISO 8601 value types.

Reference: ISO 15924, ISO 3166-1, ISO 4217, ISO 639-1, ISO 8601-1:2019
"""

from .bare_time import BareTime, to_iso8601_time
from .duration import Duration, to_iso8601_duration
from .interval import Interval
from .iso3166_1 import ISO3166_1
from .iso4217 import ISO4217
from .iso6391 import ISO6391
from .iso15924 import ISO15924
from .validation import is_iso8601_duration, is_iso8601_time

__all__ = [
    # Registries
    "ISO15924",
    "ISO3166_1",
    "ISO4217",
    "ISO6391",
    # ISO 8601 values
    "Interval",
    "Duration",
    "BareTime",
    # Formatting and validation
    "to_iso8601_duration",
    "to_iso8601_time",
    "is_iso8601_duration",
    "is_iso8601_time",
]
