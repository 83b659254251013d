"""Type definitions and defaults for fdmap."""

from typing import Final, Literal, TypeAlias, TypeVar

# Generic type variable for stored values
V = TypeVar("V")  # Value type

# Collision chain discipline: insertion order or ascending key order
ListMode: TypeAlias = Literal["fifo", "ordered"]

FIFO: Final = "fifo"
ORDERED: Final = "ordered"

# Bucket count used when a map is requested with a non-positive size
DEFAULT_BUCKET_COUNT: Final = 10
