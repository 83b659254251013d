"""fdmap - Fixed-bucket hash table mapping file descriptors to values."""

from fdmap.core import FdMap
from fdmap.errors import FdMapError, HandleDestroyedError, InvalidListModeError
from fdmap.linkedlist import DoublyLinkedList, Node
from fdmap.types import DEFAULT_BUCKET_COUNT, FIFO, ORDERED, ListMode

__version__ = "0.0.1"

__all__ = [
    "FdMap",
    "DoublyLinkedList",
    "Node",
    "ListMode",
    "FIFO",
    "ORDERED",
    "DEFAULT_BUCKET_COUNT",
    "FdMapError",
    "InvalidListModeError",
    "HandleDestroyedError",
]
