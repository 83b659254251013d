"""Main FdMap implementation."""

import logging
from collections.abc import Iterator
from typing import Generic

from fdmap.errors import HandleDestroyedError
from fdmap.linkedlist import DoublyLinkedList
from fdmap.types import DEFAULT_BUCKET_COUNT, ORDERED, V

logger = logging.getLogger(__name__)


class FdMap(Generic[V]):
    """
    Fixed-size hash table mapping file descriptors to values.

    Open file descriptors are small non-negative integers handed out
    densely by the kernel, so hashing them with ``fd % bucket_count`` spreads
    them almost evenly when the table is sized near the expected number of
    descriptors. Each bucket is an ORDERED chain, which keeps lookups for
    absent descriptors short. The table never grows; oversubscription only
    lengthens the chains.
    """

    def __init__(self, initial_size: int = DEFAULT_BUCKET_COUNT) -> None:
        """
        Initialize the map.

        Args:
            initial_size: Number of buckets. Values <= 0 fall back to
                DEFAULT_BUCKET_COUNT. The bucket count is fixed afterwards.
        """
        if initial_size > 0:
            bucket_count = initial_size
        else:
            logger.debug(
                "Requested bucket count %d is not positive, using default of %d",
                initial_size,
                DEFAULT_BUCKET_COUNT,
            )
            bucket_count = DEFAULT_BUCKET_COUNT

        self._bucket_count = bucket_count
        self._buckets: list[DoublyLinkedList[V]] = [
            DoublyLinkedList(ORDERED) for _ in range(bucket_count)
        ]
        self._item_count = 0
        self._closed = False
        logger.debug("Created fd map with %d buckets", bucket_count)

    def destroy(self) -> None:
        """Destroy every bucket and release the bucket array. Calling it again is a no-op."""
        if self._closed:
            return
        self._closed = True

        for bucket in self._buckets:
            bucket.destroy()
        self._buckets = []
        logger.debug("Destroyed fd map holding %d items", self._item_count)
        self._item_count = 0

    def __enter__(self) -> "FdMap[V]":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.destroy()

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def closed(self) -> bool:
        return self._closed

    def bucket_index(self, key: int) -> int:
        """Return the bucket a descriptor hashes to."""
        assert key >= 0, f"File descriptor must be non-negative, got {key}"
        return key % self._bucket_count

    def put(self, key: int, value: V) -> None:
        """
        Map a file descriptor to a value.

        Duplicates are not replaced: putting the same descriptor twice stores
        two entries and counts both.

        Raises:
            HandleDestroyedError: If the map has been destroyed
        """
        self._bucket_for(key).put(key, value)
        self._item_count += 1

    def delete(self, key: int) -> bool:
        """
        Remove one entry for a file descriptor.

        Returns:
            True if an entry was removed, False if the descriptor was absent

        Raises:
            HandleDestroyedError: If the map has been destroyed
        """
        removed = self._bucket_for(key).delete(key)
        if removed:
            self._item_count -= 1
        return removed

    def get(self, key: int, default: V | None = None) -> tuple[bool, V | None]:
        """
        Look up the value for a file descriptor.

        Returns:
            Tuple of (found, value); value is default when not found

        Raises:
            HandleDestroyedError: If the map has been destroyed
        """
        return self._bucket_for(key).get(key, default)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int) or key < 0:
            return False
        return key in self._bucket_for(key)

    def __len__(self) -> int:
        """Return the number of stored entries."""
        return self._item_count

    def bucket_sizes(self) -> list[int]:
        """Return the chain length of every bucket, in bucket order."""
        self._check_open()
        return [bucket.size() for bucket in self._buckets]

    def collisions(self) -> int:
        """Return how many entries share a bucket with an earlier entry."""
        return sum(size - 1 for size in self.bucket_sizes() if size > 1)

    def items(self) -> Iterator[tuple[int, V]]:
        """Yield (fd, value) pairs bucket by bucket, ascending within each bucket."""
        self._check_open()
        for bucket in self._buckets:
            yield from bucket

    def keys(self) -> Iterator[int]:
        """Yield stored file descriptors in the same order as items()."""
        for key, _ in self.items():
            yield key

    def __repr__(self) -> str:
        if self._closed:
            return f"FdMap(bucket_count={self._bucket_count}, destroyed)"
        return f"FdMap(bucket_count={self._bucket_count}, item_count={self._item_count})"

    def _check_open(self) -> None:
        if self._closed:
            raise HandleDestroyedError("Cannot use a destroyed map")

    def _bucket_for(self, key: int) -> DoublyLinkedList[V]:
        self._check_open()
        return self._buckets[self.bucket_index(key)]
