"""Doubly-linked key/value chain usable as a FIFO queue or a key-sorted list."""

from collections.abc import Iterator
from typing import Generic, Literal, TypeAlias

from fdmap.errors import HandleDestroyedError, InvalidListModeError
from fdmap.types import FIFO, ORDERED, ListMode, V

_Placement: TypeAlias = Literal["before", "after"]


class Node(Generic[V]):
    """A node in the doubly-linked list."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: int, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: Node[V] | None = None
        self.next: Node[V] | None = None

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r})"


class DoublyLinkedList(Generic[V]):
    """
    Doubly-linked chain of (key, value) pairs.

    In FIFO mode new entries are appended at the tail and popped from the
    head, giving queue semantics. In ORDERED mode entries are kept sorted
    ascending by key, so lookups for an absent key stop as soon as a larger
    key is seen and the head is always the smallest key. Duplicate keys are
    allowed in both modes.
    """

    def __init__(self, mode: ListMode = FIFO) -> None:
        """
        Initialize an empty list.

        Args:
            mode: "fifo" for insertion order, "ordered" for ascending keys.

        Raises:
            InvalidListModeError: If mode is not a recognized list mode.
        """
        if mode not in (FIFO, ORDERED):
            raise InvalidListModeError(f"Unknown list mode: {mode!r}")
        self._mode: ListMode = mode
        self._head: Node[V] | None = None
        self._tail: Node[V] | None = None
        self._size = 0
        self._closed = False

    @property
    def mode(self) -> ListMode:
        return self._mode

    @property
    def head(self) -> Node[V] | None:
        return self._head

    @property
    def tail(self) -> Node[V] | None:
        return self._tail

    @property
    def closed(self) -> bool:
        return self._closed

    def destroy(self) -> None:
        """Release every node and mark the list dead. Calling it again is a no-op."""
        if self._closed:
            return
        self._closed = True

        node = self._head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0

    def size(self) -> int:
        """Return the number of entries. O(1)."""
        self._check_open()
        return self._size

    def put(self, key: int, value: V) -> None:
        """
        Add a key-value pair.

        FIFO lists append at the tail in O(1). ORDERED lists insert before
        the first node whose key is >= key, or at the tail if there is none,
        in O(n). An existing entry with the same key is never replaced.
        """
        self._check_open()
        # Allocate before touching any link so a failure leaves the chain intact
        node = Node(key, value)

        if self._mode == ORDERED:
            runner = self._head
            while runner is not None and runner.key < key:
                runner = runner.next
            if runner is not None:
                self._link(node, "before", runner)
                return

        self._link(node, "after", self._tail)

    def get(self, key: int, default: V | None = None) -> tuple[bool, V | None]:
        """
        Look up the first entry with the given key.

        Returns:
            Tuple of (found, value); value is default when not found.
        """
        self._check_open()
        node = self._find_node(key)
        if node is None:
            return (False, default)
        return (True, node.value)

    def delete(self, key: int) -> bool:
        """
        Remove the first entry with the given key.

        Returns:
            True if an entry was removed, False if the key was absent.
        """
        self._check_open()
        node = self._find_node(key)
        if node is None:
            return False
        self._unlink(node)
        return True

    def pop_front(self) -> tuple[bool, int | None, V | None]:
        """
        Remove and return the head entry.

        This is the oldest entry in FIFO mode and the smallest key in
        ORDERED mode.

        Returns:
            Tuple of (found, key, value); (False, None, None) when empty.
        """
        self._check_open()
        node = self._head
        if node is None:
            return (False, None, None)
        self._unlink(node)
        return (True, node.key, node.value)

    def peek_front(self) -> tuple[bool, int | None, V | None]:
        """Return the head entry without removing it."""
        self._check_open()
        node = self._head
        if node is None:
            return (False, None, None)
        return (True, node.key, node.value)

    def keys(self) -> Iterator[int]:
        """Yield keys from head to tail."""
        for key, _ in self:
            yield key

    def __iter__(self) -> Iterator[tuple[int, V]]:
        """Yield (key, value) pairs from head to tail."""
        self._check_open()
        node = self._head
        while node is not None:
            # Read the successor first so the current entry may be deleted mid-walk
            following = node.next
            yield (node.key, node.value)
            node = following

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        self._check_open()
        return self._find_node(key) is not None

    def __len__(self) -> int:
        """Return the number of entries in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        state = "destroyed" if self._closed else f"size={self._size}"
        return f"DoublyLinkedList(mode={self._mode!r}, {state})"

    def _check_open(self) -> None:
        if self._closed:
            raise HandleDestroyedError("Cannot use a destroyed list")

    def _find_node(self, key: int) -> Node[V] | None:
        """Return the first node with the given key, or None."""
        node = self._head
        if self._mode == ORDERED:
            while node is not None:
                if node.key == key:
                    return node
                if node.key > key:
                    # Sorted: nothing further can match
                    return None
                node = node.next
            return None

        while node is not None:
            if node.key == key:
                return node
            node = node.next
        return None

    def _link(self, node: Node[V], placement: _Placement, refnode: Node[V] | None) -> None:
        """Link node before or after refnode. Only an empty chain has no refnode."""
        if refnode is None:
            assert self._head is None and self._tail is None
            node.prev = None
            node.next = None
            self._head = node
            self._tail = node
            self._size += 1
            return

        if placement == "before":
            node.next = refnode
            node.prev = refnode.prev
            if refnode.prev is not None:
                refnode.prev.next = node
            else:
                self._head = node
            refnode.prev = node
        else:
            node.prev = refnode
            node.next = refnode.next
            if refnode.next is not None:
                refnode.next.prev = node
            else:
                self._tail = node
            refnode.next = node

        self._size += 1

    def _unlink(self, node: Node[V]) -> None:
        """Detach node from the chain, re-patching head and tail as needed."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next

        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev

        node.prev = None
        node.next = None
        self._size -= 1
