"""Using DoublyLinkedList on its own as a queue or a sorted chain."""

from fdmap import FIFO, ORDERED, DoublyLinkedList


def main() -> None:
    """Demonstrate both list modes."""
    print("=== FIFO Queue ===\n")
    queue = DoublyLinkedList[str](FIFO)
    for fd, event in [(7, "readable"), (3, "writable"), (9, "hangup")]:
        queue.put(fd, event)
        print(f"Queued fd {fd}: {event}")

    found, fd, event = queue.peek_front()
    print(f"\nNext up: fd {fd} ({event}), {queue.size()} pending\n")

    while queue:
        _, fd, event = queue.pop_front()
        print(f"  Handling fd {fd}: {event}")

    queue.destroy()

    print("\n=== Ordered Chain ===\n")
    chain = DoublyLinkedList[str](ORDERED)
    for fd in [12, 4, 8, 4]:
        chain.put(fd, f"conn-{fd}")

    print(f"Keys in order: {list(chain.keys())}")
    print(f"Lookup 8: {chain.get(8)}")
    print(f"Lookup 5: {chain.get(5)}")
    print(f"Delete 4: {chain.delete(4)} -> {list(chain.keys())}")

    _, smallest, _ = chain.pop_front()
    print(f"Smallest fd popped: {smallest}")

    chain.destroy()


if __name__ == "__main__":
    main()
