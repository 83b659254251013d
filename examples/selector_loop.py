"""Example keeping per-descriptor state for a selectors-driven reader loop."""

import selectors
import socket
from dataclasses import dataclass, field

from fdmap import FdMap


@dataclass
class Connection:
    """State tracked for each readable socket."""

    name: str
    sock: socket.socket
    received: bytearray = field(default_factory=bytearray)


def on_readable(fdmap: FdMap[Connection], selector: selectors.BaseSelector, fd: int) -> None:
    """Read whatever is available on fd and record it against its connection."""
    found, conn = fdmap.get(fd)
    if not found or conn is None:
        return

    data = conn.sock.recv(4096)
    if data:
        conn.received.extend(data)
        print(f"[{conn.name}] fd {fd} got {data!r}")
        return

    # Peer closed
    print(f"[{conn.name}] fd {fd} closed after {len(conn.received)} bytes")
    selector.unregister(fd)
    conn.sock.close()
    fdmap.delete(fd)


def main() -> None:
    """Wire up several socket pairs and dispatch reads through an FdMap."""
    with selectors.DefaultSelector() as selector, FdMap[Connection](4) as fdmap:
        writers = []
        for i in range(3):
            reader, writer = socket.socketpair()
            reader.setblocking(False)
            fd = reader.fileno()
            fdmap.put(fd, Connection(name=f"conn-{i}", sock=reader))
            selector.register(fd, selectors.EVENT_READ)
            writers.append(writer)

        print(f"Watching {len(fdmap)} descriptors: {sorted(fdmap.keys())}\n")

        for i, writer in enumerate(writers):
            writer.sendall(f"hello from writer {i}".encode())
            writer.close()

        while len(fdmap) > 0:
            events = selector.select(timeout=5.0)
            if not events:
                print("Timed out waiting for descriptors")
                break
            for key, _ in events:
                on_readable(fdmap, selector, key.fd)

        print(f"\nRemaining descriptors: {len(fdmap)}")


if __name__ == "__main__":
    main()
