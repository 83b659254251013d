"""Basic usage example for fdmap."""

import os

from fdmap import FdMap


def main() -> None:
    """Demonstrate basic map operations."""
    print("=== Basic FdMap Example ===\n")

    with FdMap[dict](8) as fdmap:
        # Open a few real descriptors so the keys look like a live process
        pipes = [os.pipe() for _ in range(3)]
        for read_fd, write_fd in pipes:
            fdmap.put(read_fd, {"role": "reader", "peer": write_fd})
            fdmap.put(write_fd, {"role": "writer", "peer": read_fd})

        print(f"Items: {len(fdmap)}")
        print(f"Bucket sizes: {fdmap.bucket_sizes()}")
        print(f"Collisions: {fdmap.collisions()}\n")

        read_fd, write_fd = pipes[0]
        found, state = fdmap.get(read_fd)
        print(f"fd {read_fd}: found={found} state={state}")

        # Closing a descriptor means dropping its state
        os.close(read_fd)
        fdmap.delete(read_fd)
        found, state = fdmap.get(read_fd)
        print(f"fd {read_fd} after close: found={found} state={state}\n")

        for fd in list(fdmap.keys()):
            os.close(fd)
            fdmap.delete(fd)

        print(f"Final items: {len(fdmap)}")


if __name__ == "__main__":
    main()
