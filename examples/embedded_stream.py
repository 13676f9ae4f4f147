#!/usr/bin/env python3
"""
Example: Decoding patterns embedded in a larger stream

Two patterns are written back to back into one buffer. Each decode stops at
its declared payload length, so the second pattern can be read right after
the first.
"""

import io
import sys

sys.path.insert(0, "..")

from splice import Pattern, Track, decode, encode


def main():
    first = Pattern("0.808-alpha", 120.0, [Track.from_grid(0, "kick", "x---|x---|x---|x---")])
    second = Pattern("0.909", 98.4, [Track.from_grid(1, "clap", "----|x---|----|x---")])

    stream = io.BytesIO(encode(first) + encode(second))

    for expected in (first, second):
        pattern = decode(stream)
        print(pattern)
        assert pattern == expected

    print(f"Stream fully consumed: {stream.read() == b''}")


if __name__ == "__main__":
    main()
