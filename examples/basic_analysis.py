#!/usr/bin/env python3
"""
Example: Basic pattern analysis

Shows how to decode a .splice file and inspect its tracks.
"""

import sys

sys.path.insert(0, "..")

from splice import SpliceError, decode_file


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "pattern_1.splice"

    try:
        pattern = decode_file(path)
    except (OSError, SpliceError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Original text rendering
    print(pattern)

    # Per-track details
    print("Tracks:")
    for track in pattern.tracks:
        steps = ", ".join(str(s + 1) for s in track.steps) or "none"
        print(f"  ({track.id}) {track.name}: steps {steps}")
    print()

    print(f"Payload Length: {pattern.payload_length} bytes")


if __name__ == "__main__":
    main()
