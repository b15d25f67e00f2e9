import sys
import time

from parsing_util import *
from stones import DEFAULT_STONES, apply_blinks, count_stones_after_blinks

USAGE = "usage: blink.py apply|count BLINKS [STONE ...]"

MODES = {
    # apply materializes every stone, count only tracks how many there are
    "apply": lambda stones, blinks: len(apply_blinks(stones, blinks)),
    "count": count_stones_after_blinks,
}

def parse_args(argv):
    if len(argv) < 1:
        raise InputError("expected 'apply' or 'count'")
    mode = argv[0]
    if mode not in MODES:
        raise InputError(f"mode must be either 'apply' or 'count', got {mode!r}")

    if len(argv) < 2:
        raise InputError("missing blink count")
    blinks = parse_count(argv[1])

    stones = parse_stones(argv[2:]) or list(DEFAULT_STONES)
    return mode, blinks, stones

def main(argv):
    try:
        mode, blinks, stones = parse_args(argv)
    except InputError as e:
        sys.exit(f"error: {e}\n{USAGE}")

    print(f"Blinking {blinks} times and {mode}ing results for {stones}")

    start = time.perf_counter()
    count = MODES[mode](stones, blinks)
    print(f"Count: {count}")

    print(f"Finished in {time.perf_counter() - start:.3f} seconds")
    return count

if __name__ == "__main__":
    main(sys.argv[1:])
