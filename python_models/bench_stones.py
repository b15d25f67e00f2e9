import sys
import time

from tqdm import tqdm

from parsing_util import *
from stones import DEFAULT_STONES, apply_blinks, count_stones_after_blinks

DEFAULT_BENCH_BLINKS = 25
DEFAULT_ROUNDS = 20

def time_call(fn, rounds, desc=None):
    # (mean, best) seconds per call
    timings = []
    for _ in tqdm(range(rounds), desc=desc, disable=desc is None):
        start = time.perf_counter()
        fn()
        timings.append(time.perf_counter() - start)
    return sum(timings) / len(timings), min(timings)

def main(argv):
    try:
        blinks = parse_count(argv[0]) if len(argv) > 0 else DEFAULT_BENCH_BLINKS
        rounds = parse_count(argv[1], what="rounds") if len(argv) > 1 else DEFAULT_ROUNDS
    except InputError as e:
        sys.exit(f"error: {e}")
    if rounds == 0:
        sys.exit("error: rounds must be at least 1")

    cases = [
        ("With results", lambda: apply_blinks(DEFAULT_STONES, blinks)),
        ("Count only", lambda: count_stones_after_blinks(DEFAULT_STONES, blinks)),
    ]

    results = {}
    for name, fn in cases:
        mean, best = time_call(fn, rounds, desc=name)
        results[name] = (mean, best)

    print(f"{blinks} blinks of {DEFAULT_STONES}, {rounds} rounds")
    for name, (mean, best) in results.items():
        print(f"{name:>14}: mean {mean * 1e3:10.3f} ms   best {best * 1e3:10.3f} ms")

    return results

if __name__ == "__main__":
    main(sys.argv[1:])
