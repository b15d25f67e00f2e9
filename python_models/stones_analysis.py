import sys
import time
import pprint
from collections import defaultdict

from tqdm import tqdm

from util import *
from parsing_util import *
from stones import DEFAULT_STONES, STONE_BITS, count_stones_after_blinks, process_stone

DEFAULT_ANALYSIS_BLINKS = 75

class CountingCache:
    # Records lookups and hits per remaining step
    def __init__(self, backing=None):
        self.backing = {} if backing is None else backing
        self.iters = defaultdict(int)
        self.hits = defaultdict(int)
        self.keys = set()

    def get(self, key, default=None):
        self.iters[key[1]] += 1
        count = self.backing.get(key)
        if count is None:
            return default
        self.hits[key[1]] += 1
        return count

    def __setitem__(self, key, count):
        self.keys.add(key)
        self.backing[key] = count

    def all_nums(self):
        # Leaves are never stored, recover them from the last blink
        seen = {value for value, _ in self.keys}
        for value, steps in self.keys:
            if steps == 1:
                seen.update(c for c in process_stone(value) if c is not None)
        return seen

def analyze(stones, blinks, cache=None, progress=False):
    counting = CountingCache(cache)

    it = tqdm(stones, desc="stones") if progress else stones
    result = sum(count_stones_after_blinks([x], blinks, counting) for x in it)

    per_step = []
    for n in range(1, blinks+1):
        a, b = counting.iters[n], counting.hits[n]
        per_step.append((n, a, b, a-b))

    all_nums = counting.all_nums() | set(stones)
    max_value = max(all_nums, default=0)

    iters = sum(counting.iters.values())
    hits = sum(counting.hits.values())
    return {
        "result": result,
        "iters": iters,
        "hits": hits,
        "misses": iters - hits,
        "per_step": per_step,
        "distinct": len(all_nums),
        "max_value": max_value,
        "bits": bits_needed(max_value),
    }

def print_report(name, report):
    print(f"== {name}")
    print("iters", report["iters"])
    print("hits", report["hits"])
    print("misses", report["misses"])
    pprint.pprint(report["per_step"])
    print("distinct", report["distinct"])
    print("max", report["max_value"], f"({report['bits']} bits)")
    print("result", report["result"])
    print()

def main(argv):
    if len(argv) > 2:
        sys.exit("usage: stones_analysis.py [BLINKS] [FILE]")

    try:
        blinks = parse_count(argv[0]) if len(argv) > 0 else DEFAULT_ANALYSIS_BLINKS
        stones = readstones(argv[1]) if len(argv) > 1 else DEFAULT_STONES
    except (InputError, OSError) as e:
        sys.exit(f"error: {e}")

    print(f"Analyzing {blinks} blinks for {stones}")

    start = time.perf_counter()
    full = analyze(stones, blinks, progress=True)
    print_report("unbounded", full)

    # Values have to fit the datapath width
    checkwidth(full["max_value"], STONE_BITS)

    bounded = analyze(stones, blinks, cache=DirectMappedCache(blinks), progress=True)
    print_report("direct mapped", bounded)
    assert bounded["result"] == full["result"]

    print(f"Finished in {time.perf_counter() - start:.3f} seconds")

if __name__ == "__main__":
    main(sys.argv[1:])
