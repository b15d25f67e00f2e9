import sys

# Stones are modelled as 64-bit unsigned words
STONE_BITS = 64
STONE_MULTIPLIER = 2024

DEFAULT_STONES = [125, 17]

# Leave some of the interpreter's stack for the caller
MAX_RECURSIVE_BLINKS = sys.getrecursionlimit() - 100

# Rewrite rule

def count_digits(n):
    # 0 counts as one digit
    digits = 1
    while n >= 10:
        n //= 10
        digits += 1
    return digits

def split_number(n, digits):
    # Floor split, so an odd digit count puts the extra digit on the left
    pow10 = 10 ** (digits // 2)
    left = n // pow10
    right = n - left * pow10
    return left, right

def process_stone(n):
    # Returns (left, right), right is None unless the stone splits
    if n == 0:
        return 1, None

    digits = count_digits(n)
    # 1000 -> 10, 0
    if digits % 2 == 0:
        return split_number(n, digits)

    return n * STONE_MULTIPLIER, None

# Full expansion

def apply_blink(stones):
    results = []
    for n in stones:
        left, right = process_stone(n)
        results.append(left)
        if right is not None:
            results.append(right)
    return results

def apply_blinks(initial, times):
    stones = list(initial)
    for _ in range(times):
        stones = apply_blink(stones)
    return stones

# Memoized counter

def count_stone_descendants(value, steps, cache):
    # Only depends on (value, steps), never on neighbouring stones
    if steps == 0:
        return 1

    key = (value, steps)
    cached = cache.get(key)
    if cached is not None:
        return cached

    left, right = process_stone(value)
    result = count_stone_descendants(left, steps-1, cache)
    if right is not None:
        result += count_stone_descendants(right, steps-1, cache)

    cache[key] = result
    return result

def count_stone_descendants_iterative(value, steps, cache):
    # Same memo table as count_stone_descendants, walked with an explicit
    # stack of (value, steps, expanded) frames. `done` holds this walk's
    # results since a bounded cache may evict them before the parent reads
    done = {}

    def lookup(x, n):
        if n == 0:
            return 1
        if (x, n) in done:
            return done[(x, n)]
        return cache.get((x, n))

    stack = [(value, steps, False)]
    while stack:
        x, n, expanded = stack.pop()
        children = [c for c in process_stone(x) if c is not None]

        if not expanded:
            hit = lookup(x, n)
            if hit is not None:
                # Siblings may evict it from the cache before the parent reads it
                done[(x, n)] = hit
                continue
            stack.append((x, n, True))
            for c in children:
                stack.append((c, n-1, False))
            continue

        # Children were pushed after this frame so they are resolved
        total = sum(lookup(c, n-1) for c in children)
        done[(x, n)] = total
        cache[(x, n)] = total

    return lookup(value, steps)

def count_stones_after_blinks(initial, blinks, cache=None):
    # A caller supplied cache stays warm across calls
    if cache is None:
        cache = {}

    if blinks > MAX_RECURSIVE_BLINKS:
        count_fn = count_stone_descendants_iterative
    else:
        count_fn = count_stone_descendants

    return sum(count_fn(stone, blinks, cache) for stone in initial)
