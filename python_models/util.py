def checkwidth(x, bits):
    assert x >= 0 and x < (1 << bits)

def bits_needed(x):
    return max(x.bit_length(), 1)

# One block RAM per remaining step count, slot is value & mask and holds
# (value, count). Colliding stores overwrite
class DirectMappedCache:
    def __init__(self, steps, cache_bits=None):
        if cache_bits is None:
            cache_bits = default_cache_bits
        self.bits = [cache_bits(n) for n in range(steps + 1)]
        self.rams = [[(-1, 0) for _ in range(1 << b)] for b in self.bits]

    def _slot(self, key):
        value, steps = key
        assert steps >= 0 and steps < len(self.rams)
        return self.rams[steps], value & ((1 << self.bits[steps]) - 1)

    def get(self, key, default=None):
        ram, idx = self._slot(key)
        tag, count = ram[idx]
        if tag == key[0]:
            return count
        return default

    def __setitem__(self, key, count):
        ram, idx = self._slot(key)
        ram[idx] = (key[0], count)

def default_cache_bits(n):
    # Most distinct values show up with few steps remaining
    return 10 if n < 12 else 4
