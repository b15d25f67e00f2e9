import pytest

import stones
from stones import (
    apply_blinks,
    count_stone_descendants,
    count_stone_descendants_iterative,
    count_stones_after_blinks,
)
from util import DirectMappedCache, bits_needed, checkwidth, default_cache_bits


def test_checkwidth():
    checkwidth(0, 1)
    checkwidth((1 << 64) - 1, 64)
    with pytest.raises(AssertionError):
        checkwidth(1 << 64, 64)
    with pytest.raises(AssertionError):
        checkwidth(-1, 8)


def test_bits_needed():
    assert bits_needed(0) == 1
    assert bits_needed(1) == 1
    assert bits_needed(255) == 8
    assert bits_needed(256) == 9


def test_default_cache_bits():
    assert default_cache_bits(0) == 10
    assert default_cache_bits(11) == 10
    assert default_cache_bits(12) == 4
    assert default_cache_bits(75) == 4


def test_direct_mapped_cache_hit_and_miss():
    cache = DirectMappedCache(4, cache_bits=lambda n: 2)
    assert cache.get((5, 3)) is None

    cache[(5, 3)] = 42
    assert cache.get((5, 3)) == 42
    # Same slot on another level is independent
    assert cache.get((5, 2)) is None


def test_direct_mapped_cache_collision_evicts():
    cache = DirectMappedCache(4, cache_bits=lambda n: 2)
    cache[(1, 2)] = 10
    # 5 & 0b11 == 1, same slot
    cache[(5, 2)] = 20
    assert cache.get((1, 2)) is None
    assert cache.get((5, 2)) == 20
    assert cache.get((5, 1)) is None


def test_direct_mapped_cache_rejects_out_of_range_steps():
    cache = DirectMappedCache(3)
    with pytest.raises(AssertionError):
        cache.get((1, 4))


@pytest.mark.parametrize("bits", [0, 1, 4, 10])
def test_direct_mapped_cache_gives_same_counts(bits):
    cache = DirectMappedCache(25, cache_bits=lambda n: bits)
    assert count_stones_after_blinks([125, 17], 25, cache) == 55312


def test_direct_mapped_cache_descendants():
    for steps in range(8):
        cache = DirectMappedCache(steps)
        assert count_stone_descendants(1700, steps, cache) == len(apply_blinks([1700], steps))


def test_iterative_on_warm_direct_mapped_cache():
    # One slot per level, so the second walk evicts what it just read
    cache = DirectMappedCache(3, cache_bits=lambda n: 0)
    assert count_stone_descendants_iterative(0, 3, cache) == len(apply_blinks([0], 3))
    assert count_stone_descendants_iterative(21, 3, cache) == 4


@pytest.mark.parametrize("bits", [0, 1, 2])
def test_iterative_shared_direct_mapped_cache_sweep(bits):
    steps = 8
    cache = DirectMappedCache(steps, cache_bits=lambda n: bits)
    for value in range(300):
        for n in range(1, steps + 1):
            expected = count_stone_descendants(value, n, {})
            assert count_stone_descendants_iterative(value, n, cache) == expected


def test_count_past_recursion_limit_with_direct_mapped_cache():
    # Single digit stones stay within a small family of values
    blinks = stones.MAX_RECURSIVE_BLINKS + 50
    initial = [0, 1, 2024, 7]
    expected = count_stones_after_blinks(initial, blinks)
    assert expected > 0
    assert count_stones_after_blinks(initial, blinks, DirectMappedCache(blinks)) == expected
    assert count_stones_after_blinks(initial, blinks, DirectMappedCache(blinks, cache_bits=lambda n: 1)) == expected
