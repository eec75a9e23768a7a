import numpy as np
import pytest

from embedding_projector import DirectionCache


def test_cache_miss_then_hit():
    cache = DirectionCache()
    assert cache.get(("man", "woman")) is None
    stored = cache.set(("man", "woman"), np.array([0.0, 1.0]))
    assert cache.get(("man", "woman")) is stored

    stats = cache.stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 50.0


def test_cache_keys_are_ordered_pairs():
    cache = DirectionCache()
    cache.set(("man", "woman"), np.array([0.0, 1.0]))
    assert ("woman", "man") not in cache


def test_cache_keys_do_not_collide_like_concatenation():
    cache = DirectionCache()
    cache.set(("ab", "c"), np.array([1.0, 0.0]))
    cache.set(("a", "bc"), np.array([0.0, 1.0]))
    assert len(cache) == 2
    np.testing.assert_array_equal(cache.get(("ab", "c")), [1.0, 0.0])


def test_cached_directions_are_frozen():
    cache = DirectionCache()
    stored = cache.set(("man", "woman"), np.array([0.0, 1.0]))
    with pytest.raises(ValueError):
        stored[0] = 1.0


def test_bounded_cache_evicts_least_recently_used():
    cache = DirectionCache(max_size=2)
    cache.set(("a", "b"), np.array([1.0]))
    cache.set(("c", "d"), np.array([1.0]))
    cache.get(("a", "b"))
    cache.set(("e", "f"), np.array([1.0]))

    assert ("a", "b") in cache
    assert ("c", "d") not in cache
    assert len(cache) == 2


def test_clear_resets_entries_and_stats():
    cache = DirectionCache()
    cache.set(("a", "b"), np.array([1.0]))
    cache.get(("a", "b"))
    cache.clear()
    assert cache.stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}


def test_set_leaves_caller_array_writable():
    cache = DirectionCache()
    direction = np.array([0.0, 1.0])
    stored = cache.set(("man", "woman"), direction)

    assert direction.flags.writeable
    direction[0] = 5.0
    np.testing.assert_array_equal(cache.get(("man", "woman")), [0.0, 1.0])
    assert stored is not direction
