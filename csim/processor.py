from collections import namedtuple

from .cache import Cache
from .errors import TraceError
from .lru import select_victim
from .stats import Statistics

AccessEntry = namedtuple(
    'AccessEntry', 'op_type address word_size result eviction')


class AccessProcessor:
    """Applies loads and stores to a cache and keeps its statistics."""

    def __init__(self, cache: Cache):
        self.cache = cache
        self.stats = Statistics()

    def update(self, mem_op) -> AccessEntry:
        if mem_op.op_type == 'L':
            result, eviction = self.load(mem_op.tag, mem_op.set_index)
        elif mem_op.op_type == 'S':
            result, eviction = self.store(mem_op.tag, mem_op.set_index)
        else:
            raise TraceError(
                'Not supported cache operation: {}!'.format(mem_op.op_type))
        return AccessEntry(mem_op.op_type, mem_op.address, mem_op.word_size,
                           result, 'eviction' if eviction else '')

    def load(self, tag, set_index):
        time = self.cache.tick()
        cache_set = self.cache.sets[set_index]
        index = cache_set.find_matched_line(tag)
        if index is not None:
            self.stats.hits += 1
            cache_set[index].time = time
            return 'hit', False

        self.stats.misses += 1
        index, evicted = self._choose_line(cache_set)
        line = cache_set[index]
        # the filled line is clean, so a dirty victim leaves the count
        if evicted and line.dirty:
            self.stats.dirty_in_cache -= 1
        line.fill(tag, time)
        return 'miss', evicted

    def store(self, tag, set_index):
        time = self.cache.tick()
        cache_set = self.cache.sets[set_index]
        index = cache_set.find_matched_line(tag)
        if index is not None:
            self.stats.hits += 1
            line = cache_set[index]
            line.time = time
            if not line.dirty:
                line.dirty = True
                self.stats.dirty_in_cache += 1
            return 'hit', False

        self.stats.misses += 1
        index, evicted = self._choose_line(cache_set)
        line = cache_set[index]
        # a dirty victim is replaced by a dirty line: count unchanged
        if not line.dirty:
            self.stats.dirty_in_cache += 1
        line.fill(tag, time)
        line.dirty = True
        return 'miss', evicted

    def _choose_line(self, cache_set):
        """Free line if there is one, else the LRU victim (counted as evicted)."""
        index = cache_set.find_empty_line()
        if index is not None:
            return index, False
        index = select_victim(cache_set)
        if cache_set[index].dirty:
            self.stats.dirty_evicted += 1
        self.stats.evictions += 1
        return index, True

    def summary(self):
        return self.stats.summary(self.cache.block_size)
