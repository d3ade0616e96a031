from collections import namedtuple

Summary = namedtuple(
    'Summary', 'hits misses evictions dirty_bytes dirty_evictions')


class Statistics:
    """Running counters of a simulation.

    dirty_in_cache is the number of lines currently valid and dirty,
    dirty_evicted the number of evictions whose victim was dirty. Both count
    lines; summary() scales them to bytes.
    """

    def __init__(self):
        self.hits = 0
        self.misses = 0
        self.evictions = 0
        self.dirty_in_cache = 0
        self.dirty_evicted = 0

    def summary(self, block_size) -> Summary:
        return Summary(self.hits, self.misses, self.evictions,
                       self.dirty_in_cache * block_size,
                       self.dirty_evicted * block_size)

    def __repr__(self):
        return ('Statistics(hits={}, misses={}, evictions={}, '
                'dirty_in_cache={}, dirty_evicted={})').format(
                    self.hits, self.misses, self.evictions,
                    self.dirty_in_cache, self.dirty_evicted)
