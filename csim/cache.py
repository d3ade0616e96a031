from .config import CacheConfig
from .errors import ConfigError


class Line:
    def __init__(self, valid=False, tag=None, dirty=False, time=0):
        self.valid = valid
        self.tag = tag
        self.dirty = dirty
        self.time = time

    def fill(self, tag, time):
        self.valid = True
        self.tag = tag
        self.dirty = False
        self.time = time

    def __repr__(self):
        return 'Line(valid={}, tag={}, dirty={}, time={})'.format(
            self.valid, self.tag, self.dirty, self.time)


class Set:
    def __init__(self, lines):
        self.lines = tuple(lines)

    def __len__(self):
        return len(self.lines)

    def __getitem__(self, index):
        return self.lines[index]

    def find_matched_line(self, tag):
        for i, line in enumerate(self.lines):
            if line.valid and line.tag == tag:
                return i
        return None

    def find_empty_line(self):
        for i, line in enumerate(self.lines):
            if not line.valid:
                return i
        return None


class Cache:
    def __init__(self, config: CacheConfig):
        self.config = config
        sets = []
        try:
            for _ in range(config.num_sets):
                sets.append(Set(Line() for _ in range(config.E)))
        except MemoryError:
            raise ConfigError('Failed to allocate memory for {} sets of {} lines.'.format(
                config.num_sets, config.E)) from None
        self.sets = tuple(sets)
        self.time = 0

    @property
    def block_size(self):
        return self.config.block_size

    def tick(self):
        self.time += 1
        return self.time

    def count_dirty(self):
        """Full scan of valid dirty lines, for checking the running counter."""
        return sum(1 for cache_set in self.sets
                   for line in cache_set.lines if line.valid and line.dirty)
