from .address import ADDRESS_BITS
from .errors import ConfigError


class CacheConfig:
    def __init__(self, s, E, b, trace_file=None):
        if s is None or b is None or E is None or not trace_file:
            raise ConfigError('Incorrect invocation: -s, -E, -b and -t are required.')
        if s < 0 or b < 0 or E < 1:
            raise ConfigError(
                'Incorrect invocation: s={}, E={}, b={}.'.format(s, E, b))
        if s + b > ADDRESS_BITS:
            raise ConfigError(
                's + b = {} exceeds the {}-bit address space.'.format(s + b, ADDRESS_BITS))
        self.s = s
        self.E = E
        self.b = b
        self.trace_file = trace_file

    @property
    def num_sets(self):
        return 1 << self.s

    @property
    def block_size(self):
        return 1 << self.b

    def __repr__(self):
        return 'CacheConfig(s={}, E={}, b={}, trace_file={!r})'.format(
            self.s, self.E, self.b, self.trace_file)
