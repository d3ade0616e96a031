from .address import ADDRESS_BITS, decode
from .cache import Cache, Line, Set
from .config import CacheConfig
from .errors import ConfigError, CsimError, TraceError
from .lru import select_victim
from .processor import AccessEntry, AccessProcessor
from .stats import Statistics, Summary
from .trace import MAX_SIZE, MemOp, read_trace

__version__ = '0.1.0'
