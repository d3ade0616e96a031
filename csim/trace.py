import re

from .address import ADDRESS_BITS, decode
from .errors import ConfigError, TraceError

MAX_SIZE = 16
OP_TYPES = {'L', 'S'}


class MemOp:
    def __init__(self, op_type, address, word_size, s, b):
        self.op_type = op_type
        self.address = address
        self.word_size = word_size
        self.tag, self.set_index = decode(address, s, b)

    def __repr__(self):
        return 'MemOp({} {:x},{})'.format(self.op_type, self.address, self.word_size)


def parse_line(line, s, b, max_size=MAX_SIZE):
    """Turn one trace line such as ' L 10,1' into a MemOp."""
    fields = re.split(r'\s*,\s*|\s+', line.strip())
    if len(fields) != 3:
        raise TraceError('Malformed record: {!r}'.format(line.strip()))
    op_type, address, word_size = fields
    if op_type not in OP_TYPES:
        raise TraceError('Invalid action: {}'.format(op_type))
    try:
        address = int(address, 16)
    except ValueError:
        raise TraceError('Invalid address: {}'.format(address)) from None
    if not 0 <= address < (1 << ADDRESS_BITS):
        raise TraceError('Address {} is out of range'.format(address))
    try:
        word_size = int(word_size)
    except ValueError:
        raise TraceError('Invalid size: {}'.format(word_size)) from None
    if not 0 <= word_size < max_size:
        raise TraceError('Size {} is out of range'.format(word_size))
    return MemOp(op_type, address, word_size, s, b)


def file_lines_2_MemOps(lines, s, b, max_size=MAX_SIZE):
    result = []
    for number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            result.append(parse_line(line, s, b, max_size))
        except TraceError as e:
            raise TraceError('line {}: {}'.format(number, e)) from None
    return result


def get_file_lines(file_path):
    try:
        with open(file_path, mode='r') as f:
            return f.readlines()
    except OSError as e:
        raise ConfigError("Error opening '{}': {}".format(file_path, e.strerror)) from e


def read_trace(file_path, s, b, max_size=MAX_SIZE):
    return file_lines_2_MemOps(get_file_lines(file_path), s, b, max_size)
