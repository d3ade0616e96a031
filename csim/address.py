ADDRESS_BITS = 64


def decode(address, s, b):
    """Split an address into (tag, set_index) for 2^s sets of 2^b bytes."""
    remain = address >> b
    tag, set_index = divmod(remain, 1 << s)
    return tag, set_index
