def select_victim(cache_set):
    """Index of the least recently used line; the lowest index wins a tie."""
    result = 0
    lines = cache_set.lines
    for i, line in enumerate(lines):
        if line.time < lines[result].time:
            result = i
    return result
