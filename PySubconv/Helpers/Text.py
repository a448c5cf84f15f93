from collections.abc import Iterable

MAX_LINE_LENGTH = 32

def WrapLines(lines : Iterable[str], limit : int = MAX_LINE_LENGTH) -> list[str]:
    """
    Split each line into pieces no longer than limit, breaking at the last space that fits.

    The space at a break is dropped. A line with no space in range is broken at exactly limit characters.
    """
    if limit < 1:
        raise ValueError(f"Line length limit must be positive, got {limit}")

    result : list[str] = []
    for line in lines:
        while len(line) > limit:
            position = line.rfind(' ', 0, limit)
            if position < 0:
                result.append(line[:limit])
                line = line[limit:]
            else:
                result.append(line[:position])
                line = line[position + 1:]
        result.append(line)

    return result
