from typing import List

from models import GLASS_COUNT


def next_fill_count(filled: int, index: int, total: int = GLASS_COUNT) -> int:
    """
    New filled-count after clicking the glass at `index`.

    Clicking the last filled glass un-fills it (count = index);
    any other click fills up to and including the clicked glass (count = index + 1).
    """
    if not 0 <= index < total:
        raise ValueError(f"Glass index must be between 0 and {total - 1}, got {index}")
    is_filled = index < filled
    next_filled = index + 1 < total and index + 1 < filled
    if is_filled and not next_filled:
        return index
    return index + 1


def glass_states(filled: int, total: int = GLASS_COUNT) -> List[bool]:
    return [i < filled for i in range(total)]


def water_label(filled: int, total: int = GLASS_COUNT) -> str:
    return f"{filled} / {total} glasses"
