# timeline/sorter.py
from typing import Iterable, List

from notes.model import Note

def sort_timeline(notes: Iterable[Note]) -> List[Note]:
    """Order notes by start tick.

    Notes starting on the same tick keep the order they were paired in; the
    slide chaining pass depends on it. Each note's input position is part of the key
    so the result does not rely on the sort being stable.
    """
    indexed = list(enumerate(notes))
    indexed.sort(key=lambda pair: (pair[1].start_time, pair[0]))
    return [n for _, n in indexed]
