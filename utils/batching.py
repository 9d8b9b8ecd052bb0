from __future__ import annotations

from typing import List, Sequence, TypeVar


T = TypeVar("T")


def chunk_by_size(items: Sequence[T], *, max_items: int) -> List[List[T]]:
    if max_items < 1:
        raise ValueError("max_items must be at least 1")
    batches: List[List[T]] = []
    current: List[T] = []
    for item in items:
        if len(current) >= max_items:
            batches.append(current)
            current = []
        current.append(item)
    if current:
        batches.append(current)
    return batches
