from datetime import timedelta
from typing import Any, Callable, Optional

Transform = Callable[[Any, int, Any, Any], Any]


def produce(start, end, step: timedelta, transform: Optional[Transform] = None) -> list:
    """
    半開区間 [start, end) を step ごとに進めて transform の結果を並べる
    start >= end なら空リスト. step は正であること (呼び出し側の責任)
    """
    results = []
    current = start
    index = 0
    while current < end:
        results.append(transform(current, index, start, end) if transform else current)
        index += 1
        current = current + step
    return results
