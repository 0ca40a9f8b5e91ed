from typing import Callable, Sequence, TypeVar

T = TypeVar('T')


def elem_urank(arr: Sequence[T], x: float, key: Callable[[T], float] = lambda e: e) -> int:
    """
    Assume arr to be sorted increasingly by key.
    Returns the upper rank of the element x in arr:
    The upper rank is the minimal number i in 0, ..., len(arr),
    such that x < key(arr[i]) (with the interpretation key(arr[len(arr)]) = inf).
    Inserting x at this position keeps arr sorted and places x behind all elements equal to it.
    """
    low = 0
    high = len(arr)
    # Invariant: low <= urank <= high
    while high > low:
        mid = (high + low) // 2
        if x < key(arr[mid]):
            high = mid
        else:  # key(arr[mid]) <= x
            low = mid + 1
    return high
