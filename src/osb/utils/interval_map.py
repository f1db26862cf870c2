"""Ordered map from half-open key ranges to the values active over them."""

from bisect import bisect_left, bisect_right
from typing import Generic, Iterator, TypeVar

_Key = TypeVar("_Key")
_Value = TypeVar("_Value")


class IntervalMap(Generic[_Key, _Value]):
    """Breakpoint-indexed store of values over half-open ranges.

    The key axis is split by breakpoints into consecutive half-open intervals.
    Every breakpoint carries the values of all ranges covering it, so a point
    query only has to find the closest breakpoint at or before the key.

    Usage:
        interval_map = IntervalMap()
        interval_map.push(10, 50, 1)
        interval_map.push(30, 55, 2)
        list(interval_map.get(40))  # [1, 2]
    """

    def __init__(self) -> None:
        self._keys: list[_Key] = []
        self._values: list[list[_Value]] = []

    def push(self, start: _Key, end: _Key, value: _Value) -> None:
        """
        Mark ``value`` as active over ``[start, end)``.

        Args:
            start: First key covered by the value
            end: First key no longer covered by the value

        Raises:
            ValueError: If the range is empty or reversed
        """
        if not start < end:
            raise ValueError(f"Interval must satisfy start < end (got [{start!r}, {end!r}))")

        position = bisect_left(self._keys, start)
        if position == len(self._keys) or self._keys[position] != start:
            # A new breakpoint starts from whatever was active just before it
            inherited = list(self._values[position - 1]) if position > 0 else []
            self._keys.insert(position, start)
            self._values.insert(position, inherited)

        active_before_end: list[_Value] = []
        index = position
        while index < len(self._keys):
            key = self._keys[index]
            if key == end:
                return
            if end < key:
                self._keys.insert(index, end)
                self._values.insert(index, active_before_end)
                return
            active_before_end = list(self._values[index])
            self._values[index].append(value)
            index += 1

        self._keys.append(end)
        self._values.append(active_before_end)

    def get(self, key: _Key) -> Iterator[_Value]:
        """Iterate over the values active at ``key``."""
        index = bisect_right(self._keys, key) - 1
        if index < 0:
            return iter(())
        return iter(tuple(self._values[index]))

    def values(self) -> Iterator[_Value]:
        """Iterate over every stored value, breakpoint by breakpoint.

        A value spanning several breakpoints is yielded once per breakpoint.
        """
        for values in self._values:
            yield from values

    def __iter__(self) -> Iterator[tuple[_Key, tuple[_Value, ...]]]:
        for key, values in zip(self._keys, self._values):
            yield key, tuple(values)

    def __len__(self) -> int:
        return len(self._keys)
