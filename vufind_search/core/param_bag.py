from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import quote_plus


class ParamBag:
    """
    Ordered multi-valued parameter container passed to search backends.

    Every parameter name maps to a list of values. Names are case-sensitive
    and keep insertion order; values keep insertion order and may repeat.
    A name that was never set is distinct from a name holding an empty list.
    """

    def __init__(self, params: Optional[Dict[str, Any]] = None) -> None:
        self._params: Dict[str, List[Any]] = {}
        if params:
            for name, value in params.items():
                self.set(name, value)

    @staticmethod
    def _as_list(value: Any) -> List[Any]:
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    def get(self, name: str) -> Optional[List[Any]]:
        """Return a copy of the values stored for name, or None if absent"""
        if name not in self._params:
            return None
        return list(self._params[name])

    def has_param(self, name: str) -> bool:
        return name in self._params

    def contains(self, name: str, value: Any) -> bool:
        """Return True if name holds value"""
        return value in self._params.get(name, [])

    def set(self, name: str, value: Any) -> None:
        """Replace all values of name"""
        self._params[name] = self._as_list(value)

    def add(self, name: str, value: Any, deduplicate: bool = False) -> None:
        """
        Append value (or each element of a list value) to name.

        Args:
            name: Parameter name, created if absent
            value: Scalar or list of values to append
            deduplicate: Skip values already stored for name
        """
        values = self._params.setdefault(name, [])
        for item in self._as_list(value):
            if deduplicate and item in values:
                continue
            values.append(item)

    def remove(self, name: str) -> None:
        self._params.pop(name, None)

    def merge(self, other: "ParamBag") -> "ParamBag":
        """
        Append every value of other, per name, and return this bag.

        Args:
            other: Bag whose entries are appended in their original order

        Returns:
            This bag, for chaining
        """
        for name, values in other.get_array_copy().items():
            self._params.setdefault(name, []).extend(values)
        return self

    merge_with = merge

    def get_array_copy(self) -> Dict[str, List[Any]]:
        return {name: list(values) for name, values in self._params.items()}

    def request(self) -> List[str]:
        """Return URL-encoded name=value pairs, one per stored value"""
        pairs = []
        for name, values in self._params.items():
            for value in values:
                pairs.append(f"{quote_plus(name)}={quote_plus(str(value))}")
        return pairs

    def copy(self) -> "ParamBag":
        return ParamBag(self.get_array_copy())

    def count(self) -> int:
        return len(self._params)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._params))

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamBag):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"ParamBag({self._params!r})"
