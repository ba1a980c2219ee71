"""Structural matching over ``Node`` trees.

``match`` compares one value against a criteria template. For a mapping
template, every entry must be satisfied by *some* attribute of the node,
whatever that attribute is called, so ``{"key": {"name": "path"}}`` matches a
property whose key, value or any other child is an object naming ``path``.
``find`` layers an optional search over sequences and descendants on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List, Mapping, Union

from .model import Node


class Kind:
	"""Criteria value constraining the matched node's own discriminant."""

	__slots__ = ("kinds",)

	def __init__(self, *kinds: str):
		self.kinds: FrozenSet[str] = frozenset(kinds)

	def __contains__(self, kind: str) -> bool:
		return kind in self.kinds

	def __repr__(self) -> str:
		return f"Kind({', '.join(sorted(self.kinds))})"


@dataclass(frozen=True)
class FindOptions:
	into_sequences: bool = False
	recursive: bool = False


NO_RECURSION = FindOptions()
SEQUENCES = FindOptions(into_sequences=True)
RECURSIVE = FindOptions(recursive=True)

Criteria = Union[Mapping[str, Any], Kind, str, int, float, bool, None]


def is_sequence(value: Any) -> bool:
	return isinstance(value, (tuple, list))


def is_structural(value: Any) -> bool:
	return isinstance(value, (Node, tuple, list, Mapping))


def _attributes(value: Any) -> Iterable[Any]:
	if isinstance(value, Node):
		return value.attributes()
	if isinstance(value, Mapping):
		return value.values()
	return value


def _scalar_equal(value: Any, expected: Any) -> bool:
	if isinstance(value, bool) or isinstance(expected, bool):
		return value is expected
	return value == expected


def match(node: Any, criteria: Criteria) -> bool:
	if isinstance(criteria, Kind):
		return isinstance(node, Node) and node.kind in criteria

	if not is_structural(node):
		if is_structural(criteria):
			return False
		return _scalar_equal(node, criteria)

	if not isinstance(criteria, Mapping):
		return False

	for expected in criteria.values():
		if isinstance(expected, Kind):
			if not (isinstance(node, Node) and node.kind in expected):
				return False
			continue
		if not any(match(value, expected) for value in _attributes(node)):
			return False
	return True


def find(node: Any, criteria: Criteria, options: FindOptions = NO_RECURSION) -> List[Any]:
	"""Return every value under ``node`` matching ``criteria``, in pre-order.

	A matching value is not searched further. Sequences are entered when
	``into_sequences`` or ``recursive`` is set; nodes and mappings only when
	``recursive`` is set.
	"""
	results: List[Any] = []
	stack: List[Any] = [node]
	while stack:
		current = stack.pop()
		if match(current, criteria):
			results.append(current)
			continue
		if is_sequence(current) and (options.into_sequences or options.recursive):
			stack.extend(reversed(current))
		elif is_structural(current) and options.recursive:
			stack.extend(reversed(list(_attributes(current))))
	return results
