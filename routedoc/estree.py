"""Front-end adapter from JavaScript source and ESTree data to ``Node`` trees.

``from_estree`` accepts ESTree-shaped dictionaries as produced by acorn
(``--locations``) or ``esprima``'s ``toDict()``. ``parse_javascript`` runs
esprima itself.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import esprima
from esprima.error_handler import Error as EsprimaError

from .config import DEFAULT_CONFIG
from .errors import ParseFailure, ShapeMismatch
from .model import Node, freeze_mapping


POSITION_KEYS = frozenset({"loc", "range", "start", "end"})
SCALAR_TYPES = (str, int, float, bool, type(None))


def _field(value: Any, name: str) -> Any:
	if isinstance(value, Mapping):
		return value.get(name)
	return getattr(value, name, None)


def _position(data: Mapping[str, Any]) -> tuple:
	start = _field(data.get("loc"), "start")
	return _field(start, "line"), _field(start, "column")


def _convert(value: Any, source_id: str, max_depth: int, depth: int) -> Any:
	if depth > max_depth:
		raise ShapeMismatch(f"tree is deeper than {max_depth} levels", source_id)

	if isinstance(value, Mapping):
		kind = value.get("type")
		children: Dict[str, Any] = {}
		for key, child in value.items():
			if isinstance(kind, str) and (key == "type" or key in POSITION_KEYS):
				continue
			children[key] = _convert(child, source_id, max_depth, depth + 1)
		if not isinstance(kind, str):
			return freeze_mapping(children)
		line, column = _position(value)
		return Node(kind=kind, line=line, column=column, children=children)

	if isinstance(value, (list, tuple)):
		items: List[Any] = []
		for item in value:
			items.append(_convert(item, source_id, max_depth, depth + 1))
		return tuple(items)

	if isinstance(value, SCALAR_TYPES):
		return value
	# e.g. compiled regular expressions from literal values
	return str(value)


def from_estree(data: Mapping[str, Any], source_id: str = "", max_depth: int = DEFAULT_CONFIG.max_depth) -> Node:
	node = _convert(data, source_id, max_depth, 0)
	if not isinstance(node, Node):
		raise ShapeMismatch("expected an ESTree node with a \"type\"", source_id)
	return node


def parse_javascript(text: str, source_id: str = "", max_depth: Optional[int] = None) -> Node:
	try:
		program = esprima.parseScript(text, loc=True)
	except EsprimaError as e:
		message = getattr(e, "description", None) or str(e)
		raise ParseFailure(message, source_id, getattr(e, "lineNumber", None), getattr(e, "column", None)) from e
	except RecursionError as e:
		raise ParseFailure("source nests too deeply", source_id) from e

	try:
		data = program.toDict()
	except RecursionError as e:
		raise ParseFailure("source nests too deeply", source_id) from e
	return from_estree(data, source_id, max_depth or DEFAULT_CONFIG.max_depth)
