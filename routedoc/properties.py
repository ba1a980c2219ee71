from __future__ import annotations

from typing import AbstractSet, Any, Dict, Optional

from .assertions import LITERAL_KINDS, assert_kind
from .errors import CardinalityError, ShapeMismatch
from .matcher import SEQUENCES, Kind, find
from .model import Node


def _property_criteria(name: str) -> Dict[str, Any]:
	return {
		"type": Kind("Property"),
		"kind": "init",
		"key": {
			"type": Kind("Identifier"),
			"name": name,
		},
	}


def get_property(
	object_node: Node,
	name: str,
	kinds: AbstractSet[str],
	source_id: str,
) -> Optional[Node]:
	"""Return the value of property ``name`` of an object literal.

	Returns ``None`` when the property is absent. Raises ``CardinalityError``
	when it occurs more than once and ``ShapeMismatch`` when its value is not
	one of ``kinds``.
	"""
	properties = object_node.child("properties") or ()
	found = find(properties, _property_criteria(name), SEQUENCES)

	if len(found) > 1:
		raise CardinalityError(
			f'expected at most 1 property "{name}", found {len(found)}',
			source_id,
			object_node.line,
			object_node.column,
		)
	if not found:
		return None

	return assert_kind(found[0].child("value"), kinds, source_id)


def get_literal_value(object_node: Node, name: str, source_id: str, required: bool = False) -> Any:
	literal = get_property(object_node, name, LITERAL_KINDS, source_id)
	if literal is None:
		if required:
			raise ShapeMismatch(
				f'missing required property "{name}"',
				source_id,
				object_node.line,
				object_node.column,
			)
		return None
	return literal.child("value")
