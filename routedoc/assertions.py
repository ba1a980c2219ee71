from __future__ import annotations

from typing import AbstractSet, Any

from .errors import ShapeMismatch
from .model import Node


FUNCTION_KINDS = frozenset({"FunctionExpression", "ArrowFunctionExpression"})
ARRAY_KINDS = frozenset({"ArrayExpression"})
OBJECT_KINDS = frozenset({"ObjectExpression"})
LITERAL_KINDS = frozenset({"Literal"})
IDENTIFIER_KINDS = frozenset({"Identifier"})
RETURN_KINDS = frozenset({"ReturnStatement"})
BLOCK_KINDS = frozenset({"BlockStatement"})


def describe_kinds(kinds: AbstractSet[str]) -> str:
	return "[" + ", ".join(sorted(kinds)) + "]"


def assert_kind(node: Any, kinds: AbstractSet[str], source_id: str) -> Node:
	"""Raise ``ShapeMismatch`` unless ``node`` is a node of one of ``kinds``."""
	if not isinstance(node, Node):
		raise ShapeMismatch(f"expected one of {describe_kinds(kinds)}, found nothing", source_id)

	if node.kind not in kinds:
		raise ShapeMismatch(
			f"expected one of {describe_kinds(kinds)}, found {node.kind} at {node.line}:{node.column}",
			source_id,
			node.line,
			node.column,
		)
	return node
