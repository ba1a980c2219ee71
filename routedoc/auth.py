from __future__ import annotations

from typing import Iterable, List, Optional

from .assertions import ARRAY_KINDS, LITERAL_KINDS, OBJECT_KINDS, assert_kind
from .config import DEFAULT_CONFIG, ExtractorConfig
from .errors import SemanticGapError, ShapeMismatch
from .model import Authentication, Node
from .properties import get_literal_value, get_property


def normalize_strategy(name: str, config: ExtractorConfig = DEFAULT_CONFIG) -> str:
	for prefix, canonical in config.strategy_prefixes.items():
		if name.startswith(prefix):
			return canonical
	return name


def _strategy_name(literal: Node, source_id: str) -> str:
	value = literal.child("value")
	if not isinstance(value, str):
		raise ShapeMismatch(
			f"expected a strategy name string, found {literal.child('raw') or value!r} at {literal.line}:{literal.column}",
			source_id,
			literal.line,
			literal.column,
		)
	return value


def dedupe(names: Iterable[str]) -> List[str]:
	seen: List[str] = []
	for name in names:
		if name not in seen:
			seen.append(name)
	return seen


def find_authentication(
	route_config: Node,
	source_id: str,
	config: ExtractorConfig = DEFAULT_CONFIG,
) -> Optional[Authentication]:
	"""Describe the ``auth`` block of a route's config, if it has one."""
	auth = get_property(route_config, "auth", OBJECT_KINDS, source_id)
	if auth is None:
		return None

	mode = get_literal_value(auth, "mode", source_id)
	optional = isinstance(mode, str) and mode in config.optional_modes

	strategy_type = ""
	strategies = get_property(auth, "strategies", ARRAY_KINDS, source_id)
	if strategies is not None:
		names = []
		for element in strategies.child("elements") or ():
			literal = assert_kind(element, LITERAL_KINDS, source_id)
			names.append(normalize_strategy(_strategy_name(literal, source_id), config))
		strategy_type = ", ".join(dedupe(names))
	else:
		strategy = get_property(auth, "strategy", LITERAL_KINDS, source_id)
		if strategy is not None:
			strategy_type = normalize_strategy(_strategy_name(strategy, source_id), config)

	if not strategy_type:
		raise SemanticGapError("missing authentication strategy", source_id, auth.line, auth.column)

	return Authentication(optional=optional, type=strategy_type)
