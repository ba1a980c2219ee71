"""Route extraction from hapi-style route modules.

A route module exports a single function returning an array of route
objects, either inline or through a local variable::

	module.exports = function (log, db) {
		const routes = [{ method: 'GET', path: '/account/status', handler: ... }]
		return routes
	}

Every shape violation raises a ``DiagnosticError`` subclass; nothing is
skipped or guessed.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .assertions import (
	ARRAY_KINDS,
	BLOCK_KINDS,
	FUNCTION_KINDS,
	IDENTIFIER_KINDS,
	OBJECT_KINDS,
	RETURN_KINDS,
	assert_kind,
)
from .auth import find_authentication
from .config import DEFAULT_CONFIG, ExtractorConfig
from .errors import CardinalityError, DiagnosticError, ShapeMismatch
from .matcher import RECURSIVE, SEQUENCES, Kind, find
from .model import FileResult, Node, RouteDescriptor
from .properties import get_literal_value, get_property


HANDLER_KINDS = FUNCTION_KINDS | IDENTIFIER_KINDS


def _export_criteria(config: ExtractorConfig) -> Dict[str, Any]:
	return {
		"type": Kind("ExpressionStatement"),
		"expression": {
			"type": Kind("AssignmentExpression"),
			"left": {
				"type": Kind("MemberExpression"),
				"object": {
					"type": Kind(*IDENTIFIER_KINDS),
					"name": config.export_object,
				},
				"property": {
					"type": Kind(*IDENTIFIER_KINDS),
					"name": config.export_property,
				},
			},
		},
	}


def _declarator_criteria(name: str) -> Dict[str, Any]:
	return {
		"type": Kind("VariableDeclarator"),
		"id": {
			"type": Kind(*IDENTIFIER_KINDS),
			"name": name,
		},
	}


def find_exported_function(tree: Node, source_id: str, config: ExtractorConfig = DEFAULT_CONFIG) -> Node:
	"""Return the body of the function assigned to ``module.exports``."""
	exported = find(tree, _export_criteria(config), RECURSIVE)
	if len(exported) != 1:
		raise CardinalityError(f"expected 1 export, found {len(exported)}", source_id)

	assignment = exported[0].child("expression")
	function = assert_kind(assignment.child("right"), FUNCTION_KINDS, source_id)
	return function.child("body")


def find_returned_routes(body: Any, source_id: str) -> Tuple[Any, ...]:
	"""Return the raw route nodes returned by an exported function body."""
	if isinstance(body, Node) and body.kind in BLOCK_KINDS:
		returned = find(body.child("body") or (), {"type": Kind(*RETURN_KINDS)}, SEQUENCES)
		if len(returned) != 1:
			raise CardinalityError(
				f"expected 1 return statement, found {len(returned)}",
				source_id,
				body.line,
				body.column,
			)
		returned_data = returned[0].child("argument")
	else:
		# expression-bodied arrow function
		returned_data = body

	if isinstance(returned_data, Node) and returned_data.kind in IDENTIFIER_KINDS:
		name = returned_data.child("name")
		definitions = find(body, _declarator_criteria(name), RECURSIVE)
		if len(definitions) != 1:
			raise CardinalityError(
				f"expected 1 set of route definitions, found {len(definitions)}",
				source_id,
				returned_data.line,
				returned_data.column,
			)
		returned_data = definitions[0].child("init")

	routes = assert_kind(returned_data, ARRAY_KINDS, source_id)
	return tuple(routes.child("elements") or ())


def find_route_handler(route: Node, source_id: str) -> Tuple[Optional[Node], Optional[str]]:
	handler = get_property(route, "handler", HANDLER_KINDS, source_id)
	if handler is None:
		raise ShapeMismatch('missing required property "handler"', source_id, route.line, route.column)

	if handler.kind in IDENTIFIER_KINDS:
		return None, handler.child("name")
	return handler, None


def build_route(route: Any, source_id: str, config: ExtractorConfig = DEFAULT_CONFIG) -> RouteDescriptor:
	route = assert_kind(route, OBJECT_KINDS, source_id)
	method = get_literal_value(route, "method", source_id, required=True)
	path = get_literal_value(route, "path", source_id, required=True)

	authentication = validation = response = None
	route_config = get_property(route, "config", OBJECT_KINDS, source_id)
	if route_config is not None:
		authentication = find_authentication(route_config, source_id, config)
		validation = get_property(route_config, "validate", OBJECT_KINDS, source_id)
		response = get_property(route_config, "response", OBJECT_KINDS, source_id)

	handler, handler_name = find_route_handler(route, source_id)

	return RouteDescriptor(
		method=str(method),
		path=str(path),
		authentication=authentication,
		validation=validation,
		response=response,
		handler=handler,
		handler_name=handler_name,
		line=route.line,
	)


def extract_routes(tree: Node, source_id: str, config: ExtractorConfig = DEFAULT_CONFIG) -> List[RouteDescriptor]:
	body = find_exported_function(tree, source_id, config)
	return [build_route(route, source_id, config) for route in find_returned_routes(body, source_id)]


def extract_file(source_id: str, tree: Node, config: ExtractorConfig = DEFAULT_CONFIG) -> FileResult:
	try:
		routes = extract_routes(tree, source_id, config)
	except DiagnosticError as e:
		return FileResult(source_id=source_id, error=e.to_diagnostic())
	return FileResult(source_id=source_id, routes=routes)


def extract_many(
	files: Iterable[Tuple[str, Node]],
	config: ExtractorConfig = DEFAULT_CONFIG,
) -> List[FileResult]:
	return [extract_file(source_id, tree, config) for source_id, tree in files]
