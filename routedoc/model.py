from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, model_serializer


class Node(BaseModel):
	"""A tagged node of a parsed source tree.

	``kind`` is the discriminant (the ESTree ``type``). ``children`` holds the
	remaining fields in declaration order: scalars, nodes, tuples of nodes or
	read-only mappings for untyped objects. Position is kept for diagnostics
	only and never takes part in matching.
	"""

	model_config = ConfigDict(frozen=True)

	kind: str
	line: Optional[int] = None
	column: Optional[int] = None
	children: Dict[str, Any] = {}

	def attributes(self) -> Iterator[Any]:
		yield self.kind
		yield from self.children.values()

	def child(self, name: str) -> Any:
		return self.children.get(name)

	def to_estree(self, positions: bool = True) -> Dict[str, Any]:
		data: Dict[str, Any] = {"type": self.kind}
		for key, value in self.children.items():
			data[key] = _to_plain(value, positions)
		if positions and self.line is not None:
			data["loc"] = {"start": {"line": self.line, "column": self.column}}
		return data

	@model_serializer
	def serialize_estree(self) -> Dict[str, Any]:
		return self.to_estree()


def _to_plain(value: Any, positions: bool = True) -> Any:
	if isinstance(value, Node):
		return value.to_estree(positions)
	if isinstance(value, (tuple, list)):
		return [_to_plain(v, positions) for v in value]
	if isinstance(value, (dict, MappingProxyType)):
		return {k: _to_plain(v, positions) for k, v in value.items()}
	return value


def freeze_mapping(data: Mapping[str, Any]) -> Mapping[str, Any]:
	return MappingProxyType(dict(data))


class Authentication(BaseModel):
	optional: bool = False
	type: str


class RouteDescriptor(BaseModel):
	method: str
	path: str
	authentication: Optional[Authentication] = None
	validation: Optional[Node] = None
	response: Optional[Node] = None
	handler: Optional[Node] = None
	handler_name: Optional[str] = None
	line: Optional[int] = None

	@property
	def title(self) -> str:
		return f"{self.method} {self.path}"


class Diagnostic(BaseModel):
	source_id: str
	category: str
	message: str
	line: Optional[int] = None
	column: Optional[int] = None


class FileResult(BaseModel):
	source_id: str
	routes: List[RouteDescriptor] = []
	error: Optional[Diagnostic] = None

	@property
	def ok(self) -> bool:
		return self.error is None


class SourceFile(BaseModel):
	source_id: str
	source: Optional[str] = None
	tree: Optional[Dict[str, Any]] = None


class ModuleRoutes(BaseModel):
	title: str
	source_id: str
	routes: List[RouteDescriptor] = []
