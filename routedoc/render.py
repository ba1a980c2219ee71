from __future__ import annotations

import json
import re
from typing import List, Optional

from .model import ModuleRoutes, Node, RouteDescriptor


def slugify(title: str) -> str:
	return re.sub(r"[^a-z0-9_-]", "", re.sub(r"\s", "-", title.lower()))


def _auth_badge(route: RouteDescriptor) -> str:
	if route.authentication is None:
		return ""
	if route.authentication.optional:
		return ":lock::question:"
	return ":lock:"


def _json_block(label: str, node: Optional[Node]) -> List[str]:
	if node is None:
		return []
	return [
		f"{label}:",
		"",
		"```json",
		json.dumps(node.to_estree(positions=False), indent=2),
		"```",
		"",
	]


def render_contents_entry(route: RouteDescriptor) -> str:
	title = route.title
	if route.authentication is None:
		return f"  * [{title}](#{slugify(title)})"
	return f"  * [{title} {_auth_badge(route)} {route.authentication.type}](#{slugify(title)})"


def render_route(route: RouteDescriptor) -> str:
	parts: List[str] = [f"## {route.title}", ""]
	if route.authentication is not None:
		prefix = " Optionally" if route.authentication.optional else ""
		parts.append(f"{_auth_badge(route)}{prefix} HAWK-authenticated with {route.authentication.type}.")
		parts.append("")
	if route.handler_name:
		parts.append(f"Handler: `{route.handler_name}`")
		parts.append("")
	parts.extend(_json_block("Request validation", route.validation))
	parts.extend(_json_block("Response", route.response))
	parts.extend(_json_block("Handler", route.handler))
	return "\n".join(parts)


def render_markdown(modules: List[ModuleRoutes]) -> str:
	"""Render a contents list followed by one section per route."""
	contents: List[str] = []
	body: List[str] = []
	for module in modules:
		contents.append(f"* {module.title}")
		for route in module.routes:
			contents.append(render_contents_entry(route))
			body.append(render_route(route))
	return "\n".join(contents) + "\n\n" + "\n\n".join(body).rstrip("\n") + "\n"
