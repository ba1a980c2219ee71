"""Route documentation extractor for hapi-style route modules.

Modules:
- matcher.py: Structural matching and search over parsed source trees.
- assertions.py: Node kind guards raising positioned diagnostics.
- properties.py: Object-literal property accessors.
- auth.py: Authentication strategy normalization.
- routes.py: Route descriptor extraction per source file.
- estree.py: ESTree / esprima front-end adapter.
- fs_scan.py: Route module discovery.
- render.py: Markdown rendering of extracted routes.
- model.py: Data structures for nodes, routes and per-file results.
"""

__all__ = [
	"matcher",
	"assertions",
	"properties",
	"auth",
	"routes",
	"estree",
	"fs_scan",
	"render",
	"model",
	"config",
	"errors",
]
