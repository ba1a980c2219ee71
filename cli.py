from __future__ import annotations

import argparse
import json
import logging
import os
import sys

import uvicorn

from routedoc.config import DEFAULT_CONFIG
from routedoc.errors import DiagnosticError
from routedoc.estree import parse_javascript
from routedoc.fs_scan import module_title, read_source, scan_routes
from routedoc.model import FileResult, ModuleRoutes
from routedoc.render import render_markdown
from routedoc.routes import extract_file, extract_routes


logger = logging.getLogger(__name__)


def cmd_generate(args: argparse.Namespace) -> int:
	config = DEFAULT_CONFIG.with_ignored(args.ignore)
	routes_dir = os.path.abspath(args.routes_dir)
	modules = []
	try:
		for path in scan_routes(routes_dir, config):
			logger.info("Parsing %s", path)
			tree = parse_javascript(read_source(path), path, config.max_depth)
			routes = extract_routes(tree, path, config)
			modules.append(ModuleRoutes(title=module_title(path), source_id=path, routes=routes))
	except DiagnosticError as e:
		print(str(e), file=sys.stderr)
		return 1

	output = os.path.abspath(args.output)
	with open(output, "w", encoding="utf-8") as fh:
		fh.write(render_markdown(modules))
	os.chmod(output, 0o644)
	logger.info("Wrote %d route modules to %s", len(modules), output)
	return 0


def cmd_extract(args: argparse.Namespace) -> int:
	config = DEFAULT_CONFIG
	results = []
	for path in args.paths:
		try:
			tree = parse_javascript(read_source(path), path, config.max_depth)
		except DiagnosticError as e:
			results.append(FileResult(source_id=path, error=e.to_diagnostic()))
			continue
		results.append(extract_file(path, tree, config))
	print(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
	return 0 if all(r.ok for r in results) else 1


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def main(argv=None) -> int:
	parser = argparse.ArgumentParser(prog="routedoc")
	parser.add_argument("-v", "--verbose", action="store_true")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pg = sub.add_parser("generate", help="Write Markdown API docs for a routes directory")
	pg.add_argument("--routes-dir", default="lib/routes", help="Directory holding route modules")
	pg.add_argument("-o", "--output", default="docs/api.md", help="Markdown file to write")
	pg.add_argument("--ignore", action="append", default=[], help="Extra file name to skip")
	pg.set_defaults(func=cmd_generate)

	pe = sub.add_parser("extract", help="Print extracted routes as JSON")
	pe.add_argument("paths", nargs="+", help="Route module files")
	pe.set_defaults(func=cmd_extract)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
