from __future__ import annotations

import logging
import os
import re
from typing import List

from .config import DEFAULT_CONFIG, ExtractorConfig
from .errors import ParseFailure


logger = logging.getLogger(__name__)


def module_title(path: str) -> str:
	name = os.path.splitext(os.path.basename(path))[0]
	return re.sub(r"^[a-z]", lambda m: m.group(0).upper(), name)


def scan_routes(routes_dir: str, config: ExtractorConfig = DEFAULT_CONFIG) -> List[str]:
	"""List the route modules directly inside ``routes_dir``, sorted by name."""
	paths: List[str] = []
	for filename in sorted(os.listdir(routes_dir)):
		if not filename.endswith(".js"):
			continue
		if filename in config.ignore:
			logger.debug("Skipping ignored route module %s", filename)
			continue
		path = os.path.join(routes_dir, filename)
		if os.path.isfile(path):
			paths.append(path)
	return paths


def read_source(path: str) -> str:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return fh.read()
	except UnicodeDecodeError as e:
		raise ParseFailure(f"not valid UTF-8: {e.reason} at byte {e.start}", path) from e
	except OSError as e:
		raise ParseFailure(f"cannot read file: {e.strerror or e}", path) from e
