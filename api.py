from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from routedoc.config import DEFAULT_CONFIG
from routedoc.errors import DiagnosticError
from routedoc.estree import from_estree, parse_javascript
from routedoc.model import FileResult, SourceFile
from routedoc.routes import extract_file


logger = logging.getLogger(__name__)

app = FastAPI(title="Route Docs Extractor")


class ExtractRequest(BaseModel):
	files: List[SourceFile]


@app.get("/health")
def health() -> dict:
	return {"status": "ok"}


@app.post("/extract")
def extract(req: ExtractRequest) -> List[dict]:
	results: List[FileResult] = []
	for f in req.files:
		if f.tree is None and f.source is None:
			raise HTTPException(status_code=400, detail=f"Neither source nor tree given for {f.source_id}")

		try:
			if f.tree is not None:
				tree = from_estree(f.tree, f.source_id, DEFAULT_CONFIG.max_depth)
			else:
				tree = parse_javascript(f.source, f.source_id, DEFAULT_CONFIG.max_depth)
		except DiagnosticError as e:
			logger.info("Could not read %s: %s", f.source_id, e.message)
			results.append(FileResult(source_id=f.source_id, error=e.to_diagnostic()))
			continue

		results.append(extract_file(f.source_id, tree, DEFAULT_CONFIG))
	return [r.model_dump(mode="json") for r in results]


def create_app() -> FastAPI:
	return app
