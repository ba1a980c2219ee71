from __future__ import annotations

from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict


DEFAULT_IGNORE = frozenset({"defaults.js", "idp.js", "index.js", "validators.js"})


class ExtractorConfig(BaseModel):
	"""Settings for route extraction and discovery.

	``strategy_prefixes`` maps a strategy-name prefix to its canonical token;
	the first matching prefix wins, in insertion order.
	"""

	model_config = ConfigDict(frozen=True)

	export_object: str = "module"
	export_property: str = "exports"
	strategy_prefixes: Dict[str, str] = {
		"sessionToken": "sessionToken",
		"keyFetchToken": "keyFetchToken",
	}
	optional_modes: FrozenSet[str] = frozenset({"try", "optional"})
	ignore: FrozenSet[str] = DEFAULT_IGNORE
	max_depth: int = 400

	def with_ignored(self, names: Optional[list] = None) -> "ExtractorConfig":
		if not names:
			return self
		return self.model_copy(update={"ignore": self.ignore | frozenset(names)})


DEFAULT_CONFIG = ExtractorConfig()
