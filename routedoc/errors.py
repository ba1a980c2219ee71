"""Diagnostic exception hierarchy.

Raised by the extraction core when a route module does not have the shape
it expects. ``extract_file`` is the only place that turns them into a
``Diagnostic`` value.
"""

from __future__ import annotations

from typing import Optional

from .model import Diagnostic


class DiagnosticError(Exception):
	"""A malformed input shape, with enough context to point at it."""

	category = "diagnostic"

	def __init__(
		self,
		message: str,
		source_id: str = "",
		line: Optional[int] = None,
		column: Optional[int] = None,
	) -> None:
		self.message = message
		self.source_id = source_id
		self.line = line
		self.column = column
		super().__init__(message)

	def __str__(self) -> str:
		if not self.source_id:
			return self.message
		text = f'Error parsing "{self.source_id}"'
		if self.line:
			text += f" at line {self.line}"
		return f"{text}:\n{self.message}"

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			source_id=self.source_id,
			category=self.category,
			message=self.message,
			line=self.line,
			column=self.column,
		)


class ShapeMismatch(DiagnosticError):
	"""A node has an unexpected kind, or a required property is missing."""

	category = "shape"


class CardinalityError(DiagnosticError):
	"""Zero or several matches where exactly one was required."""

	category = "cardinality"


class SemanticGapError(DiagnosticError):
	"""A recognised shape lacks required content."""

	category = "semantic"


class ParseFailure(DiagnosticError):
	"""The front-end could not turn source text into a tree."""

	category = "parse"
