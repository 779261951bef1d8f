# (c) Copyright Datacraft, 2026
"""Enhancement errors."""


class EnhancementError(Exception):
	"""Base error for strategy generation."""
	pass


class InvalidColorError(EnhancementError, ValueError):
	"""A color is not a valid hex string."""

	def __init__(self, value: str):
		self.value = value
		super().__init__(f"Invalid hex color: {value!r}")


class AnalysisError(EnhancementError, KeyError):
	"""Required analysis data is missing."""

	def __init__(self, field: str, message: str | None = None):
		self.field = field
		super().__init__(message or f"Document analysis is missing '{field}'")

	def __str__(self) -> str:
		return self.args[0]
