# (c) Copyright Datacraft, 2026
"""Logging helpers."""
from logging.config import dictConfig
from pathlib import Path

import yaml


def configure_logging(config_path: Path | str | None) -> bool:
	"""
	Apply a YAML logging configuration.

	Returns True when a configuration file was found and applied.
	"""
	if config_path is None:
		return False

	path = Path(config_path)
	if not path.exists() or not path.is_file():
		return False

	with open(path, "r") as stream:
		config = yaml.safe_load(stream)

	dictConfig(config)
	return True
