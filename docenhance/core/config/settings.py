# (c) Copyright Datacraft, 2026
"""Application settings configuration."""
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	log_config: Path | None = Path("logging.yaml")

	# Enhancer fan-out
	parallel_enhancers: bool = True
	max_workers: int = Field(gt=0, default=5)

	# Ranking
	low_score_threshold: float = Field(ge=0, le=100, default=50.0)
	low_score_boost: float = Field(ge=1.0, default=1.2)
	optimal_top_n: int = Field(gt=0, default=5)

	# Filtering; 0 keeps every candidate
	min_impact: float = Field(ge=0, le=100, default=0.0)

	# Color
	min_contrast_ratio: float = Field(ge=1.0, le=21.0, default=4.5)

	# Background
	background_image_url: str | None = None

	model_config = SettingsConfigDict(
		env_prefix='de_',
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)


_settings: Settings | None = None


def get_settings() -> Settings:
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings
