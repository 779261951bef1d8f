# (c) Copyright Datacraft, 2026
"""Shared enumerations."""
from enum import Enum


class Priority(str, Enum):
	LOW = "low"
	MEDIUM = "medium"
	HIGH = "high"


class Style(str, Enum):
	MODERN = "modern"
	CLASSIC = "classic"
	MINIMAL = "minimal"
	PLAYFUL = "playful"
	PROFESSIONAL = "professional"
	CREATIVE = "creative"


class ColorScheme(str, Enum):
	MONOCHROME = "monochrome"
	COMPLEMENTARY = "complementary"
	ANALOGOUS = "analogous"
	VIBRANT = "vibrant"
	MUTED = "muted"


class ChangeDomain(str, Enum):
	"""Category of visual property a strategy modifies."""
	COLORS = "colors"
	TYPOGRAPHY = "typography"
	LAYOUT = "layout"
	BACKGROUND = "background"
	DECORATIVE_ELEMENTS = "decorativeElements"


class Alignment(str, Enum):
	LEFT = "left"
	CENTER = "center"
	RIGHT = "right"
	JUSTIFY = "justify"


class BackgroundType(str, Enum):
	SOLID = "solid"
	GRADIENT = "gradient"
	PATTERN = "pattern"
	IMAGE = "image"


class ElementType(str, Enum):
	SHAPE = "shape"
	ICON = "icon"
	PATTERN = "pattern"
	DIVIDER = "divider"


class ElementPurpose(str, Enum):
	EMPHASIS = "emphasis"
	DECORATION = "decoration"
	SEPARATION = "separation"
	BACKGROUND = "background"
