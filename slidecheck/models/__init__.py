"""Pydantic models for SlideCheck contracts."""

from .base import SlideCheckBaseModel
from .config import Config
from .section import INTENT_TYPES, IntentType, Section
from .slide import MISSING_ASSET_PATH, AssetRef, SlideSpec, SlideUnit
from .template import TemplateConstraints, TemplateDef
from .timing import Timing
from .validation import (
    ErrorCode,
    ValidationError,
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
    WarningCode,
)

__all__ = [
    "Config",
    "SlideCheckBaseModel",
    "INTENT_TYPES",
    "IntentType",
    "Section",
    "MISSING_ASSET_PATH",
    "AssetRef",
    "SlideSpec",
    "SlideUnit",
    "TemplateConstraints",
    "TemplateDef",
    "Timing",
    "ErrorCode",
    "WarningCode",
    "ValidationIssue",
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
]
