"""Template catalog lookup and loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from pydantic import ValidationError as SchemaError

from .models.template import TemplateDef


class TemplateCatalogError(Exception):
    """Raised when a template catalog file cannot be read or parsed."""


class DuplicateTemplateError(TemplateCatalogError):
    """Raised when two templates share an id."""

    def __init__(self, template_id: str):
        super().__init__(f"Duplicate template id in catalog: {template_id}")
        self.template_id = template_id


class TemplateRegistry:
    """Immutable id -> TemplateDef index, in catalog order."""

    def __init__(self, templates: Iterable[TemplateDef] = ()):
        self._templates: Dict[str, TemplateDef] = {}
        for template in templates:
            if template.id in self._templates:
                raise DuplicateTemplateError(template.id)
            self._templates[template.id] = template

    def get(self, template_id: str) -> Optional[TemplateDef]:
        return self._templates.get(template_id)

    def ids(self) -> List[str]:
        return list(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __iter__(self) -> Iterator[TemplateDef]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)


def load_templates(catalog_path: Path) -> TemplateRegistry:
    """Load a `{"templates": [...]}` catalog file into a registry."""
    try:
        with open(catalog_path, "r", encoding="utf-8") as handle:
            catalog = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise TemplateCatalogError(f"Failed to load templates: {catalog_path}: {exc}") from exc

    if not isinstance(catalog, dict) or not isinstance(catalog.get("templates"), list):
        raise TemplateCatalogError(f"Catalog missing 'templates' list: {catalog_path}")

    try:
        templates = [TemplateDef.model_validate(entry) for entry in catalog["templates"]]
    except SchemaError as exc:
        raise TemplateCatalogError(f"Invalid template entry in {catalog_path}: {exc}") from exc
    return TemplateRegistry(templates)
