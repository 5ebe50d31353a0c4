"""Runtime configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .models.config import Config

TEMPLATE_CATALOG_RELPATH = Path("assets") / "templates" / "default_templates.json"


def load_config(project_root: Optional[Path] = None, require_catalog: bool = True) -> Config:
    """Resolve project paths under `project_root` (default: the repo root).

    Only the bundled template catalog is checked for existence, and only when
    `require_catalog` is set; section and timing checks never read it.
    """
    root = project_root or Path(__file__).resolve().parents[1]
    templates_path = root / TEMPLATE_CATALOG_RELPATH

    if require_catalog and not templates_path.is_file():
        raise FileNotFoundError(f"Missing template catalog: {templates_path}")

    return Config(
        project_root=str(root),
        assets_dir=str(root / "assets"),
        templates_path=str(templates_path),
        inputs_dir=str(root / "inputs"),
        runs_dir=str(root / "runs"),
    )
