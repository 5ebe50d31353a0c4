"""CLI entry point for SlideCheck validators."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Optional, Sequence

from .config import load_config
from .logging_utils import log_event, result_summary, run_log_path
from .models.config import Config
from .models.validation import ValidationResult
from .registry import TemplateCatalogError, TemplateRegistry, load_templates
from .validate.boundary import (
    parse_sections,
    parse_slide_specs,
    parse_slide_units,
    parse_text_map,
    parse_timings,
)
from .validate.sections import validate_section
from .validate.slides import validate_slide_spec, validate_slide_specs
from .validate.timing import validate_speech_density, validate_timing_sync


class InputError(Exception):
    """Raised when an input file is missing, unreadable or not valid JSON."""


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project-root",
        type=str,
        default=None,
        help="Path to project root (default: auto-detect)",
    )
    parser.add_argument(
        "--output", type=str, default=None, help="Write the validation report JSON here"
    )
    parser.add_argument(
        "--run-id", type=str, default=None, help="Log events to runs/<run-id>/run_log.jsonl"
    )


def _config(args: argparse.Namespace, require_catalog: bool = True) -> Config:
    return load_config(
        Path(args.project_root) if args.project_root else None,
        require_catalog=require_catalog,
    )


def _load_json(path_str: str, label: str) -> Any:
    path = Path(path_str)
    if not path.exists():
        raise InputError(f"{label} file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise InputError(f"{label} file is not valid JSON: {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"{label} file could not be read: {path}: {exc}") from exc


def _load_registry(args: argparse.Namespace, config: Config) -> TemplateRegistry:
    return load_templates(Path(args.templates) if args.templates else Path(config.templates_path))


def _unwrap(data: Any, key: str) -> Any:
    """Accept either a bare list or an object holding the list under `key`."""
    if isinstance(data, dict) and key in data:
        return data[key]
    return data


def _merge(results: Sequence[ValidationResult]) -> ValidationResult:
    errors = [e for r in results for e in r.errors]
    warnings = [w for r in results for w in r.warnings]
    return ValidationResult.build(errors=errors, warnings=warnings)


def _finish(
    args: argparse.Namespace, config: Config, command: str, result: ValidationResult
) -> int:
    """Print and optionally persist the report; exit code 1 on errors."""
    log_path = run_log_path(config, args.run_id)
    if log_path:
        log_event(log_path, "VALIDATE_DONE", {"command": command, **result_summary(result)})

    print(result.to_json())

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result.to_json(indent=2) + "\n")
        if log_path:
            log_event(log_path, "REPORT_WRITTEN", {"command": command, "path": str(output_path)})

    return 0 if result.valid else 1


def cmd_templates(args: argparse.Namespace) -> int:
    try:
        # An explicit --templates file stands in for the bundled catalog.
        config = _config(args, require_catalog=not args.templates)
        registry = _load_registry(args, config)
    except (FileNotFoundError, TemplateCatalogError) as exc:
        print(f"ERROR: {exc}")
        return 1
    log_path = run_log_path(config, args.run_id)
    if log_path:
        log_event(log_path, "TEMPLATES_LOADED", {"template_ids": registry.ids()})
    print(f"Template catalog passed: {len(registry)} templates.")
    return 0


def cmd_slides(args: argparse.Namespace) -> int:
    """Validate slide specs against the template catalog."""
    try:
        config = _config(args, require_catalog=not args.templates)
        registry = _load_registry(args, config)
        data = _load_json(args.slides, "Slides")
    except (FileNotFoundError, TemplateCatalogError, InputError) as exc:
        print(f"ERROR: {exc}")
        return 1

    if isinstance(data, dict) and "specs" in data:
        specs, parsed = parse_slide_specs(data["specs"])
        checked = validate_slide_specs(specs, registry)
        count = sum(len(spec.slides) for spec in specs)
    else:
        slides, parsed = parse_slide_units(_unwrap(data, "slides"))
        checked = validate_slide_spec(slides, registry)
        count = len(slides)

    log_path = run_log_path(config, args.run_id)
    if log_path:
        log_event(log_path, "INPUT_LOADED", {"path": args.slides, "slide_count": count})

    return _finish(args, config, "slides", _merge([parsed, checked]))


def cmd_sections(args: argparse.Namespace) -> int:
    """Validate section length and intent tags."""
    config = _config(args, require_catalog=False)
    try:
        data = _load_json(args.sections, "Sections")
    except InputError as exc:
        print(f"ERROR: {exc}")
        return 1

    sections, parsed = parse_sections(_unwrap(data, "sections"))
    log_path = run_log_path(config, args.run_id)
    if log_path:
        log_event(log_path, "INPUT_LOADED", {"path": args.sections, "section_count": len(sections)})

    results = [parsed] + [validate_section(section) for section in sections]
    return _finish(args, config, "sections", _merge(results))


def cmd_timings(args: argparse.Namespace) -> int:
    """Validate speech density and timing synchronization."""
    config = _config(args, require_catalog=False)
    try:
        timing_data = _load_json(args.timings, "Timings")
        text_data = _load_json(args.texts, "Texts")
    except InputError as exc:
        print(f"ERROR: {exc}")
        return 1

    timings, parsed_timings = parse_timings(_unwrap(timing_data, "timings"))
    texts, parsed_texts = parse_text_map(_unwrap(text_data, "lines"))

    log_path = run_log_path(config, args.run_id)
    if log_path:
        log_event(log_path, "INPUT_LOADED", {
            "path": args.timings,
            "timing_count": len(timings),
            "line_count": len(texts),
        })

    results = [
        parsed_timings,
        parsed_texts,
        validate_speech_density(timings, texts),
        validate_timing_sync(timings),
    ]
    return _finish(args, config, "timings", _merge(results))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SlideCheck CLI - slide, section and timing validation")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Templates command
    templates_parser = subparsers.add_parser(
        "templates", help="Load and check the template catalog"
    )
    _add_common_args(templates_parser)
    templates_parser.add_argument(
        "--templates", type=str, default=None, help="Template catalog JSON (default: bundled catalog)"
    )
    templates_parser.set_defaults(func=cmd_templates)

    # Slides command
    slides_parser = subparsers.add_parser(
        "slides", help="Validate slides against template constraints"
    )
    _add_common_args(slides_parser)
    slides_parser.add_argument(
        "--slides", type=str, required=True, help='JSON with "slides" or "specs"'
    )
    slides_parser.add_argument(
        "--templates", type=str, default=None, help="Template catalog JSON (default: bundled catalog)"
    )
    slides_parser.set_defaults(func=cmd_slides)

    # Sections command
    sections_parser = subparsers.add_parser(
        "sections", help="Check section length and intent tags"
    )
    _add_common_args(sections_parser)
    sections_parser.add_argument(
        "--sections", type=str, required=True, help='JSON with "sections"'
    )
    sections_parser.set_defaults(func=cmd_sections)

    # Timings command
    timings_parser = subparsers.add_parser(
        "timings", help="Check speech density and subtitle timing sync"
    )
    _add_common_args(timings_parser)
    timings_parser.add_argument(
        "--timings", type=str, required=True, help='JSON with "timings" sorted by startSec'
    )
    timings_parser.add_argument(
        "--texts", type=str, required=True, help='JSON with "lines" mapping lineId to text'
    )
    timings_parser.set_defaults(func=cmd_timings)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
