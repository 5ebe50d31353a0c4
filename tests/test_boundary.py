"""Input boundary parsing tests."""

import unittest

from slidecheck.validate.boundary import (
    parse_sections,
    parse_slide_specs,
    parse_slide_units,
    parse_templates,
    parse_text_map,
    parse_timings,
)


class TestBoundaryParsing(unittest.TestCase):
    def test_well_formed_slides(self) -> None:
        slides, result = parse_slide_units([
            {"template": "title-slide", "vars": {"title": "T"}},
            {"template": "bullet-hero", "vars": {"bullets": ["a"]},
             "assets": [{"kind": "image", "path": "missing://"}]},
        ])
        self.assertTrue(result.valid)
        self.assertEqual([s.template for s in slides], ["title-slide", "bullet-hero"])
        self.assertEqual(slides[1].assets[0].path, "missing://")

    def test_malformed_items_are_reported_and_dropped(self) -> None:
        slides, result = parse_slide_units([
            {"template": "title-slide", "vars": {"title": "T"}},
            {"vars": {"title": "no template"}},
            "not an object",
        ])
        self.assertEqual(len(slides), 1)
        self.assertFalse(result.valid)
        self.assertTrue(all(e.code == "MALFORMED_INPUT" for e in result.errors))
        fields = [e.field for e in result.errors]
        self.assertIn("slides[1].template", fields)
        self.assertIn("slides[2]", fields)
        self.assertEqual(result.errors[0].context["index"], 1)

    def test_nested_location(self) -> None:
        _, result = parse_slide_units([
            {"template": "t", "assets": [{"kind": "image", "path": "a"}, {"kind": "font", "path": "b"}]},
        ])
        self.assertEqual([e.field for e in result.errors], ["slides[0].assets[1].kind"])

    def test_non_list_payload(self) -> None:
        sections, result = parse_sections({"id": "s1"})
        self.assertEqual(sections, [])
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].field, "sections")
        self.assertEqual(result.errors[0].code, "MALFORMED_INPUT")

    def test_sections_camel_case(self) -> None:
        sections, result = parse_sections([
            {"id": "s1", "scriptId": "script", "order": 0, "text": "Body", "intents": ["tip"]},
            {"id": "s2", "scriptId": "script", "order": "first", "text": "Body"},
        ])
        self.assertEqual([s.id for s in sections], ["s1"])
        self.assertEqual([e.field for e in result.errors], ["sections[1].order"])

    def test_timings(self) -> None:
        timings, result = parse_timings([
            {"lineId": "l1", "startSec": 0, "endSec": 1.5, "gapAfterSec": 0.1},
            {"lineId": "l2", "startSec": -1, "endSec": 1.0},
        ])
        self.assertEqual([t.line_id for t in timings], ["l1"])
        self.assertEqual(result.errors[0].field, "timings[1].startSec")

    def test_specs_and_templates(self) -> None:
        specs, spec_result = parse_slide_specs([
            {"section_id": "s1", "slides": [{"template": "t"}]},
        ])
        self.assertTrue(spec_result.valid)
        self.assertEqual(len(specs[0].slides), 1)

        templates, template_result = parse_templates([
            {"id": "t", "desc": "d", "vars": ["title"]},
            {"id": "u", "constraints": {"bullets_max": -1}},
        ])
        self.assertEqual([t.id for t in templates], ["t"])
        self.assertEqual(template_result.errors[0].field, "templates[1].constraints.bullets_max")

    def test_templates_camel_case_constraints(self) -> None:
        templates, result = parse_templates([
            {"id": "t", "vars": ["bullets"], "constraints": {"bulletsMax": 3}},
        ])
        self.assertTrue(result.valid)
        self.assertEqual(templates[0].constraints.bullets_max, 3)

    def test_text_map(self) -> None:
        texts, result = parse_text_map({"l1": "hello", "l2": 42})
        self.assertEqual(texts, {"l1": "hello"})
        self.assertEqual([e.field for e in result.errors], ["lines.l2"])

    def test_text_map_non_object(self) -> None:
        texts, result = parse_text_map(["hello"])
        self.assertEqual(texts, {})
        self.assertFalse(result.valid)


if __name__ == "__main__":
    unittest.main()
