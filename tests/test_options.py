"""Tests for matcher option resolution."""

from simplex.markers import NO_MARKERS, FieldMarkers
from simplex.matcher import Simplex
from simplex.options import SimplexOptions, resolve_options


class TestResolveOptions:
    def test_defaults(self):
        options = resolve_options()
        assert options == SimplexOptions()
        assert options.global_ is False
        assert options.field_markers == NO_MARKERS
        assert options.strict_whitespace is False
        assert options.weak_parse is False

    def test_flag_string(self):
        assert resolve_options("g").global_ is True
        assert resolve_options("gi").global_ is True
        assert resolve_options("i").global_ is False
        assert resolve_options("").global_ is False

    def test_mapping_with_camel_case_keys(self):
        options = resolve_options(
            {
                "global": True,
                "fieldMarkers": "<>",
                "strictWhitespace": True,
                "weakParse": True,
            }
        )
        assert options == SimplexOptions(
            global_=True,
            field_markers=FieldMarkers("<", ">"),
            strict_whitespace=True,
            weak_parse=True,
        )

    def test_mapping_with_snake_case_keys(self):
        options = resolve_options({"field_markers": ["${", "}"], "weak_parse": True})
        assert options.field_markers == FieldMarkers("${", "}")
        assert options.weak_parse is True
        assert options.global_ is False

    def test_unknown_keys_are_ignored(self):
        assert resolve_options({"caseInsensitive": True}) == SimplexOptions()

    def test_unrecognized_shape_uses_defaults(self):
        assert resolve_options(42) == SimplexOptions()
        assert resolve_options(["g"]) == SimplexOptions()

    def test_options_instance_passes_through(self):
        options = SimplexOptions(global_=True)
        assert resolve_options(options) is options

    def test_raw_marker_spec_in_constructor_is_resolved(self):
        assert SimplexOptions(field_markers="<>").field_markers == FieldMarkers("<", ">")
        assert SimplexOptions(field_markers=["${", "}"]).field_markers == FieldMarkers("${", "}")
        assert SimplexOptions(field_markers=None).field_markers == NO_MARKERS

    def test_unrecognized_marker_spec_in_constructor_falls_back(self):
        assert SimplexOptions(field_markers=42).field_markers == NO_MARKERS

    def test_options_instance_with_raw_markers_drives_matching(self):
        matcher = Simplex("<name>", SimplexOptions(field_markers="<>"))

        assert matcher.match("hi <joe> there") == {"name": "joe"}
