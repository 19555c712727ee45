"""Tests for subject path parsing."""

from app.models.taxonomy import ROOT_NODE_NAME
from app.services.taxonomy.categories import (
    build_category_view,
    build_top_and_second_level,
    is_full_subject_path,
    split_subject_path,
)


class TestSubjectPath:
    def test_full_path(self):
        assert is_full_subject_path("/Biology/Genetics")
        assert is_full_subject_path("/Biology/Genetics/Gene expression")

    def test_top_level_only(self):
        assert not is_full_subject_path("/OnlyTop")

    def test_old_style_without_leading_slash(self):
        assert not is_full_subject_path("Biology/Genetics/x")
        assert not is_full_subject_path("bad-path")

    def test_empty(self):
        assert not is_full_subject_path("")
        assert not is_full_subject_path("/")

    def test_trailing_separator_does_not_add_level(self):
        assert split_subject_path("/Biology/") == ["", "Biology"]
        assert not is_full_subject_path("/Biology/")


class TestTopAndSecondLevel:
    def test_example(self):
        paths = ["/Biology/Genetics/x", "/Biology/Genetics/y", "/Biology/Ecology/z", "bad-path"]
        assert build_top_and_second_level(paths) == {"Biology": ["Ecology", "Genetics"]}

    def test_short_paths_contribute_nothing(self):
        assert build_top_and_second_level(["/OnlyTop"]) == {}

    def test_sorted_and_unique(self):
        paths = ["/B/z", "/B/a", "/B/z/deep", "/A/m", "/B/a"]
        result = build_top_and_second_level(paths)
        assert list(result) == ["A", "B"]
        assert result["B"] == ["a", "z"]

    def test_case_sensitive_sort(self):
        result = build_top_and_second_level(["/T/beta", "/T/Alpha", "/T/alpha"])
        assert result["T"] == ["Alpha", "alpha", "beta"]

    def test_empty_input(self):
        assert build_top_and_second_level([]) == {}


class TestCategoryView:
    def test_nests_every_level(self):
        root = build_category_view(["/Biology/Genetics/Gene expression", "/Biology/Ecology"])
        assert root.name == ROOT_NODE_NAME
        assert list(root.children) == ["Biology"]
        biology = root.get_child("Biology")
        assert list(biology.children) == ["Ecology", "Genetics"]
        assert list(biology.get_child("Genetics").children) == ["Gene expression"]

    def test_shares_nodes_between_paths(self):
        root = build_category_view(["/A/B/C", "/A/B/D", "/A/B"])
        assert list(root.find(["A", "B"]).children) == ["C", "D"]

    def test_ignores_malformed(self):
        root = build_category_view(["/OnlyTop", "plain", "/X/Y"])
        assert list(root.children) == ["X"]

    def test_find_missing(self):
        root = build_category_view(["/A/B"])
        assert root.find(["A", "nope"]) is None
        assert root.find([]) is root

    def test_to_dict(self):
        root = build_category_view(["/A/B"])
        assert root.to_dict() == {
            "name": "ROOT",
            "children": [{"name": "A", "children": [{"name": "B", "children": []}]}],
        }
