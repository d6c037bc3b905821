"""
Unit tests for the List Reconciler.
"""

from allways.reconcile import final_export_sequence, reconcile


class TestFinalExportSequence:

    def test_case_sensitive_order(self):
        names = ["foo_car", "A", "foo_bar", "foo", "c", "bAba", "b", "B", "bAbA", "C"]
        assert final_export_sequence(names) == [
            "A", "B", "C", "b", "bAbA", "bAba", "c", "foo", "foo_bar", "foo_car",
        ]

    def test_duplicates_collapse(self):
        assert final_export_sequence(["z", "a", "z", "a"]) == ["a", "z"]

    def test_empty(self):
        assert final_export_sequence([]) == []


class TestReconcile:

    def test_no_existing_list(self):
        result = reconcile(["foo", "bar"])
        assert result.names == ["bar", "foo"]
        assert result.previous is None
        assert result.added == ["bar", "foo"]
        assert result.removed == []

    def test_stale_names_dropped(self):
        result = reconcile(["bar", "baz"], ["bar", "foo"])
        assert result.names == ["bar", "baz"]
        assert result.added == ["baz"]
        assert result.removed == ["foo"]

    def test_unchanged(self):
        result = reconcile(["b", "a"], ["a", "b"])
        assert result.names == ["a", "b"]
        assert result.added == []
        assert result.removed == []

    def test_empty_candidates_still_produce_sequence(self):
        result = reconcile([], ["old"])
        assert result.names == []
        assert result.removed == ["old"]
