"""Tests for lazy glob search over directory trees."""

from __future__ import annotations

import unittest
from unittest import mock

from frozendir import Directory, File, MatchOptions, PatternError, build_directory


def sample_tree() -> Directory:
    return build_directory(
        {
            "a": {
                "b.txt": b"hello",
                "c.md": b"notes",
                "deep": {"d.txt": b"deep"},
            },
            "e.txt": b"top",
            "f": {},
        }
    )


class FindTests(unittest.TestCase):
    def test_scenario_single_match(self) -> None:
        tree = Directory("", (Directory("a", (File("a/b.txt", b"hello"),)),))

        matches = list(tree.find("a/*.txt"))

        self.assertEqual(len(matches), 1)
        self.assertEqual(matches[0], File("a/b.txt", b"hello"))

    def test_match_set_is_exact_at_every_depth(self) -> None:
        matches = {entry.raw_path.value for entry in sample_tree().find("**/*.txt")}
        self.assertEqual(matches, {"a/b.txt", "a/deep/d.txt", "e.txt"})

    def test_directories_can_match(self) -> None:
        matches = [entry.raw_path.value for entry in sample_tree().find("?")]
        self.assertCountEqual(matches, ["a", "f"])

    def test_traversal_order_is_stack_based(self) -> None:
        visited = [entry.raw_path.value for entry in sample_tree().find("**")]
        self.assertEqual(
            visited,
            ["f", "e.txt", "a", "a/deep", "a/deep/d.txt", "a/c.md", "a/b.txt"],
        )

    def test_every_entry_is_tested_exactly_once(self) -> None:
        tree = sample_tree()
        globs = tree.find("no-such-entry")
        with mock.patch.object(globs.pattern.__class__, "matches", autospec=True, return_value=False) as matches:
            self.assertEqual(list(globs), [])
        tested = [call.args[1] for call in matches.call_args_list]
        self.assertCountEqual(tested, [entry.raw_path.value for entry in tree.walk()])

    def test_bad_pattern_fails_before_traversal(self) -> None:
        tree = sample_tree()
        with mock.patch.object(Directory, "entries", new_callable=mock.PropertyMock) as entries:
            with self.assertRaises(PatternError):
                tree.find("[invalid")
            entries.assert_not_called()

    def test_iteration_is_lazy_and_can_stop_early(self) -> None:
        globs = sample_tree().find("**")
        first = next(globs)
        self.assertEqual(first.raw_path.value, "f")
        self.assertEqual(len(list(globs)), 6)
        self.assertEqual(list(globs), [])

    def test_each_call_restarts_from_scratch(self) -> None:
        tree = sample_tree()
        self.assertEqual(list(tree.find("*.md")), list(tree.find("*.md")))

    def test_find_with_options(self) -> None:
        options = MatchOptions(require_literal_separator=True)
        matches = [entry.raw_path.value for entry in sample_tree().find("*.txt", options)]
        self.assertEqual(matches, ["e.txt"])

    def test_empty_tree_yields_nothing(self) -> None:
        self.assertEqual(list(Directory("").find("**")), [])


if __name__ == "__main__":
    unittest.main()
