"""Tests for directory lookup and projections."""

from __future__ import annotations

import unittest
from pathlib import PurePosixPath

from frozendir import Directory, File, Owned


def sample_tree() -> Directory:
    return Directory(
        "",
        (
            File("README.md", b"# readme"),
            Directory(
                "a",
                (
                    File("a/b.txt", b"hello"),
                    Directory("a/nested", (File("a/nested/deep.txt", b"deep"),)),
                ),
            ),
            File("z.bin", b"\x00\x01"),
            Directory("empty"),
        ),
    )


class DirectoryProjectionTests(unittest.TestCase):
    def test_entries_preserve_construction_order(self) -> None:
        tree = sample_tree()
        self.assertEqual(
            [str(entry.path) for entry in tree.entries],
            ["README.md", "a", "z.bin", "empty"],
        )

    def test_files_and_dirs_filter_direct_children_in_order(self) -> None:
        tree = sample_tree()
        self.assertEqual([str(f.path) for f in tree.files()], ["README.md", "z.bin"])
        self.assertEqual([str(d.path) for d in tree.dirs()], ["a", "empty"])

    def test_children_empty_for_files(self) -> None:
        tree = sample_tree()
        for entry in tree.walk():
            if isinstance(entry, File):
                self.assertEqual(entry.children(), ())
            else:
                self.assertEqual(entry.children(), entry.entries)

    def test_walk_is_preorder(self) -> None:
        self.assertEqual(
            [str(entry.path) for entry in sample_tree().walk()],
            ["README.md", "a", "a/b.txt", "a/nested", "a/nested/deep.txt", "z.bin", "empty"],
        )


class DirectoryLookupTests(unittest.TestCase):
    def test_lookup_scenario(self) -> None:
        tree = Directory("", (Directory("a", (File("a/b.txt", b"hello"),)),))

        found = tree.get_file("a/b.txt")

        self.assertIsNotNone(found)
        assert found is not None
        self.assertEqual(found.contents, b"hello")
        self.assertTrue(tree.contains("a"))
        self.assertFalse(tree.contains("a/c.txt"))

    def test_every_entry_round_trips_through_get_entry(self) -> None:
        tree = sample_tree()
        for entry in tree.walk():
            self.assertEqual(tree.get_entry(entry.path), entry)
            self.assertEqual(tree.get_entry(str(entry.path)), entry)

    def test_get_file_and_get_dir_filter_by_variant(self) -> None:
        tree = sample_tree()
        self.assertIsNone(tree.get_file("a"))
        self.assertIsNone(tree.get_dir("a/b.txt"))
        self.assertIsNotNone(tree.get_dir("a/nested"))
        self.assertIsNotNone(tree.get_file(PurePosixPath("a/nested/deep.txt")))
        self.assertIsNone(tree.get_entry("missing"))

    def test_lookup_uses_stored_paths_not_nesting(self) -> None:
        tree = Directory("", (Directory("outer", (File("elsewhere.txt", b"x"),)),))
        self.assertIsNotNone(tree.get_file("elsewhere.txt"))
        self.assertIsNone(tree.get_file("outer/elsewhere.txt"))

    def test_first_preorder_match_wins(self) -> None:
        nested_duplicate = File("dup", b"nested")
        sibling_duplicate = File("dup", b"sibling")
        tree = Directory(
            "",
            (
                Directory("first", (nested_duplicate,)),
                sibling_duplicate,
            ),
        )
        found = tree.get_file("dup")
        assert found is not None
        self.assertEqual(found.contents, b"nested")


class DirectoryStorageTests(unittest.TestCase):
    def test_borrowed_and_owned_trees_are_equal(self) -> None:
        self.assertEqual(sample_tree(), sample_tree().to_owned())

    def test_to_owned_converts_every_entry(self) -> None:
        owned = sample_tree().to_owned()
        self.assertTrue(owned.raw_entries.is_owned)
        for entry in owned.walk():
            self.assertTrue(entry.raw_path.is_owned)
            if isinstance(entry, File):
                self.assertTrue(entry.raw_contents.is_owned)

    def test_trees_are_hashable(self) -> None:
        self.assertEqual(hash(sample_tree()), hash(sample_tree().to_owned()))

    def test_explicit_owned_storage_is_kept(self) -> None:
        tree = Directory(Owned(""), Owned([File("a", b"")]))
        self.assertTrue(tree.raw_entries.is_owned)
        self.assertIsInstance(tree.entries, tuple)

    def test_plain_list_of_entries_is_frozen_into_a_tuple(self) -> None:
        tree = Directory("", [File("a", b"x")])
        self.assertTrue(tree.raw_entries.is_borrowed)
        self.assertEqual(tree.entries, (File("a", b"x"),))
        self.assertEqual(tree, Directory("", (File("a", b"x"),)))


if __name__ == "__main__":
    unittest.main()
