"""Column alignment, hidden filtering, and consumption of listings.

Padding is computed over every entry, including hidden ones, so toggling
``show_hidden`` never shifts the columns of the rows that remain.
"""

from __future__ import annotations

import io
import unittest

from lazyls.entry import EntryDescriptor, EntryKind
from lazyls.errors import ListingConsumedError
from lazyls.listing import ListingState, format_row
from lazyls.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _descriptor(name: str, size: str = "1kb", kind: EntryKind = EntryKind.FILE) -> EntryDescriptor:
    return EntryDescriptor(name=name, kind=kind, size_display=size, time_display="30 Jan 20:37")


class PaddingTests(unittest.TestCase):
    def test_names_have_same_length_after_padding(self) -> None:
        state = ListingState(entries=[_descriptor("test"), _descriptor("test_test")])
        state.pad()
        self.assertEqual(len(state.entries[0].name), len(state.entries[1].name))

    def test_sizes_have_same_length_after_padding(self) -> None:
        state = ListingState(entries=[_descriptor("a", "1KB"), _descriptor("b", "495B")])
        state.pad()
        self.assertEqual(len(state.entries[0].size_display), len(state.entries[1].size_display))

    def test_longest_value_still_gets_one_trailing_space(self) -> None:
        state = ListingState(entries=[_descriptor("test", "12B"), _descriptor("test_test", "1KB")])
        state.pad()
        self.assertEqual(state.entries[1].name, "test_test ")
        self.assertEqual(state.entries[0].name, "test      ")
        self.assertEqual(state.entries[0].size_display, "12B ")

    def test_pad_twice_is_a_noop(self) -> None:
        state = ListingState(entries=[_descriptor("ab"), _descriptor("abcd")])
        state.pad()
        first = [item.name for item in state.entries]
        state.pad()
        self.assertEqual([item.name for item in state.entries], first)
        self.assertTrue(state.padded)

    def test_column_widths_cover_all_entries(self) -> None:
        state = ListingState(entries=[_descriptor(".git", "-"), _descriptor("README", "12KB")])
        self.assertEqual(state.column_widths(), (6, 4))


class RenderTests(unittest.TestCase):
    def test_plain_row_layout(self) -> None:
        state = ListingState(entries=[_descriptor("a", "1KB"), _descriptor("bbb", "12B")])
        lines = state.render(PLAIN_THEME)
        self.assertEqual(lines, ["a    1KB  30 Jan 20:37", "bbb  12B  30 Jan 20:37"])

    def test_rows_keep_traversal_order(self) -> None:
        state = ListingState(entries=[_descriptor("zeta"), _descriptor("alpha"), _descriptor("mid")])
        lines = state.render(PLAIN_THEME)
        self.assertEqual([line.split()[0] for line in lines], ["zeta", "alpha", "mid"])

    def test_hidden_entries_filtered_but_widths_include_them(self) -> None:
        state = ListingState(entries=[_descriptor(".git"), _descriptor("README")])
        state.setup_args((False, False, None))
        lines = state.render(PLAIN_THEME)
        self.assertEqual(lines, ["README  1kb  30 Jan 20:37"])

        hidden_long = ListingState(entries=[_descriptor(".long_hidden_name"), _descriptor("README")])
        lines = hidden_long.render(PLAIN_THEME)
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("README" + " " * 12 + " 1kb"))

    def test_show_hidden_includes_dot_entries(self) -> None:
        state = ListingState(entries=[_descriptor(".git"), _descriptor("README")], show_hidden=True)
        lines = state.render(PLAIN_THEME)
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith(".git "))

    def test_all_hidden_emits_nothing(self) -> None:
        state = ListingState(entries=[_descriptor(".a"), _descriptor(".b")])
        self.assertEqual(state.render(PLAIN_THEME), [])

    def test_empty_listing_emits_nothing(self) -> None:
        self.assertEqual(ListingState().render(PLAIN_THEME), [])

    def test_render_consumes_state(self) -> None:
        state = ListingState(entries=[_descriptor("a")])
        state.render(PLAIN_THEME)
        self.assertTrue(state.consumed)
        self.assertEqual(state.entries, [])
        with self.assertRaises(ListingConsumedError):
            state.render(PLAIN_THEME)
        with self.assertRaises(ListingConsumedError):
            state.pad()

    def test_print_writes_lines_to_stream(self) -> None:
        state = ListingState(entries=[_descriptor("a", "1KB")])
        out = io.StringIO()
        state.print(out, PLAIN_THEME)
        self.assertEqual(out.getvalue(), "a  1KB  30 Jan 20:37\n")


class RowStyleTests(unittest.TestCase):
    def test_directory_uses_dir_name_and_neutral_size_styles(self) -> None:
        row = format_row(_descriptor("src ", "4KB ", EntryKind.DIRECTORY), DEFAULT_THEME)
        reset = DEFAULT_THEME.reset
        self.assertEqual(
            row,
            f"{DEFAULT_THEME.dir_name}src {reset} {DEFAULT_THEME.dir_size}4KB {reset} "
            f"{DEFAULT_THEME.timestamp}30 Jan 20:37{reset}",
        )

    def test_file_uses_neutral_name_and_accent_size_styles(self) -> None:
        row = format_row(_descriptor("a.txt", "1KB"), DEFAULT_THEME)
        self.assertTrue(row.startswith(f"{DEFAULT_THEME.file_name}a.txt{DEFAULT_THEME.reset}"))
        self.assertIn(f"{DEFAULT_THEME.file_size}1KB{DEFAULT_THEME.reset}", row)
        self.assertNotIn(DEFAULT_THEME.dir_name, row)

    def test_three_slots_are_distinct(self) -> None:
        styles = {DEFAULT_THEME.dir_name, DEFAULT_THEME.file_size, DEFAULT_THEME.timestamp}
        self.assertEqual(len(styles), 3)


class SetupArgsTests(unittest.TestCase):
    def test_setup_args_should_setup(self) -> None:
        state = ListingState()
        state.setup_args((True, True, "dir"))
        self.assertTrue(state.show_hidden)
        self.assertTrue(state.long_format)
        self.assertEqual(state.tree, (True, "dir"))

    def test_missing_tree_root_keeps_tree_disabled(self) -> None:
        state = ListingState()
        state.setup_args((False, False, None))
        self.assertEqual(state.tree, (False, ""))


if __name__ == "__main__":
    unittest.main()
