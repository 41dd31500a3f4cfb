"""Interactive loop scenarios driven by scripted input.

Each test feeds one line per prompt (including the Enter that acknowledges
a pause) and inspects the filesystem and session state afterwards.
"""

from __future__ import annotations

import io
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rich.console import Console

from fsnav.core.app import EXIT_INTERRUPTED, EXIT_OK, Fsnav
from fsnav.core.config import RuntimeConfig
from fsnav.core.errors import LaunchError
from fsnav.core.state import Clipboard
from fsnav.widgets.screen import TerminalScreen


class AppScenarioTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        (self.root / "alpha").mkdir()
        (self.root / "beta.txt").write_text("beta contents", encoding="utf-8")
        self.launcher = mock.Mock()

    def _app(self, *lines: str) -> Fsnav:
        self.output = io.StringIO()
        self.errors = io.StringIO()
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        screen = TerminalScreen(
            Console(file=self.output, width=200, color_system=None, force_terminal=False),
            Console(file=self.errors, width=200, color_system=None, force_terminal=False),
            stream=stream,
        )
        return Fsnav(
            self.root,
            screen=screen,
            config=RuntimeConfig(show_hidden=True, open_command=None),
            launcher=self.launcher,
        )

    def test_quit_returns_zero(self) -> None:
        app = self._app("q")

        self.assertEqual(app.run(), EXIT_OK)
        self.assertIn("[1] 📁 alpha", self.output.getvalue())
        self.assertIn("[2] 📄 beta.txt", self.output.getvalue())

    def test_end_of_input_ends_the_session(self) -> None:
        app = self._app()

        self.assertEqual(app.run(), EXIT_OK)

    def test_interrupt_exits_with_130(self) -> None:
        app = self._app()

        with mock.patch.object(app, "step", side_effect=KeyboardInterrupt):
            self.assertEqual(app.run(), EXIT_INTERRUPTED)

    def test_navigation_round_trip(self) -> None:
        app = self._app("1", "0")

        app.step()
        self.assertEqual(app.current_dir, self.root / "alpha")
        app.step()
        self.assertEqual(app.current_dir, self.root)
        self.assertNotIn("Press Enter", self.output.getvalue())

    def test_cut_navigate_paste_moves_file(self) -> None:
        # beta.txt -> cut -> ack -> enter alpha -> paste -> ack
        app = self._app("2", "2", "", "1", "p", "")

        self.assertEqual(app.run(), EXIT_OK)

        moved = self.root / "alpha" / "beta.txt"
        self.assertEqual(moved.read_text(encoding="utf-8"), "beta contents")
        self.assertFalse((self.root / "beta.txt").exists())
        self.assertTrue(app.store.clipboard.is_empty)
        self.assertIn("Clipboard: Cutting 'beta.txt'", self.output.getvalue())
        self.assertIn(f"File moved: {moved}", self.output.getvalue())

    def test_copy_paste_keeps_clipboard_for_another_paste(self) -> None:
        (self.root / "gamma").mkdir()
        # copy beta.txt, paste into alpha, back up, enter gamma, paste again
        app = self._app("3", "1", "", "1", "p", "", "0", "2", "p", "")

        app.run()

        self.assertTrue((self.root / "alpha" / "beta.txt").exists())
        self.assertTrue((self.root / "gamma" / "beta.txt").exists())
        self.assertTrue((self.root / "beta.txt").exists())
        self.assertEqual(app.store.clipboard, Clipboard.copy(self.root / "beta.txt"))

    def test_paste_with_empty_clipboard_reports_and_continues(self) -> None:
        app = self._app("p", "", "q")

        self.assertEqual(app.run(), EXIT_OK)
        self.assertIn("Clipboard is empty!", self.output.getvalue())
        self.assertEqual(self.errors.getvalue(), "")

    def test_clear_clipboard(self) -> None:
        app = self._app("2", "1", "", "c", "", "c", "")

        app.run()

        self.assertTrue(app.store.clipboard.is_empty)
        self.assertIn("Clipboard cleared", self.output.getvalue())
        self.assertIn("Clipboard is already empty!", self.output.getvalue())

    def test_invalid_index_and_unknown_command_keep_state(self) -> None:
        app = self._app("99", "", "what", "")

        app.run()

        self.assertEqual(app.current_dir, self.root)
        self.assertIn("Invalid index!", self.output.getvalue())
        self.assertIn("Unknown command: what", self.output.getvalue())

    def test_negative_or_signed_numbers_are_not_indices(self) -> None:
        app = self._app("+1", "")

        app.run()

        self.assertEqual(app.current_dir, self.root)
        self.assertIn("Unknown command: +1", self.output.getvalue())

    def test_create_folder_and_file(self) -> None:
        app = self._app("n", "docs", "", "f", "notes.md", "")

        app.run()

        self.assertTrue((self.root / "docs").is_dir())
        self.assertEqual((self.root / "notes.md").read_bytes(), b"")
        self.assertIn(f"Folder created: {self.root / 'docs'}", self.output.getvalue())
        self.assertIn(f"Creating a new file in: {self.root}", self.output.getvalue())

    def test_create_with_empty_or_taken_name_is_reported(self) -> None:
        app = self._app("n", "", "", "f", "beta.txt", "")

        app.run()

        self.assertEqual(sorted(p.name for p in self.root.iterdir()), ["alpha", "beta.txt"])
        self.assertEqual((self.root / "beta.txt").read_text(encoding="utf-8"), "beta contents")
        self.assertIn("Error: Folder name cannot be empty!", self.errors.getvalue())
        self.assertIn("Error: File 'beta.txt' already exists!", self.errors.getvalue())

    def test_rename_from_file_menu(self) -> None:
        app = self._app("2", "4", "renamed.txt", "")

        app.run()

        self.assertFalse((self.root / "beta.txt").exists())
        self.assertEqual((self.root / "renamed.txt").read_text(encoding="utf-8"), "beta contents")
        self.assertIn("File renamed", self.output.getvalue())

    def test_delete_from_file_menu(self) -> None:
        app = self._app("2", "3", "")

        app.run()

        self.assertFalse((self.root / "beta.txt").exists())
        self.assertIn("File deleted", self.output.getvalue())

    def test_open_stays_in_file_menu_until_back(self) -> None:
        app = self._app("2", "5", "", "5", "", "b", "q")

        self.assertEqual(app.run(), EXIT_OK)

        self.assertEqual(self.launcher.launch.call_count, 2)
        self.launcher.launch.assert_called_with(self.root / "beta.txt")
        self.assertEqual(self.output.getvalue().count("File: beta.txt"), 3)

    def test_unknown_file_menu_choice_stays_in_menu(self) -> None:
        app = self._app("2", "9", "", "b")

        app.run()

        self.assertIn("Invalid input!", self.output.getvalue())
        self.assertEqual(self.output.getvalue().count("File: beta.txt"), 2)
        self.assertTrue(app.store.clipboard.is_empty)

    def test_launch_failure_is_reported_and_loop_continues(self) -> None:
        self.launcher.launch.side_effect = LaunchError(
            code="launch_failed", message="Could not start 'xdg-open' to open beta.txt"
        )
        app = self._app("2", "5", "", "q")

        self.assertEqual(app.run(), EXIT_OK)
        self.assertIn("Error: Could not start 'xdg-open' to open beta.txt", self.errors.getvalue())

    def test_unreadable_directory_falls_back_to_last_listed(self) -> None:
        app = self._app("1", "")

        app.step()
        self.assertEqual(app.current_dir, self.root / "alpha")
        shutil.rmtree(self.root / "alpha")
        app.step()

        self.assertEqual(app.current_dir, self.root)
        self.assertIn("Error: Unable to read directory", self.errors.getvalue())

    def test_vanished_start_directory_falls_back_to_ancestor(self) -> None:
        (self.root / "alpha" / "inner").mkdir()
        app = self._app("1", "1", "")

        app.step()
        app.step()
        self.assertEqual(app.current_dir, self.root / "alpha" / "inner")
        shutil.rmtree(self.root / "alpha")
        app.step()

        self.assertEqual(app.current_dir, self.root)

    def test_unexpected_exception_is_reported_not_fatal(self) -> None:
        app = self._app("n", "", "q")

        with mock.patch.object(app.path_actions, "create_path", side_effect=RuntimeError("boom")):
            self.assertEqual(app.run(), EXIT_OK)

        self.assertIn("Error: boom", self.errors.getvalue())


if __name__ == "__main__":
    unittest.main()
