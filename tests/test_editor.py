from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from lazyfinder.editor import launch_editor, resolve_editor_command
from lazyfinder.errors import EditorLaunchError


class ResolveEditorCommandTests(unittest.TestCase):
    def test_visual_wins_over_editor(self) -> None:
        with mock.patch.dict("lazyfinder.editor.os.environ", {"VISUAL": "code --wait", "EDITOR": "nano"}, clear=True):
            self.assertEqual(resolve_editor_command(), ["code", "--wait"])

    def test_editor_used_when_visual_is_blank(self) -> None:
        with mock.patch.dict("lazyfinder.editor.os.environ", {"VISUAL": "  ", "EDITOR": "nano -w"}, clear=True):
            self.assertEqual(resolve_editor_command(), ["nano", "-w"])

    def test_falls_back_to_editor_on_path(self) -> None:
        with mock.patch.dict("lazyfinder.editor.os.environ", {}, clear=True), mock.patch(
            "lazyfinder.editor.shutil.which", side_effect=lambda name: "/usr/bin/nano" if name == "nano" else None
        ):
            self.assertEqual(resolve_editor_command(), ["nano"])

    def test_no_editor_available_raises(self) -> None:
        with mock.patch.dict("lazyfinder.editor.os.environ", {}, clear=True), mock.patch(
            "lazyfinder.editor.shutil.which", return_value=None
        ):
            with self.assertRaises(EditorLaunchError):
                resolve_editor_command()

    def test_unparseable_editor_raises(self) -> None:
        with mock.patch.dict("lazyfinder.editor.os.environ", {"EDITOR": "vim 'unterminated"}, clear=True):
            with self.assertRaises(EditorLaunchError):
                resolve_editor_command()


class LaunchEditorTests(unittest.TestCase):
    def test_editor_runs_between_tui_toggles(self) -> None:
        events: list[str] = []

        def fake_run(cmd, check):
            events.append("run:" + " ".join(cmd))

        with mock.patch.dict("lazyfinder.editor.os.environ", {"EDITOR": "vim"}, clear=True), mock.patch(
            "lazyfinder.editor.subprocess.run", side_effect=fake_run
        ):
            launch_editor(
                Path("/project/a.txt"),
                disable_tui_mode=lambda: events.append("disable"),
                enable_tui_mode=lambda: events.append("enable"),
            )

        self.assertEqual(events, ["disable", "run:vim /project/a.txt", "enable"])

    def test_launch_failure_restores_tui_and_raises(self) -> None:
        enable = mock.Mock()
        disable = mock.Mock()

        with mock.patch.dict("lazyfinder.editor.os.environ", {"EDITOR": "missing-editor"}, clear=True), mock.patch(
            "lazyfinder.editor.subprocess.run", side_effect=FileNotFoundError(2, "No such file or directory")
        ):
            with self.assertRaises(EditorLaunchError):
                launch_editor(Path("/project/a.txt"), disable, enable)

        disable.assert_called_once_with()
        enable.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
