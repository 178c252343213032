"""CLI argument and default-path behavior tests.

Verifies how ``lazydu.cli.main`` resolves the root and picks a mode.
Prevents regressions in command-line entrypoint ergonomics.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazydu import cli


def _tty_stream() -> mock.Mock:
    stream = mock.Mock()
    stream.isatty.return_value = True
    return stream


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_config = tempfile.TemporaryDirectory()
        patcher = mock.patch(
            "lazydu.runtime.config.CONFIG_PATH",
            Path(self._tmp_config.name) / "config.json",
        )
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp_config.cleanup)

    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_bytes(b"x" * 10)
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["lazydu"]), mock.patch.object(
                    cli.sys, "stdin", _tty_stream()
                ), mock.patch.object(cli.sys, "stdout", _tty_stream()), mock.patch.object(
                    cli.sys, "stderr", io.StringIO()
                ), mock.patch("lazydu.cli.run_browser") as run_browser:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            run_browser.assert_called_once()
            index, path, theme, style = run_browser.call_args.args
            self.assertEqual(path, root)
            self.assertEqual(index.total_size(), 10)
            self.assertEqual(theme.name, "default")
            self.assertEqual(style, "monokai")

    def test_nopager_prints_size_ranked_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "small.txt").write_bytes(b"x" * 5)
            (root / "sub").mkdir()
            (root / "sub" / "big.bin").write_bytes(b"x" * 2000)
            stdout = io.StringIO()

            with mock.patch.object(sys, "argv", ["lazydu", str(root), "--nopager"]), mock.patch.object(
                cli.sys, "stdout", stdout
            ), mock.patch.object(cli.sys, "stderr", io.StringIO()), mock.patch("lazydu.cli.run_browser") as run_browser:
                cli.main()

            run_browser.assert_not_called()
            lines = stdout.getvalue().splitlines()
            self.assertEqual(lines[0], f"{root} 2 (2.0 KiB)")
            self.assertTrue(lines[1].endswith(" sub/"))
            self.assertTrue(lines[2].endswith(" small.txt"))
            self.assertNotIn("\x1b", stdout.getvalue())

    @unittest.skipUnless(sys.platform.startswith("linux"), "needs a filesystem that accepts non-UTF-8 names")
    def test_nopager_listing_survives_undecodable_filename_on_strict_utf8_stdout(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with open(os.path.join(os.fsencode(root), b"bad\xff.bin"), "wb") as handle:
                handle.write(b"x" * 7)
            buffer = io.BytesIO()
            stdout = io.TextIOWrapper(buffer, encoding="utf-8")

            with mock.patch.object(sys, "argv", ["lazydu", str(root), "--nopager"]), mock.patch.object(
                cli.sys, "stdout", stdout
            ), mock.patch.object(cli.sys, "stderr", io.StringIO()):
                cli.main()
            stdout.flush()

            lines = buffer.getvalue().decode("utf-8").splitlines()
            self.assertEqual(lines[0], f"{root} 1 (7 B)")
            self.assertTrue(lines[1].endswith(" bad\ufffd.bin"))

    def test_benchmark_mode_reports_total_and_skips_browser(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "f.bin").write_bytes(b"x" * 300)
            stdout = io.StringIO()

            with mock.patch.object(sys, "argv", ["lazydu", str(root), "--benchmark", "-w", "2"]), mock.patch.object(
                cli.sys, "stdout", stdout
            ), mock.patch("lazydu.cli.run_browser") as run_browser:
                cli.main()

            run_browser.assert_not_called()
            output = stdout.getvalue()
            self.assertIn("items indexed in", output)
            self.assertIn("data accumulated in", output)
            self.assertIn("total 300 B (300 bytes)", output)

    def test_missing_root_aborts_before_scanning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with mock.patch.object(sys, "argv", ["lazydu", str(missing)]), mock.patch(
                "lazydu.cli.build_index"
            ) as build_index:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

            build_index.assert_not_called()
            self.assertIn("Cannot scan", str(ctx.exception.code))

    def test_workers_flag_overrides_config_and_can_be_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with mock.patch.object(
                sys, "argv", ["lazydu", str(root), "--nopager", "-w", "3", "--save-defaults"]
            ), mock.patch.object(cli.sys, "stdout", io.StringIO()), mock.patch(
                "lazydu.cli.build_index", wraps=cli.build_index
            ) as build_index:
                cli.main()

            self.assertEqual(build_index.call_args.kwargs["workers"], 3)
            self.assertEqual(cli.load_worker_count(), 3)

    def test_rejects_non_positive_worker_count(self) -> None:
        with mock.patch.object(sys, "argv", ["lazydu", "-w", "0"]), mock.patch.object(
            sys, "stderr", io.StringIO()
        ):
            with self.assertRaises(SystemExit):
                cli.main()


if __name__ == "__main__":
    unittest.main()
