import os
import stat
import tempfile
from unittest import TestCase
from unittest.mock import patch

from clang_shim.helpers import (
    extract_version_str,
    has_path_separator,
    multiline_str_to_list,
    version_has_major,
    which,
)


class TestExtractVersionStr(TestCase):
    def test_clang(self) -> None:
        self.assertEqual(
            extract_version_str(
                "Ubuntu clang version 15.0.7\n"
                "Target: x86_64-pc-linux-gnu\n"
                "Thread model: posix\n"
            ),
            "15.0.7",
        )

    def test_homebrew(self) -> None:
        self.assertEqual(
            extract_version_str("Homebrew clang version 18.1.8\nTarget: arm64-apple-darwin23\n"),
            "18.1.8",
        )

    def test_first_occurrence(self) -> None:
        self.assertEqual(
            extract_version_str("clang version 16.0.6 (based on LLVM version 16.0.6git)"),
            "16.0.6",
        )

    def test_missing(self) -> None:
        self.assertIsNone(extract_version_str("gcc (GCC) 13.2.1 20230801\n"))
        self.assertIsNone(extract_version_str(""))

    def test_word_boundary(self) -> None:
        self.assertIsNone(extract_version_str("subversion 1.14.2"))


class TestVersionHasMajor(TestCase):
    def test_match(self) -> None:
        self.assertTrue(version_has_major("16.0.6", 16))
        self.assertTrue(version_has_major("15.0.7", 15))

    def test_dot_boundary(self) -> None:
        self.assertFalse(version_has_major("160.0.0", 16))
        self.assertFalse(version_has_major("16.0.0", 1))

    def test_bare_major(self) -> None:
        self.assertFalse(version_has_major("16", 16))

    def test_different_major(self) -> None:
        self.assertFalse(version_has_major("17.0.1", 16))


class TestMultilineStrToList(TestCase):
    def test(self) -> None:
        self.assertListEqual(
            multiline_str_to_list("""
                -nostartfiles

                -O2
            """),
            ["-nostartfiles", "-O2"],
        )


class TestHasPathSeparator(TestCase):
    def test(self) -> None:
        self.assertTrue(has_path_separator("/usr/bin/clang"))
        self.assertTrue(has_path_separator("./clang"))
        self.assertFalse(has_path_separator("clang-16"))


class TestWhich(TestCase):
    def test(self) -> None:
        with tempfile.TemporaryDirectory() as first_dir, \
                tempfile.TemporaryDirectory() as second_dir:
            not_executable = os.path.join(first_dir, "clang")
            with open(not_executable, "w") as f:
                f.write("")

            executable = os.path.join(second_dir, "clang")
            with open(executable, "w") as f:
                f.write("#!/bin/sh\n")
            os.chmod(executable, os.stat(executable).st_mode | stat.S_IXUSR)

            with patch.dict(os.environ, {"PATH": os.pathsep.join([first_dir, second_dir])}):
                self.assertEqual(which("clang"), executable)
                self.assertIsNone(which("clang-16"))

    def test_empty_entry_is_current_directory(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            executable = os.path.join(temp_dir, "clang")
            with open(executable, "w") as f:
                f.write("#!/bin/sh\n")
            os.chmod(executable, os.stat(executable).st_mode | stat.S_IXUSR)

            old_cwd = os.getcwd()
            os.chdir(temp_dir)
            try:
                with patch.dict(os.environ, {"PATH": os.pathsep + "/nonexistent"}):
                    self.assertEqual(
                        os.path.realpath(which("clang")), os.path.realpath(executable))
            finally:
                os.chdir(old_cwd)
