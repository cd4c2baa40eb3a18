import logging
import subprocess

from typing import List, Optional, Tuple

from clang_shim.helpers import is_executable_file, which


class ProcessRunner:
    """
    Everything the shim needs from the operating system to look for and run binaries. The
    resolver only talks to the system through this class, so tests can substitute a fake.
    """

    def which(self, file_name: str) -> Optional[str]:
        return which(file_name)

    def is_executable_file(self, file_path: str) -> bool:
        return is_executable_file(file_path)

    def capture_stdout(self, args: List[str]) -> Tuple[int, bytes]:
        """
        Runs the given command, waits for it to exit and returns its exit code and standard
        output. Raises OSError if the process could not be started.
        """
        p = subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL)
        stdout, _ = p.communicate()
        return p.returncode, stdout

    def run(self, args: List[str]) -> int:
        """
        Runs the given command with inherited standard streams and returns its exit code. A
        negative value means the process was killed by that signal.
        """
        logging.debug("Running command: %s", args)
        return subprocess.call(args)
