from typing import Dict, List, Optional, Tuple, Union

from clang_shim.process_runner import ProcessRunner


class FakeProcessRunner(ProcessRunner):
    """
    ProcessRunner that never starts real processes. Executables are identified by path and
    "run" by returning canned output (or raising a canned exception).
    """

    # Path -> standard output of "<path> --version", or an exception to raise when run.
    executables: Dict[str, Union[bytes, OSError]]

    # Bare name -> path, what which() returns.
    path_entries: Dict[str, str]

    run_exit_code: Union[int, OSError]

    captured_commands: List[List[str]]
    run_commands: List[List[str]]

    def __init__(
            self,
            executables: Optional[Dict[str, Union[bytes, OSError]]] = None,
            path_entries: Optional[Dict[str, str]] = None,
            run_exit_code: Union[int, OSError] = 0) -> None:
        self.executables = dict(executables or {})
        self.path_entries = dict(path_entries or {})
        self.run_exit_code = run_exit_code
        self.captured_commands = []
        self.run_commands = []

    def add_on_path(self, name: str, path: str, version_output: Union[bytes, OSError]) -> None:
        self.path_entries[name] = path
        self.executables[path] = version_output

    def which(self, file_name: str) -> Optional[str]:
        return self.path_entries.get(file_name)

    def is_executable_file(self, file_path: str) -> bool:
        return file_path in self.executables

    def capture_stdout(self, args: List[str]) -> Tuple[int, bytes]:
        self.captured_commands.append(list(args))
        output = self.executables.get(args[0])
        if output is None:
            raise FileNotFoundError(args[0])
        if isinstance(output, OSError):
            raise output
        return 0, output

    def run(self, args: List[str]) -> int:
        self.run_commands.append(list(args))
        if isinstance(self.run_exit_code, OSError):
            raise self.run_exit_code
        return self.run_exit_code
