from typing import List


class ShimError(Exception):
    """
    Base class for fatal errors. The entry point reports these as a single line on stderr
    instead of a traceback.
    """
    pass


class ResolutionFailure(ShimError):
    """
    Raised when no candidate binary reports an accepted major version. There is no fallback.
    """

    logical_name: str
    accepted_major_versions: List[int]

    def __init__(self, logical_name: str, accepted_major_versions: List[int]) -> None:
        self.logical_name = logical_name
        self.accepted_major_versions = list(accepted_major_versions)
        super().__init__(
            "Cannot find %s with any of the accepted major versions: %s" % (
                logical_name, ', '.join(str(v) for v in self.accepted_major_versions)))


class InvocationDecodeFailure(ShimError):
    argv0: str

    def __init__(self, argv0: str) -> None:
        self.argv0 = argv0
        super().__init__("Cannot determine the invocation name from argument zero: %r" % argv0)


class ChildProcessSpawnFailure(ShimError):
    path: str

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        super().__init__("Failed to run %s: %s" % (path, cause))
