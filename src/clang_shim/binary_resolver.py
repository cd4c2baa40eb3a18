import logging
import os

from typing import Callable, Dict, List, Optional

from clang_shim.errors import ResolutionFailure
from clang_shim.helpers import (
    extract_version_str,
    has_path_separator,
    version_has_major,
)
from clang_shim.homebrew import find_homebrew_prefix
from clang_shim.process_runner import ProcessRunner
from clang_shim.shim_conf import ShimConf


class VersionedBinary:
    path: str
    version: str

    def __init__(self, path: str, version: str) -> None:
        self.path = path
        self.version = version

    def __repr__(self) -> str:
        return 'VersionedBinary(path=%r, version=%r)' % (self.path, self.version)


class SearchCandidate:
    # Description of where we are looking, for log messages.
    display_name: str

    # Either a path to an executable or a bare name to be looked up on PATH.
    binary: str

    major_version: int

    # Whether to skip this candidate if it turns out to be the shim itself.
    skip_if_self: bool

    def __init__(
            self,
            display_name: str,
            binary: str,
            major_version: int,
            skip_if_self: bool = False) -> None:
        self.display_name = display_name
        self.binary = binary
        self.major_version = major_version
        self.skip_if_self = skip_if_self

    def __repr__(self) -> str:
        return 'SearchCandidate(%r, %r, %d)' % (
            self.display_name, self.binary, self.major_version)


def generate_search_candidates(
        logical_name: str,
        accepted_major_versions: List[int],
        homebrew_prefix: Optional[str]) -> List[SearchCandidate]:
    """
    Returns the candidates to try, in order. Versions are the outer loop and locations are the
    inner loop, so a preferred version found anywhere beats a less preferred version found in a
    more preferred location.
    """
    candidates: List[SearchCandidate] = []
    for major_version in accepted_major_versions:
        if homebrew_prefix:
            candidates.append(SearchCandidate(
                'Homebrew llvm',
                os.path.join(homebrew_prefix, 'opt', 'llvm', 'bin', logical_name),
                major_version))
            candidates.append(SearchCandidate(
                'Homebrew llvm@%d' % major_version,
                os.path.join(
                    homebrew_prefix, 'opt', 'llvm@%d' % major_version, 'bin', logical_name),
                major_version))
        candidates.append(SearchCandidate(
            'PATH', logical_name, major_version, skip_if_self=True))
        candidates.append(SearchCandidate(
            'PATH (version-suffixed)',
            '%s-%d' % (logical_name, major_version),
            major_version))
    return candidates


class BinaryResolver:
    conf: ShimConf
    runner: ProcessRunner

    # Real path of the shim's own executable, if known. We must never resolve to ourselves.
    self_path: Optional[str]

    homebrew_prefix_finder: Callable[[ProcessRunner], Optional[str]]

    def __init__(
            self,
            conf: ShimConf,
            runner: Optional[ProcessRunner] = None,
            self_path: Optional[str] = None,
            homebrew_prefix_finder: Callable[
                [ProcessRunner], Optional[str]] = find_homebrew_prefix) -> None:
        self.conf = conf
        self.runner = runner or ProcessRunner()
        self.self_path = os.path.realpath(self_path) if self_path else None
        self.homebrew_prefix_finder = homebrew_prefix_finder

    def find_executable(self, binary: str) -> Optional[str]:
        if has_path_separator(binary):
            if self.runner.is_executable_file(binary):
                return binary
            return None
        return self.runner.which(binary)

    def is_self(self, path: str) -> bool:
        return self.self_path is not None and os.path.realpath(path) == self.self_path

    def check_binary(self, path: str) -> Optional[VersionedBinary]:
        """
        Runs the given executable with the version query flag and parses the version it reports.
        Returns None on any kind of failure.
        """
        try:
            _, stdout = self.runner.capture_stdout([path, self.conf.version_query_flag])
        except OSError as ex:
            logging.debug("Failed to run %s: %s", path, ex)
            return None
        try:
            output = stdout.decode('utf-8')
        except UnicodeDecodeError:
            logging.debug("Output of %s %s is not valid UTF-8", path, self.conf.version_query_flag)
            return None
        version = extract_version_str(output)
        if version is None:
            logging.debug("Could not find a version in the output of %s", path)
            return None
        return VersionedBinary(path, version)

    def resolve(
            self,
            logical_name: str,
            accepted_major_versions: Optional[List[int]] = None) -> str:
        if accepted_major_versions is None:
            accepted_major_versions = self.conf.accepted_major_versions

        candidates = generate_search_candidates(
            logical_name,
            accepted_major_versions,
            self.homebrew_prefix_finder(self.runner))

        # The same executable shows up once per accepted version, no need to run it every time.
        checked: Dict[str, Optional[VersionedBinary]] = {}

        for candidate in candidates:
            path = self.find_executable(candidate.binary)
            if path is None:
                continue
            if candidate.skip_if_self and self.is_self(path):
                logging.debug("Skipping %s: it is this shim itself", path)
                continue
            if path not in checked:
                checked[path] = self.check_binary(path)
            versioned_binary = checked[path]
            if versioned_binary is None:
                continue
            if version_has_major(versioned_binary.version, candidate.major_version):
                logging.debug(
                    "Found %s version %s via %s: %s",
                    logical_name, versioned_binary.version, candidate.display_name,
                    versioned_binary.path)
                return versioned_binary.path
            logging.debug(
                "%s reports version %s, wanted major version %d",
                path, versioned_binary.version, candidate.major_version)

        raise ResolutionFailure(logical_name, accepted_major_versions)
