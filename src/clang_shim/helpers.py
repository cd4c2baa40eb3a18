import os
import re

from typing import List, Optional


# Matches e.g. "clang version 16.0.6" or "Homebrew clang version 18.1.8".
VERSION_RE = re.compile(r'\bversion\s+(\S+)')


def multiline_str_to_list(multiline_str: str) -> List[str]:
    lines = multiline_str.strip().split("\n")
    lines = [s.strip() for s in lines]
    return [s for s in lines if s]


def is_executable_file(file_path: str) -> bool:
    return os.path.isfile(file_path) and os.access(file_path, os.X_OK)


def which(file_name: str) -> Optional[str]:
    for path in os.environ.get('PATH', os.defpath).split(os.pathsep):
        if not path:
            # An empty entry means the current directory.
            path = os.curdir
        full_path = os.path.join(path, file_name)
        if is_executable_file(full_path):
            return os.path.abspath(full_path)
    return None


def has_path_separator(s: str) -> bool:
    return os.sep in s or (os.altsep is not None and os.altsep in s)


def extract_version_str(version_output: str) -> Optional[str]:
    """
    Extracts the version token from the output of e.g. "clang --version". The token is whatever
    non-whitespace text immediately follows the first occurrence of the word "version".
    """
    match = VERSION_RE.search(version_output)
    if match is None:
        return None
    return match.group(1)


def version_has_major(version_str: str, major_version: int) -> bool:
    # A plain prefix check would consider 160.0.0 to be a version 16 release.
    return version_str.startswith('%d.' % major_version)
