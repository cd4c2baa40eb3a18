import logging
import os

from typing import Optional

import sys_detection

from sys_detection import is_macos

from clang_shim.process_runner import ProcessRunner


HOMEBREW_ARM64_PREFIX = '/opt/homebrew'
HOMEBREW_X86_64_PREFIX = '/usr/local'


def query_brew_prefix(runner: ProcessRunner) -> Optional[str]:
    brew_path = runner.which('brew')
    if brew_path is None:
        return None
    try:
        exit_code, stdout = runner.capture_stdout([brew_path, '--prefix'])
    except OSError as ex:
        logging.debug("Failed to run %s --prefix: %s", brew_path, ex)
        return None
    if exit_code != 0:
        logging.debug("%s --prefix exited with code %d", brew_path, exit_code)
        return None
    try:
        prefix = stdout.decode('utf-8').strip()
    except UnicodeDecodeError:
        return None
    return prefix or None


def get_default_macos_prefix() -> Optional[str]:
    """
    Returns the standard Homebrew prefix for the CPU architecture of this Mac, if Homebrew is
    installed there. Used when brew itself is not on PATH, e.g. in a sanitized build environment.
    """
    if not is_macos():
        return None
    try:
        architecture = sys_detection.local_sys_conf().architecture
    except Exception as ex:
        logging.debug("Could not detect the CPU architecture: %s", ex)
        return None
    if architecture in ('arm64', 'aarch64'):
        prefix = HOMEBREW_ARM64_PREFIX
    else:
        prefix = HOMEBREW_X86_64_PREFIX
    if os.path.isdir(os.path.join(prefix, 'Cellar')):
        return prefix
    return None


def find_homebrew_prefix(runner: ProcessRunner) -> Optional[str]:
    prefix = query_brew_prefix(runner) or get_default_macos_prefix()
    if prefix:
        logging.debug("Using Homebrew prefix: %s", prefix)
    return prefix
