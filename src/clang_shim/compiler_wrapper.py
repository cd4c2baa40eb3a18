#!/usr/bin/env python3

import sys
import os
import logging

from typing import List, Optional

from clang_shim.arg_rewriter import ArgRewriter
from clang_shim.binary_resolver import BinaryResolver
from clang_shim.errors import ChildProcessSpawnFailure, InvocationDecodeFailure
from clang_shim.helpers import has_path_separator
from clang_shim.process_runner import ProcessRunner
from clang_shim.shim_conf import ShimConf


# Exit code used when the compiler did not exit normally, e.g. was killed by a signal.
NO_EXIT_CODE = -1


def get_invoked_name(argv0: str) -> str:
    invoked_name = os.path.basename(argv0.rstrip(os.sep))
    if not invoked_name:
        raise InvocationDecodeFailure(argv0)
    try:
        # Undecodable bytes in argv show up as lone surrogates.
        invoked_name.encode('utf-8')
    except UnicodeEncodeError:
        raise InvocationDecodeFailure(argv0)
    return invoked_name


class CompilerWrapper:
    conf: ShimConf
    runner: ProcessRunner
    args: List[str]
    resolver: BinaryResolver
    rewriter: ArgRewriter

    def __init__(
            self,
            conf: Optional[ShimConf] = None,
            runner: Optional[ProcessRunner] = None,
            args: Optional[List[str]] = None,
            resolver: Optional[BinaryResolver] = None) -> None:
        self.conf = conf or ShimConf()
        self.runner = runner or ProcessRunner()
        self.args = list(sys.argv if args is None else args)
        self.resolver = resolver or BinaryResolver(
            self.conf, runner=self.runner, self_path=self.get_self_path())
        self.rewriter = ArgRewriter(self.conf.ignored_args)

    def get_self_path(self) -> Optional[str]:
        if not self.args or not self.args[0]:
            return None
        argv0 = self.args[0]
        if has_path_separator(argv0):
            return os.path.abspath(argv0)
        return self.runner.which(argv0)

    def get_logical_name(self) -> str:
        if not self.args or not self.args[0]:
            logging.error("No invocation name in argument zero: %s", self.args)
            raise InvocationDecodeFailure(self.args[0] if self.args else '')
        return self.conf.get_logical_name(get_invoked_name(self.args[0]))

    def run(self) -> int:
        logical_name = self.get_logical_name()
        compiler_path = self.resolver.resolve(logical_name)
        logging.debug("Using %s from %s", logical_name, compiler_path)

        args = self.rewriter.rewrite(self.args[1:])
        logging.debug("Processed args: %s", args)

        try:
            exit_code = self.runner.run([compiler_path] + args)
        except OSError as ex:
            raise ChildProcessSpawnFailure(compiler_path, ex)
        if exit_code < 0:
            logging.debug("%s was killed by signal %d", compiler_path, -exit_code)
            return NO_EXIT_CODE
        return exit_code


def run_compiler_wrapper(
        conf: Optional[ShimConf] = None,
        args: Optional[List[str]] = None) -> int:
    compiler_wrapper = CompilerWrapper(conf=conf, args=args)
    return compiler_wrapper.run()
