#!/usr/bin/env python3

import logging
import os
import sys

from clang_shim.compiler_wrapper import run_compiler_wrapper
from clang_shim.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR
from clang_shim.errors import ShimError
from clang_shim.shim_conf import ShimConf


# Conventional exit code of a process terminated by SIGINT.
INTERRUPTED_EXIT_CODE = 130


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="[%(filename)s:%(lineno)d] %(asctime)s %(levelname)s: %(message)s")


def main() -> None:
    configure_logging()
    conf = ShimConf()
    try:
        exit_code = run_compiler_wrapper(conf=conf)
    except ShimError as ex:
        sys.stderr.write('%s: %s\n' % (conf.product_name, ex))
        sys.exit(1)
    except KeyboardInterrupt:
        # The compiler got the same SIGINT and reports on its own.
        sys.exit(INTERRUPTED_EXIT_CODE)
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
