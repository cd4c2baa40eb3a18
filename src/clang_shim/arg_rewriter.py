import re

from typing import Iterable, List, Optional, Set, Tuple

from clang_shim.constants import DEFAULT_IGNORED_ARGS


# E.g. --target=riscv64imac_zba_zbb_zbc_zbs-unknown-ckb-elf. Groups: word width, ISA extension
# suffix, remainder of the triple starting with the hyphen.
RISCV_TARGET_RE = re.compile(r'--target=riscv(64|32)([^-]+)(-.*)', re.DOTALL)


def split_riscv_target(arg: str) -> Optional[Tuple[str, str]]:
    """
    Splits a RISC-V target triple that carries ISA extensions into a target triple without them
    and an equivalent -march flag. Returns None if the argument is not such a target triple.

    --target=riscv64imac_zba-unknown-elf -> (--target=riscv64-unknown-elf, -march=rv64imac_zba)
    """
    match = RISCV_TARGET_RE.fullmatch(arg)
    if match is None:
        return None
    width, extensions, remainder = match.groups()
    return '--target=riscv%s%s' % (width, remainder), '-march=rv%s%s' % (width, extensions)


class ArgRewriter:
    ignored_args: Set[str]

    def __init__(self, ignored_args: Optional[Set[str]] = None) -> None:
        self.ignored_args = set(DEFAULT_IGNORED_ARGS if ignored_args is None else ignored_args)

    def rewrite(self, args: Iterable[str]) -> List[str]:
        result: List[str] = []
        for arg in args:
            if arg in self.ignored_args:
                continue
            target_and_march = split_riscv_target(arg)
            if target_and_march is not None:
                result.extend(target_and_march)
            else:
                result.append(arg)
        return result
