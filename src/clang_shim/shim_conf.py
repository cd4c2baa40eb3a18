from typing import Dict, List, Optional, Set

from clang_shim.constants import (
    DEFAULT_ACCEPTED_MAJOR_VERSIONS,
    DEFAULT_IGNORED_ARGS,
    DEFAULT_LOGICAL_NAME,
    DEFAULT_NAME_ALIASES,
    SHIM_PRODUCT_NAME,
    VERSION_QUERY_FLAG,
)


class ShimConf:
    # Major versions of the underlying compiler we accept, highest priority first.
    accepted_major_versions: List[int]

    # Arguments dropped from the command line.
    ignored_args: Set[str]

    # Invocation name -> logical binary name.
    name_aliases: Dict[str, str]

    version_query_flag: str

    product_name: str

    def __init__(
            self,
            accepted_major_versions: Optional[List[int]] = None,
            ignored_args: Optional[Set[str]] = None,
            name_aliases: Optional[Dict[str, str]] = None,
            version_query_flag: str = VERSION_QUERY_FLAG,
            product_name: str = SHIM_PRODUCT_NAME) -> None:
        if accepted_major_versions is None:
            accepted_major_versions = DEFAULT_ACCEPTED_MAJOR_VERSIONS
        if not accepted_major_versions:
            raise ValueError("At least one accepted major version must be specified")
        self.accepted_major_versions = list(accepted_major_versions)
        self.ignored_args = set(
            DEFAULT_IGNORED_ARGS if ignored_args is None else ignored_args)
        if name_aliases is None:
            name_aliases = dict(DEFAULT_NAME_ALIASES)
            name_aliases[product_name] = DEFAULT_LOGICAL_NAME
        self.name_aliases = dict(name_aliases)
        self.version_query_flag = version_query_flag
        self.product_name = product_name

    def get_logical_name(self, invoked_name: str) -> str:
        """
        Returns the logical name of the binary to resolve for the given invocation name, e.g.
        "clang" when invoked as "cc" or as the shim itself. Unknown names are used verbatim.
        """
        return self.name_aliases.get(invoked_name, invoked_name)
