from clang_shim.helpers import multiline_str_to_list


SHIM_PRODUCT_NAME = 'clang-shim'

# Major versions of Clang we accept, in the order of preference.
DEFAULT_ACCEPTED_MAJOR_VERSIONS = [18, 17, 16]

VERSION_QUERY_FLAG = '--version'

# Arguments that the underlying Clang does not understand or that only produce noise. These are
# dropped from the command line entirely.
DEFAULT_IGNORED_ARGS = set(multiline_str_to_list("""
    -nostartfiles
    -Wno-nonnull-compare
    -Wno-dangling-pointer
"""))

# The shim itself, when invoked under its own name, stands in for this binary.
DEFAULT_LOGICAL_NAME = 'clang'

# Maps the name we were invoked as to the logical name of the binary to look for, in addition to
# the shim's own name.
DEFAULT_NAME_ALIASES = {
    'cc': 'clang',
    'c++': 'clang++',
}

LOG_LEVEL_ENV_VAR = 'CLANG_SHIM_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'
