# topmark:header:start
#
#   project      : DocBlocks
#   file         : exit_codes.py
#   file_relpath : src/docblocks/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DocBlocks CLI.

DocBlocks aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. The one deliberate
divergence is `WOULD_CHANGE=2`, used by ``docblocks check`` when a file does
not reproduce itself byte for byte. Tests must assert
`result.exception is None` to disambiguate from Click's own usage errors
(which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DocBlocks CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Round-trip check failed: reconstruction differs from the source.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed edit records or undecodable input. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_LANGUAGE: No comment syntax for the file. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        ENGINE_ERROR: Edits cannot be reconstructed (delimiter collision).
            Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        TEMP_FAILURE: Stale edit records; reload and retry. Mirrors BSD
            ``EX_TEMPFAIL (75)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_LANGUAGE = 69  # EX_UNAVAILABLE
    ENGINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    TEMP_FAILURE = 75  # EX_TEMPFAIL
    CONFIG_ERROR = 78  # EX_CONFIG
