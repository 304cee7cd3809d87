# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Process exit codes for `stw clean` and `stw check`.

CI jobs key off these, so each one maps to a single kind of outcome.
"""

# Every selected file was processed (clean) or is already normalized (check).
SUCCESS: int = 0
# Bad invocation: no subcommand, no extensions anywhere, root path missing.
USER_ERROR: int = 1
# --config given but unreadable, not YAML, or rejected by the schema.
CONFIG_ERROR: int = 2
# The run started but at least one file or directory could not be handled.
RUNTIME_ERROR: int = 3
# `check` found files that `clean` would rewrite.
VALIDATION_ERROR: int = 4
