"""Process exit codes.

- 0: success (incident resolved/triggered and accepted by the API)
- 1: validation failure, API rejection, or any fatal error
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
