from __future__ import annotations

import logging
import subprocess
from typing import List

logger = logging.getLogger(__name__)


def run_formatter(command: List[str], path: str, timeout: int = 300) -> bool:
    """Format `path` in place with `command + [path]`. Never raises; returns success."""
    if not command:
        return False
    try:
        result = subprocess.run(
            command + [path],
            text=True,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("formatter %s skipped for %s: %s", command[0], path, exc)
        return False
    if result.returncode != 0:
        logger.debug("formatter %s exited %d on %s: %s", command[0], result.returncode, path, result.stderr.strip())
        return False
    return True
