"""Run the configured sleep command."""

import logging
import subprocess

from sleeponlan.errors import SleepInvocationFailed

logger = logging.getLogger(__name__)


def invoke_sleep(command: str) -> int:
    """
    Run ``command`` through ``sh -c`` and wait for it to finish.

    No timeout is applied: the caller stays blocked for as long as the
    command runs.

    Returns:
        The command's exit status

    Raises:
        SleepInvocationFailed: If the shell cannot be spawned or waited on
    """
    logger.debug("Running sleep command: %s", command)
    try:
        result = subprocess.run(["sh", "-c", command], check=False)
    except (OSError, ValueError) as exc:
        raise SleepInvocationFailed(command, exc) from exc

    if result.returncode != 0:
        logger.warning("Sleep command '%s' exited with status %d", command, result.returncode)
    return result.returncode
