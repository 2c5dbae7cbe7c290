import logging
import os
import subprocess
from typing import List, Optional

OPERATION_TIMEOUT = 600

logger = logging.getLogger("zsh_setup")


class CommandError(Exception):
    """A command could not be run or exited with a non-zero status."""

    def __init__(self, cmd: List[str], returncode: Optional[int] = None, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        detail = f"exit status {returncode}" if returncode is not None else "could not be started"
        if stderr:
            detail = f"{detail}: {stderr.strip()}"
        super().__init__(f"Command '{' '.join(cmd)}' failed ({detail})")


def run_command(
    cmd: List[str],
    check: bool = True,
    capture_output: bool = True,
    timeout: Optional[int] = OPERATION_TIMEOUT,
    env: Optional[dict] = None,
) -> subprocess.CompletedProcess:
    """Execute a system command, raising CommandError when check is set and it fails."""
    logger.debug(f"Running command: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            env=env or os.environ.copy(),
            text=True,
            capture_output=capture_output,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.debug(f"Command timed out after {timeout} seconds: {' '.join(cmd)}")
        raise CommandError(cmd, stderr=f"timed out after {timeout} seconds")
    except OSError as e:
        raise CommandError(cmd, stderr=str(e))
    if check and result.returncode != 0:
        raise CommandError(cmd, result.returncode, result.stderr or "")
    return result
