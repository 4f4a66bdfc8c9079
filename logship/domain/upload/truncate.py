"""
In-place truncation with an explicit privilege capability
"""
import os
import subprocess
from pathlib import Path
from typing import Callable, Union

from ...core.constants import DEFAULT_TEE_PATH, TRUNCATE_MODES
from ...core.exceptions import TruncateFailure
from ...core.logging import get_logger

logger = get_logger(__name__)


class Truncator:
    """
    Empties a file in place, keeping its inode and permissions.

    Modes:
    - direct: the current user truncates the file itself
    - sudo: `sudo -n <tee> <file>` with empty stdin, as the job runner user
      usually lacks write access to system logs
    - auto: direct when the file is writable, sudo otherwise

    The capability is checked before anything is written, so a missing
    privilege fails fast instead of half-succeeding.
    """

    def __init__(
        self,
        mode: str = "auto",
        tee_path: str = DEFAULT_TEE_PATH,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        if mode not in TRUNCATE_MODES:
            raise ValueError(f"Unsupported truncate mode: {mode}")
        self.mode = mode
        self.tee_path = tee_path
        self._run = runner

    def resolve_mode(self, path: Union[str, Path]) -> str:
        """Concrete mode (direct or sudo) for a path"""
        if self.mode != "auto":
            return self.mode
        return "direct" if os.access(path, os.W_OK) else "sudo"

    def ensure_capability(self, path: Union[str, Path]) -> str:
        """
        Check that the file can be truncated.

        Returns:
            Resolved mode

        Raises:
            TruncateFailure: If the required privilege is missing
        """
        mode = self.resolve_mode(path)

        if mode == "direct":
            if not os.access(path, os.W_OK):
                raise TruncateFailure(f"No write permission on {path}")
            return mode

        # `sudo -l <cmd>` exits 0 only if the command is allowed
        try:
            result = self._run(
                ["sudo", "-n", "-l", self.tee_path],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as e:
            raise TruncateFailure(f"sudo unavailable: {e}") from e
        if result.returncode != 0:
            raise TruncateFailure(
                f"Not allowed to run {self.tee_path} via non-interactive sudo"
            )
        return mode

    def truncate(self, path: Union[str, Path]) -> None:
        """
        Truncate a file to zero bytes in place.

        Raises:
            TruncateFailure: If the capability is missing or the write fails
        """
        mode = self.ensure_capability(path)
        logger.debug("Truncating %s (%s)", path, mode)

        if mode == "direct":
            try:
                os.truncate(path, 0)
            except OSError as e:
                raise TruncateFailure(f"Failed to truncate {path}: {e}") from e
            return

        try:
            result = self._run(
                ["sudo", "-n", self.tee_path, str(path)],
                input=b"",
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            raise TruncateFailure(f"Failed to run sudo: {e}") from e
        if result.returncode != 0:
            err = (result.stderr or b"").decode(errors="replace").strip()
            raise TruncateFailure(
                f"sudo {self.tee_path} exited with {result.returncode}: {err}"
            )
