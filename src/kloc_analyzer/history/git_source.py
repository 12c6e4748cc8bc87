"""Read git history via subprocess."""

import subprocess
import tempfile
import threading
from typing import Optional

from ..exceptions import RetrievalError
from ..logging_config import get_logger
from .source import HistorySource

logger = get_logger(__name__)

COMMIT_FORMAT = "%H|%an|%ae|%ad|%s"


class GitHistorySource(HistorySource):
    """HistorySource backed by the ``git`` executable."""

    # Default cap on a single git output (50MB) to prevent OOM on huge repos
    _MAX_OUTPUT_BYTES = 50 * 1024 * 1024
    _CHUNK_SIZE = 1024 * 1024

    def __init__(
        self,
        repo_path,
        timeout_seconds: int = 300,
        max_output_bytes: Optional[int] = None,
    ):
        super().__init__(repo_path)
        self.timeout_seconds = timeout_seconds
        self.max_output_bytes = max_output_bytes or self._MAX_OUTPUT_BYTES

    def log_commits(self, from_date: str, to_date: str) -> str:
        return self._run_git(
            [
                "log",
                f"--since={from_date}",
                f"--until={to_date}",
                f"--pretty=format:{COMMIT_FORMAT}",
                "--date=short",
            ]
        )

    def log_numstat(self, from_date: str, to_date: str) -> str:
        return self._run_git(
            [
                "log",
                f"--since={from_date}",
                f"--until={to_date}",
                "--numstat",
                "--pretty=format:%H",
            ]
        )

    def show_numstat(self, commit_id: str) -> str:
        return self._run_git(["show", "--numstat", "--format=", commit_id])

    def _run_git(self, args: list[str]) -> str:
        """Run one git command and return its stdout.

        Output is streamed in chunks and truncated at ``max_output_bytes``.
        stderr goes to a temporary file so a chatty stderr cannot block the
        stdout reader. The process is killed on timeout, and its pipes are
        closed on every exit path.

        Raises:
            RetrievalError: If git is missing, times out, or exits non-zero
        """
        cmd = ["git", "-C", str(self.repo_path), *args]
        command = " ".join(cmd)
        logger.debug("Running %s", command)

        with tempfile.TemporaryFile(mode="w+") as stderr_file:
            try:
                proc = subprocess.Popen(
                    cmd,
                    stdout=subprocess.PIPE,
                    stderr=stderr_file,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                )
            except OSError as e:
                raise RetrievalError(command, str(e))

            timed_out = threading.Event()

            def _on_timeout() -> None:
                # A process that already exited has not timed out
                if proc.poll() is None:
                    timed_out.set()
                    proc.kill()

            timer = threading.Timer(self.timeout_seconds, _on_timeout)
            timer.start()
            truncated = False
            try:
                chunks = []
                total_size = 0
                stdout = proc.stdout
                if stdout is None:
                    raise RetrievalError(command, "no stdout pipe")
                while True:
                    chunk = stdout.read(self._CHUNK_SIZE)
                    if not chunk:
                        break
                    total_size += len(chunk)
                    if total_size > self.max_output_bytes:
                        logger.warning(
                            "git output exceeded %dMB limit, truncating",
                            self.max_output_bytes // (1024 * 1024),
                        )
                        truncated = True
                        proc.kill()
                        break
                    chunks.append(chunk)
                proc.wait()
            finally:
                timer.cancel()
                if proc.stdout:
                    proc.stdout.close()
                if proc.poll() is None:
                    proc.kill()
                    proc.wait()

            if timed_out.is_set() and proc.returncode != 0:
                raise RetrievalError(command, f"timed out after {self.timeout_seconds}s")
            if proc.returncode != 0 and not truncated:
                stderr_file.seek(0)
                raise RetrievalError(command, stderr_file.read().strip() or f"exit code {proc.returncode}")

        return "".join(chunks).strip()
