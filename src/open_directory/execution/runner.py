import logging
import subprocess
import time

from .models import LaunchRequest, LaunchResult

logger = logging.getLogger(__name__)

START_FAILURE_EXIT_CODE = 70
TIMEOUT_EXIT_CODE = 124


def launch(binary: str, path: str, timeout_seconds: float | None = None) -> LaunchResult:
    """Run ``binary path`` as a new process and wait for it to finish."""
    request = LaunchRequest(binary=binary, path=path, timeout_seconds=timeout_seconds)
    command = [request.binary, request.path]
    start = time.monotonic()

    try:
        completed = subprocess.run(
            command,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=request.timeout_seconds,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.error("%s timed out after %ss", request.binary, request.timeout_seconds)
        return _error_result(
            message=f"binary timed out after {request.timeout_seconds}s",
            exit_code=TIMEOUT_EXIT_CODE,
            timing_ms=_elapsed_ms(start),
        )
    except OSError as exc:
        logger.error("Failed to start %s: %s", request.binary, exc)
        return _error_result(
            message=f"failed to start {request.binary}: {exc}",
            exit_code=START_FAILURE_EXIT_CODE,
            timing_ms=_elapsed_ms(start),
        )

    if completed.returncode != 0:
        logger.warning("%s exited with code %d for %s", request.binary, completed.returncode, request.path)
    else:
        logger.info("Opened %s with %s", request.path, request.binary)

    return LaunchResult(
        success=completed.returncode == 0,
        exit_code=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        timing_ms=_elapsed_ms(start),
    )


def _error_result(message: str, exit_code: int, timing_ms: int = 0) -> LaunchResult:
    return LaunchResult(
        success=False,
        exit_code=exit_code,
        stdout="",
        stderr=message,
        timing_ms=timing_ms,
    )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
