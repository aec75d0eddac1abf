import logging
import os
from collections.abc import Iterable

from .models import Candidate, RootWarning, ScanResult

logger = logging.getLogger(__name__)


def scan(roots: Iterable[str]) -> ScanResult:
    """List the immediate subdirectories of every root, in root order.

    A root that cannot be listed contributes no candidates and is reported
    as a warning instead of aborting the scan.
    """
    result = ScanResult()
    for root in roots:
        try:
            candidates = _list_subdirectories(root)
        except (OSError, ValueError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            logger.warning("Skipping unreadable root %s: %s", root, reason)
            result.warnings.append(RootWarning(root=root, reason=reason))
            continue

        logger.info("Found %d directories under %s", len(candidates), root)
        result.candidates.extend(candidates)
    return result


def scan_candidates(roots: Iterable[str]) -> list[Candidate]:
    return scan(roots).candidates


def _list_subdirectories(root: str) -> list[Candidate]:
    candidates: list[Candidate] = []
    with os.scandir(root) as entries:
        for entry in entries:
            if not _is_directory(entry):
                continue
            path = os.path.abspath(entry.path)
            if not _is_utf8_encodable(path):
                logger.warning("Skipping directory with undecodable name: %r", os.fsencode(path))
                continue
            candidates.append(Candidate(title=entry.name, path=path))
    return candidates


def _is_directory(entry: os.DirEntry) -> bool:
    # Symlinked directories count, broken links do not.
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_utf8_encodable(value: str) -> bool:
    # Undecodable filesystem bytes come back as lone surrogates.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
