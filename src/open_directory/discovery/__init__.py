"""Directory discovery models and scanner."""

from .models import Candidate, RootWarning, ScanResult
from .scanner import scan, scan_candidates

__all__ = ["Candidate", "RootWarning", "ScanResult", "scan", "scan_candidates"]
