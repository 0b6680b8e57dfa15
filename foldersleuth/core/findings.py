# foldersleuth/core/findings.py
from dataclasses import dataclass
from typing import List
from .models import AnalysisReport

DEEP_STRUCTURE_DEPTH = 5
LARGE_COLLECTION_FILES = 1000

SIZE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB']


@dataclass(frozen=True)
class Finding:
    code: str  # e.g. "duplicate_patterns", "deep_structure"
    message: str


def format_bytes(num_bytes: int) -> str:
    """Formats a byte count with a 1024-based unit, e.g. 1536 -> '1.50 KB'."""
    if num_bytes <= 0:
        return "0 B"
    value = float(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {SIZE_UNITS[unit]}"


def derive_findings(report: AnalysisReport) -> List[Finding]:
    """Picks out the notable facts of a report, in a fixed order."""
    findings: List[Finding] = []

    pattern_count = len(report.duplicate_patterns)
    if pattern_count > 0:
        plural = "s" if pattern_count != 1 else ""
        findings.append(Finding("duplicate_patterns", f"{pattern_count} potential duplicate pattern{plural}"))
    if report.hidden_file_count > 0:
        findings.append(Finding("hidden_files", f"{report.hidden_file_count} hidden files detected"))
    if report.max_depth > DEEP_STRUCTURE_DEPTH:
        findings.append(Finding("deep_structure", f"Deep folder structure detected (depth: {report.max_depth})"))
    if report.total_files > LARGE_COLLECTION_FILES:
        findings.append(Finding("large_collection", f"Large file collection: {report.total_files}+ files"))

    return findings
