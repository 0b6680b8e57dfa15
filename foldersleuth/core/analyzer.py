# foldersleuth/core/analyzer.py
from datetime import datetime
from typing import Any, Dict, Optional, Union
from .aggregator import aggregate
from .errors import InvalidPathError
from .models import AnalysisReport
from .scanner import scan_tree


def analyze(path: str, now: Optional[datetime] = None, show_progress: bool = False) -> AnalysisReport:
    """
    Profiles the directory tree rooted at path.

    Raises:
        InvalidPathError: path is missing or not a directory. Nothing is traversed.
    """
    traversal = scan_tree(path, show_progress=show_progress)
    return aggregate(traversal, now=now)


def analyze_folder_command(path: str) -> Union[Dict[str, Any], str]:
    """
    Entry point for front ends: the serialized report on success, or the
    error message string when path is not a directory.
    """
    try:
        return analyze(path).to_dict()
    except InvalidPathError as e:
        return str(e)
