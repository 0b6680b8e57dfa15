# foldersleuth/core/__init__.py
from .models import FileRecord, TypeBucket, DuplicateGroup, NamingTally, TraversalResult, AnalysisReport
from .errors import FolderSleuthError, InvalidPathError
from .scanner import scan_tree
from .aggregator import aggregate
from .duplicate_detector import find_duplicate_names
from .file_classifier import classify_file, group_file_types_by_category
from .findings import Finding, derive_findings, format_bytes
from .analyzer import analyze, analyze_folder_command
