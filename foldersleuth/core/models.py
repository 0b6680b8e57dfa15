# foldersleuth/core/models.py
import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

NO_EXTENSION_KEY = "no-extension"
LARGEST_FILES_LIMIT = 10
SECONDS_PER_DAY = 86400
MODIFIED_FORMAT = "%Y-%m-%d %H:%M"


def split_extension(name: str):
    """
    Splits a file name into (base_name, extension) at the final dot.
    A leading dot alone (".bashrc") does not start an extension.
    """
    stem, dot, ext = name.rpartition('.')
    if not dot or not stem:
        return name, ""
    return stem, ext


@dataclass(frozen=True)
class FileRecord:
    path: str
    name: str
    extension: str  # lower-cased, without the dot; "" if none
    size: int  # in bytes
    modified_at: Optional[datetime] = None  # timezone-aware, local zone
    depth: int = 0  # root is 0, its direct children are 1

    @property
    def base_name(self) -> str:
        return split_extension(self.name)[0]

    @property
    def modified(self) -> str:
        if self.modified_at is None:
            return ""
        return self.modified_at.strftime(MODIFIED_FORMAT)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'name': self.name,
            'extension': self.extension,
            'size': self.size,
            'modified': self.modified,
            'depth': self.depth,
        }


@dataclass
class TypeBucket:
    count: int = 0
    total_size: int = 0
    average_size: int = 0

    def add(self, size: int) -> None:
        self.count += 1
        self.total_size += size

    def finalize(self) -> None:
        self.average_size = self.total_size // self.count if self.count else 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'count': self.count,
            'total_size': self.total_size,
            'average_size': self.average_size,
        }


@dataclass
class DuplicateGroup:
    pattern: str  # the shared base name
    files: List[str] = field(default_factory=list)  # file names only, no directories

    @property
    def count(self) -> int:
        return len(self.files)

    def to_dict(self) -> Dict[str, Any]:
        return {'pattern': self.pattern, 'count': self.count, 'files': list(self.files)}


@dataclass
class NamingTally:
    camel_case_count: int = 0
    snake_case_count: int = 0
    kebab_case_count: int = 0

    @property
    def total(self) -> int:
        return self.camel_case_count + self.snake_case_count + self.kebab_case_count

    def to_dict(self) -> Dict[str, int]:
        return {
            'camel_case_count': self.camel_case_count,
            'snake_case_count': self.snake_case_count,
            'kebab_case_count': self.kebab_case_count,
        }


@dataclass
class TraversalResult:
    root_dir: str
    files: List[FileRecord] = field(default_factory=list)  # in encounter order
    folder_count: int = 0  # excludes the root itself
    hidden_count: int = 0


@dataclass
class AnalysisReport:
    total_files: int = 0
    total_size: int = 0
    total_folders: int = 0
    file_types: Dict[str, TypeBucket] = field(default_factory=dict)
    largest_files: List[FileRecord] = field(default_factory=list)
    oldest_file: Optional[FileRecord] = None
    newest_file: Optional[FileRecord] = None
    avg_file_age_days: float = 0.0
    max_depth: int = 0
    hidden_file_count: int = 0
    duplicate_patterns: List[DuplicateGroup] = field(default_factory=list)
    naming_stats: NamingTally = field(default_factory=NamingTally)

    def to_dict(self) -> Dict[str, Any]:
        """Serializes the report using the field names the GUI consumer expects."""
        return {
            'total_files': self.total_files,
            'total_size': self.total_size,
            'total_folders': self.total_folders,
            'file_types': {ext: bucket.to_dict() for ext, bucket in self.file_types.items()},
            'largest_files': [f.to_dict() for f in self.largest_files],
            'oldest_file': self.oldest_file.to_dict() if self.oldest_file else None,
            'newest_file': self.newest_file.to_dict() if self.newest_file else None,
            'avg_file_age_days': self.avg_file_age_days,
            'max_depth': self.max_depth,
            'hidden_file_count': self.hidden_file_count,
            'duplicate_patterns': [g.to_dict() for g in self.duplicate_patterns],
            'naming_stats': self.naming_stats.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
