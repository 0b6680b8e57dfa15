# foldersleuth/core/aggregator.py
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple
from .models import (
    AnalysisReport, FileRecord, NamingTally, TraversalResult, TypeBucket,
    LARGEST_FILES_LIMIT, NO_EXTENSION_KEY, SECONDS_PER_DAY,
)
from .duplicate_detector import find_duplicate_names

SNAKE_CASE = 'snake_case'
KEBAB_CASE = 'kebab_case'
CAMEL_CASE = 'camel_case'


def tally_file_types(files: Sequence[FileRecord]) -> Dict[str, TypeBucket]:
    file_types: Dict[str, TypeBucket] = {}
    for record in files:
        key = record.extension or NO_EXTENSION_KEY
        file_types.setdefault(key, TypeBucket()).add(record.size)

    # Averages only once every file is in its bucket
    for bucket in file_types.values():
        bucket.finalize()
    return file_types


def largest_files(files: Sequence[FileRecord], limit: int = LARGEST_FILES_LIMIT) -> List[FileRecord]:
    # sorted() is stable with reverse=True, equal sizes keep encounter order
    return sorted(files, key=lambda f: f.size, reverse=True)[:limit]


def _aware(moment: datetime) -> datetime:
    # Naive values are taken as local wall-clock time
    return moment if moment.tzinfo is not None else moment.astimezone()


def age_in_days(record: FileRecord, now: datetime) -> Optional[float]:
    if record.modified_at is None:
        return None
    return (_aware(now) - _aware(record.modified_at)).total_seconds() / SECONDS_PER_DAY


def age_statistics(files: Sequence[FileRecord], now: datetime) -> Tuple[Optional[FileRecord], Optional[FileRecord], float]:
    """
    Returns (oldest, newest, average age in days).

    Files without a usable timestamp are left out of all three values. On
    equal ages the first file seen stays oldest and stays newest.
    """
    oldest: Optional[FileRecord] = None
    newest: Optional[FileRecord] = None
    oldest_age = newest_age = 0.0
    total_age = 0.0
    dated = 0

    for record in files:
        age = age_in_days(record, now)
        if age is None:
            continue
        total_age += age
        dated += 1
        if oldest is None or age > oldest_age:
            oldest, oldest_age = record, age
        if newest is None or age < newest_age:
            newest, newest_age = record, age

    average = total_age / dated if dated else 0.0
    return oldest, newest, average


def classify_naming(name: str) -> Optional[str]:
    """
    Classifies a file name as snake_case, kebab-case or camelCase, checked in
    that order. All-lowercase names without separators ("readme.md") are flat
    and return None.
    """
    if '_' in name:
        return SNAKE_CASE
    if '-' in name:
        return KEBAB_CASE
    if any('A' <= c <= 'Z' for c in name):
        return CAMEL_CASE
    return None


def tally_naming(files: Sequence[FileRecord]) -> NamingTally:
    tally = NamingTally()
    for record in files:
        style = classify_naming(record.name)
        if style == SNAKE_CASE:
            tally.snake_case_count += 1
        elif style == KEBAB_CASE:
            tally.kebab_case_count += 1
        elif style == CAMEL_CASE:
            tally.camel_case_count += 1
    return tally


def aggregate(traversal: TraversalResult, now: Optional[datetime] = None) -> AnalysisReport:
    """
    Builds the AnalysisReport from the traversal output.

    Args:
        traversal (TraversalResult): Files, folder and hidden-entry counts from scan_tree.
        now (datetime, optional): Local time the ages are measured against.
                                  Read once from the clock when omitted.

    Returns:
        AnalysisReport: A self-contained report; an empty file list gives
                        zeroes, empty containers and no oldest/newest file.
    """
    if now is None:
        now = datetime.now().astimezone()
    now = _aware(now)
    files = traversal.files
    oldest, newest, avg_age = age_statistics(files, now)

    return AnalysisReport(
        total_files=len(files),
        total_size=sum(f.size for f in files),
        total_folders=traversal.folder_count,
        file_types=tally_file_types(files),
        largest_files=largest_files(files),
        oldest_file=oldest,
        newest_file=newest,
        avg_file_age_days=avg_age,
        max_depth=max((f.depth for f in files), default=0),
        hidden_file_count=traversal.hidden_count,
        duplicate_patterns=find_duplicate_names(files),
        naming_stats=tally_naming(files),
    )
