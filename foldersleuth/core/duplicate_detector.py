# foldersleuth/core/duplicate_detector.py
from typing import Dict, Iterable, List
from .models import FileRecord, DuplicateGroup


def find_duplicate_names(files: Iterable[FileRecord]) -> List[DuplicateGroup]:
    """
    Groups files by base name (extension stripped, case-sensitive), ignoring
    the directory they live in. This is a naming heuristic only: no content
    is compared.

    Groups come out in the order their base name was first seen; members keep
    encounter order and are reported by file name.
    """
    names_by_base: Dict[str, List[str]] = {}

    for record in files:
        names_by_base.setdefault(record.base_name, []).append(record.name)

    return [
        DuplicateGroup(pattern=base_name, files=names)
        for base_name, names in names_by_base.items()
        if len(names) > 1
    ]
