# foldersleuth/core/scanner.py
import os
import stat
from datetime import datetime
from typing import Optional
from tqdm import tqdm
from .errors import InvalidPathError
from .models import FileRecord, TraversalResult, split_extension


def _is_hidden(name: str) -> bool:
    return name.startswith('.')


def _local_mtime(st: os.stat_result) -> Optional[datetime]:
    try:
        # Timezone-aware local time
        return datetime.fromtimestamp(st.st_mtime).astimezone()
    except (OverflowError, OSError, ValueError):
        # Out-of-range timestamps only drop the file from the age statistics
        return None


def _build_file_record(file_path: str, file_name: str, depth: int) -> Optional[FileRecord]:
    """
    Stats a single non-directory entry and returns its FileRecord.
    Returns None for anything that is not a regular file or cannot be stat'ed.
    Symlinks are followed, so a link to a regular file is recorded with the
    target's size and modification time.
    """
    try:
        st = os.stat(file_path)
    except OSError:
        return None
    if not stat.S_ISREG(st.st_mode):
        return None

    _, extension = split_extension(file_name)
    return FileRecord(
        path=file_path,
        name=file_name,
        extension=extension.lower(),
        size=st.st_size,
        modified_at=_local_mtime(st),
        depth=depth,
    )


def scan_tree(root_dir: str, show_progress: bool = False) -> TraversalResult:
    """
    Walks root_dir recursively and collects a FileRecord for every readable
    regular file, plus the number of sub-folders and hidden entries.

    The root is depth 0 and is neither counted as a folder nor as hidden.
    Symlinked directories are counted as folders but never descended into.
    Entries are visited in sorted order within each directory.

    Raises:
        InvalidPathError: root_dir does not exist or is not a directory.
    """
    if not os.path.isdir(root_dir):
        raise InvalidPathError(root_dir)

    result = TraversalResult(root_dir=root_dir)
    walker = os.walk(root_dir, topdown=True, followlinks=False)
    for dirpath, dirnames, filenames in tqdm(walker, desc="Walking directories", unit="dir",
                                             disable=not show_progress):
        if dirpath == root_dir:
            child_depth = 1
        else:
            child_depth = os.path.relpath(dirpath, root_dir).count(os.sep) + 2
        dirnames.sort()
        filenames.sort()

        for dirname in dirnames:
            result.folder_count += 1
            if _is_hidden(dirname):
                result.hidden_count += 1

        for filename in filenames:
            if _is_hidden(filename):
                result.hidden_count += 1
            record = _build_file_record(os.path.join(dirpath, filename), filename, child_depth)
            if record is not None:
                result.files.append(record)

    return result
