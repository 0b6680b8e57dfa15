# foldersleuth/core/file_classifier.py
import magic
from typing import Dict, Mapping
from .models import FileRecord, TypeBucket, NO_EXTENSION_KEY

UNKNOWN_CATEGORY = 'unknown'

# Extensions are stored lower-cased and without the dot
EXTENSION_TO_CATEGORY = {
    # Documents
    'pdf': 'document', 'doc': 'document', 'docx': 'document', 'txt': 'document',
    'md': 'document', 'rtf': 'document', 'odt': 'document', 'xls': 'document',
    'xlsx': 'document', 'ppt': 'document', 'pptx': 'document',
    # Images
    'jpg': 'image', 'jpeg': 'image', 'png': 'image', 'gif': 'image',
    'webp': 'image', 'svg': 'image', 'bmp': 'image', 'tiff': 'image', 'heic': 'image',
    # Code
    'js': 'code', 'ts': 'code', 'tsx': 'code', 'jsx': 'code', 'py': 'code',
    'rs': 'code', 'go': 'code', 'java': 'code', 'cpp': 'code', 'c': 'code',
    'h': 'code', 'cs': 'code', 'html': 'code', 'css': 'code', 'php': 'code',
    'rb': 'code', 'swift': 'code', 'kt': 'code', 'sh': 'code',
    # Audio
    'mp3': 'audio', 'wav': 'audio', 'flac': 'audio', 'aac': 'audio', 'ogg': 'audio',
    # Video
    'mp4': 'video', 'avi': 'video', 'mov': 'video', 'mkv': 'video', 'wmv': 'video',
    # Archives
    'zip': 'archive', 'rar': 'archive', 'tar': 'archive', 'gz': 'archive', '7z': 'archive',
    # Data
    'json': 'data', 'xml': 'data', 'csv': 'data', 'yaml': 'data', 'yml': 'data',
    'toml': 'data',
    # Executables / System
    'exe': 'executable', 'dll': 'library', 'so': 'library',
}


def category_for_extension(extension: str) -> str:
    return EXTENSION_TO_CATEGORY.get(extension.lower(), UNKNOWN_CATEGORY)


def _category_for_mime(mime_type: str) -> str:
    primary_type = mime_type.split('/')[0]
    if primary_type in ('image', 'video', 'audio'):
        return primary_type
    if primary_type == 'text':
        return 'document'
    if 'zip' in mime_type or 'compressed' in mime_type or 'archive' in mime_type:
        return 'archive'
    if 'xml' in mime_type or 'json' in mime_type:
        return 'data'
    if 'executable' in mime_type:
        return 'executable'
    return UNKNOWN_CATEGORY


def classify_file(record: FileRecord) -> str:
    """
    Returns the broad category of a file ("image", "code", ...).
    The extension decides when it is known; otherwise the file content is
    sniffed with python-magic. Anything unreadable is "unknown".
    """
    category = category_for_extension(record.extension)
    if category != UNKNOWN_CATEGORY:
        return category

    try:
        mime_type = magic.from_file(record.path, mime=True)
    except magic.MagicException:
        return UNKNOWN_CATEGORY
    except OSError:
        # Gone or unreadable since the traversal
        return UNKNOWN_CATEGORY

    if not mime_type:
        return UNKNOWN_CATEGORY
    return _category_for_mime(mime_type)


def group_file_types_by_category(file_types: Mapping[str, TypeBucket]) -> Dict[str, TypeBucket]:
    """
    Rolls the per-extension buckets of a report up into categories.
    Only the extension is used here, so "no-extension" lands in "unknown".

    Args:
        file_types (Mapping[str, TypeBucket]): AnalysisReport.file_types.

    Returns:
        Dict[str, TypeBucket]: Buckets keyed by category, averages recomputed.
    """
    categories: Dict[str, TypeBucket] = {}
    for extension, bucket in file_types.items():
        if extension == NO_EXTENSION_KEY:
            category = UNKNOWN_CATEGORY
        else:
            category = category_for_extension(extension)
        merged = categories.setdefault(category, TypeBucket())
        merged.count += bucket.count
        merged.total_size += bucket.total_size

    for bucket in categories.values():
        bucket.finalize()
    return categories
