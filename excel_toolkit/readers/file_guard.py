"""Source checks run before any spreadsheet decoding.

Implements:
- File existence validation
- Extension validation against the configured formats
- Size ceiling on disk and, for zip-based workbooks, uncompressed
"""
import zipfile
from pathlib import Path
from typing import Union

import structlog

from excel_toolkit.config import ImporterSettings
from excel_toolkit.errors.exceptions import (
    SizeLimitExceededError,
    SourceNotFoundError,
    UnsupportedFormatError,
)

logger = structlog.get_logger(__name__)


def validate_source_path(source: Union[str, Path]) -> Path:
    """Resolve the source and make sure it is an existing file.

    Raises:
        SourceNotFoundError: If the path does not exist or is not a file
    """
    path = Path(source).expanduser()

    if not path.exists():
        raise SourceNotFoundError(
            f"Excel file not found: {source}",
            details={"source": str(source)}
        )

    if not path.is_file():
        raise SourceNotFoundError(
            f"Path is not a file: {source}",
            details={"source": str(source)}
        )

    return path


def validate_extension(path: Path, settings: ImporterSettings) -> str:
    """Return the lowercased extension if it is a supported spreadsheet format.

    Raises:
        UnsupportedFormatError: If the extension is not configured as supported
    """
    extension = path.suffix.lower()
    if extension not in settings.supported_extensions:
        raise UnsupportedFormatError(
            f"Unsupported file type '{extension or path.name}'. "
            f"Must be one of: {', '.join(settings.supported_extensions)}",
            details={"source": str(path), "supported_extensions": settings.supported_extensions}
        )
    return extension


def validate_source_size(path: Path, settings: ImporterSettings) -> int:
    """Check the on-disk and uncompressed size against the ceiling.

    Zip-based workbooks (.xlsx, .xlsm) are measured by the sum of their
    members' uncompressed sizes as well, since that is what gets decoded.

    Returns:
        Size in bytes of the larger of the two measurements

    Raises:
        SizeLimitExceededError: If either measurement exceeds the ceiling
        UnsupportedFormatError: If a zip container has a damaged central directory
    """
    max_bytes = settings.max_file_size_bytes
    file_size = path.stat().st_size
    measured = file_size

    if file_size <= max_bytes and zipfile.is_zipfile(path):
        try:
            with zipfile.ZipFile(path) as archive:
                measured = max(file_size, sum(info.file_size for info in archive.infolist()))
        except zipfile.BadZipFile as e:
            logger.warning("zip_container_unreadable", source=str(path), error=str(e))
            raise UnsupportedFormatError(
                f"Unable to read '{path.name}' as an Excel workbook: {e}",
                details={"source": str(path)}
            ) from e

    if measured > max_bytes:
        logger.warning(
            "source_exceeds_size_limit",
            source=str(path),
            size_bytes=measured,
            max_size_bytes=max_bytes,
        )
        raise SizeLimitExceededError(
            f"File size exceeds limit of {settings.max_file_size_mb} MB. "
            f"Current size: {round(measured / (1024 * 1024), 2)} MB",
            details={
                "source": str(path),
                "size_mb": round(measured / (1024 * 1024), 2),
                "max_size_mb": settings.max_file_size_mb,
            }
        )

    return measured


def validate_source(source: Union[str, Path], settings: ImporterSettings) -> Path:
    """Run every source check and return the validated path.

    Raises:
        SourceNotFoundError: File doesn't exist
        UnsupportedFormatError: Extension not supported
        SizeLimitExceededError: File exceeds the size ceiling
    """
    path = validate_source_path(source)
    validate_extension(path, settings)
    size = validate_source_size(path, settings)

    logger.debug("source_validated", source=str(path), size_bytes=size)
    return path
