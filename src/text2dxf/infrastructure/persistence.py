"""Saving drawing documents as .dxf files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from text2dxf.domain.errors import DrawingIOError
from text2dxf.infrastructure.dxf_encoder import DxfEncoder

if TYPE_CHECKING:
    from text2dxf.domain.document import Document


logger = logging.getLogger(__name__)

DXF_SUFFIX = ".dxf"
DEFAULT_FILENAME = "output_plan.dxf"


def normalize_filename(filename: str | Path) -> str:
    """Append ``.dxf`` unless the name already ends with it (any case).

    Examples:
        >>> normalize_filename("room_3x5")
        'room_3x5.dxf'
        >>> normalize_filename("PLAN.DXF")
        'PLAN.DXF'
    """
    name = str(filename)
    if not name.lower().endswith(DXF_SUFFIX):
        name += DXF_SUFFIX
    return name


def resolve_output_path(filename: str | Path, base_dir: Path | None = None) -> Path:
    """Resolve a target filename to the absolute path of the .dxf file.

    Args:
        filename: Target name, with or without the ``.dxf`` suffix.
        base_dir: Directory that relative names are resolved against.
            Defaults to the current working directory.

    Returns:
        Absolute path ending in ``.dxf``.
    """
    path = Path(normalize_filename(filename)).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir).expanduser() / path
    return path.absolute()


def save(
    doc: Document,
    filename: str | Path,
    base_dir: Path | None = None,
    encoder: DxfEncoder | None = None,
) -> Path:
    """Encode ``doc`` and write it to a .dxf file, overwriting any existing file.

    Missing parent directories are created. The document is never modified,
    whether or not the save succeeds.

    Args:
        doc: The document to save.
        filename: Target name; ``.dxf`` is appended when missing.
        base_dir: Directory for relative names (default: current directory).
        encoder: Encoder to use (default: a :class:`DxfEncoder`).

    Returns:
        Absolute path of the written file.

    Raises:
        DrawingIOError: If the directory cannot be created or the file
            cannot be written.
    """
    path = resolve_output_path(filename, base_dir)
    encoder = encoder or DxfEncoder()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DrawingIOError(f"Failed to create directory {path.parent}: {e}", path) from e

    content = encoder.encode(doc)
    try:
        # Characters outside the code page become \U+XXXX escapes
        with path.open(
            "w", encoding=encoder.encoding, errors="dxfreplace", newline="\n"
        ) as f:
            f.write(content)
    except OSError as e:
        raise DrawingIOError(f"Failed to save DXF file {path}: {e}", path) from e

    logger.info("Saved drawing with %d entities to %s", doc.entity_count, path)
    return path
