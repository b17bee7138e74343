"""Infrastructure layer - DXF encoding and file output."""

from .dxf_encoder import DxfEncoder, encode
from .persistence import (
    DEFAULT_FILENAME,
    normalize_filename,
    resolve_output_path,
    save,
)

__all__ = [
    "DEFAULT_FILENAME",
    "DxfEncoder",
    "encode",
    "normalize_filename",
    "resolve_output_path",
    "save",
]
