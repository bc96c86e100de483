from pnmexport.errors import (
    ExportError, DimensionError, ShapeMismatchError, AllocationError, FileCreationError, WriteError
)
from pnmexport.exporter import export, export_binary, export_ascii
from pnmexport.formats import ColorType, ChannelSize, Encoding, expected_size
from pnmexport.header import read_header

__all__ = [
    'ExportError', 'DimensionError', 'ShapeMismatchError', 'AllocationError', 'FileCreationError', 'WriteError',
    'export', 'export_binary', 'export_ascii',
    'ColorType', 'ChannelSize', 'Encoding', 'expected_size',
    'read_header',
]
