from pathlib import Path
from typing import Union

from pnmexport.encoder import encode_ascii, encode_binary, row_buffer
from pnmexport.encoding import as_byte_array
from pnmexport.errors import DimensionError, ShapeMismatchError
from pnmexport.formats import ColorType, ChannelSize, Encoding, expected_size
from pnmexport.header import header_info
from pnmexport.log import Log
from pnmexport.sink import FileSink


def export(name: Union[str, Path], buffer, width: int, height: int, color_type: ColorType,
           channel_size: ChannelSize, encoding: Encoding) -> Path:
    """
    Save an image buffer as a PGM (grayscale) or PPM (color) file.

    :param name: output file name; '.pgm' or '.ppm' is appended depending on the color type
    :param buffer: row-major pixel data without padding, 16-bit samples big endian
    :param width: image width, in pixels
    :param height: image height, in pixels
    :param color_type: pixel layout of the buffer; an alpha channel is dropped from the output
    :param channel_size: 8 or 16 bits per channel
    :param encoding: binary ("raw") or ASCII ("plain") output
    :return: path of the written file
    """
    if width <= 0 or height <= 0:
        raise DimensionError(f'Image dimensions must be positive, got {width}x{height}')

    pixels = as_byte_array(buffer)
    expected = expected_size(width, height, color_type, channel_size)
    if pixels.size != expected:
        raise ShapeMismatchError(pixels.size, expected)

    info = header_info(color_type, channel_size, encoding)
    path = Path(f'{name}{info.extension}')

    # Scratch memory is claimed before the destination file is created
    compacted = row_buffer(width, color_type, channel_size) if encoding == Encoding.Binary else None

    with FileSink(path) as sink:
        sink.write_bytes(info.format(width, height))
        if encoding == Encoding.Binary:
            encode_binary(sink, pixels, width, height, color_type, channel_size, compacted)
        else:
            encode_ascii(sink, pixels, width, height, color_type, channel_size)

    Log.debug(f'Exported {width}x{height} {color_type.value} {channel_size.value}bpc image to {path} ({info.magic})')
    return path


def export_binary(name: Union[str, Path], buffer, width: int, height: int, color_type: ColorType,
                  channel_size: ChannelSize) -> Path:
    return export(name, buffer, width, height, color_type, channel_size, Encoding.Binary)


def export_ascii(name: Union[str, Path], buffer, width: int, height: int, color_type: ColorType,
                 channel_size: ChannelSize) -> Path:
    return export(name, buffer, width, height, color_type, channel_size, Encoding.Ascii)
