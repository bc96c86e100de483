import numpy as np

from pnmexport.encoding import decode_samples
from pnmexport.errors import AllocationError
from pnmexport.formats import ColorType, ChannelSize
from pnmexport.log import Log
from pnmexport.sink import FileSink


def _rows(pixels: np.ndarray, width: int, height: int, color_type: ColorType, channel_size: ChannelSize):
    """ (height, width, channels, bytes per channel) view of the flat pixel bytes """
    return pixels.reshape(height, width, color_type.channels, channel_size.bytes_per_channel)


def row_buffer(width: int, color_type: ColorType, channel_size: ChannelSize):
    """ Scratch row for dropping the alpha channel, None if the color type has no alpha """
    if not color_type.has_alpha:
        return None

    try:
        return np.empty((width, color_type.channels - 1, channel_size.bytes_per_channel), dtype=np.uint8)
    except MemoryError as e:
        raise AllocationError(f'Cannot allocate a {width} pixel row buffer') from e


def encode_binary(sink: FileSink, pixels: np.ndarray, width: int, height: int,
                  color_type: ColorType, channel_size: ChannelSize, compacted: np.ndarray = None):
    """
    Write the packed ("raw") pixel data of a P5/P6 file.

    Both the input buffer and Netpbm keep 16-bit samples big endian, so samples are copied byte for byte.
    The alpha channel, if any, is dropped one row at a time through a single reused row buffer. Pass one from
    `row_buffer` to have allocation happen before the file is created.
    """
    if not color_type.has_alpha:
        sink.write_bytes(pixels.data)
        return

    rows = _rows(pixels, width, height, color_type, channel_size)
    if compacted is None:
        compacted = row_buffer(width, color_type, channel_size)

    for row in rows:
        np.copyto(compacted, row[:, :-1, :])
        sink.write_bytes(compacted.data)

    Log.debug(f'Dropped the alpha channel from {height} rows')


def encode_ascii(sink: FileSink, pixels: np.ndarray, width: int, height: int,
                 color_type: ColorType, channel_size: ChannelSize):
    """
    Write the decimal ("plain") pixel data of a P2/P3 file.

    Every row of the image becomes one line of width * channels_without_alpha space separated values.
    """
    rows = _rows(pixels, width, height, color_type, channel_size)
    channels = color_type.channels_without_alpha

    for row in rows:
        values = decode_samples(row.reshape(-1), channel_size.format).reshape(width, color_type.channels)

        tokens = []
        for pixel in values.tolist():
            tokens.extend(str(sample) for sample in pixel[:channels])

        sink.write_text(' '.join(tokens) + '\n')
