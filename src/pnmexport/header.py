import re

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from pnmexport.formats import ColorType, ChannelSize, Encoding


@dataclass(frozen=True)
class HeaderInfo:
    extension: str
    magic: str
    maxval: int

    def format(self, width: int, height: int) -> bytes:
        return f'{self.magic}\n{width} {height}\n{self.maxval}\n'.encode('ascii')


@dataclass(frozen=True)
class NetpbmHeader:
    magic: str
    width: int
    height: int
    maxval: int
    data_offset: int


_EXTENSIONS = {
    ColorType.Gray: '.pgm',
    ColorType.GrayAlpha: '.pgm',
    ColorType.Rgb: '.ppm',
    ColorType.RgbAlpha: '.ppm',
}

_MAGIC = {
    (Encoding.Binary, False): 'P5',
    (Encoding.Binary, True): 'P6',
    (Encoding.Ascii, False): 'P2',
    (Encoding.Ascii, True): 'P3',
}

# Magic, width, height and maxval, each followed by whitespace and optional '#' comment lines.
# A single whitespace character separates maxval from the pixel data.
_HEADER_RE = re.compile(
    br'^(P[2356])\s+(?:#.*[\r\n])*'
    br'\s*(\d+)\s+(?:#.*[\r\n])*'
    br'\s*(\d+)\s+(?:#.*[\r\n])*'
    br'\s*(\d+)\s'
)


def header_info(color_type: ColorType, channel_size: ChannelSize, encoding: Encoding) -> HeaderInfo:
    return HeaderInfo(_EXTENSIONS[color_type], _MAGIC[(encoding, color_type.is_color)], channel_size.maxval)


def read_header(source: Union[bytes, bytearray, str, Path]) -> NetpbmHeader:
    """
    Parse the header of a PGM/PPM file (plain or raw).

    :param source: the file contents, or a path to the file
    :return: the header values plus the offset at which the pixel data starts
    """
    data = bytes(source) if isinstance(source, (bytes, bytearray)) else Path(source).read_bytes()

    match = _HEADER_RE.match(data)
    if match is None:
        raise ValueError('Invalid PGM/PPM header')

    magic, width, height, maxval = match.groups()
    return NetpbmHeader(magic.decode('ascii'), int(width), int(height), int(maxval), match.end())
