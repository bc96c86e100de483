import argparse
import os
import sys

from dataclasses import dataclass
from typing import Optional

from PIL import Image
import numpy as np

from pnmexport.encoding import to_big_endian, widen_to_16bit
from pnmexport.errors import ExportError
from pnmexport.exporter import export
from pnmexport.formats import ColorType, ChannelSize, Encoding
from pnmexport.log import Log

_COLOR_TYPES = {
    'L': ColorType.Gray,
    'LA': ColorType.GrayAlpha,
    'RGB': ColorType.Rgb,
    'RGBA': ColorType.RgbAlpha,
}

_SIXTEEN_BIT_MODES = ('I;16', 'I;16L', 'I;16B', 'I')


@dataclass
class ExportConfig:
    output: Optional[str]
    encoding: Encoding
    sixteen_bit: bool

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser):
        parser.add_argument('--output', '-o', type=str, default=None,
                            help='Output file name without extension. Defaults to the input path without its extension')
        parser.add_argument('--ascii', '-a', action='store_true', help='Write a plain (P2/P3) file instead of a raw one')
        parser.add_argument('--sixteen-bit', action='store_true', help='Write 16 bits per channel')

    @staticmethod
    def from_args(args) -> 'ExportConfig':
        return ExportConfig(args.output, Encoding.Ascii if args.ascii else Encoding.Binary, args.sixteen_bit)


def image_to_buffer(img: Image.Image):
    """
    Turn a Pillow image into a pixel buffer the exporter understands.

    :return: (pixels, width, height, color type, channel size)
    """
    width, height = img.size

    if img.mode in _SIXTEEN_BIT_MODES:
        return to_big_endian(np.array(img)), width, height, ColorType.Gray, ChannelSize.SixteenBpc

    if img.mode not in _COLOR_TYPES:
        if img.mode == '1':
            target = 'L'
        elif img.mode in ('PA', 'La', 'RGBa') or 'transparency' in img.info:
            target = 'RGBA'
        else:
            target = 'RGB'

        Log.debug(f'Converting {img.mode} image to {target}')
        img = img.convert(target)

    color_type = _COLOR_TYPES[img.mode]
    if color_type.has_alpha:
        Log.warning(f'{img.mode} image: the alpha channel is not stored in PGM/PPM files and will be dropped')

    return np.array(img), width, height, color_type, ChannelSize.EightBpc


def convert(input_file: str, config: ExportConfig):
    with Image.open(input_file) as img:
        pixels, width, height, color_type, channel_size = image_to_buffer(img)

    if config.sixteen_bit and channel_size == ChannelSize.EightBpc:
        pixels = widen_to_16bit(pixels)
        channel_size = ChannelSize.SixteenBpc

    name = config.output if config.output is not None else os.path.splitext(input_file)[0]
    path = export(name, pixels, width, height, color_type, channel_size, config.encoding)

    Log.info(f'Converted {input_file} to {path}')
    Log.info(f'Image dimensions: {width}x{height}, {color_type.value}, {channel_size.value} bits per channel')
    return path


def main(argv=None):
    parser = argparse.ArgumentParser('pnm-export', description='Convert an image to a PGM or PPM file')
    parser.add_argument('input', type=str, help='Image file to convert')

    Log.add_args(parser)
    ExportConfig.add_arguments(parser)

    args = parser.parse_args(argv)
    Log.setup(args)

    try:
        convert(args.input, ExportConfig.from_args(args))
    except (ExportError, OSError) as e:
        Log.error(f'An error occurred: {e}')
        sys.exit(1)


if __name__ == "__main__":
    main()
