from enum import Enum

from pnmexport.encoding import Format


class ColorType(Enum):
    Gray = 'gray'
    Rgb = 'rgb'
    GrayAlpha = 'graya'
    RgbAlpha = 'rgba'

    @property
    def channels(self) -> int:
        return _CHANNELS[self]

    @property
    def has_alpha(self) -> bool:
        """ Alpha, when present, is always the last channel of a pixel """
        return self in (ColorType.GrayAlpha, ColorType.RgbAlpha)

    @property
    def channels_without_alpha(self) -> int:
        return self.channels - 1 if self.has_alpha else self.channels

    @property
    def is_color(self) -> bool:
        return self in (ColorType.Rgb, ColorType.RgbAlpha)


class ChannelSize(Enum):
    EightBpc = 8
    SixteenBpc = 16

    @property
    def bytes_per_channel(self) -> int:
        return _BYTES_PER_CHANNEL[self]

    @property
    def maxval(self) -> int:
        return _MAXVAL[self]

    @property
    def format(self) -> Format:
        return _FORMAT[self]


class Encoding(Enum):
    Binary = 'binary'
    Ascii = 'ascii'


_CHANNELS = {
    ColorType.Gray: 1,
    ColorType.Rgb: 3,
    ColorType.GrayAlpha: 2,
    ColorType.RgbAlpha: 4,
}

_BYTES_PER_CHANNEL = {
    ChannelSize.EightBpc: 1,
    ChannelSize.SixteenBpc: 2,
}

_MAXVAL = {
    ChannelSize.EightBpc: 255,
    ChannelSize.SixteenBpc: 65535,
}

_FORMAT = {
    ChannelSize.EightBpc: Format.u8,
    ChannelSize.SixteenBpc: Format.u16,
}


def expected_size(width: int, height: int, color_type: ColorType, channel_size: ChannelSize) -> int:
    """ Number of bytes an image buffer of the given shape must contain """
    return width * height * color_type.channels * channel_size.bytes_per_channel
