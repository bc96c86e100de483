import pytest

# 5x5 sample images, one row of pixels per line

GRAY_8BPC = bytes([
    0x00, 0x00, 0xff, 0xff, 0x00,
    0x00, 0xe0, 0x00, 0x00, 0xe0,
    0x00, 0x00, 0xad, 0xad, 0x00,
    0x00, 0x85, 0x00, 0x00, 0x85,
    0x00, 0x00, 0x52, 0x52, 0x00,
])

GRAY_16BPC = bytes([
    0xff, 0xff, 0x00, 0x00, 0xff, 0xed, 0xff, 0x9f, 0xff, 0xeb,
    0xd8, 0xbc, 0x00, 0x00, 0xd9, 0x68, 0x00, 0x00, 0x00, 0x00,
    0xb2, 0x40, 0x00, 0x00, 0xb2, 0x37, 0xb2, 0x47, 0xb1, 0xdd,
    0x81, 0x3d, 0x00, 0x00, 0x8b, 0x71, 0x00, 0x00, 0x8a, 0xd4,
    0x5a, 0xa0, 0x00, 0x00, 0x5a, 0x57, 0x5a, 0x4e, 0x5a, 0xa3,
])

GRAYA_8BPC = bytes([
    0x00, 0x00, 0x00, 0x00, 0xff, 0xff, 0xff, 0xff, 0x00, 0x00,
    0x00, 0x00, 0xd3, 0xff, 0x00, 0x00, 0x00, 0x00, 0xd2, 0xff,
    0x00, 0x00, 0x00, 0x00, 0x9b, 0xff, 0x9b, 0xff, 0x00, 0x00,
    0x00, 0x00, 0x65, 0xff, 0x00, 0x00, 0x00, 0x00, 0x65, 0xff,
    0x00, 0x00, 0x00, 0x00, 0x32, 0xff, 0x32, 0xff, 0x00, 0x00,
])

GRAYA_16BPC = bytes([
    0xff, 0xc3, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0xff, 0xc4, 0xff, 0xff, 0xff, 0xb5, 0xff, 0xff, 0xff, 0xfb, 0xff, 0xff,
    0xc8, 0xb2, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0xc9, 0x32, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x92, 0x44, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x92, 0x93, 0xff, 0xff, 0x91, 0xfa, 0xff, 0xff, 0x92, 0x31, 0xff, 0xff,
    0x69, 0x3b, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x69, 0x3d, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x69, 0x47, 0xff, 0xff,
    0x31, 0xcb, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x31, 0xc6, 0xff, 0xff, 0x32, 0x11, 0xff, 0xff, 0x32, 0x1e, 0xff, 0xff,
])

RGB_16BPC = bytes([
    0x00, 0x00, 0x78, 0x69, 0x61, 0x7b, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x78, 0x31, 0x62, 0x49,
    0x00, 0x30, 0x78, 0x35, 0x62, 0x0d, 0x00, 0x00, 0x78, 0x6e, 0x62, 0x54,
    0x00, 0x1f, 0x9d, 0xce, 0x54, 0x39, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x9e, 0x51, 0x54, 0x32,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x1e, 0xbc, 0x4e, 0x48, 0xad, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x75, 0xbc, 0x3b, 0x48, 0x5f,
    0x00, 0x31, 0xbc, 0x8e, 0x48, 0xef, 0x00, 0x00, 0xbc, 0x75, 0x49, 0x01,
    0x00, 0x00, 0xda, 0x6e, 0x3d, 0x21, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xe1, 0xea, 0x3a, 0x87,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x65, 0xe1, 0xbb, 0x3a, 0xa4,
    0x00, 0x00, 0xff, 0xff, 0x2f, 0xba, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x3e, 0xff, 0xff, 0x2f, 0xc0,
    0x00, 0x00, 0xff, 0xff, 0x2f, 0xc1, 0x00, 0x00, 0xff, 0xbf, 0x2f, 0x1c,
])

RGB_8BPC = bytes([
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xff, 0xe3, 0x00, 0xff, 0xe4, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0xff, 0xa8, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xff, 0xa9, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xff, 0x92, 0x00, 0xff, 0x93, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0xfa, 0x82, 0x06, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xfa, 0x82, 0x06,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xe6, 0x6d, 0x1e, 0xe6, 0x6d, 0x1e, 0x00, 0x00, 0x00,
])

RGBA_16BPC = bytes([
    0xff, 0xda, 0x00, 0x59, 0x7e, 0x51, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0xff, 0x80, 0x00, 0x00, 0x7e, 0x68, 0xff, 0xff, 0xff, 0xf3, 0x00, 0x00, 0x7e, 0x53, 0xff, 0xff,
    0xff, 0xd7, 0x00, 0x00, 0x7d, 0xfc, 0xff, 0xff,
    0xe1, 0x77, 0x00, 0x56, 0x63, 0x1a, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0xe1, 0xc4, 0x00, 0x14, 0x63, 0xdd, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0xbb, 0xc8, 0x00, 0x45, 0x41, 0xf8, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0xbc, 0x4d, 0x00, 0x71, 0x42, 0x49, 0xff, 0xff, 0xbb, 0xec, 0x00, 0x00, 0x42, 0x17, 0xff, 0xff,
    0xbc, 0x70, 0x00, 0x00, 0x42, 0x6b, 0xff, 0xff,
    0x96, 0xcd, 0x00, 0x00, 0x21, 0x30, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x96, 0x71, 0x00, 0x00, 0x21, 0xa6, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x9d, 0xd2, 0x00, 0x00, 0x27, 0x86, 0xff, 0xff,
    0x78, 0xd2, 0x00, 0x00, 0x06, 0xf7, 0xff, 0xff, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x78, 0x9d, 0x00, 0x47, 0x07, 0x09, 0xff, 0xff, 0x78, 0x36, 0x00, 0x00, 0x06, 0x49, 0xff, 0xff,
    0x78, 0xdf, 0x00, 0x4a, 0x06, 0x9f, 0xff, 0xff,
])


@pytest.fixture
def out_name(tmp_path):
    """ Base name (no extension) for an exported file """
    return tmp_path / 'image'


def pixel_data(path):
    """ Everything after the three header lines """
    return path.read_bytes().split(b'\n', 3)[3]
