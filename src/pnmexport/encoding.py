from enum import Enum

import numpy as np


class ByteOrder(Enum):
    # Netpbm stores multi-byte samples most significant byte first
    BigEndian = '>'
    Default = BigEndian


class Format(Enum):
    u8 = 'B'
    u16 = 'H'


def sample_dtype(fmt: Format, order: ByteOrder = ByteOrder.Default) -> np.dtype:
    return np.dtype(f'{order.value}{fmt.value}')


def as_byte_array(buffer) -> np.ndarray:
    """
    Flat, read-only uint8 view of any bytes-like object or numpy array.
    Arrays are taken as they are laid out in memory, so a '>u2' array yields big endian sample pairs.
    """
    if isinstance(buffer, np.ndarray):
        return np.ascontiguousarray(buffer).view(np.uint8).reshape(-1)

    return np.frombuffer(buffer, dtype=np.uint8)


def decode_samples(data: np.ndarray, fmt: Format) -> np.ndarray:
    """
    Turn a run of packed sample bytes into integer sample values.
    16-bit samples are combined as (high << 8) | low, with the high byte first, whatever the host byte order is.
    """
    if fmt == Format.u8:
        return data.astype(np.uint32)

    pairs = data.reshape(-1, 2).astype(np.uint32)
    return (pairs[:, 0] << 8) | pairs[:, 1]


def to_big_endian(samples: np.ndarray) -> np.ndarray:
    """ Clamp integer samples to 16 bits and store them in Netpbm byte order """
    clipped = np.clip(samples, 0, 0xFFFF)
    return clipped.astype(sample_dtype(Format.u16))


def widen_to_16bit(samples: np.ndarray) -> np.ndarray:
    """ Scale 8-bit samples to the full 16-bit range (0xAB -> 0xABAB) """
    return to_big_endian(samples.astype(np.uint32) * 257)
