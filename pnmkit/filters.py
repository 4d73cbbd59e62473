"""3x3 convolution filters for PGM and PPM images."""

from __future__ import annotations

import enum
import struct
from typing import Iterable, Tuple

from .image import Image, PGMImage, PPMImage

Kernel = Tuple[Tuple[float, float, float], ...]

_FLOAT32 = struct.Struct("f")


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _kernel(rows) -> Kernel:
    return tuple(tuple(_f32(weight) for weight in row) for row in rows)


BLUR_KERNEL: Kernel = _kernel([[1.0 / 9.0] * 3] * 3)
LAPLACE_KERNEL: Kernel = _kernel(
    [[0.0, -1.0, 0.0], [-1.0, 4.0, -1.0], [0.0, -1.0, 0.0]]
)
SHARPEN_KERNEL: Kernel = _kernel(
    [[0.0, -1.0, 0.0], [-1.0, 5.0, -1.0], [0.0, -1.0, 0.0]]
)


class FilterType(enum.Enum):
    BLUR = "blur"
    LAPLACE = "laplace"
    SHARPEN = "sharpen"

    @classmethod
    def from_name(cls, name: str) -> "FilterType":
        """Filter with the given name; unknown names fall back to blur."""
        try:
            return cls(name)
        except ValueError:
            return cls.BLUR

    def __str__(self) -> str:
        return self.value


_KERNELS = {
    FilterType.BLUR: BLUR_KERNEL,
    FilterType.LAPLACE: LAPLACE_KERNEL,
    FilterType.SHARPEN: SHARPEN_KERNEL,
}


def kernel_for(filter_type: FilterType) -> Kernel:
    return _KERNELS[filter_type]


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _taps(kernel: Kernel):
    return [
        (dx, dy, weight)
        for dy, row in zip((-1, 0, 1), kernel)
        for dx, weight in zip((-1, 0, 1), row)
    ]


def convolve_rows(source: Image, target: Image, kernel: Kernel, rows: Iterable[int]) -> None:
    """Write the convolution of ``source`` for the given rows into ``target``.

    Neighbours outside the image contribute nothing; sums are accumulated in
    single precision, truncated toward zero and clamped to [0, max_color].
    """
    width, height, channels = source.width, source.height, source.channels
    high = source.max_color
    samples = source.pixels
    out = target.pixels
    taps = _taps(kernel)

    for y in rows:
        for x in range(width):
            sums = [0.0] * channels
            for dx, dy, weight in taps:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height:
                    base = (ny * width + nx) * channels
                    for channel, value in enumerate(samples[base:base + channels]):
                        sums[channel] = _f32(sums[channel] + _f32(value * weight))
            base = (y * width + x) * channels
            out[base:base + channels] = [clamp(int(total), 0, high) for total in sums]


def convolve(image: Image, kernel: Kernel) -> Image:
    """Return a new image of the same kind holding the convolution of ``image``."""
    if not isinstance(image, (PGMImage, PPMImage)):
        raise TypeError(f"cannot filter {type(image).__name__}; expected a PGM or PPM image")
    target = image.copy()
    target.pixels = [0] * image.width * image.height * image.channels
    convolve_rows(image, target, kernel, range(image.height))
    return target


def apply_filter(image: Image, filter_type: FilterType) -> Image:
    return convolve(image, kernel_for(filter_type))