"""Plain-text PGM (P2) and PPM (P3) images."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from os import PathLike
from typing import ClassVar, Iterable, NamedTuple, Optional, Union

PathType = Union[str, "PathLike[str]"]

_MAGIC_RE = re.compile(r"\s*(\S{1,2})")
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_WS_RE = re.compile(r"\s*")


class ImageFormatError(ValueError):
    """Raised when a file is not a well-formed P2 or P3 image."""


class RGB(NamedTuple):
    r: int = 0
    g: int = 0
    b: int = 0


class _Scanner:
    """Reads whitespace-separated tokens from a text image."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def magic(self) -> Optional[str]:
        match = _MAGIC_RE.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match.group(1)

    def integer(self) -> Optional[int]:
        match = _INT_RE.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return int(match.group(1))

    def skip_comments(self) -> None:
        while True:
            self.pos = _WS_RE.match(self.text, self.pos).end()
            if not self.text.startswith("#", self.pos):
                return
            newline = self.text.find("\n", self.pos)
            self.pos = len(self.text) if newline < 0 else newline + 1


def _read_text(path: PathType) -> str:
    with open(path, encoding="latin-1") as handle:
        return handle.read()


def _clamp(value: int, high: int) -> int:
    return max(0, min(high, value))


@dataclass
class Image:
    """A raster of integer samples stored row by row."""

    width: int = 0
    height: int = 0
    max_color: int = 0
    pixels: list = field(default_factory=list)

    magic: ClassVar[str] = ""
    channels: ClassVar[int] = 1
    kind: ClassVar[str] = "image"

    @property
    def pixel_count(self) -> int:
        return len(self.pixels)

    @classmethod
    def load(cls, path: PathType) -> "Image":
        """Read an image; on the base class the format is chosen by magic number."""
        if cls is Image:
            return load_image(path)
        return cls._parse(_read_text(path))

    @classmethod
    def _parse(cls, text: str) -> "Image":
        scanner = _Scanner(text)
        magic = scanner.magic()
        if magic is None:
            raise ImageFormatError("cannot read magic number")
        if magic != cls.magic:
            raise ImageFormatError(
                f"not a valid {cls.kind} file ({cls.magic} expected)"
            )
        scanner.skip_comments()
        width = scanner.integer()
        height = scanner.integer() if width is not None else None
        if width is None or height is None:
            raise ImageFormatError("cannot read image dimensions")
        scanner.skip_comments()
        max_color = scanner.integer()
        if max_color is None:
            raise ImageFormatError("cannot read max color value")

        count = width * height * cls.channels if width > 0 and height > 0 else 0
        return cls(width, height, max_color, list(_read_samples(scanner, count)))

    def save(self, path: PathType) -> None:
        with open(path, "w", encoding="ascii", newline="\n") as handle:
            handle.write(f"{self.magic}\n{self.width} {self.height}\n{self.max_color}\n")
            handle.writelines(f"{value}\n" for value in self.pixels)

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def copy(self) -> "Image":
        return replace(self, pixels=list(self.pixels))


def _read_samples(scanner: _Scanner, count: int) -> Iterable[int]:
    for position in range(count):
        value = scanner.integer()
        if value is None:
            raise ImageFormatError(f"cannot read pixel value at position {position}")
        yield value


class PGMImage(Image):
    """Grayscale image, one sample per pixel."""

    magic = "P2"
    channels = 1
    kind = "PGM"

    def get_gray(self, x: int, y: int) -> int:
        """Gray value at (x, y), or 0 outside the image."""
        if not self.is_valid_coordinate(x, y):
            return 0
        return self.pixels[self.pixel_index(x, y)]

    def set_gray(self, x: int, y: int, value: int) -> None:
        """Store a value clamped to [0, max_color]; ignored outside the image."""
        if self.is_valid_coordinate(x, y):
            self.pixels[self.pixel_index(x, y)] = _clamp(value, self.max_color)


class PPMImage(Image):
    """Colour image, three samples (R, G, B) per pixel."""

    magic = "P3"
    channels = 3
    kind = "PPM"

    def get_rgb(self, x: int, y: int) -> RGB:
        """Colour at (x, y), or black outside the image."""
        if not self.is_valid_coordinate(x, y):
            return RGB(0, 0, 0)
        base = self.pixel_index(x, y) * 3
        return RGB(*self.pixels[base:base + 3])

    def set_rgb(self, x: int, y: int, color: Iterable[int]) -> None:
        """Store a colour with each channel clamped; ignored outside the image."""
        if not self.is_valid_coordinate(x, y):
            return
        red, green, blue = color
        base = self.pixel_index(x, y) * 3
        self.pixels[base:base + 3] = [
            _clamp(red, self.max_color),
            _clamp(green, self.max_color),
            _clamp(blue, self.max_color),
        ]


_FORMATS = {cls.magic: cls for cls in (PGMImage, PPMImage)}


def read_magic(path: PathType) -> str:
    """Return the magic number at the start of an image file."""
    magic = _Scanner(_read_text(path)).magic()
    if magic is None:
        raise ImageFormatError(f"cannot read magic number from {path}")
    return magic


def load_image(path: PathType) -> Image:
    """Load a P2 or P3 file as the matching image class."""
    image_class = _FORMATS.get(read_magic(path))
    if image_class is None:
        raise ImageFormatError(
            "unsupported image format; only P2 (PGM) and P3 (PPM) are supported"
        )
    return image_class.load(path)