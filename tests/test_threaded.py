import pytest

from pnmkit.filters import FilterType, apply_filter
from pnmkit.image import Image, PGMImage, PPMImage, load_image
from pnmkit.threaded import (
    NUM_THREADS,
    apply_filter_threaded,
    main,
    row_ranges,
    usage,
)


def _gray(width, height):
    pixels = [(x * 7 + y * 13) % 256 for y in range(height) for x in range(width)]
    return PGMImage(width, height, 255, pixels)


def _color(width, height):
    pixels = []
    for y in range(height):
        for x in range(width):
            pixels += [(x * 11) % 256, (y * 17) % 256, (x * y * 5) % 256]
    return PPMImage(width, height, 255, pixels)


@pytest.mark.parametrize("height", [0, 1, 3, 4, 7, 10, 33])
@pytest.mark.parametrize("threads", [1, 2, 3, 4, 8])
def test_row_ranges_cover_every_row_once(height, threads):
    bands = row_ranges(height, threads)
    assert len(bands) == threads
    assert [row for band in bands for row in band] == list(range(height))


@pytest.mark.parametrize("height,threads", [(10, 4), (7, 3), (33, 8)])
def test_row_ranges_last_band_takes_remainder(height, threads):
    bands = row_ranges(height, threads)
    base = height // threads
    assert all(len(band) == base for band in bands[:-1])
    assert len(bands[-1]) == base + height % threads


def test_row_ranges_rejects_zero_threads():
    with pytest.raises(ValueError):
        row_ranges(10, 0)


@pytest.mark.parametrize("filter_type", list(FilterType))
@pytest.mark.parametrize("threads", [1, 2, 4, 5])
def test_threaded_gray_matches_sequential(filter_type, threads):
    image = _gray(9, 7)
    result = apply_filter_threaded(image, filter_type, threads)
    assert isinstance(result, PGMImage)
    assert result == apply_filter(image, filter_type)


@pytest.mark.parametrize("filter_type", list(FilterType))
@pytest.mark.parametrize("threads", [1, 3, 4])
def test_threaded_color_matches_sequential(filter_type, threads):
    image = _color(6, 5)
    result = apply_filter_threaded(image, filter_type, threads)
    assert isinstance(result, PPMImage)
    assert result == apply_filter(image, filter_type)


def test_threaded_leaves_input_untouched():
    image = _gray(5, 5)
    before = list(image.pixels)
    apply_filter_threaded(image, FilterType.SHARPEN, 4)
    assert image.pixels == before


def test_more_threads_than_rows():
    image = _gray(4, 2)
    assert apply_filter_threaded(image, FilterType.BLUR, 8) == apply_filter(
        image, FilterType.BLUR
    )


def test_threaded_rejects_plain_image():
    with pytest.raises(TypeError):
        apply_filter_threaded(Image(1, 1, 255, [0]), FilterType.BLUR)


def test_usage_mentions_thread_count():
    text = usage("prog")
    assert text.startswith("Usage: prog input_file output_file [--f filter_type]")
    assert f"This version uses {NUM_THREADS} threads (pthreads)" in text


def test_main_requires_two_arguments(capsys):
    assert main(["only_input.pgm"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "missing.pgm"), str(tmp_path / "out.pgm")]) == 1


def test_main_applies_filter(tmp_path, capsys):
    source = tmp_path / "in.ppm"
    target = tmp_path / "out.ppm"
    image = _color(5, 6)
    image.save(source)
    assert main([str(source), str(target), "--f", "laplace"]) == 0
    assert load_image(target) == apply_filter(image, FilterType.LAPLACE)
    out = capsys.readouterr().out
    assert f"Threads used:    {NUM_THREADS}" in out


def test_main_copies_without_filter(tmp_path):
    source = tmp_path / "in.pgm"
    target = tmp_path / "out.pgm"
    image = _gray(3, 4)
    image.save(source)
    assert main([str(source), str(target)]) == 0
    assert load_image(target) == image


def test_main_unknown_filter_falls_back_to_blur(tmp_path):
    source = tmp_path / "in.pgm"
    target = tmp_path / "out.pgm"
    image = _gray(4, 4)
    image.save(source)
    assert main([str(source), str(target), "--f", "emboss"]) == 0
    assert load_image(target) == apply_filter(image, FilterType.BLUR)