import pytest

from pnmkit.filters import FilterType, apply_filter
from pnmkit.image import Image, PGMImage, PPMImage, load_image
from pnmkit.multi_filter import (
    apply_all_filters,
    file_extension,
    main,
    output_paths,
    usage,
)


def _gray():
    return PGMImage(3, 3, 255, [10, 20, 30, 40, 250, 60, 70, 80, 90])


def _color():
    pixels = [v % 256 for v in range(0, 3 * 3 * 3 * 17, 17)]
    return PPMImage(3, 3, 255, pixels)


def test_file_extension_takes_last_dot():
    assert file_extension("lena.ppm") == ".ppm"
    assert file_extension("archive.tar.pgm") == ".pgm"


def test_file_extension_without_dot_is_empty():
    assert file_extension("noext") == ""


def test_output_paths_use_prefix_and_extension():
    paths = output_paths("fruit.pgm", "result")
    assert paths == {
        FilterType.BLUR: "result_blur.pgm",
        FilterType.LAPLACE: "result_laplace.pgm",
        FilterType.SHARPEN: "result_sharpen.pgm",
    }


def test_output_paths_without_extension():
    paths = output_paths("image", "out")
    assert paths[FilterType.SHARPEN] == "out_sharpen"


@pytest.mark.parametrize("factory", [_gray, _color])
def test_apply_all_filters_matches_single_filters(factory):
    image = factory()
    results = apply_all_filters(image)
    assert set(results) == set(FilterType)
    for kind, result in results.items():
        assert result == apply_filter(image, kind)


def test_apply_all_filters_leaves_input_untouched():
    image = _gray()
    before = list(image.pixels)
    apply_all_filters(image)
    assert image.pixels == before


def test_apply_all_filters_rejects_plain_image():
    with pytest.raises(TypeError):
        apply_all_filters(Image(1, 1, 255, [0]))


def test_usage_mentions_program():
    text = usage("prog")
    assert text.startswith("Usage: prog input_file output_prefix")
    assert "  prog lena.ppm lena_result" in text


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_writes_three_filtered_files(tmp_path):
    source = tmp_path / "input.pgm"
    image = _gray()
    image.save(source)
    prefix = str(tmp_path / "res")

    assert main([str(source), prefix]) == 0

    for kind, path in output_paths(str(source), prefix).items():
        assert load_image(path) == apply_filter(image, kind)


def test_main_missing_input_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.pgm"), str(tmp_path / "out")]) == 1
    assert "Failed to load input image." in capsys.readouterr().err


def test_main_unwritable_output_fails(tmp_path, capsys):
    source = tmp_path / "input.ppm"
    _color().save(source)
    prefix = str(tmp_path / "no_such_dir" / "res")
    assert main([str(source), prefix]) == 1
    assert "Failed to save one or more output images." in capsys.readouterr().err