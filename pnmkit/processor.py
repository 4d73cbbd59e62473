"""Command that loads an image, optionally filters it, and saves it."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from .filters import FilterType, apply_filter
from .image import ImageFormatError, load_image
from .timer import Timer


def find_filter_name(args: Sequence[str]) -> Optional[str]:
    """Value following the first ``--f`` among the options, if any."""
    for option, value in zip(args, args[1:]):
        if option == "--f":
            return value
    return None


def usage(program_name: str) -> str:
    return "\n".join(
        [
            f"Usage: {program_name} input_file output_file [--f filter_type]",
            "  input_file:  Input image file (PPM or PGM)",
            "  output_file: Output image file",
            "  --f filter:  Filter to apply (blur, laplace, sharpen)",
            "               If no filter specified, image will be copied",
            "",
            "Examples:",
            f"  {program_name} lena.ppm lena_copy.ppm",
            f"  {program_name} fruit.ppm fruit_blur.ppm --f blur",
            f"  {program_name} image.pgm image_sharp.pgm --f sharpen",
        ]
    )


def _ms(timer: Timer) -> str:
    return format(timer.elapsed_milliseconds(), "g")


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "processor"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(usage(program))
        return 1

    input_path, output_path = args[0], args[1]
    filter_name = find_filter_name(args[2:])

    total_timer, load_timer, process_timer, save_timer = Timer(), Timer(), Timer(), Timer()

    print("=== Image Processor ===")
    print(f"Input file: {input_path}")
    print(f"Output file: {output_path}")
    if filter_name is not None:
        print(f"Filter: {filter_name}")
    else:
        print("Operation: Copy image (no filter)")
    print()

    total_timer.start()

    print("Loading input image...")
    load_timer.start()
    try:
        image = load_image(input_path)
    except OSError:
        _error(f"Error: Cannot open file {input_path}")
        image = None
    except ImageFormatError as exc:
        _error(f"Error: {exc}")
        image = None
    load_timer.stop()

    if image is None:
        _error("Failed to load input image.")
        return 1

    print("Image loaded successfully!")
    print(f"  Format: {image.magic}")
    print(f"  Dimensions: {image.width}x{image.height}")
    print(f"  Max color value: {image.max_color}")
    print(f"  Load time: {_ms(load_timer)} ms")
    print()

    if filter_name is not None:
        print(f"Applying filter: {filter_name}...")
        with process_timer:
            try:
                output = apply_filter(image, FilterType.from_name(filter_name))
            except TypeError as exc:
                _error(f"Error: {exc}")
                output = None
        if output is None:
            _error("Failed to apply filter.")
            return 1
        print("Filter applied successfully!")
    else:
        print("No filter specified, copying image...")
        with process_timer:
            output = image.copy()
    print(f"  Processing time: {_ms(process_timer)} ms")
    print()

    print("Saving output image...")
    save_timer.start()
    try:
        output.save(output_path)
    except OSError:
        save_timer.stop()
        _error(f"Error: Cannot create file {output_path}")
        _error("Failed to save output image.")
        return 1
    save_timer.stop()

    total_timer.stop()

    print("Image saved successfully!")
    print(f"  Save time: {_ms(save_timer)} ms")
    print()

    print("=== Performance Summary ===")
    print(f"Load time:       {_ms(load_timer)} ms")
    print(f"Processing time: {_ms(process_timer)} ms")
    print(f"Save time:       {_ms(save_timer)} ms")
    print(f"Total time:      {_ms(total_timer)} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())