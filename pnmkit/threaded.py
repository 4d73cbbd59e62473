"""Command that filters an image by splitting its rows across worker threads."""

from __future__ import annotations

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .filters import FilterType, convolve_rows, kernel_for
from .image import Image, ImageFormatError, PGMImage, PPMImage, load_image
from .processor import find_filter_name
from .timer import Timer

NUM_THREADS = 4


def row_ranges(height: int, num_threads: int) -> List[range]:
    """Split ``height`` rows into ``num_threads`` bands.

    Every band gets ``height // num_threads`` rows; the last band also takes
    the remainder.
    """
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")
    per_thread, remaining = divmod(height, num_threads)
    bands = [range(i * per_thread, (i + 1) * per_thread) for i in range(num_threads)]
    last = bands[-1]
    bands[-1] = range(last.start, last.stop + remaining)
    return bands


def apply_filter_threaded(
    image: Image, filter_type: FilterType, num_threads: int = NUM_THREADS
) -> Image:
    """Return the filtered image, computing each band of rows in its own thread."""
    if not isinstance(image, (PGMImage, PPMImage)):
        raise TypeError(
            f"cannot filter {type(image).__name__}; expected a PGM or PPM image"
        )
    bands = row_ranges(image.height, num_threads)
    kernel = kernel_for(filter_type)
    target = image.copy()
    target.pixels = [0] * image.width * image.height * image.channels
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        futures = [
            pool.submit(convolve_rows, image, target, kernel, band) for band in bands
        ]
        for future in futures:
            future.result()
    return target


def usage(program_name: str) -> str:
    return "\n".join(
        [
            f"Usage: {program_name} input_file output_file [--f filter_type]",
            "  input_file:  Input image file (PPM or PGM)",
            "  output_file: Output image file",
            "  --f filter:  Filter to apply (blur, laplace, sharpen)",
            "               If no filter specified, image will be copied",
            "",
            f"This version uses {NUM_THREADS} threads (pthreads)",
        ]
    )


def _ms(timer: Timer) -> str:
    return format(timer.elapsed_milliseconds(), "g")


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    program = (
        os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "processor_threaded"
    )
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(usage(program))
        return 1

    input_path, output_path = args[0], args[1]
    filter_name = find_filter_name(args[2:])

    total_timer, load_timer, process_timer, save_timer = Timer(), Timer(), Timer(), Timer()

    print(f"=== Pthread Image Processor ({NUM_THREADS} threads) ===")
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

    output: Optional[Image] = image.copy()

    if filter_name is not None:
        print(f"Applying filter with {NUM_THREADS} threads: {filter_name}...")
        with process_timer:
            try:
                output = apply_filter_threaded(
                    image, FilterType.from_name(filter_name), NUM_THREADS
                )
            except TypeError as exc:
                _error(f"Error: {exc}")
                output = None
        if output is None:
            _error("Failed to apply filter.")
            return 1
        print("Filter applied successfully!")
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

    print("=== Performance Summary (Pthreads) ===")
    print(f"Threads used:    {NUM_THREADS}")
    print(f"Load time:       {_ms(load_timer)} ms")
    print(f"Processing time: {_ms(process_timer)} ms")
    print(f"Save time:       {_ms(save_timer)} ms")
    print(f"Total time:      {_ms(total_timer)} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())