"""Command that applies every filter to one image in parallel and saves each result."""

from __future__ import annotations

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Optional, Sequence

from .filters import FilterType, apply_filter
from .image import Image, ImageFormatError, PGMImage, PPMImage, load_image
from .timer import Timer


def file_extension(path: str) -> str:
    """Text from the last dot of ``path`` onwards, or an empty string."""
    dot = str(path).rfind(".")
    return "" if dot < 0 else str(path)[dot:]


def output_paths(input_path: str, prefix: str) -> Dict[FilterType, str]:
    """Output file for each filter: ``<prefix>_<filter><extension of input>``."""
    extension = file_extension(input_path)
    return {kind: f"{prefix}_{kind.value}{extension}" for kind in FilterType}


def apply_all_filters(image: Image) -> Dict[FilterType, Image]:
    """Apply blur, laplace and sharpen concurrently, one thread per filter."""
    if not isinstance(image, (PGMImage, PPMImage)):
        raise TypeError(
            f"cannot filter {type(image).__name__}; expected a PGM or PPM image"
        )
    with ThreadPoolExecutor(max_workers=len(FilterType)) as pool:
        futures = {kind: pool.submit(apply_filter, image, kind) for kind in FilterType}
        return {kind: future.result() for kind, future in futures.items()}


def usage(program_name: str) -> str:
    return "\n".join(
        [
            f"Usage: {program_name} input_file output_prefix",
            "  input_file:   Input image file (PPM or PGM)",
            "  output_prefix: Prefix for output files",
            "  The program will generate 3 output files:",
            "    - output_prefix_blur.ext",
            "    - output_prefix_laplace.ext",
            "    - output_prefix_sharpen.ext",
            "",
            "Examples:",
            f"  {program_name} lena.ppm lena_result",
            f"  {program_name} fruit.pgm fruit_result",
        ]
    )


def _ms(timer: Timer) -> str:
    return format(timer.elapsed_milliseconds(), "g")


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _save_all(
    outputs: Dict[FilterType, Image], paths: Dict[FilterType, str]
) -> Dict[FilterType, bool]:
    def save(kind: FilterType) -> bool:
        try:
            outputs[kind].save(paths[kind])
        except OSError:
            _error(f"Error: Cannot create file {paths[kind]}")
            return False
        print(f"Saved: {paths[kind]}")
        return True

    with ThreadPoolExecutor(max_workers=len(outputs)) as pool:
        futures = {kind: pool.submit(save, kind) for kind in outputs}
        return {kind: future.result() for kind, future in futures.items()}


def main(argv: Optional[Sequence[str]] = None) -> int:
    program = (
        os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "multi_filter"
    )
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(usage(program))
        return 1

    input_path, prefix = args[0], args[1]
    total_timer, load_timer, process_timer, save_timer = Timer(), Timer(), Timer(), Timer()

    print("=== Multi-Filter Image Processor ===")
    print(f"Input file: {input_path}")
    print(f"Output prefix: {prefix}")
    print(f"Number of threads available: {os.cpu_count() or 1}")
    print()

    total_timer.start()

    print("Loading input image...")
    load_timer.start()
    try:
        image: Optional[Image] = load_image(input_path)
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

    paths = output_paths(input_path, prefix)

    print("Applying filters in parallel...")
    with process_timer:
        try:
            outputs = apply_all_filters(image)
        except TypeError as exc:
            _error("Error: One or more filters failed to apply.")
            _error(f"  - {exc}")
            return 1
    for kind in outputs:
        print(f"Completed {kind.name} filter")

    print("All filters applied successfully!")
    print(f"  Processing time: {_ms(process_timer)} ms")
    print()

    print("Saving output images...")
    with save_timer:
        saved = _save_all(outputs, paths)

    if not all(saved.values()):
        _error("Error: Failed to save one or more output images.")
        for kind, ok in saved.items():
            if not ok:
                _error(f"  - Failed to save: {paths[kind]}")
        return 1

    total_timer.stop()

    print()
    print("=== Performance Summary ===")
    print(f"Load time:       {_ms(load_timer)} ms")
    print(f"Processing time: {_ms(process_timer)} ms")
    print(f"Save time:       {_ms(save_timer)} ms")
    print(f"Total time:      {_ms(total_timer)} ms")
    print()

    print("Output files generated:")
    for path in paths.values():
        print(f"  - {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())