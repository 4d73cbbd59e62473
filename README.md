# pnmkit

pnmkit loads, filters and saves plain-text Netpbm images. It supports
grayscale PGM (`P2`) and colour PPM (`P3`) files. The filters are 3x3
convolutions:

- `blur`: a box blur in which each of the nine cells weighs 1/9
- `laplace`: edge detection, with 4 at the centre and -1 on the four neighbours
- `sharpen`: 5 at the centre and -1 on the four neighbours

Neighbours that fall outside the image are left out of the sum. Sums are
accumulated in single precision. Each result is truncated toward zero and
clamped to `0..max_color`.

The package depends only on the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command-line tools

### Single filter

```
pnmkit-process input_file output_file [--f filter_type]
```

This applies `blur`, `laplace` or `sharpen` to the input image and writes
the result. The `--f` option goes after the two file names. If you give no
filter, the image is copied unchanged. A filter name that is not recognised
falls back to `blur`. The tool prints the time spent loading, processing and
saving, and exits with status 1 if the image cannot be loaded or saved.

```
pnmkit-process lena.ppm lena_copy.ppm
pnmkit-process fruit.ppm fruit_blur.ppm --f blur
pnmkit-process image.pgm image_sharp.pgm --f sharpen
```

### Threaded filter

```
pnmkit-threaded input_file output_file [--f filter_type]
```

This takes the same arguments as `pnmkit-process`. It splits the rows of
the image into four bands and filters each band in its own worker thread.
Every band gets the same number of rows, and the last band also takes any
rows left over.

### All three filters at once

```
pnmkit-multi input_file output_prefix
```

This applies blur, laplace and sharpen concurrently, one thread per filter,
then saves the three results concurrently. Each output file name ends in
the extension of the input file (the text from its last dot on):

- `output_prefix_blur.ext`
- `output_prefix_laplace.ext`
- `output_prefix_sharpen.ext`

```
pnmkit-multi lena.ppm lena_result
```

### Benchmark

```
pnmkit-benchmark
```

This takes no arguments. It runs image-processing programs through the
shell over the images `imagenes/fruit.ppm` and `imagenes/lena.ppm`, the
filters `blur`, `sharpen` and `laplace`, and the thread or process counts
1, 2, 4 and 8. It times each run and writes the results to
`performance_results.csv`, with the columns
`Implementation,Image,Filter,Threads/Processes,Total Time (ms)`.

The commands it runs are executables in the current directory, not the
commands installed by this package:

- `./processor IMAGE output_sequential.ppm --f FILTER`
- `./processor_pthread IMAGE output_pthread.ppm --f FILTER --t N`
- `./processor_omp IMAGE output_omp.ppm --f FILTER --t N`
- `mpirun -np N ./processor_mpi IMAGE output_mpi.ppm --f FILTER`

A run whose program is missing or fails is still timed and recorded.

## Library use

```python
from pnmkit.image import load_image
from pnmkit.filters import FilterType, apply_filter
from pnmkit.timer import Timer

image = load_image("fruit.ppm")  # a PGMImage or a PPMImage, chosen by the magic number
with Timer() as timer:
    blurred = apply_filter(image, FilterType.from_name("blur"))
blurred.save("fruit_blur.ppm")
print(f"{timer.elapsed_milliseconds()} ms")
```

### `pnmkit.image`

- `load_image(path)` and `Image.load(path)` pick the class from the magic
  number; `PGMImage.load(path)` and `PPMImage.load(path)` accept only their
  own format. `read_magic(path)` returns the magic number alone.
- An image has `width`, `height`, `max_color`, a flat `pixels` list stored
  row by row (three samples per pixel for PPM) and `pixel_count`.
  `save(path)` writes the header followed by one sample per line;
  `copy()` returns an independent copy.
- `PGMImage` provides `get_gray(x, y)` and `set_gray(x, y, value)`.
  `PPMImage` provides `get_rgb(x, y)`, which returns an `RGB` tuple, and
  `set_rgb(x, y, color)`, where `color` is any three integers.
- Written values are clamped to `0..max_color`. A coordinate outside the
  image reads as zero (or black), and a write to one is ignored.
- Comment lines starting with `#` are skipped after the magic number and
  after the dimensions. A malformed file raises `ImageFormatError`, a
  subclass of `ValueError`; a file that cannot be opened raises `OSError`.

### `pnmkit.filters`

- `FilterType` has `BLUR`, `LAPLACE` and `SHARPEN`; `FilterType.from_name`
  maps an unknown name to `BLUR`.
- `apply_filter(image, filter_type)` and `convolve(image, kernel)` return a
  new filtered image and leave the input unchanged. They raise `TypeError`
  for anything other than a `PGMImage` or `PPMImage`.
- `kernel_for(filter_type)` returns the kernel; `convolve_rows(source,
  target, kernel, rows)` fills in only the given rows of `target`.

### `pnmkit.threaded` and `pnmkit.multi_filter`

- `row_ranges(height, num_threads)` returns the row bands, and
  `apply_filter_threaded(image, filter_type, num_threads)` filters with one
  thread per band.
- `apply_all_filters(image)` returns a dictionary from each `FilterType`
  to its filtered image. `output_paths(input_path, prefix)` and
  `file_extension(path)` build the output names used by `pnmkit-multi`.

### `pnmkit.timer`

`Timer` is a stopwatch with `start()`, `stop()`, `reset()` and
`is_running()`. It reports whole microseconds through
`elapsed_microseconds()`, and milliseconds and seconds through
`elapsed_milliseconds()` and `elapsed_seconds()`. While the timer runs,
these count up to now; once it stops, they count up to the last stop.
`current_elapsed_milliseconds()` and `current_elapsed_seconds()` return 0
while the timer is stopped. Used as a context manager, it starts on entry
and stops on exit.

## What the package does not do

- It reads and writes only the plain-text `P2` and `P3` formats. It does
  not handle binary Netpbm files (`P5`, `P6`) or other image formats.
- It has no multi-process or cluster version of the processor. The
  benchmark expects to find the programs it runs, including one started
  with `mpirun`, in the current directory.