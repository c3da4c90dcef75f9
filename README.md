# bmprotate

Rotate 24-bit uncompressed BMP images 90 degrees counterclockwise, and compare
the pixel data of two BMP files.

## Installation

```
pip install .
```

## Command line

### image-transformer

```
image-transformer input.bmp output.bmp
```

Reads `input.bmp`, turns it a quarter turn counterclockwise and writes the
result to `output.bmp`. Both file names must end in `.bmp`. On success it
prints `Image successfully rotated.` and exits with 0.

On failure it prints the reason to standard error and exits with 1. Reasons
include a source file that cannot be opened, an unknown extension, a header
that cannot be read, an unsupported header field (signature, reserved,
planes, bit count, compression, colours used, important colours), a bad data
offset, a pixel array that runs past the end of the file, and an output file
that cannot be opened or written. If writing the output fails, the partly
written file is removed.

### image-matcher

```
image-matcher output.bmp expected.bmp
```

Compares two BMP files. Each must start with `BM` and have a bit count of 24.
It exits with 0 when both have the same width and height and the same pixel
rows; row padding bytes are skipped and not compared. Otherwise it prints a
message to standard error and exits with the value of the matching
`CompareStatus` (for example 3 when the dimensions differ). A file that cannot
be opened gives exit status 1.

## Library use

```python
from bmprotate.bmp import read_bmp, write_bmp
from bmprotate.rotation import rotate_counterclockwise

with open("input.bmp", "rb") as src:
    image = read_bmp(src)

rotated = rotate_counterclockwise(image, 90.0)

with open("output.bmp", "wb") as dst:
    write_bmp(dst, rotated)
```

- `bmprotate.image` — `Image` (width, height and a list of `Pixel` values
  stored top row first, with `blank`, `get`, `set` and `rows`) and `Pixel`
  (blue, green, red components, with `to_bytes` and `from_bytes`).
- `bmprotate.bmp` — `read_bmp` and `write_bmp`, the 54-byte `BmpHeader`
  (`unpack`, `pack`, `for_image`, `validate`) and the size helpers
  `width_padding`, `padded_pixel_array_size` and `file_size`. `read_bmp`
  raises `BmpReadError`, whose `status` is a `ReadStatus` naming the check that
  failed; `write_bmp` raises `BmpWriteError`.
- `bmprotate.rotation` — `rotate_counterclockwise(image, angle)` returns a new
  image turned 90 degrees counterclockwise. Angles of 90.01 degrees and more
  raise `RotationError`.
- `bmprotate.formats` — `image_format_from_filename` maps `.bmp` and `.png` to
  `ImageFormat` and raises `UnknownExtensionError` otherwise; `load_image` and
  `save_image` pick the reader or writer by extension;
  `are_files_binary_similar` tells whether two files hold identical bytes.
- `bmprotate.transformer` — `rotate_image(source, target)` does the whole job
  from file name to file name and raises `TransformError`, whose `stage` is a
  `Stage` and whose `message()` is the text the command prints.
- `bmprotate.matcher` — `bmp_compare(stream1, stream2)` returns a
  `CompareStatus` for two open BMP streams; `compare_streams` compares a number
  of bytes from two streams and returns a `CmpResult`.

## Limitations

- Only 24-bit uncompressed BMP files are read and written.
- The `.png` extension is recognised, but PNG files are neither read nor
  written; using one is reported as an unknown extension.
- Only a 90 degree counterclockwise turn is done; there is no other angle and
  no flipping.

## Tests

```
pip install .[test]
pytest
```