import io

import pytest
from PIL import Image

from quadcode.config import Limits
from quadcode.encoding import encode_grid
from quadcode.errors import (
    BoundsError,
    InputFormatError,
    PixelValueError,
    TruncationError,
)
from quadcode.loaders import GridLoader, ImageLoader, ManualLoader, PbmLoader, load_grid


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_pbm_with_comments(tmp_path):
    path = write(tmp_path, "img.pbm", "P1\n# made by hand\n  # another\n2 2\n1 1\n0 1\n")
    grid = load_grid(path)
    assert (grid.width, grid.height) == (2, 2)
    assert grid.pixels == (1, 1, 0, 1)
    assert encode_grid(grid) == "XPPBP"


def test_pbm_arbitrary_whitespace():
    grid = PbmLoader().parse("  P1 3\t1\n\n1\r\n0 1")
    assert grid.pixels == (1, 0, 1)


def test_pbm_ignores_trailing_data():
    grid = PbmLoader().parse("P1\n1 1\n1 0 0 junk\n")
    assert grid.pixels == (1,)


@pytest.mark.parametrize("text", ["P2\n1 1\n1\n", "", "P\n1 1\n1\n", "# c\nP1\n1 1\n1\n"])
def test_pbm_wrong_marker(text):
    with pytest.raises(InputFormatError):
        PbmLoader().parse(text)


@pytest.mark.parametrize("text", ["P1\nwide 2\n", "P1\n2\n", "P1\n2 # c\n2\n"])
def test_pbm_bad_dimensions(text):
    with pytest.raises(InputFormatError):
        PbmLoader().parse(text)


@pytest.mark.parametrize("text", ["P1\n0 1\n", "P1\n1 -1\n", "P1\n1025 1\n", "P1\n1 769\n"])
def test_pbm_dimensions_out_of_range(text):
    with pytest.raises(BoundsError):
        PbmLoader().parse(text)


def test_pbm_configured_limits():
    with pytest.raises(BoundsError):
        PbmLoader().parse("P1\n3 1\n0 0 0\n", Limits(max_width=2, max_height=2))


def test_pbm_non_binary_pixel():
    with pytest.raises(PixelValueError):
        PbmLoader().parse("P1\n2 1\n1 2\n")


def test_pbm_truncated():
    with pytest.raises(TruncationError) as info:
        PbmLoader().parse("P1\n2 2\n1 0 1\n")
    assert (info.value.read, info.value.expected) == (3, 4)


def test_pbm_stray_token_counts_as_truncation():
    with pytest.raises(TruncationError) as info:
        PbmLoader().parse("P1\n2 2\n1 0\n# comment\n1 1\n")
    assert info.value.read == 2


def test_missing_file(tmp_path):
    with pytest.raises(InputFormatError):
        load_grid(str(tmp_path / "nope.pbm"))


def test_other_extensions_are_read_as_pbm(tmp_path):
    path = write(tmp_path, "image.txt", "P1\n1 1\n1\n")
    assert encode_grid(load_grid(path)) == "P"
    path = write(tmp_path, "image.dat", "P1\n2 2\n1 1\n0 1\n")
    assert encode_grid(load_grid(path)) == "XPPBP"


def test_other_extensions_still_need_the_marker(tmp_path):
    path = write(tmp_path, "notes.txt", "hello world\n")
    with pytest.raises(InputFormatError):
        load_grid(path)


def test_custom_registry_without_fallback(tmp_path):
    path = write(tmp_path, "image.txt", "P1\n1 1\n1\n")
    with pytest.raises(InputFormatError):
        GridLoader({".pbm": PbmLoader()}).load(path)


def test_file_without_extension_is_pbm(tmp_path):
    path = write(tmp_path, "image", "P1\n1 1\n0\n")
    assert encode_grid(load_grid(path)) == "B"


def test_loader_registry():
    loader = GridLoader()
    assert ".pbm" in loader.supported_extensions
    assert ".png" in loader.supported_extensions
    assert "" not in loader.supported_extensions


def test_raster_image(tmp_path):
    img = Image.new("L", (2, 2), 255)
    img.putpixel((0, 0), 0)
    path = str(tmp_path / "dot.png")
    img.save(path)
    grid = ImageLoader(dither=False).load(path)
    assert grid.pixels == (1, 0, 0, 0)
    assert encode_grid(grid) == "XPBBB"


def test_raster_image_too_large(tmp_path):
    path = str(tmp_path / "wide.png")
    Image.new("L", (5, 1), 0).save(path)
    with pytest.raises(BoundsError):
        load_grid(path, Limits(max_width=4, max_height=4))


def test_raster_image_unreadable(tmp_path):
    path = str(tmp_path / "broken.png")
    with open(path, "wb") as handle:
        handle.write(b"not an image")
    with pytest.raises(InputFormatError):
        load_grid(path)


def manual(text, limits=None):
    prompt = io.StringIO()
    grid = ManualLoader(io.StringIO(text), prompt).load(limits)
    return grid, prompt.getvalue()


def test_manual_entry():
    grid, prompt = manual("2\n2\n1 0\n0 1\n")
    assert encode_grid(grid) == "XPBBP"
    assert "Enter width (max 1024)" in prompt
    assert "Enter height (max 768)" in prompt


def test_manual_entry_on_one_line():
    grid, _ = manual("3 1 1 1 0")
    assert grid.pixels == (1, 1, 0)


@pytest.mark.parametrize("text", ["x 2\n", "2 y\n", "", "1_0 1\n" + "0 " * 10, "2.0 1\n0 0\n"])
def test_manual_bad_dimensions(text):
    with pytest.raises(InputFormatError):
        manual(text)


def test_manual_dimensions_out_of_range():
    with pytest.raises(BoundsError):
        manual("3 3\n", Limits(max_width=2, max_height=2))


@pytest.mark.parametrize("token", ["2", "a", "-1", "01"])
def test_manual_bad_pixel(token):
    with pytest.raises(PixelValueError):
        manual(f"2 1\n1 {token}\n")


def test_manual_runs_out_of_pixels():
    with pytest.raises(TruncationError):
        manual("2 2\n1 0 1\n")
