import numpy as np
import pytest
from PIL import Image

from comic_ocr.errors import ImageLoadError
from comic_ocr.image.processing import crop_region, load_image, roi_to_pixels
from comic_ocr.ocr.model import Rect
from comic_ocr.ocr.regions import plan_regions


def test_load_image_gif_as_rgb(tmp_path):
    path = tmp_path / "page.gif"
    Image.new("P", (40, 20)).save(path)
    img = load_image(str(path))
    assert img.shape == (20, 40, 3)
    assert img.dtype == np.uint8


def test_load_image_missing_file(tmp_path):
    with pytest.raises(ImageLoadError):
        load_image(str(tmp_path / "missing.png"))


def test_load_image_corrupt_file(tmp_path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"not an image")
    with pytest.raises(ImageLoadError):
        load_image(str(path))


def test_roi_to_pixels_top_half_is_first_rows():
    assert roi_to_pixels((100, 50, 3), Rect(0.0, 0.5, 1.0, 0.5)) == (0, 0, 50, 50)
    assert roi_to_pixels((100, 50, 3), Rect(0.0, 0.0, 1.0, 0.5)) == (0, 50, 50, 50)


def test_crop_region_returns_matching_rows():
    img = np.zeros((90, 30, 3), dtype=np.uint8)
    img[:30] = 255  # top band white
    top = crop_region(img, Rect(0.0, 2 / 3, 1.0, 1 / 3))
    bottom = crop_region(img, Rect(0.0, 0.0, 1.0, 1 / 3))
    assert top.shape == (30, 30, 3)
    assert top.min() == 255
    assert bottom.max() == 0


@pytest.mark.parametrize("height", [7, 97, 100, 333, 1001])
@pytest.mark.parametrize("rows", [3, 6, 7, 9])
def test_row_bands_tile_image_without_gaps(height, rows):
    regions = plan_regions(100, height, rows)
    boxes = [roi_to_pixels((height, 100, 3), roi) for roi in regions]
    assert boxes[0][1] == 0
    for (_, y0, _, h0), (_, y1, _, _) in zip(boxes, boxes[1:]):
        assert y0 + h0 == y1
    assert boxes[-1][1] + boxes[-1][3] == height
