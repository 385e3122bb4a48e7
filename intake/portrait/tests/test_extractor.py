import io
from unittest import mock

from PIL import Image
from django.test import SimpleTestCase

from intake.portrait.services.extractor import PersonRegionExtractor
from intake.vision.services.provider import AnalyzedImage
from intake.vision.tests.fakes import obj, png_bytes


def open_png(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


class PersonRegionExtractorTest(SimpleTestCase):
    def setUp(self):
        self.extractor = PersonRegionExtractor()
        self.image = png_bytes(200, 100)

    def test_no_objects(self):
        self.assertIsNone(self.extractor.extract(AnalyzedImage(), self.image))

    def test_first_object_not_person(self):
        analysis = AnalyzedImage(objects=(obj("car", 0, 0, 10, 10), obj("person", 10, 10, 40, 40)))
        self.assertIsNone(self.extractor.extract(analysis, self.image))

    def test_crop_has_box_dimensions(self):
        analysis = AnalyzedImage(objects=(obj("person", 15, 20, 37, 61), obj("person", 0, 0, 5, 5)))
        out = self.extractor.extract(analysis, self.image)
        img = open_png(out)
        self.assertEqual(img.format, "PNG")
        self.assertEqual(img.size, (37, 61))

    def test_crop_keeps_pixels(self):
        src = Image.new("RGB", (50, 50), (0, 0, 0))
        src.paste((255, 0, 0), (10, 10, 20, 20))
        buf = io.BytesIO()
        src.save(buf, format="PNG")
        out = self.extractor.extract(AnalyzedImage(objects=(obj("person", 10, 10, 10, 10),)), buf.getvalue())
        img = open_png(out).convert("RGB")
        self.assertEqual(img.getpixel((0, 0)), (255, 0, 0))
        self.assertEqual(img.getpixel((9, 9)), (255, 0, 0))

    def test_box_overflow_is_clipped(self):
        analysis = AnalyzedImage(objects=(obj("person", 180, 90, 50, 50),))
        img = open_png(self.extractor.extract(analysis, self.image))
        self.assertEqual(img.size, (20, 10))

    def test_box_outside_image(self):
        analysis = AnalyzedImage(objects=(obj("person", 300, 0, 50, 50),))
        self.assertIsNone(self.extractor.extract(analysis, self.image))

    def test_jpeg_cmyk_source(self):
        buf = io.BytesIO()
        Image.new("CMYK", (40, 40), (0, 0, 0, 0)).save(buf, format="JPEG")
        out = self.extractor.extract(AnalyzedImage(objects=(obj("person", 0, 0, 20, 30),)), buf.getvalue())
        self.assertEqual(open_png(out).size, (20, 30))

    def test_undecodable_image(self):
        analysis = AnalyzedImage(objects=(obj("person", 0, 0, 10, 10),))
        with self.assertRaisesMessage(ValueError, "INVALID_IMAGE"):
            self.extractor.extract(analysis, b"not an image")

    def test_oversized_image_is_invalid(self):
        analysis = AnalyzedImage(objects=(obj("person", 0, 0, 10, 10),))
        # 200x100 > 2 x 100 pixels : Pillow lève DecompressionBombError
        with mock.patch.object(Image, "MAX_IMAGE_PIXELS", 100):
            with self.assertRaisesMessage(ValueError, "INVALID_IMAGE"):
                self.extractor.extract(analysis, self.image)
