from django.test import SimpleTestCase

from intake.vision.services.geometry import BoundingBox, squared_distance


class BoundingBoxTest(SimpleTestCase):
    def test_rejects_empty_or_negative(self):
        with self.assertRaises(ValueError):
            BoundingBox(0, 0, 0, 10)
        with self.assertRaises(ValueError):
            BoundingBox(0, 0, 10, -1)
        with self.assertRaises(ValueError):
            BoundingBox(-1, 0, 10, 10)

    def test_clip_inside_is_identity(self):
        box = BoundingBox(10, 20, 30, 40)
        self.assertEqual(box.clip(100, 100), box)
        self.assertEqual(box.as_crop_box(), (10, 20, 40, 60))

    def test_clip_overflow(self):
        box = BoundingBox(80, 90, 50, 50)
        self.assertEqual(box.clip(100, 100), BoundingBox(80, 90, 20, 10))

    def test_clip_outside(self):
        self.assertIsNone(BoundingBox(150, 0, 10, 10).clip(100, 100))
        self.assertIsNone(BoundingBox(0, 100, 10, 10).clip(100, 100))


class SquaredDistanceTest(SimpleTestCase):
    def test_squared_distance(self):
        self.assertEqual(squared_distance((10, 10), (12, 11)), 5)
        self.assertEqual(squared_distance((10, 10), (50, 50)), 3200)
        self.assertEqual(squared_distance((3.5, 0), (3.5, 0)), 0)
