import base64

from django.test import SimpleTestCase, override_settings

from intake.vision.services.images import decode_image_base64, encode_image_base64


class DecodeImageTest(SimpleTestCase):
    def test_roundtrip(self):
        self.assertEqual(decode_image_base64(encode_image_base64(b"\x89PNG")), b"\x89PNG")
        self.assertIsNone(encode_image_base64(None))

    def test_invalid_base64(self):
        with self.assertRaisesMessage(ValueError, "INVALID_IMAGE_BASE64"):
            decode_image_base64("@@@invalid@@@")

    def test_empty(self):
        with self.assertRaisesMessage(ValueError, "INVALID_IMAGE_SIZE"):
            decode_image_base64("")

    @override_settings(INTAKE_MAX_IMAGE_BYTES=4)
    def test_too_large(self):
        with self.assertRaisesMessage(ValueError, "INVALID_IMAGE_SIZE"):
            decode_image_base64(base64.b64encode(b"12345").decode())
