import base64
import json
from unittest import mock

from django.core.files.storage import default_storage
from django.db import DatabaseError
from django.test import TestCase, Client

from intake.vision.services.provider import AnalyzedImage
from intake.vision.tests.fakes import FakeVisionProvider, face, id_card_regions, png_bytes
from users.models import User

PROVIDER = "intake.extraction.services.extraction_service.get_vision_provider"


class UsersApiTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.photo = png_bytes(64, 64)
        self.photo_b64 = base64.b64encode(self.photo).decode()
        self.with_face = FakeVisionProvider(analysis=AnalyzedImage(faces=(face(),)))
        self.user = User.objects.create(first_name="Anna", last_name="Verdi", description="seed")

    def _send(self, method, path, body):
        return getattr(self.client, method)(path, data=json.dumps(body), content_type="application/json")

    def _body(self, **extra):
        body = {"first_name": "Mario", "last_name": "Rossi", "description": "dev",
                "photo_content_base64": self.photo_b64, "photo_name": "mario.png"}
        body.update(extra)
        return body

    def test_list_and_retrieve(self):
        resp = self.client.get("/api/v1/users/")
        self.assertEqual(resp.status_code, 200, resp.content)
        self.assertEqual([u["last_name"] for u in resp.json()], ["Verdi"])

        resp = self.client.get(f"/api/v1/users/{self.user.id}/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["first_name"], "Anna")

    def test_retrieve_missing(self):
        self.assertEqual(self.client.get("/api/v1/users/9999/").status_code, 404)

    def test_create_with_face(self):
        with mock.patch(PROVIDER, return_value=self.with_face), self.captureOnCommitCallbacks(execute=True):
            resp = self._send("post", "/api/v1/users/", self._body())
        self.assertEqual(resp.status_code, 201, resp.content)
        data = resp.json()
        self.assertEqual(data["last_name"], "Rossi")
        self.assertTrue(data["photo"].endswith("photos/mario.png"))
        self.assertNotIn("photo_content_base64", data)
        with default_storage.open("photos/mario.png") as f:
            self.assertEqual(f.read(), self.photo)
        self.assertTrue(User.objects.filter(last_name="Rossi").exists())

    def test_create_overwrites_same_photo_name(self):
        with mock.patch(PROVIDER, return_value=self.with_face), self.captureOnCommitCallbacks(execute=True):
            self._send("post", "/api/v1/users/", self._body())
            other = png_bytes(32, 32)
            resp = self._send("post", "/api/v1/users/", self._body(first_name="Luigi", photo_content_base64=base64.b64encode(other).decode()))
        self.assertEqual(resp.status_code, 201)
        self.assertTrue(resp.json()["photo"].endswith("photos/mario.png"))
        with default_storage.open("photos/mario.png") as f:
            self.assertEqual(f.read(), other)

    def test_failed_insert_leaves_no_blob(self):
        broken = mock.patch("users.views.user.User.objects.create", side_effect=DatabaseError("insert failed"))
        with mock.patch(PROVIDER, return_value=self.with_face), broken, self.captureOnCommitCallbacks(execute=True) as callbacks:
            with self.assertRaises(DatabaseError):
                self._send("post", "/api/v1/users/", self._body(photo_name="orphan.png"))
        self.assertEqual(callbacks, [])
        self.assertFalse(default_storage.exists("photos/orphan.png"))

    def test_create_without_face_is_rejected(self):
        with mock.patch(PROVIDER, return_value=FakeVisionProvider()):
            resp = self._send("post", "/api/v1/users/", self._body())
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"]["message"], "Photo not valid!")
        self.assertFalse(User.objects.filter(last_name="Rossi").exists())

    def test_create_vision_down(self):
        with mock.patch(PROVIDER, return_value=FakeVisionProvider(fail_analyze=True)):
            resp = self._send("post", "/api/v1/users/", self._body())
        self.assertEqual(resp.status_code, 502)
        self.assertFalse(User.objects.filter(last_name="Rossi").exists())

    def test_create_requires_names_and_photo(self):
        resp = self._send("post", "/api/v1/users/", {"first_name": "Mario"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("last_name", resp.json())
        self.assertIn("photo_content_base64", resp.json())

    def test_update(self):
        path = f"/api/v1/users/{self.user.id}/"
        with mock.patch(PROVIDER, return_value=self.with_face), self.captureOnCommitCallbacks(execute=True):
            resp = self._send("put", path, self._body(id=self.user.id, photo_name="anna.png"))
        self.assertEqual(resp.status_code, 204, resp.content)
        self.user.refresh_from_db()
        self.assertEqual(self.user.last_name, "Rossi")
        self.assertTrue(self.user.photo.endswith("photos/anna.png"))
        self.assertTrue(default_storage.exists("photos/anna.png"))

    def test_failed_update_leaves_no_blob(self):
        broken = mock.patch("users.views.user.User.save", side_effect=DatabaseError("update failed"))
        path = f"/api/v1/users/{self.user.id}/"
        with mock.patch(PROVIDER, return_value=self.with_face), broken, self.captureOnCommitCallbacks(execute=True) as callbacks:
            with self.assertRaises(DatabaseError):
                self._send("put", path, self._body(photo_name="stale.png"))
        self.assertEqual(callbacks, [])
        self.assertFalse(default_storage.exists("photos/stale.png"))

    def test_update_id_mismatch(self):
        resp = self._send("put", f"/api/v1/users/{self.user.id}/", self._body(id=self.user.id + 1))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"]["code"], "ID_MISMATCH")

    def test_update_missing(self):
        with mock.patch(PROVIDER, return_value=self.with_face):
            resp = self._send("put", "/api/v1/users/9999/", self._body())
        self.assertEqual(resp.status_code, 404)

    def test_update_without_face_keeps_record(self):
        with mock.patch(PROVIDER, return_value=FakeVisionProvider()):
            resp = self._send("put", f"/api/v1/users/{self.user.id}/", self._body())
        self.assertEqual(resp.status_code, 400)
        self.user.refresh_from_db()
        self.assertEqual(self.user.last_name, "Verdi")

    def test_delete(self):
        path = f"/api/v1/users/{self.user.id}/"
        self.assertEqual(self.client.delete(path).status_code, 204)
        self.assertEqual(self.client.delete(path).status_code, 404)

    def test_extractuserdata(self):
        fake = FakeVisionProvider(regions=id_card_regions())
        with mock.patch(PROVIDER, return_value=fake):
            resp = self._send("post", "/api/v1/users/extractuserdata/", {"image_base64": self.photo_b64})
        self.assertEqual(resp.status_code, 200, resp.content)
        self.assertEqual(resp.json(), {"portrait_base64": None, "first_name": "MARIO", "last_name": "ROSSI"})
