import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

pytestmark = pytest.mark.django_db


@pytest.fixture
def upload_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


def _post(client, upload):
    data = {"image": upload} if upload is not None else {}
    return client.post("/api/upload", data, format="multipart")


def test_upload_stores_file_under_random_name(api_client, upload_root):
    response = _post(api_client, SimpleUploadedFile("lion.JPG", b"fake-jpeg-bytes", content_type="image/jpeg"))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["imageUrl"].startswith("/uploads/")
    assert body["imageUrl"].endswith(".jpg")
    assert "lion" not in body["imageUrl"]

    stored = upload_root / body["imageUrl"].rsplit("/", 1)[1]
    assert stored.read_bytes() == b"fake-jpeg-bytes"


def test_upload_without_file(api_client, upload_root):
    response = _post(api_client, None)

    assert response.status_code == 400
    assert response.json() == {"message": "No file uploaded"}


def test_upload_over_limit_is_rejected(api_client, upload_root):
    big = SimpleUploadedFile("big.png", b"0" * (6 * 1024 * 1024), content_type="image/png")

    response = _post(api_client, big)

    assert response.status_code == 413
    assert list(upload_root.iterdir()) == []


@pytest.mark.parametrize("name,content_type", [
    ("notes.txt", "image/png"),
    ("photo.png", "text/plain"),
    ("photo.png", "application/pdf"),
    ("photo.svg", "image/svg+xml"),
])
def test_upload_requires_image_extension_and_mime(api_client, upload_root, name, content_type):
    response = _post(api_client, SimpleUploadedFile(name, b"data", content_type=content_type))

    assert response.status_code == 415
    assert list(upload_root.iterdir()) == []


def test_upload_does_not_inspect_content(api_client, upload_root):
    response = _post(api_client, SimpleUploadedFile("photo.webp", b"definitely not an image", content_type="image/webp"))

    assert response.status_code == 200


def test_uploaded_image_is_served_from_returned_url(api_client, upload_root):
    body = _post(api_client, SimpleUploadedFile("lion.png", b"png-bytes", content_type="image/png")).json()

    response = api_client.get(body["imageUrl"])

    assert response.status_code == 200
    assert b"".join(response.streaming_content) == b"png-bytes"


def test_missing_upload_is_404(api_client, upload_root):
    assert api_client.get("/uploads/missing.png").status_code == 404
