"""Image uploads."""

from pathlib import Path

from zelvix.core.config import settings

API = "/api/v1/uploads"
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


async def test_upload_stores_and_serves_image(client):
    response = await client.post(API, files={"file": ("My Photo (1).PNG", PNG, "image/png")})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"].endswith("-my-photo-1.png")
    assert data["url"] == f"/uploads/{data['name']}"
    assert data["size"] == len(PNG)
    assert data["type"] == "image/png"
    assert (Path(settings.UPLOAD_DIR) / data["name"]).read_bytes() == PNG

    served = await client.get(data["url"])
    assert served.status_code == 200
    assert served.content == PNG


async def test_upload_requires_file(client):
    response = await client.post(API, data={"note": "nothing"})

    assert response.status_code == 400
    assert response.json()["message"] == "File is required"


async def test_upload_rejects_non_images(client):
    response = await client.post(API, files={"file": ("notes.pdf", b"%PDF-1.4", "application/pdf")})

    assert response.status_code == 400
    assert response.json()["message"] == "Only jpg, png, webp, or gif files are allowed"


async def test_upload_rejects_empty_file(client):
    response = await client.post(API, files={"file": ("blank.png", b"", "image/png")})

    assert response.status_code == 400
    assert response.json()["message"] == "File is empty"


async def test_upload_size_limit(client):
    content = b"\x00" * (settings.MAX_IMAGE_SIZE + 1)

    response = await client.post(API, files={"file": ("big.jpg", content, "image/jpeg")})

    assert response.status_code == 400
    assert response.json()["message"] == "File size must be 5MB or less"
