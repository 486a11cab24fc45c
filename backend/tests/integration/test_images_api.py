"""HTTP tests for the /images endpoints."""

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.mark.asyncio
async def test_upload_and_download_image(client):
    response = await client.post(
        "/api/v1/images", files={"file": ("avatar.png", PNG_BYTES, "image/png")}
    )

    assert response.status_code == 201
    image = response.json()
    assert image["content_type"] == "image/png"
    assert image["file_size"] == len(PNG_BYTES)

    download = await client.get(image["url"])
    assert download.status_code == 200
    assert download.content == PNG_BYTES
    assert download.headers["content-type"] == "image/png"


@pytest.mark.asyncio
async def test_upload_rejects_non_images(client):
    response = await client.post(
        "/api/v1/images", files={"file": ("notes.txt", b"hello", "text/plain")}
    )
    assert response.status_code == 415


@pytest.mark.asyncio
async def test_upload_rejects_large_images(client):
    too_big = b"\x00" * (1024 * 1024 + 1)
    response = await client.post(
        "/api/v1/images", files={"file": ("big.png", too_big, "image/png")}
    )
    assert response.status_code == 413


@pytest.mark.asyncio
async def test_upload_rejects_empty_file(client):
    response = await client.post(
        "/api/v1/images", files={"file": ("empty.png", b"", "image/png")}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_download_unknown_image_returns_404(client):
    response = await client.get("/api/v1/images/missing")
    assert response.status_code == 404
