# tests/test_uploads.py
import re
from pathlib import Path

from storefront.core.config import get_settings


def test_upload_stores_file_and_serves_it(client):
    r = client.post(
        "/upload",
        files={"product": ("shoe.png", b"\x89PNG fake image", "image/png")},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True

    match = re.fullmatch(r"http://testserver/images/(product_\d+\.png)", body["image_url"])
    assert match
    filename = match.group(1)
    assert (Path(get_settings().upload_dir) / filename).read_bytes() == b"\x89PNG fake image"

    served = client.get(f"/images/{filename}")
    assert served.status_code == 200
    assert served.content == b"\x89PNG fake image"


def test_upload_without_extension(client):
    r = client.post("/upload", files={"product": ("blob", b"data")})
    assert re.search(r"/images/product_\d+$", r.json()["image_url"])


def test_upload_requires_product_field(client):
    r = client.post("/upload", files={"other": ("a.png", b"data")})
    assert r.status_code == 422


def test_root_liveness(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Ecommerce API is running"


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
