import pytest

from core import ServerConfig
from web import create_app

INDEX_BODY = b"<h1>Hi</h1>"
SECRET_BODY = b"top secret"


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_bytes(INDEX_BODY)
    (public / "style.css").write_bytes(b"body{}")
    (public / "app.js").write_bytes(b"console.log(1);")
    (public / "blob.bin").write_bytes(b"\x00\x01\x02")
    (public / ".env").write_bytes(b"TOKEN=abc")
    docs = public / "docs"
    docs.mkdir()
    (docs / "index.html").write_bytes(b"<h1>Docs</h1>")
    (docs / "notes.txt").write_bytes(b"notes")
    (public / "empty").mkdir()
    (tmp_path / "secret.txt").write_bytes(SECRET_BODY)
    return public


@pytest.fixture
def config(public_dir):
    return ServerConfig(host="127.0.0.1", port=0, public_dir=public_dir)


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
