import threading

import pytest
import requests

from dirserve.server import create_server_socket, serve_forever


@pytest.fixture
def site(tmp_path, monkeypatch):
    """A served root with a few files, plus a secret file just outside it."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "index.html").write_text("<h1>hello</h1>")
    (root / "notes.txt").write_text("plain notes")
    (root / "report.pdf").write_bytes(b"%PDF-1.4 fake")
    (root / "archive.zip").write_bytes(b"PK\x03\x04zip")
    (root / "Photo.JPG").write_bytes(b"\xff\xd8\xff")
    (root / "my file.txt").write_text("spaced")
    sub = root / "docs"
    sub.mkdir()
    (sub / "guide.txt").write_text("guide")
    (tmp_path / "secret.txt").write_text("top secret")
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def address(site):
    server_socket = create_server_socket("127.0.0.1", 0)
    host, port = server_socket.getsockname()
    thread = threading.Thread(target=serve_forever, args=(server_socket,), daemon=True)
    thread.start()
    yield host, port
    server_socket.close()


@pytest.fixture
def http(address):
    host, port = address
    session = requests.Session()
    # Keep proxy settings from the environment out of loopback requests
    session.trust_env = False
    base = f"http://{host}:{port}"

    def get(path):
        return session.get(base + path, timeout=5)

    yield get
    session.close()
