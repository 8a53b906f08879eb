import pytest

from dirserve.mime import DEFAULT_MIME_TYPE, content_disposition, is_inline, mime_type_for


@pytest.mark.parametrize(
    "name,expected",
    [
        ("a.txt", "text/plain"),
        ("index.HTML", "text/html"),
        ("old.htm", "text/html"),
        ("site.css", "text/css"),
        ("app.js", "application/javascript"),
        ("data.json", "application/json"),
        ("Photo.JPG", "image/jpeg"),
        ("pic.jpeg", "image/jpeg"),
        ("logo.svg", "image/svg+xml"),
        ("song.mp3", "audio/mpeg"),
        ("clip.mp4", "video/mp4"),
        ("report.pdf", "application/pdf"),
        ("archive.zip", DEFAULT_MIME_TYPE),
        ("backup.tar.gz", DEFAULT_MIME_TYPE),
        ("Makefile", DEFAULT_MIME_TYPE),
        (".txt", DEFAULT_MIME_TYPE),
        ("/srv/dir.png/file", DEFAULT_MIME_TYPE),
    ],
)
def test_mime_type_for(name, expected):
    assert mime_type_for(name) == expected


@pytest.mark.parametrize(
    "mime_type",
    ["text/plain", "image/png", "audio/mpeg", "video/mp4", "application/pdf", "application/json", "application/xml"],
)
def test_inline_types(mime_type):
    assert is_inline(mime_type)


@pytest.mark.parametrize("mime_type", ["application/octet-stream", "application/javascript", "application/pdfx"])
def test_attachment_types(mime_type):
    assert not is_inline(mime_type)


def test_content_disposition():
    assert content_disposition("/srv/report.pdf", "application/pdf") == "inline"
    assert content_disposition("/srv/archive.zip", DEFAULT_MIME_TYPE) == 'attachment; filename="archive.zip"'


def test_quotes_in_file_name_are_not_escaped():
    assert content_disposition('/srv/a"b.bin', DEFAULT_MIME_TYPE) == 'attachment; filename="a"b.bin"'
