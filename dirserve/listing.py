import html
import os
import urllib.parse
from typing import List, NamedTuple


class Entry(NamedTuple):
    name: str
    is_dir: bool


def list_directory(directory: str) -> List[Entry]:
    """Immediate children of directory; nothing below the first level."""
    with os.scandir(directory) as it:
        return [Entry(entry.name, entry.is_dir()) for entry in it]


def sort_entries(entries: List[Entry]) -> List[Entry]:
    # Directories first, then files; plain code point order within each group
    return sorted(entries, key=lambda e: (not e.is_dir, e.name))


def printable(name: str) -> str:
    # Undecodable bytes from the filesystem come back as lone surrogates
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def quote(path: str) -> str:
    return urllib.parse.quote(path, errors="surrogateescape")


def url_path(root: str, path: str) -> str:
    rel = os.path.relpath(path, root)
    if rel == os.curdir:
        return ""
    return rel.replace(os.sep, "/")


def render_listing(directory: str, root: str, entries: List[Entry]) -> bytes:
    """Generate an HTML directory listing for directory, which lives under root."""
    safe_rel = url_path(root, directory)
    title_path = printable("/" + (safe_rel + "/" if safe_rel else ""))

    lines = [
        "<!DOCTYPE html>",
        "<html lang=\"en\"><head><meta charset='utf-8'>",
        "<meta name='viewport' content='width=device-width, initial-scale=1'>",
        f"<title>Directory listing for {html.escape(title_path)}</title>",
        "<style>",
        "body{font-family:Arial,sans-serif; line-height:1.6; color:#333; max-width:800px; margin:0 auto; padding:20px}",
        "h1{border-bottom:1px solid #ccc; padding-bottom:10px}",
        "ul{list-style-type:none; padding:0}",
        "li{margin-bottom:10px}",
        "a{text-decoration:none; color:#0066cc}",
        "a:hover{text-decoration:underline}",
        ".icon{margin-right:10px; font-size:1.2em}",
        "</style>",
        "</head><body>",
        f"<h1>Directory listing for {html.escape(title_path)}</h1>",
        "<ul>",
    ]

    # Parent directory link if not root
    if directory != root:
        parent = os.path.dirname(safe_rel)
        parent_href = "/" + (quote(parent) + "/" if parent else "")
        lines.append(f"<li><a href=\"{parent_href}\"><span class=\"icon\">📁</span>Parent Directory</a></li>")

    for entry in sort_entries(entries):
        item_rel = (safe_rel + "/" if safe_rel else "") + entry.name
        display = printable(entry.name) + ("/" if entry.is_dir else "")
        href = "/" + quote(item_rel) + ("/" if entry.is_dir else "")
        icon = "📁" if entry.is_dir else "📄"
        lines.append(
            f"<li><a href=\"{html.escape(href)}\"><span class=\"icon\">{icon}</span>{html.escape(display)}</a></li>"
        )

    lines += ["</ul>", "</body></html>"]
    return "\n".join(lines).encode("utf-8")
