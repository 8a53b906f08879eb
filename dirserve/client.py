import os
import re
import socket
import sys
import urllib.parse

BUFFER_SIZE = 8192
TIMEOUT = 10

FILENAME_PATTERN = re.compile(r'filename="(.*)"')


def build_get(path: str, headers) -> bytes:
    """Frame a GET for path; spaces and other unsafe characters are percent-encoded."""
    target = urllib.parse.quote("/" + path.lstrip("/"), safe="/%")
    lines = [f"GET {target} HTTP/1.1"]
    lines += [f"{name}: {value}" for name, value in headers]
    return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8")


def read_all(sock: socket.socket) -> bytes:
    # The server closes after one response, so EOF ends the message
    chunks = []
    while True:
        data = sock.recv(BUFFER_SIZE)
        if not data:
            break
        chunks.append(data)
    return b"".join(chunks)


def http_get(host: str, port: int, path: str) -> bytes:
    request = build_get(path, [("Host", f"{host}:{port}"), ("Connection", "close")])
    with socket.create_connection((host, port), timeout=TIMEOUT) as s:
        s.sendall(request)
        return read_all(s)


def parse_http_response(raw: bytes):
    """Split a raw response into (status_code, reason, headers, body).

    Headers come back as an ordered list of (name, value) pairs.
    """
    sep = raw.find(b"\r\n\r\n")
    if sep == -1:
        raise ValueError("Invalid HTTP response: no header/body separator")
    head = raw[:sep].decode("utf-8", errors="replace")
    body = raw[sep + 4:]

    lines = head.split("\r\n")
    parts = lines[0].split(" ", 2)
    if len(parts) < 2 or not parts[0].startswith("HTTP/"):
        raise ValueError("Invalid status line")
    status_code = int(parts[1])
    reason = parts[2] if len(parts) == 3 else ""

    headers = []
    for line in lines[1:]:
        if ":" in line:
            k, v = line.split(":", 1)
            headers.append((k.strip(), v.strip()))

    return status_code, reason, headers, body


def header_value(headers, name: str) -> str:
    for k, v in headers:
        if k.lower() == name.lower():
            return v
    return ""


def attachment_name(disposition: str, path: str) -> str:
    match = FILENAME_PATTERN.search(disposition)
    if match:
        return os.path.basename(match.group(1))
    return path.strip("/").split("/")[-1] or "index"


def main():
    if len(sys.argv) not in (4, 5):
        print("Usage: dirserve-fetch server_host server_port url_path [directory]")
        sys.exit(1)

    host = sys.argv[1]
    port = int(sys.argv[2])
    path = sys.argv[3]
    out_dir = sys.argv[4] if len(sys.argv) == 5 else "."

    raw = http_get(host, port, path)
    status, reason, headers, body = parse_http_response(raw)

    if status != 200:
        print(f"HTTP {status} {reason}")
        sys.exit(0)

    ctype = header_value(headers, "Content-Type")
    disposition = header_value(headers, "Content-Disposition")
    if not disposition.startswith("attachment") and (ctype.startswith("text/") or ctype == "application/json"):
        print(body.decode("utf-8", errors="replace"))
        return

    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, attachment_name(disposition, path))
    with open(out_path, "wb") as f:
        f.write(body)
    print(f"Saved to {out_path}")


if __name__ == "__main__":
    main()
