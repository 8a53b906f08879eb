import os
import socket
import sys
from datetime import datetime

from dirserve.listing import list_directory, render_listing
from dirserve.mime import content_disposition, mime_type_for
from dirserve.request import Request, RequestParseError, parse_request
from dirserve.resolver import Forbidden, NotFound, current_root, resolve_path
from dirserve.response import Response

HOST = "127.0.0.1"
PORT = 5500
# Requests longer than one read are truncated
BUFFER_SIZE = 1024
BACKLOG = 1


def log(message: str, error: bool = False) -> None:
    stream = sys.stderr if error else sys.stdout
    print(f"[{datetime.now().strftime('%H:%M:%S')}] {message}", file=stream, flush=True)


def serve_directory(directory: str, root: str) -> Response:
    body = render_listing(directory, root, list_directory(directory))
    return Response.ok(body, "text/html")


def serve_file(path: str) -> Response:
    with open(path, "rb") as f:
        body = f.read()
    mime_type = mime_type_for(path)
    response = Response.ok(body, mime_type)
    response.add_header("Content-Disposition", content_disposition(path, mime_type))
    return response


def handle_request(request: Request) -> Response:
    """Serve a file or directory listing for the requested path.

    Missing and out-of-root paths become 404 and 403 responses. Filesystem
    errors past that point (unreadable file, vanished directory) propagate.
    """
    root = current_root()
    try:
        path = resolve_path(root, request.resource.path)
    except NotFound:
        return Response.not_found()
    except Forbidden:
        return Response.forbidden()

    if os.path.isdir(path):
        return serve_directory(path, root)
    return serve_file(path)


def handle_client(client_socket, addr) -> None:
    """Read one request from client_socket, answer it and close the socket."""
    try:
        data = client_socket.recv(BUFFER_SIZE)
        try:
            request = parse_request(data)
        except RequestParseError as e:
            log(f"Bad request from {addr}: {e}", error=True)
            return

        host = request.get_header("Host") or "-"
        log(f"Request from {addr}: {request.method} {request.resource.path} (Host: {host})")
        response = handle_request(request)
        client_socket.sendall(response.to_bytes())
        log(f"Response to {addr}: {response.status_line()}")
    except Exception as e:
        log(f"Error handling client {addr}: {e}", error=True)
    finally:
        client_socket.close()


def create_server_socket(host: str = HOST, port: int = PORT) -> socket.socket:
    server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)

    # Rebinding right after a restart would otherwise fail with "Address already in use"
    server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

    server_socket.bind((host, port))
    server_socket.listen(BACKLOG)
    return server_socket


def serve_forever(server_socket: socket.socket) -> None:
    """Accept and handle connections one at a time until the socket is closed."""
    while True:
        try:
            client_socket, addr = server_socket.accept()
        except OSError as e:
            if server_socket.fileno() == -1:
                return
            log(f"Connection failed: {e}", error=True)
            continue

        log(f"Connection from {addr}")
        handle_client(client_socket, addr)


def run_server(host: str = HOST, port: int = PORT) -> None:
    server_socket = create_server_socket(host, port)
    log(f"Serving {current_root()} on http://{host}:{port}")

    try:
        serve_forever(server_socket)
    except KeyboardInterrupt:
        log("Shutting down server...")
    finally:
        server_socket.close()


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
