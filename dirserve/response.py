from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dirserve import __version__

HTTP_VERSION = "HTTP/1.1"
SERVER_NAME = f"dirserve/{__version__}"


@dataclass
class Response:
    status_code: int
    status_text: str
    headers: List[Tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    @classmethod
    def build(cls, status_code: int, status_text: str, body: bytes, content_type: Optional[str] = None) -> "Response":
        """Create a response whose Content-Length matches body."""
        headers = [
            ("Content-Length", str(len(body))),
            ("Server", SERVER_NAME),
        ]
        if content_type is not None:
            headers.append(("Content-Type", content_type))
        return cls(status_code, status_text, headers, body)

    @classmethod
    def ok(cls, body: bytes, content_type: Optional[str] = None) -> "Response":
        return cls.build(200, "OK", body, content_type)

    @classmethod
    def not_found(cls) -> "Response":
        return cls.build(404, "Not Found", b"404 Not Found", "text/plain")

    @classmethod
    def forbidden(cls) -> "Response":
        return cls.build(403, "Forbidden", b"403 Forbidden", "text/plain")

    def add_header(self, name: str, value: str) -> None:
        self.headers.append((name, value))

    def status_line(self) -> str:
        return f"{HTTP_VERSION} {self.status_code} {self.status_text}"

    def to_bytes(self) -> bytes:
        """Build a raw HTTP/1.1 response (status line + headers + body)."""
        lines = [self.status_line()]
        for name, value in self.headers:
            lines.append(f"{name}: {value}")
        head = "\r\n".join(lines) + "\r\n\r\n"
        return head.encode() + self.body
