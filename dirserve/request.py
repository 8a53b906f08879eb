from dataclasses import dataclass
from typing import Tuple


class RequestParseError(ValueError):
    """Raised when a buffer does not hold a usable request line."""


class EmptyRequest(RequestParseError):
    pass


class MalformedRequestLine(RequestParseError):
    pass


@dataclass(frozen=True)
class Resource:
    # Raw request target, still percent-encoded
    path: str


@dataclass(frozen=True)
class Request:
    method: str
    resource: Resource
    headers: Tuple[Tuple[str, str], ...] = ()

    def get_header(self, name: str):
        """Return the first value stored under name (exact match), or None."""
        for key, value in self.headers:
            if key == name:
                return value
        return None


def _split_lines(text: str) -> list:
    if not text:
        return []
    lines = text.split("\n")
    # A terminating newline does not open another line
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_request(buffer: bytes) -> Request:
    """Parse the method, raw path and headers out of one read buffer.

    Header lines without a ": " separator are skipped. Anything after the
    first blank line is ignored.
    """
    text = buffer.decode("utf-8", errors="replace")
    lines = _split_lines(text)
    if not lines:
        raise EmptyRequest("Empty request")

    parts = lines[0].split()
    if len(parts) < 2:
        raise MalformedRequestLine(f"Invalid request line: {lines[0]!r}")
    method, path = parts[0], parts[1]

    headers = []
    for line in lines[1:]:
        if line == "":
            break
        pair = line.split(": ", 1)
        if len(pair) == 2:
            headers.append((pair[0], pair[1]))

    return Request(method=method, resource=Resource(path=path), headers=tuple(headers))
