"""Map request paths onto the serving root without letting them escape it.

The root is the process working directory, read again for every request.
Containment is checked on the canonical path (``..`` collapsed, symlinks
followed) and compares whole path components, so ``/srv-evil`` is never
accepted as living under ``/srv``.
"""
import os
import urllib.parse


class Rejected(Exception):
    """A request path that must be answered with an error status."""


class NotFound(Rejected):
    pass


class Forbidden(Rejected):
    pass


def current_root() -> str:
    return os.path.realpath(os.getcwd())


def to_relative(decoded: str) -> str:
    """Strip the request's leading slash plus anything that would make the path absolute."""
    if decoded.startswith("/"):
        decoded = decoded[1:]
    _, rel = os.path.splitdrive(decoded)
    return rel.lstrip("/" + os.sep)


def is_within(path: str, root: str) -> bool:
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives on Windows
        return False


def resolve_path(root: str, raw_path: str) -> str:
    """Return the canonical filesystem path for raw_path under root.

    Raises NotFound when nothing exists at the joined path and Forbidden when
    the existing target lies outside root once canonicalised.
    """
    decoded = urllib.parse.unquote(raw_path)
    candidate = os.path.join(root, to_relative(decoded))

    if not os.path.exists(candidate):
        raise NotFound(raw_path)

    resolved = os.path.realpath(candidate)
    if not is_within(resolved, os.path.realpath(root)):
        raise Forbidden(raw_path)
    return resolved
