"""Link path normalization and form validation shared by the relay and UI."""

from typing import Any, Iterable, Optional


MAX_PATH_LENGTH = 128
MIN_SUBDOMAIN_LENGTH = 3
MAX_SUBDOMAIN_LENGTH = 32


def normalize_path(value: Optional[str]) -> str:
    s = (value or "").strip()
    if s.startswith("/"):
        s = s[1:]
    return s.rstrip("/")


def join_segments(segments: Iterable[str]) -> str:
    """Join catch-all route segments and normalize the result."""
    return normalize_path("/".join(segments))


def validate_link_path(path: str) -> Optional[str]:
    """Return an error message for an invalid normalized path, else None."""
    if not path:
        return "path is required"
    if len(path) > MAX_PATH_LENGTH:
        return f"path is too long (max {MAX_PATH_LENGTH} characters)"
    if ".." in path:
        return "path must not contain '..'"
    if "//" in path:
        return "path must not contain '//'"
    if path.startswith("/"):
        return "path must not start with '/'"
    return None


def validate_target_url(url: Optional[str]) -> Optional[str]:
    u = (url or "").strip()
    if not u:
        return "targetUrl is required"
    if not (u.startswith("https://") or u.startswith("http://")):
        return "targetUrl must start with http(s)://"
    return None


def validate_subdomain_options(random_subdomain: Any, subdomain_length: Any) -> Optional[str]:
    if random_subdomain is not None and not isinstance(random_subdomain, bool):
        return "randomSubdomain must be a boolean"
    if subdomain_length is None:
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(subdomain_length, bool) or not isinstance(subdomain_length, int):
        return "subdomainLength must be an integer"
    if not MIN_SUBDOMAIN_LENGTH <= subdomain_length <= MAX_SUBDOMAIN_LENGTH:
        return f"subdomainLength must be between {MIN_SUBDOMAIN_LENGTH} and {MAX_SUBDOMAIN_LENGTH}"
    return None

