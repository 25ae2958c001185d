from urllib.parse import urlsplit

SAFE_SCHEMES = ("http", "https")


def is_safe_url(value):
    """
    True for http(s) URLs, in-page anchors and relative paths.

    Anything carrying another scheme (javascript:, data:, vbscript:) or a
    protocol-relative host is refused, as are values a browser would
    normalise before parsing (surrounding whitespace, control characters,
    backslashes).
    """
    if not isinstance(value, str) or not value:
        return False
    if value != value.strip() or "\\" in value:
        return False
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        return False
    if value.startswith("#"):
        return True
    if value.startswith("//"):
        return False

    try:
        parts = urlsplit(value)
    except ValueError:
        return False

    if not parts.scheme:
        return ":" not in value.split("/", 1)[0]
    return parts.scheme.lower() in SAFE_SCHEMES and bool(parts.netloc)
