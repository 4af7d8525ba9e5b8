import re

_TAG_RE = re.compile(r"<[^>]*>")


def clean_input(value):
    """
    Strips HTML tags and surrounding whitespace from string input.
    Blank strings become None; non-string values are returned unchanged.
    """
    if value is None or not isinstance(value, str):
        return value
    cleaned = _TAG_RE.sub("", value).replace("\u00a0", " ").strip()
    return cleaned or None
