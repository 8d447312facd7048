from urllib.parse import urlsplit


def is_url(s: str) -> bool:
    s = (s or "").strip()
    if not (s.lower().startswith("http://") or s.lower().startswith("https://")):
        return False
    try:
        return bool(urlsplit(s).hostname)
    except ValueError:
        return False
