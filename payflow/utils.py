from fastapi import Header, HTTPException
from typing import Optional
from urllib.parse import urlsplit, urlunsplit
from .config import settings

LOCAL_HOSTS = ("localhost", "127.0.0.1")

def require_service_api_key(x_api_key: Optional[str] = Header(default=None)):
    # open when no key is configured
    if settings.service_api_key and x_api_key != settings.service_api_key:
        raise HTTPException(status_code=401, detail="Invalid X-API-KEY")
    return True

def strip_query(url: str) -> str:
    """Drop query string and fragment, keep scheme, host and path."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))

def is_local_host(url: str) -> bool:
    return urlsplit(url).hostname in LOCAL_HOSTS
