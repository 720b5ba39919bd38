import ipaddress
import logging
import socket
from typing import Optional
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

FRONT_PAGE_URL = "https://news.ycombinator.com/"
ALLOWED_SCHEMES = {"http", "https"}
ALLOWED_PROXY_SCHEMES = {"http", "https"}


def _is_private_address(hostname: str) -> bool:
    """Return True if *hostname* resolves to a private, loopback, link-local or reserved address."""
    try:
        infos = socket.getaddrinfo(hostname, None)
    except socket.gaierror:
        return False

    for info in infos:
        # Strip IPv6 zone IDs (e.g. "fe80::1%eth0" → "fe80::1")
        raw_ip = info[4][0].split("%")[0]
        try:
            addr = ipaddress.ip_address(raw_ip)
        except ValueError:
            continue
        if addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved:
            return True
    return False


def _validate_url(url: str) -> None:
    """Raise ValueError if *url* is not an absolute http(s) URL."""
    parsed = urlparse(url)

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Scheme '{parsed.scheme}' is not allowed. Use http or https.")

    if not parsed.hostname:
        raise ValueError("URL must have a valid hostname.")


def _validate_proxy(proxy: str) -> None:
    """Raise ValueError if *proxy* is not a usable forward-proxy URL."""
    parsed = urlparse(proxy)

    if parsed.scheme not in ALLOWED_PROXY_SCHEMES:
        raise ValueError(
            f"Proxy scheme '{parsed.scheme}' is not supported. Use http or https."
        )

    if not parsed.hostname:
        raise ValueError("Proxy URL must have a valid hostname.")

    # .port raises ValueError itself for non-numeric or out-of-range ports
    if parsed.port == 0:
        raise ValueError("Proxy port must be between 1 and 65535.")


def ensure_public_proxy(proxy: Optional[str]) -> None:
    """Raise ValueError if *proxy* is malformed or points at an internal address.

    Meant for proxies supplied by remote callers; a local user running the
    command line may still use a proxy on localhost or the private network.
    """
    if proxy is None:
        return
    _validate_proxy(proxy)
    if _is_private_address(urlparse(proxy).hostname):
        raise ValueError("Proxies on private/internal addresses are not allowed.")


async def fetch_page(url: str = FRONT_PAGE_URL, proxy: Optional[str] = None) -> str:
    """Fetch *url* and return the response body as a string.

    When *proxy* is given, both plain and TLS traffic are routed through it.
    The body is returned whatever the status code; only the transport can fail.

    Raises:
        ValueError: if *url* or *proxy* is malformed. Raised before any
            connection is opened.
        httpx.RequestError: on connection, TLS, proxy or timeout failures.
    """
    _validate_url(url)
    if proxy is not None:
        _validate_proxy(proxy)

    async with httpx.AsyncClient(proxy=proxy, follow_redirects=True) as client:
        response = await client.get(url)

    logger.info(
        "Fetched %s (HTTP %s, %d bytes)",
        response.url,
        response.status_code,
        len(response.content),
    )
    return response.text
