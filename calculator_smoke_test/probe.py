"""Probe that the static server actually delivers the page."""

import logging

import aiohttp
from yarl import URL

log = logging.getLogger(__name__)


async def probe_page(base_url: URL, page: str, timeout: float = 5.0) -> int | None:
    """Fetch the page through the server and return the HTTP status.

    Problems are reported as warnings only; the checks read the page from
    disk and do not depend on the probe.

    Returns:
        The response status, or None if the request could not be made

    """
    url = base_url / page
    try:
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=timeout)
        ) as session:
            async with session.get(url) as response:
                await response.read()
                status = response.status
    except (aiohttp.ClientError, TimeoutError) as e:
        log.warning("Could not fetch %s: %s", url, e)
        return None

    if status == 200:
        log.info("Served page OK: %s", url)
    else:
        log.warning("Unexpected status %d fetching %s", status, url)
    return status
