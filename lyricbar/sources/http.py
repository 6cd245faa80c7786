from __future__ import annotations

import logging

import requests

from .errors import FileTooLargeError

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.114 Safari/537.36"
)
MAX_DOCUMENT_BYTES = 1 << 20  # 1 MiB
CHUNK_SIZE = 4096


class DocumentFetcher:
    def __init__(
        self,
        *,
        timeout_s: float = 10.0,
        max_bytes: int = MAX_DOCUMENT_BYTES,
        session: requests.Session | None = None,
    ):
        self.timeout_s = timeout_s
        self.max_bytes = max_bytes
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def fetch_document(self, url: str) -> bytes | None:
        """
        GET `url` and return the raw body.

        Returns None on transport errors and non-2xx statuses.
        Raises FileTooLargeError once the body grows past `max_bytes`.
        """
        try:
            r = self.session.get(url, timeout=self.timeout_s, stream=True)
        except requests.RequestException as e:
            logger.warning("GET %s failed: %s", url, e)
            return None

        with r:
            if r.status_code // 100 != 2:
                logger.debug("GET %s -> HTTP %s", url, r.status_code)
                return None

            body = bytearray()
            try:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    if not chunk:
                        continue
                    if len(body) + len(chunk) > self.max_bytes:
                        logger.error("File '%s' too large (over %s bytes)", url, self.max_bytes)
                        raise FileTooLargeError(f"file too large: {url}")
                    body.extend(chunk)
            except requests.RequestException as e:
                logger.warning("Reading %s failed: %s", url, e)
                return None

        return bytes(body)

    def close(self) -> None:
        self.session.close()
