"""
Document service: retrieves the markdown source over HTTP and renders it.
"""

from typing import Optional

import httpx

from rendermark.errors import DocumentFetchError
from rendermark.models.document import RenderedDocument
from rendermark.utils.app_logger import logger
from rendermark.utils.markdown import markdown_to_fragments


class DocumentService:
    """Fetches the configured document and converts it to HTML"""

    def __init__(
        self,
        document_url: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            document_url: Absolute URL, or a URL relative to base_url
            base_url: URL of the page the document is rendered into
            timeout: Seconds to wait for the fetch; None waits indefinitely
            client: Optional shared client. When omitted, a client is opened
                and closed per fetch.
        """
        self.document_url = document_url
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    def resolve_url(self) -> str:
        """Resolve the document URL against the page URL, if one is set"""
        if self.base_url:
            return str(httpx.URL(self.base_url).join(self.document_url))
        return self.document_url

    async def fetch_text(self) -> str:
        """
        Retrieve the document text.

        Returns:
            str: Document body decoded as text

        Raises:
            DocumentFetchError: On transport errors, invalid URLs or a
                non-success status code
        """
        try:
            url = self.resolve_url()
        except httpx.InvalidURL as e:
            logger.document_fetch_failed(self.document_url, str(e))
            raise DocumentFetchError(self.document_url, str(e)) from e

        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            reason = str(e) or type(e).__name__
            logger.document_fetch_failed(url, reason)
            raise DocumentFetchError(url, reason) from e

        if not response.is_success:
            reason = f"HTTP {response.status_code}"
            logger.document_fetch_failed(url, reason)
            raise DocumentFetchError(url, reason)

        # Drop a leading byte-order mark so the first line classifies normally
        text = response.text.removeprefix("\ufeff")
        logger.document_fetched(url, len(text))
        return text

    async def render(self) -> RenderedDocument:
        """
        Fetch the document and convert it to HTML.

        Returns:
            RenderedDocument: Source text and rendered HTML

        Raises:
            DocumentFetchError: If the fetch fails; nothing is rendered then
        """
        text = await self.fetch_text()

        lines = text.split("\n")
        fragments = markdown_to_fragments(text)
        logger.document_rendered(lines=len(lines), fragments=len(fragments))

        return RenderedDocument(
            url=self.resolve_url(),
            markdown=text,
            html="\n".join(fragments),
            line_count=len(lines),
        )
