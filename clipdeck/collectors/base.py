"""Base search adapter interface for all upstream providers.

All adapters should extend BaseSearchAdapter and implement the required methods.
"""

from abc import ABC, abstractmethod
from typing import Optional

from clipdeck.models.schemas import SearchPage


class BaseSearchAdapter(ABC):
    """Abstract base class for upstream search adapters.

    An adapter issues exactly one upstream request per ``search`` call and
    returns a normalized SearchPage, or raises an UpstreamError.
    """

    provider: str = "unknown"

    @abstractmethod
    async def search(
        self,
        keyword: str,
        count: int,
        cursor: Optional[str] = None,
    ) -> SearchPage:
        """Fetch one page of results for ``keyword``.

        Args:
            keyword: Non-empty search keyword.
            count: Positive page size.
            cursor: Opaque cursor from a previous page, or None for the first page.

        Returns:
            Normalized search page.
        """
        ...

    async def aclose(self) -> None:
        """Release transport resources. No-op by default."""
        return None

    async def __aenter__(self) -> "BaseSearchAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
