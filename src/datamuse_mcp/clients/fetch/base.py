from abc import ABC, abstractmethod

from yarl import URL


class BaseFetchClient(ABC):
    @abstractmethod
    async def fetch(self, url: str | URL) -> str: ...

    async def close(self) -> None:  # noqa: B027
        """Release any resources held by the client."""
