from abc import ABC, abstractmethod


class BaseAgent(ABC):
    # Context keys that must be present before run() is called
    requires: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def run(self, context: dict) -> dict:
        """Read the shared location/chat context, return the keys this step contributes."""
        ...

    def missing(self, context: dict) -> list[str]:
        return [key for key in self.requires if key not in context]
