from abc import ABC, abstractmethod

from .types import Language


class GrammarCorrector(ABC):
    """
    Abstract correction boundary.
    The HTTP layer must depend ONLY on this interface.
    """

    @abstractmethod
    async def correct(self, api_key: str, language: Language, text: str) -> str:
        """Return the grammar-corrected text."""
        raise NotImplementedError
