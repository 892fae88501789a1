"""Base class for page transformers.

A page transformer migrates one aspect of a legacy publishing page onto
the modern page created for it. Transformers are built per legacy page and
mutate the modern page in place.
"""

from abc import ABC, abstractmethod
from typing import Any

from schemas.page_header import ModernPage


class PageTransformer(ABC):
    """Abstract base class for legacy-to-modern page transformers."""

    @abstractmethod
    def transform(self, target_page: ModernPage) -> Any:
        """Apply the transformation to target_page.

        Args:
            target_page: Modern page to configure

        Returns:
            Transformer specific outcome
        """
        pass
