"""Financing option entity."""

from enum import Enum
from unicodedata import combining, normalize


def _fold(text: str) -> str:
    """Lowercase and strip accents (e.g., 'Crédit' -> 'credit')."""
    decomposed = normalize("NFKD", text)
    return "".join(char for char in decomposed if not combining(char)).strip().lower()


class FinancingOption(str, Enum):
    """The three financing options being compared."""

    CREDIT = "Crédit"
    LOA = "LOA"
    LLD = "LLD"

    @classmethod
    def from_label(cls, label: str) -> "FinancingOption":
        """
        Resolve a free-text label returned by the recommendation service.

        Args:
            label: Label such as "Crédit", "credit", "LOA" or "lld"

        Returns:
            Matching financing option

        Raises:
            ValueError: If the label names no known option
        """
        folded = _fold(label or "")
        for option in cls:
            if folded == _fold(option.value):
                return option
        raise ValueError(f"Unknown financing option: {label!r}")
