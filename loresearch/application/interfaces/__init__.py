"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from loresearch.infrastructure or loresearch.api.
"""

from loresearch.application.interfaces.repositories import IStoreRepository
from loresearch.application.interfaces.services import (
    IHighlighter,
    IMatcher,
    IRelevanceScorer,
)

__all__ = [
    "IHighlighter",
    "IMatcher",
    "IRelevanceScorer",
    "IStoreRepository",
]
