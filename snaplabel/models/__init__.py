from snaplabel.models.card import VARIANT_SEPARATOR, ArtVariant, Card, is_path_safe
from snaplabel.models.outcome import (
    FailureDetail,
    FailureKind,
    Outcome,
    describe_exception,
)

__all__ = [
    "ArtVariant",
    "Card",
    "FailureDetail",
    "FailureKind",
    "Outcome",
    "VARIANT_SEPARATOR",
    "describe_exception",
    "is_path_safe",
]
