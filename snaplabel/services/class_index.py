"""
Class index for labelImg.

The class index is the ordered list of card ids. A card's position in it is
its integer class in every label file, so the list used to write
`predefined_classes.txt` must be the same list used when labelling.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from snaplabel.models import Card, FailureKind, Outcome, describe_exception

logger = logging.getLogger(__name__)


def class_names(cards: Iterable[Card]) -> list[str]:
    """Card ids in the order the API returned them."""
    return [card.def_id for card in cards]


def persist_class_index(names: Sequence[str], path: Path) -> Outcome[Path]:
    """
    Write the class index, one card id per line.

    Overwrites any existing file. The same names always produce the same bytes.

    Args:
        names: Ordered card ids
        path: Destination, usually <data_dir>/predefined_classes.txt

    Returns:
        Outcome holding the written path
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(names), encoding="utf-8")
    except OSError as e:
        logger.warning("Failed to write class index %s: %s", path, e)
        return Outcome.failed(
            FailureKind.WRITE_FAILED,
            f"Failed to write class index: {describe_exception(e)}",
            subject=str(path),
        )

    logger.info("Wrote %s", path)
    return Outcome.success(path)


def load_class_index(path: Path) -> Outcome[list[str]]:
    """
    Read a persisted class index back.

    Returns:
        Outcome holding the card ids in file order
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Could not read class index %s: %s", path, e)
        return Outcome.failed(
            FailureKind.READ_FAILED,
            f"Failed to read class index: {describe_exception(e)}",
            subject=str(path),
        )

    return Outcome.success([line for line in text.splitlines() if line])


def class_index_of(names: Sequence[str], card: str) -> int | None:
    """Zero-based class of a card, or None if it is not in the index."""
    try:
        return names.index(card)
    except ValueError:
        return None


def list_card_directories(data_dir: Path) -> Outcome[list[str]]:
    """
    Build a class list from the card directories already on disk.

    Each sub-directory of the data directory is one card. Names are sorted.

    Args:
        data_dir: Root data directory

    Returns:
        Outcome holding the card ids
    """
    try:
        names = sorted(entry.name for entry in data_dir.iterdir() if entry.is_dir())
    except OSError as e:
        logger.warning("Unable to read %s: %s", data_dir, e)
        return Outcome.failed(
            FailureKind.READ_FAILED,
            f"Unable to read data directory: {describe_exception(e)}",
            subject=str(data_dir),
        )

    return Outcome.success(names)
