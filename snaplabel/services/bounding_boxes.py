"""
YOLO bounding box labels.

Every downloaded image is the card itself, so each gets a single box covering
the whole frame: `<class> 0.5 0.5 1 1` in normalized coordinates. The
predefined classes file is copied next to the images so labelImg can resolve
class integers from the card directory alone.
"""

import logging
import shutil
from pathlib import Path

from snaplabel.config import Settings
from snaplabel.models import FailureKind, Outcome, describe_exception

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".webp", ".png", ".jpg", ".jpeg", ".bmp"})
LABEL_EXTENSION = ".txt"

# x_center y_center width height
FULL_FRAME_BOX = "0.5 0.5 1 1"


def label_line(class_index: int) -> str:
    """Full-frame YOLO box for a class."""
    return f"{class_index} {FULL_FRAME_BOX}"


def is_image(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def write_label(image: Path, class_index: int) -> Outcome[Path]:
    """Write the label file that sits beside one image."""
    label = image.with_suffix(LABEL_EXTENSION)
    try:
        label.write_text(label_line(class_index) + "\n", encoding="utf-8")
    except OSError as e:
        logger.warning("Failed to write label %s: %s", label, e)
        return Outcome.failed(
            FailureKind.WRITE_FAILED,
            f"Failed to write label: {describe_exception(e)}",
            subject=str(label),
        )

    logger.info("Wrote %s", label)
    return Outcome.success(label)


def copy_classes_file(classes_file: Path, destination: Path) -> Outcome[Path]:
    """Copy the predefined classes file into a card directory."""
    try:
        shutil.copyfile(classes_file, destination)
    except OSError as e:
        logger.warning("Failed to copy %s to %s: %s", classes_file, destination, e)
        return Outcome.failed(
            FailureKind.WRITE_FAILED,
            f"Failed to copy classes file: {describe_exception(e)}",
            subject=str(destination),
        )

    logger.info("Wrote %s", destination)
    return Outcome.success(destination)


def generate_bounding_boxes(
    card_dir: Path,
    class_index: int,
    classes_file: Path,
    settings: Settings,
) -> list[Outcome[Path]]:
    """
    Label every image of one card and copy the classes file alongside.

    `class_index` must be the card's position in the list that was written to
    `classes_file`, otherwise the labels and the index disagree.

    Args:
        card_dir: The card's image directory
        class_index: Zero-based class of the card
        classes_file: Persisted predefined classes file
        settings: Application settings

    Returns:
        One Outcome per label file, then one for the classes copy.
        A single READ_FAILED outcome if the directory cannot be listed.
    """
    try:
        images = sorted(path for path in card_dir.iterdir() if is_image(path))
    except OSError as e:
        logger.warning("Unable to read %s: %s", card_dir, e)
        return [
            Outcome.failed(
                FailureKind.READ_FAILED,
                f"Unable to read card directory: {describe_exception(e)}",
                subject=str(card_dir),
            )
        ]

    results = [write_label(image, class_index) for image in images]
    results.append(copy_classes_file(classes_file, card_dir / settings.classes_name))
    return results
