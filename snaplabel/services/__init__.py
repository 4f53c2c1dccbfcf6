"""
snaplabel services.

Metadata fetching, artwork download and label generation.
"""

from snaplabel.services.artwork_downloader import (
    art_url,
    artwork_path,
    artwork_queue,
    download_all,
    download_artwork,
    download_variant,
)
from snaplabel.services.bounding_boxes import (
    FULL_FRAME_BOX,
    IMAGE_EXTENSIONS,
    LABEL_EXTENSION,
    generate_bounding_boxes,
    label_line,
)
from snaplabel.services.class_index import (
    class_index_of,
    class_names,
    list_card_directories,
    load_class_index,
    persist_class_index,
)
from snaplabel.services.metadata_client import (
    create_client,
    fetch_art_variants,
    fetch_cards,
)
from snaplabel.services.variant_resolver import owning_card, resolve_variants

__all__ = [
    "FULL_FRAME_BOX",
    "IMAGE_EXTENSIONS",
    "LABEL_EXTENSION",
    "art_url",
    "artwork_path",
    "artwork_queue",
    "class_index_of",
    "class_names",
    "create_client",
    "download_all",
    "download_artwork",
    "download_variant",
    "fetch_art_variants",
    "fetch_cards",
    "generate_bounding_boxes",
    "label_line",
    "list_card_directories",
    "load_class_index",
    "owning_card",
    "persist_class_index",
    "resolve_variants",
]
