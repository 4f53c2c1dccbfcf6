from collections.abc import Iterable

from snaplabel.models import VARIANT_SEPARATOR, ArtVariant, is_path_safe


def owning_card(def_id: str) -> str:
    """Card id for a variant id: everything before the first separator."""
    return def_id.split(VARIANT_SEPARATOR, 1)[0]


def resolve_variants(variants: Iterable[ArtVariant]) -> dict[str, list[str]]:
    """
    Group variant ids by owning card.

    Variants keep their input order within each card. Duplicates are kept.
    Variants whose owning card is empty (e.g. "_01") or not usable as a
    directory name (e.g. ".._01") are dropped.

    Args:
        variants: Art variants, already filtered

    Returns:
        Dict mapping card id to its variant ids
    """
    resolved: dict[str, list[str]] = {}
    for variant in variants:
        card = owning_card(variant.def_id)
        if not is_path_safe(card) or not is_path_safe(variant.def_id):
            continue
        resolved.setdefault(card, []).append(variant.def_id)
    return resolved
