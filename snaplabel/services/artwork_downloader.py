"""
Artwork downloader.

Downloads the rendered artwork for a card and each of its art variants into
`<data_dir>/<card>/<variant>.<ext>`.

Within one card, variants are fetched strictly one after another, each
request issued only once the previous file write has settled. Different
cards run as independent chains that interleave freely.
"""

import asyncio
import logging
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

import httpx

from snaplabel.config import Settings
from snaplabel.models import FailureKind, Outcome, describe_exception

logger = logging.getLogger(__name__)

# Partial downloads are written here first, then renamed into place
_PARTIAL_SUFFIX = ".part"


def art_url(settings: Settings, variant: str) -> str:
    """Render URL path for a variant, relative to the API base URL."""
    return settings.art_render_path.format(variant=variant, extension=settings.image_extension)


def artwork_path(data_dir: Path, card: str, variant: str, extension: str) -> Path:
    """Local file path for a downloaded variant."""
    return data_dir / card / f"{variant}.{extension}"


def artwork_queue(card: str, variant_map: Mapping[str, Sequence[str]]) -> list[str]:
    """
    Variants to download for a card, base artwork first.

    A card missing from the variant map only gets its base artwork.
    """
    return [card, *variant_map.get(card, [])]


async def download_variant(
    client: httpx.AsyncClient,
    settings: Settings,
    card: str,
    variant: str,
) -> Outcome[Path]:
    """
    Download one variant image to disk.

    Existing files are overwritten.

    Args:
        client: HTTP client created by create_client
        settings: Application settings
        card: Owning card id, names the output directory
        variant: Variant id, names the output file

    Returns:
        Outcome holding the written path
    """
    path = artwork_path(settings.data_dir, card, variant, settings.image_extension)
    partial = path.with_name(path.name + _PARTIAL_SUFFIX)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        async with client.stream("GET", art_url(settings, variant)) as response:
            response.raise_for_status()
            with open(partial, "wb") as f:
                async for chunk in response.aiter_bytes():
                    f.write(chunk)
        partial.replace(path)
    except (httpx.HTTPError, OSError) as e:
        logger.warning("Failed to download %s: %s", variant, e)
        _discard(partial)
        return Outcome.failed(
            FailureKind.DOWNLOAD_FAILED,
            f"Failed to download {variant}: {describe_exception(e)}",
            subject=variant,
        )

    logger.info("Wrote %s", path)
    return Outcome.success(path)


def _discard(partial: Path) -> None:
    try:
        partial.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove partial download %s: %s", partial, e)


async def download_artwork(
    client: httpx.AsyncClient,
    settings: Settings,
    card: str,
    variants: Iterable[str],
) -> list[Outcome[Path]]:
    """
    Download a card's variants one at a time, in order.

    A failed variant is recorded and the chain moves on to the next one.

    Args:
        client: HTTP client created by create_client
        settings: Application settings
        card: Card id
        variants: Variant ids, conventionally from artwork_queue

    Returns:
        One Outcome per variant, in processing order
    """
    pending = deque(variants)
    results: list[Outcome[Path]] = []

    while pending:
        variant = pending.popleft()
        results.append(await download_variant(client, settings, card, variant))

    failed = sum(1 for result in results if not result.ok)
    logger.debug("Finished %s: %d downloaded, %d failed", card, len(results) - failed, failed)
    return results


async def download_all(
    client: httpx.AsyncClient,
    settings: Settings,
    cards: Iterable[str],
    variant_map: Mapping[str, Sequence[str]],
) -> dict[str, list[Outcome[Path]]]:
    """
    Download artwork for many cards, one concurrent chain per card.

    Args:
        client: HTTP client created by create_client
        settings: Application settings
        cards: Card ids
        variant_map: Card id -> variant ids, from resolve_variants

    Returns:
        Dict mapping card id to its per-variant outcomes
    """
    # One chain per distinct card; two chains must never share files
    cards = list(dict.fromkeys(cards))
    chains = [
        download_artwork(client, settings, card, artwork_queue(card, variant_map))
        for card in cards
    ]
    results = await asyncio.gather(*chains)
    return dict(zip(cards, results, strict=True))
