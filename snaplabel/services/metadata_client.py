"""
Card metadata client.

Fetches the card list and the art variant list from the untapped.gg Snap
JSON API. Test and unreleased entries are filtered out here so nothing
downstream ever sees them.

Test entries are dropped on their raw values before parsing, and every
remaining entry is parsed on its own: one malformed entry is logged and
skipped, it never empties the list.

Failures never raise: a network, HTTP or parse error is logged and returned
as a failed Outcome, and callers treat it as "no data available".
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from snaplabel.config import Settings
from snaplabel.models import ArtVariant, Card, FailureKind, Outcome, describe_exception

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def create_client(settings: Settings) -> httpx.AsyncClient:
    """
    Create the HTTP client shared by metadata and artwork requests.

    The pool timeout is disabled so download chains queued behind the
    connection limit wait for a free connection instead of failing.
    """
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        timeout=httpx.Timeout(settings.request_timeout, pool=None),
    )


async def _get_json(client: httpx.AsyncClient, path: str) -> Any:
    response = await client.get(path)
    response.raise_for_status()
    return response.json()


def _is_test_card(entry: Any) -> bool:
    series = entry.get("series") if isinstance(entry, dict) else None
    return isinstance(series, int | float) and series <= 0


def _is_test_variant(entry: Any) -> bool:
    return isinstance(entry, dict) and entry.get("source") == 0


def _parse_entries(
    payload: Any,
    model: type[M],
    is_test_entry: Callable[[Any], bool],
    kind: str,
) -> list[M]:
    """
    Parse a JSON array entry by entry.

    Raises:
        ValueError: If the payload is not a JSON array
    """
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array of {kind}, got {type(payload).__name__}")

    parsed: list[M] = []
    for position, entry in enumerate(payload):
        if is_test_entry(entry):
            continue
        try:
            parsed.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning("Skipping malformed %s entry %d: %s", kind, position, e)
    return parsed


async def fetch_cards(client: httpx.AsyncClient, settings: Settings) -> Outcome[list[Card]]:
    """
    Fetch all released cards.

    Args:
        client: HTTP client created by create_client
        settings: Application settings

    Returns:
        Outcome holding cards in API order, with series <= 0 removed
    """
    try:
        payload = await _get_json(client, settings.cards_path)
        cards = _parse_entries(payload, Card, _is_test_card, "cards")
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Failed to fetch cards: %s", e)
        return Outcome.failed(
            FailureKind.METADATA_UNAVAILABLE,
            f"Failed to fetch cards: {describe_exception(e)}",
            subject=settings.cards_path,
        )

    released = [card for card in cards if card.is_released]
    logger.debug("Fetched %d cards (%d released)", len(cards), len(released))
    return Outcome.success(released)


async def fetch_art_variants(
    client: httpx.AsyncClient, settings: Settings
) -> Outcome[list[ArtVariant]]:
    """
    Fetch all art variants.

    Args:
        client: HTTP client created by create_client
        settings: Application settings

    Returns:
        Outcome holding variants in API order, with source == 0 removed
    """
    try:
        payload = await _get_json(client, settings.art_variants_path)
        variants = _parse_entries(payload, ArtVariant, _is_test_variant, "art variants")
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Failed to fetch art variants: %s", e)
        return Outcome.failed(
            FailureKind.METADATA_UNAVAILABLE,
            f"Failed to fetch art variants: {describe_exception(e)}",
            subject=settings.art_variants_path,
        )

    kept = [variant for variant in variants if not variant.is_test_data]
    logger.debug("Fetched %d art variants (%d kept)", len(variants), len(kept))
    return Outcome.success(kept)
