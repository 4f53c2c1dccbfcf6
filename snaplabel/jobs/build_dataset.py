"""
Build a labelImg dataset from Snap card artwork.

Fetches card metadata, writes the predefined class list, downloads artwork
and writes one full-frame YOLO box per image. Every step is best effort:
failures are recorded in the run report and the run carries on.

Usage:
    python -m snaplabel.jobs.build_dataset --predefined --all
    python -m snaplabel.jobs.build_dataset --card Groot --boxes
"""

import argparse
import asyncio
import logging
from dataclasses import dataclass, field
from importlib.metadata import version as pkg_version
from pathlib import Path

import httpx

from snaplabel.config import Settings
from snaplabel.models import FailureDetail, FailureKind, Outcome
from snaplabel.services import (
    class_index_of,
    class_names,
    create_client,
    download_all,
    fetch_art_variants,
    fetch_cards,
    generate_bounding_boxes,
    list_card_directories,
    load_class_index,
    persist_class_index,
    resolve_variants,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    """
    What a run should do.

    Attributes:
        card: Single card to process
        all_cards: Process every released card (takes precedence over card)
        predefined: Write predefined_classes.txt
        images: Download artwork for the selected cards
        boxes: Write bounding box labels for the selected cards
        from_disk: Take the card list from existing data directories
            instead of the API
    """

    card: str | None = None
    all_cards: bool = False
    predefined: bool = False
    images: bool = False
    boxes: bool = False
    from_disk: bool = False


@dataclass
class RunReport:
    """Everything a run produced or failed to produce."""

    class_index: list[str] = field(default_factory=list)
    predefined: Outcome[Path] | None = None
    downloads: dict[str, list[Outcome[Path]]] = field(default_factory=dict)
    labels: dict[str, list[Outcome[Path]]] = field(default_factory=dict)
    # Failures that stopped a step before it produced any file
    skipped: list[FailureDetail] = field(default_factory=list)

    def outcomes(self) -> list[Outcome[Path]]:
        results = [self.predefined] if self.predefined is not None else []
        for per_card in (*self.downloads.values(), *self.labels.values()):
            results.extend(per_card)
        return results

    @property
    def written(self) -> list[Path]:
        return [result.value for result in self.outcomes() if result.ok]

    @property
    def failures(self) -> list[FailureDetail]:
        failed = [result.failure for result in self.outcomes() if result.failure]
        return [*self.skipped, *failed]

    def skip(self, outcome: Outcome) -> None:
        if outcome.failure is not None:
            self.skipped.append(outcome.failure)


async def load_card_names(
    options: RunOptions, settings: Settings, client: httpx.AsyncClient
) -> Outcome[list[str]]:
    """Ordered card ids from the API, or from disk when requested."""
    if options.from_disk:
        return list_card_directories(settings.data_dir)

    cards = await fetch_cards(client, settings)
    if not cards.ok:
        return cards
    return Outcome.success(class_names(cards.value))


def select_cards(options: RunOptions, names: list[str], report: RunReport) -> list[str]:
    """Cards the download and label steps should work on."""
    if options.all_cards:
        return list(names)
    if options.card is None:
        return []
    if options.card not in names:
        logger.warning("'%s' is not recognized as a valid card name", options.card)
        report.skip(
            Outcome.failed(
                FailureKind.UNRECOGNIZED_CARD,
                f"'{options.card}' is not recognized as a valid card name",
                subject=options.card,
            )
        )
        return []
    return [options.card]


async def download_images(
    targets: list[str], settings: Settings, client: httpx.AsyncClient, report: RunReport
) -> None:
    variants = await fetch_art_variants(client, settings)
    if not variants.ok:
        report.skip(variants)
        return

    variant_map = resolve_variants(variants.value)
    report.downloads = await download_all(client, settings, targets, variant_map)


def label_images(targets: list[str], settings: Settings, report: RunReport) -> None:
    # Persisted file first: labels must match the classes.txt copied beside them
    classes_file = settings.predefined_classes_path
    label_names = load_class_index(classes_file).unwrap_or(None) or report.class_index

    for card in targets:
        index = class_index_of(label_names, card)
        if index is None:
            logger.warning("'%s' is not in %s", card, classes_file)
            report.skip(
                Outcome.failed(
                    FailureKind.UNRECOGNIZED_CARD,
                    f"'{card}' has no class in {classes_file}",
                    subject=card,
                )
            )
            continue
        report.labels[card] = generate_bounding_boxes(
            settings.card_dir(card), index, classes_file, settings
        )


async def run_build(
    options: RunOptions,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> RunReport:
    """
    Run the requested steps.

    Args:
        options: What to do
        settings: Application settings
        client: Optional HTTP client; one is created and closed if omitted

    Returns:
        Report of written files and failures
    """
    if client is None:
        async with create_client(settings) as owned:
            return await run_build(options, settings, owned)

    report = RunReport()

    names = await load_card_names(options, settings, client)
    if not names.ok:
        report.skip(names)
        return report
    report.class_index = names.value

    if options.predefined:
        report.predefined = persist_class_index(
            report.class_index, settings.predefined_classes_path
        )

    targets = select_cards(options, report.class_index, report)
    if not targets:
        return report

    if options.images:
        await download_images(targets, settings, client, report)
    if options.boxes:
        label_images(targets, settings, report)

    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snaplabel",
        description="Download Snap card artwork and write labelImg YOLO labels",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {pkg_version('snaplabel')}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="output logs to the console")
    parser.add_argument(
        "-p",
        "--predefined",
        action="store_true",
        help="create predefined_classes.txt for labelImg to consume",
    )
    parser.add_argument(
        "-c",
        "--card",
        metavar="NAME",
        help="work on a single card, e.g. -c HighEvolutionary",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="all_cards",
        action="store_true",
        help="work on all currently released cards",
    )
    parser.add_argument(
        "-i", "--images", action="store_true", help="download artwork (default)"
    )
    parser.add_argument(
        "-b", "--boxes", action="store_true", help="write full-frame bounding box labels"
    )
    parser.add_argument(
        "--from-disk",
        action="store_true",
        help="take the card list from existing data directories instead of the API",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory to store artwork and labels (default: data)",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> RunOptions:
    """Translate parsed arguments; a card scope with no step means images."""
    images = args.images or not args.boxes
    return RunOptions(
        card=args.card,
        all_cards=args.all_cards,
        predefined=args.predefined,
        images=images,
        boxes=args.boxes,
        from_disk=args.from_disk,
    )


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.debug:
        overrides["debug"] = True
    if args.data_dir is not None:
        overrides["data_dir"] = args.data_dir
    settings = Settings(**overrides)

    configure_logging(settings.debug)
    report = asyncio.run(run_build(options_from_args(args), settings))

    print(f"Wrote {len(report.written)} files, {len(report.failures)} failures")


if __name__ == "__main__":
    main()
