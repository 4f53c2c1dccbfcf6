from pathlib import Path

from snaplabel.models import Card, FailureKind
from snaplabel.services.class_index import (
    class_index_of,
    class_names,
    list_card_directories,
    load_class_index,
    persist_class_index,
)


class TestClassNames:
    def test_keeps_card_order(self) -> None:
        cards = [Card(def_id="Zabu", series=3), Card(def_id="Groot", series=1)]

        assert class_names(cards) == ["Zabu", "Groot"]


class TestPersistClassIndex:
    def test_one_card_per_line(self, tmp_path: Path) -> None:
        path = tmp_path / "predefined_classes.txt"

        outcome = persist_class_index(["Groot", "Zabu", "Misty"], path)

        assert outcome.ok
        assert path.read_text(encoding="utf-8").splitlines() == ["Groot", "Zabu", "Misty"]

    def test_single_card(self, tmp_path: Path) -> None:
        path = tmp_path / "predefined_classes.txt"

        persist_class_index(["Groot"], path)

        assert path.read_text(encoding="utf-8") == "Groot"

    def test_rewrite_is_byte_identical(self, tmp_path: Path) -> None:
        """Writing the same names twice yields the same file."""
        path = tmp_path / "predefined_classes.txt"

        persist_class_index(["Groot", "Zabu"], path)
        first = path.read_bytes()
        persist_class_index(["Groot", "Zabu"], path)

        assert path.read_bytes() == first

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "predefined_classes.txt"
        path.write_text("Stale\nEntries\nHere", encoding="utf-8")

        persist_class_index(["Groot"], path)

        assert path.read_text(encoding="utf-8") == "Groot"

    def test_write_failure_is_reported(self, tmp_path: Path) -> None:
        """A path that cannot be written yields a failed outcome."""
        blocker = tmp_path / "data"
        blocker.write_text("not a directory")

        outcome = persist_class_index(["Groot"], blocker / "predefined_classes.txt")

        assert not outcome.ok
        assert outcome.failure.kind == FailureKind.WRITE_FAILED


class TestLoadClassIndex:
    def test_reads_back_written_index(self, tmp_path: Path) -> None:
        path = tmp_path / "predefined_classes.txt"
        persist_class_index(["Groot", "Zabu"], path)

        outcome = load_class_index(path)

        assert outcome.ok
        assert outcome.value == ["Groot", "Zabu"]

    def test_ignores_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "predefined_classes.txt"
        path.write_text("Groot\nZabu\n\n", encoding="utf-8")

        assert load_class_index(path).value == ["Groot", "Zabu"]

    def test_missing_file(self, tmp_path: Path) -> None:
        outcome = load_class_index(tmp_path / "missing.txt")

        assert not outcome.ok
        assert outcome.failure.kind == FailureKind.READ_FAILED


class TestClassIndexOf:
    def test_zero_based_position(self) -> None:
        names = ["Groot", "Zabu", "Misty", "HighEvolutionary"]

        assert class_index_of(names, "Groot") == 0
        assert class_index_of(names, "HighEvolutionary") == 3

    def test_unknown_card(self) -> None:
        assert class_index_of(["Groot"], "TestCard") is None


class TestListCardDirectories:
    def test_lists_sorted_directories(self, tmp_path: Path) -> None:
        """Only directories count as cards; files are ignored."""
        (tmp_path / "Zabu").mkdir()
        (tmp_path / "Groot").mkdir()
        (tmp_path / "predefined_classes.txt").write_text("Groot")

        outcome = list_card_directories(tmp_path)

        assert outcome.ok
        assert outcome.value == ["Groot", "Zabu"]

    def test_missing_data_directory(self, tmp_path: Path) -> None:
        outcome = list_card_directories(tmp_path / "missing")

        assert not outcome.ok
        assert outcome.failure.kind == FailureKind.READ_FAILED
