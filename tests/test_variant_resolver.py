from snaplabel.models import ArtVariant
from snaplabel.services.variant_resolver import owning_card, resolve_variants


def _variants(*def_ids: str) -> list[ArtVariant]:
    return [ArtVariant(def_id=def_id, source=1) for def_id in def_ids]


class TestOwningCard:
    def test_splits_on_first_separator(self) -> None:
        assert owning_card("Groot_v1") == "Groot"
        assert owning_card("Groot_v1_alt") == "Groot"

    def test_no_separator_is_the_card(self) -> None:
        assert owning_card("Groot") == "Groot"

    def test_leading_separator_is_empty(self) -> None:
        assert owning_card("_v1") == ""


class TestResolveVariants:
    def test_groups_by_card(self) -> None:
        resolved = resolve_variants(_variants("Groot_v1", "Zabu_01", "Groot_v2"))

        assert resolved == {"Groot": ["Groot_v1", "Groot_v2"], "Zabu": ["Zabu_01"]}

    def test_preserves_input_order(self) -> None:
        resolved = resolve_variants(_variants("Groot_c", "Groot_a", "Groot_b"))

        assert resolved["Groot"] == ["Groot_c", "Groot_a", "Groot_b"]

    def test_empty_owner_is_dropped(self) -> None:
        """Malformed ids do not crash the resolver."""
        resolved = resolve_variants(_variants("_orphan", "Groot_v1"))

        assert resolved == {"Groot": ["Groot_v1"]}

    def test_duplicates_are_kept(self) -> None:
        resolved = resolve_variants(_variants("Groot_v1", "Groot_v1"))

        assert resolved["Groot"] == ["Groot_v1", "Groot_v1"]

    def test_card_without_variants_has_no_entry(self) -> None:
        resolved = resolve_variants(_variants("Groot_v1"))

        assert "Zabu" not in resolved

    def test_empty_input(self) -> None:
        assert resolve_variants([]) == {}

    def test_unsafe_owner_is_dropped(self) -> None:
        """An owner that is not a plain directory name is dropped."""
        resolved = resolve_variants(_variants(".._v1", "._v2", "Groot_v1"))

        assert resolved == {"Groot": ["Groot_v1"]}
