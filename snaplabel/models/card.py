from pydantic import BaseModel, ConfigDict, Field, field_validator

# Art variant ids are "<cardId>_<suffix>"
VARIANT_SEPARATOR = "_"

_RESERVED_NAMES = frozenset({"", ".", ".."})


def is_path_safe(identifier: str) -> bool:
    """True if the id can name a file or directory directly under the data dir."""
    return identifier not in _RESERVED_NAMES and "/" not in identifier and "\\" not in identifier


def _require_path_safe(identifier: str) -> str:
    if not is_path_safe(identifier):
        raise ValueError(f"'{identifier}' cannot be used as a file name")
    return identifier


class Card(BaseModel):
    """
    A card as returned by the cards endpoint.

    Attributes:
        def_id: Stable card identifier (e.g., "Groot")
        series: Release series; missing or <= 0 marks test/unreleased data
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def_id: str = Field(alias="defId")
    series: int | None = None

    @field_validator("def_id")
    @classmethod
    def check_def_id(cls, value: str) -> str:
        return _require_path_safe(value)

    @property
    def is_released(self) -> bool:
        return self.series is not None and self.series > 0


class ArtVariant(BaseModel):
    """
    An alternate artwork as returned by the art variants endpoint.

    Attributes:
        def_id: Variant identifier (e.g., "Groot_01")
        source: Where the variant comes from; 0 marks test data
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def_id: str = Field(alias="defId")
    source: int | None = None

    @field_validator("def_id")
    @classmethod
    def check_def_id(cls, value: str) -> str:
        return _require_path_safe(value)

    @property
    def is_test_data(self) -> bool:
        return self.source == 0
