from pathlib import Path

import pytest

from snaplabel.config import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings writing into a temporary data directory, ignoring any .env."""
    return Settings(_env_file=None, data_dir=tmp_path / "data")


@pytest.fixture
def api_url(settings: Settings):
    """Build absolute API URLs for respx routes."""

    def _url(path: str) -> str:
        return f"{settings.api_base_url}{path}"

    return _url


@pytest.fixture
def sample_cards() -> list[dict]:
    """Sample cards.json payload."""
    return [
        {"defId": "Groot", "name": "Groot", "series": 1, "cost": 3},
        {"defId": "TestCard", "name": "Test Card", "series": 0},
        {"defId": "HighEvolutionary", "name": "High Evolutionary", "series": 3},
    ]


@pytest.fixture
def sample_variants() -> list[dict]:
    """Sample artVariants.json payload."""
    return [
        {"defId": "Groot_v1", "source": 1},
        {"defId": "Groot_v2", "source": 0},
        {"defId": "HighEvolutionary_01", "source": 2},
    ]
