from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SNAPLABEL_")

    debug: bool = False

    api_base_url: str = "https://snapjson.untapped.gg"
    cards_path: str = "/v2/latest/en/cards.json"
    art_variants_path: str = "/v2/latest/en/artVariants.json"
    # Rendered artwork, one fixed style and resolution
    art_render_path: str = "/art/render/framebreak/common/512/{variant}.{extension}"
    image_extension: str = "webp"

    user_agent: str = "snaplabel/1.0"
    # None disables the per-request timeout
    request_timeout: float | None = None

    data_dir: Path = Path("data")
    predefined_classes_name: str = "predefined_classes.txt"
    classes_name: str = "classes.txt"

    @property
    def predefined_classes_path(self) -> Path:
        """Location of the ordered class list consumed by labelImg."""
        return self.data_dir / self.predefined_classes_name

    def card_dir(self, card: str) -> Path:
        """Directory holding one card's artwork and labels."""
        return self.data_dir / card
