"""Configuration settings for the Alpha Vantage client."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_TIMEOUT = 30.0


@dataclass
class Settings:
    """Client settings."""

    alpha_vantage_api_key: str = field(
        default_factory=lambda: os.getenv("ALPHA_VANTAGE_API_KEY", "")
    )
    base_url: str = field(
        default_factory=lambda: os.getenv("ALPHA_VANTAGE_BASE_URL", DEFAULT_BASE_URL)
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("ALPHA_VANTAGE_TIMEOUT", DEFAULT_TIMEOUT))
    )

    def validate(self) -> None:
        """Validate required settings."""
        if not self.alpha_vantage_api_key:
            raise ValueError(
                "ALPHA_VANTAGE_API_KEY not set. Get one at: "
                "https://www.alphavantage.co/support/#api-key"
            )

    def has_api_key(self) -> bool:
        """Check if the Alpha Vantage API key is configured."""
        return bool(self.alpha_vantage_api_key)
