# inventory_engine/core/config/settings.py

from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from inventory_engine.core.enums.lot_store_kind import LotStoreKind

# Names of the rounding modes exposed by the decimal module
RoundingMode = Literal[
    "ROUND_HALF_EVEN",
    "ROUND_HALF_UP",
    "ROUND_HALF_DOWN",
    "ROUND_UP",
    "ROUND_DOWN",
    "ROUND_CEILING",
    "ROUND_FLOOR",
    "ROUND_05UP",
]

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or .env file.
    Includes general app settings, the lot store selection and the
    per-unit price rounding policy.
    """
    # General App Settings
    APP_NAME: str = "Inventory Cost Engine API"
    APP_VERSION: str = "0.1.0"
    DEBUG_MODE: bool = False

    # API Specific Settings
    API_V1_STR: str = "/api/v1"

    # Logging Settings
    LOG_LEVEL: str = "INFO" # e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Lot Store Settings
    LOT_STORE_KIND: LotStoreKind = LotStoreKind.BINARY_HEAP

    # Price-per-unit Settings
    DECIMAL_PRECISION: int = Field(default=28, ge=1) # Significant digits used for the division
    PRICE_DECIMAL_PLACES: int = Field(default=10, ge=0) # Places the per-unit price is quantized to
    PRICE_ROUNDING: RoundingMode = "ROUND_HALF_EVEN"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent.parent / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=False, # Allows env vars like APP_NAME or app_name
        extra='ignore' # Ignore extra environment variables not defined in the model
    )

settings = Settings()
