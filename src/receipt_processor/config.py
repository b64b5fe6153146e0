from dotenv import load_dotenv
from pydantic import BaseModel
from pydantic_settings import BaseSettings
from typing import Dict, Optional, Tuple

load_dotenv()


class SettlementParty(BaseModel):
    """One side of the two-party settlement."""
    name: str  # purchaser name as written in receipt headers
    identifier: str  # consumer character other people use for this person


class Settings(BaseSettings):
    app_name: str = "Receipt Processor"
    app_version: str = "1.0.0"
    debug: bool = False

    # Receipt file format
    receipt_extension: str = ".check"
    header_marker: str = "pirka"
    comment_prefix: str = "#"
    currency: str = "GBP"

    # Consumer identifier resolution
    shared_identifier: str = "a"
    name_overrides: Dict[str, str] = {
        "a": "all",  # shared by everyone
        "p": "paulis",
    }

    # Settlement between two people; the first party owes when its debt is strictly larger
    settlement_parties: Tuple[SettlementParty, SettlementParty] = (
        SettlementParty(name="raitis", identifier="r"),
        SettlementParty(name="oskars", identifier="o"),
    )

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    class Config:
        env_prefix = "RECEIPTS_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
