# src/unit_batcher/config.py
import os
from typing import FrozenSet, Literal
from pydantic import BaseModel, Field, field_validator

class Config(BaseModel):
    batch_policy: Literal["size", "target_set"] = "size"
    batch_size: int = Field(default=100, ge=1)   # 0 would mean "release before anything arrives"
    batch_target_ids: FrozenSet[str] = frozenset()
    log_level: str = "INFO"

    @field_validator("batch_policy", "log_level", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("batch_target_ids", mode="before")
    @classmethod
    def split_ids(cls, v):
        # BATCH_TARGET_IDS="a,b,c"
        if isinstance(v, str):
            return frozenset(p.strip() for p in v.split(",") if p.strip())
        return v

def load_config() -> Config:
    """Reads the BATCH_* / LOG_LEVEL environment variables; raises pydantic.ValidationError on bad values."""
    return Config(
        batch_policy=os.getenv("BATCH_POLICY", "size").lower(),
        batch_size=os.getenv("BATCH_SIZE", "100"),
        batch_target_ids=os.getenv("BATCH_TARGET_IDS", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
