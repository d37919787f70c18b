# pastebininit/utils/models.py

from datetime import datetime
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class Privacy(str, Enum):
    PUBLIC = "0"
    UNLISTED = "1"
    PRIVATE = "2"

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Expiration(str, Enum):
    NEVER = "N"
    TEN_MINUTES = "10M"
    ONE_HOUR = "1H"
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    TWO_WEEKS = "2W"
    ONE_MONTH = "1M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"

    @property
    def label(self) -> str:
        return EXPIRATION_LABELS[self]


EXPIRATION_LABELS = {
    Expiration.NEVER: "Never",
    Expiration.TEN_MINUTES: "10 Minutes",
    Expiration.ONE_HOUR: "1 Hour",
    Expiration.ONE_DAY: "1 Day",
    Expiration.ONE_WEEK: "1 Week",
    Expiration.TWO_WEEKS: "2 Weeks",
    Expiration.ONE_MONTH: "1 Month",
    Expiration.SIX_MONTHS: "6 Months",
    Expiration.ONE_YEAR: "1 Year",
}


class Credentials(BaseModel):
    """Developer key plus the session key obtained by logging in, if any."""

    model_config = ConfigDict(frozen=True)

    api_dev_key: str
    user_key: Optional[str] = None

    @field_validator("api_dev_key")
    @classmethod
    def strip_key(cls, value: str) -> str:
        return value.strip()

    @property
    def authenticated(self) -> bool:
        return bool(self.user_key)


class UploadRequest(BaseModel):
    """Everything needed to create one paste."""

    model_config = ConfigDict(frozen=True)

    content: str
    title: Optional[str] = None
    syntax_format: str = "text"
    privacy: Privacy = Privacy.PUBLIC
    expiration: Expiration = Expiration.NEVER

    @property
    def size_bytes(self) -> int:
        return len(self.content.encode("utf-8"))


class AuthResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    user_key: Optional[str] = None
    error: Optional[str] = None
    duration_seconds: float
    timestamp: datetime


class UploadSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    paste_url: str
    paste_key: str
    raw_url: str
    status_code: int
    duration_seconds: float
    timestamp: datetime
    paste_name: str
    paste_format: str
    paste_privacy: str
    paste_expiration: str
    size_bytes: int
    authenticated: bool


class UploadFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    error: str
    error_type: str
    status_code: Optional[int] = None
    duration_seconds: float
    timestamp: datetime


UploadResult = Union[UploadSuccess, UploadFailure]
