import re
from enum import IntEnum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BrowserType(IntEnum):
    # ANY is a filter value only, discovered records always carry a concrete type
    ANY = 0
    CHROMIUM = 1
    FIREFOX = 2
    GOOGLE_CHROME = 3
    EPIPHANY = 4

    @classmethod
    def from_name(cls, name: str) -> "BrowserType":
        """Parse 'google-chrome', 'GOOGLE_CHROME' or 'googlechrome' into a BrowserType."""
        key = name.strip().upper().replace('-', '_')
        if key in cls.__members__:
            return cls[key]
        for member in cls:
            if member.name.replace('_', '') == key.replace('_', ''):
                return member
        raise ValueError(f"Unknown browser type: {name}")

    @property
    def setting_name(self) -> str:
        return self.name.lower().replace('_', '-')


class BrowserCheckEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    exename: str = Field(..., description="Executable name searched in $PATH, or an absolute path used as is.")
    version_pattern: str = Field(..., description="Regular expression searched in the output of `<exe> --version`.")
    browser_type: BrowserType

    @field_validator('exename')
    @classmethod
    def _exename_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("exename must not be empty")
        return value

    @field_validator('version_pattern')
    @classmethod
    def _pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid version pattern {value!r}: {e}") from e
        return value

    @field_validator('browser_type')
    @classmethod
    def _concrete_type(cls, value: BrowserType) -> BrowserType:
        if value == BrowserType.ANY:
            raise ValueError("A browser check needs a concrete browser type, not ANY")
        return value


class BrowserRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    executable: str  # absolute path
    identification: str  # full text matched by the version pattern
    version: str
    type: BrowserType
    snapdir: bool = Field(False, description="Executable runs under snap confinement with restricted write access.")


class WebHeadSettings(BaseModel):
    # Mirrors the "webhead" block of settings.json
    probe_timeout_seconds: Optional[float] = Field(None, description="Bound for each `--version` probe; None waits forever.")
    app_name: str = ""
    browser_checks: List[Dict] = Field(default_factory=list, description="Extra catalog entries appended to the built-in ones.")
    extra_arguments: Dict[str, List] = Field(default_factory=dict, description="Additional command line arguments per browser type name.")
