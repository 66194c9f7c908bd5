from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from printing.errors import InvalidOptionError


class ContentType(Enum):
    RAW_BASE64 = "raw_base64"
    PDF_BASE64 = "pdf_base64"
    RAW_URI = "raw_uri"
    PDF_URI = "pdf_uri"

    @staticmethod
    def for_base64(raw: bool) -> "ContentType":
        return ContentType.RAW_BASE64 if raw else ContentType.PDF_BASE64

    @staticmethod
    def for_uri(raw: bool) -> "ContentType":
        return ContentType.RAW_URI if raw else ContentType.PDF_URI


class AuthType(Enum):
    BASIC = "BasicAuth"
    DIGEST = "DigestAuth"


@dataclass(frozen=True)
class Authentication:
    type: AuthType
    user: str
    password: str

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "credentials": {"user": self.user, "pass": self.password},
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Authentication":
        credentials = data.get("credentials") or {}
        return Authentication(
            type=AuthType(data.get("type", AuthType.BASIC.value)),
            user=credentials.get("user", ""),
            password=credentials.get("pass", ""),
        )


@dataclass
class JobOptions:
    """
    Job level print options.

    The keys checked against printer capabilities get their own fields (None means unset).
    Anything else is kept in `extra` and sent to the backend untouched.
    """

    KNOWN_KEYS = ("copies", "paper", "media", "dpi", "color")

    copies: Optional[int] = None
    paper: Optional[str] = None
    media: Optional[str] = None
    dpi: Optional[str | int] = None
    color: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def merge(self, options: "Mapping[str, Any] | JobOptions") -> None:
        if isinstance(options, JobOptions):
            options = options.to_dict()

        for key, value in options.items():
            if key == "copies" and value is not None:
                value = self._to_int(key, value)
            if key in self.KNOWN_KEYS:
                setattr(self, key, value)
            else:
                self.extra[key] = value

    @staticmethod
    def _to_int(key: str, value: Any) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise InvalidOptionError(f"Option '{key}' must be a whole number, got {value!r}") from None

    def is_set(self, key: str) -> bool:
        if key in self.KNOWN_KEYS:
            return getattr(self, key) is not None
        return key in self.extra

    def to_dict(self) -> dict:
        data = {key: getattr(self, key) for key in self.KNOWN_KEYS if getattr(self, key) is not None}
        data.update(self.extra)
        return data

    @staticmethod
    def from_dict(data: Optional[Mapping[str, Any]]) -> "JobOptions":
        options = JobOptions()
        options.merge(data or {})
        return options


@dataclass
class JobAttributes:
    content_type: Optional[ContentType] = None
    content: Optional[str] = None
    source: Optional[str] = None
    printer_id: Optional[int | str] = None
    qty: int = 1
    options: JobOptions = field(default_factory=JobOptions)
    authentication: Optional[Authentication] = None
    expire_after: Optional[int] = None

    def clone(self) -> "JobAttributes":
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """Wire shape expected by the backend's job creation endpoint."""
        data: Dict[str, Any] = {
            "contentType": self.content_type.value if self.content_type else None,
            "content": self.content,
            "source": self.source,
            "printerId": self.printer_id,
            "qty": self.qty,
            "options": self.options.to_dict(),
        }
        if self.authentication is not None:
            data["authentication"] = self.authentication.to_dict()
        if self.expire_after is not None:
            data["expireAfter"] = self.expire_after
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "JobAttributes":
        content_type = data.get("contentType")
        authentication = data.get("authentication")

        return JobAttributes(
            content_type=ContentType(content_type) if content_type else None,
            content=data.get("content"),
            source=data.get("source"),
            printer_id=data.get("printerId"),
            qty=data.get("qty", 1),
            options=JobOptions.from_dict(data.get("options")),
            authentication=Authentication.from_dict(authentication) if authentication else None,
            expire_after=data.get("expireAfter"),
        )
