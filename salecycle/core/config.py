from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from salecycle.schemas.enums import CookieBehavior

SALECYCLE_SCRIPT_URL = "https://app.salecycle.com/salecycle.js"

class VariableNames(BaseModel):
    """Wire keys of every page variable. Override before the first render."""
    model_config = ConfigDict(frozen=True)

    customer_name: str = "n"
    customer_email: str = "e"
    customer_phone_number: str = "t"
    client_id: str = "c"
    session_id: str = "b"
    cart_status: str = "s"
    currency: str = "y"
    cookie_behavior: str = "uc"
    total_value: str = "v2"
    cart_item_ids: str = "p"
    cart_item_names: str = "i"
    cart_item_values: str = "v1"
    cart_item_quantities: str = "q1"
    cart_item_image_urls: str = "u"
    custom_field_one: str = "cu1"
    custom_field_two: str = "cu2"
    page_name: str = "w"

    @field_validator("*")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("variable name must not be blank")
        return v

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, env_nested_delimiter="__", extra="ignore"
    )

    # Issued by SaleCycle, mandatory before the first render
    SALECYCLE_CLIENT_ID: str | None = None

    # ISO 4217, e.g. GBP
    SALECYCLE_CURRENCY: str | None = "GBP"
    SALECYCLE_COOKIE_BEHAVIOR: CookieBehavior = CookieBehavior.COOKIES_REQUIRE_SESSION_ID

    # Cookie the default session resolver reads the visitor's session id from
    SALECYCLE_SESSION_COOKIE: str = "session_id"
    SALECYCLE_SCRIPT_URL: str = SALECYCLE_SCRIPT_URL

    # e.g. SALECYCLE_VARIABLES__CART_STATUS=st
    SALECYCLE_VARIABLES: VariableNames = VariableNames()

    LOG_LEVEL: str = "INFO"

class SaleCycleConfig(BaseModel):
    """Read-only configuration shared by every request of the process.

    Built once at startup (see ``from_settings``) and handed to each
    ``SaleCycle`` instance. To change a value build a new object with
    ``model_copy(update=...)``; instances are frozen so in-flight requests
    never observe a half-applied change.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    client_id: str | None = None
    currency: str | None = "GBP"
    cookie_behavior: CookieBehavior = CookieBehavior.COOKIES_REQUIRE_SESSION_ID
    session_resolver: Callable[[], str | None] | None = None
    variables: VariableNames = VariableNames()
    script_url: str = SALECYCLE_SCRIPT_URL

    @classmethod
    def from_settings(
        cls,
        s: Settings,
        session_resolver: Callable[[], str | None] | None = None,
    ) -> "SaleCycleConfig":
        return cls(
            client_id=s.SALECYCLE_CLIENT_ID,
            currency=s.SALECYCLE_CURRENCY,
            cookie_behavior=s.SALECYCLE_COOKIE_BEHAVIOR,
            session_resolver=session_resolver,
            variables=s.SALECYCLE_VARIABLES,
            script_url=s.SALECYCLE_SCRIPT_URL,
        )

settings = Settings()
