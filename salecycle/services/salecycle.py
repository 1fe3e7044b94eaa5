"""SaleCycle page tag: field setters and the render step.

Usage per request::

    sc = SaleCycle(config, RequestStateStorage(request))
    sc.set_cart_status(CartStatus.CHECKOUT)
    sc.add_cart_item("es123", "Kettle", Decimal("12.00"), 1, None)
    html = sc.render()

Calling ``render`` more than once per request is not a supported contract.
The static values (session id, client id, currency, cookie behavior) are
written with overwrite semantics, so a second call re-emits each key once.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from salecycle.core.config import SaleCycleConfig
from salecycle.core.errors import ConfigurationError, SaleCycleError
from salecycle.schemas.enums import CartStatus, CookieBehavior, RenderState
from salecycle.schemas.tag import PageTagRequest
from salecycle.services.encoding import format_amount, format_quantity, pipeline, PIPE
from salecycle.services.page_variables import PageVariableStore
from salecycle.services.state import StateStorage

logger = logging.getLogger(__name__)

SCRIPT_OPEN = '<script type="text/javascript"> var __sc = new Array();'
SCRIPT_LOADER = (
    'try {{ var __scS = document.createElement("script"); __scS.type = "text/javascript"; '
    '__scS.src = "{url}"; document.getElementsByTagName("head")[0].appendChild(__scS); }} '
    "catch (e) {{ }} </script>"
)

def format_variable(key: str, value: str) -> str:
    return f'__sc["{key}"]="{value}";'

class SaleCycle:
    def __init__(self, config: SaleCycleConfig, storage: StateStorage) -> None:
        self.config = config
        self.store = PageVariableStore(storage)

    @property
    def names(self):
        return self.config.variables

    @property
    def page_variables(self) -> dict[str, str]:
        return self.store.variables

    @property
    def state(self) -> RenderState:
        return self.store.current.state

    def add_page_variable(self, name: str, value: str) -> None:
        self.store.add_variable(name, value)

    # ------------------------------------------------------------------
    # setters

    def set_customer_name(self, first_name: str | None, last_name: str | None = None,
                          title: str | None = None) -> None:
        """Recorded only when a first name is given; parts are joined as-is."""
        if first_name is None:
            return
        parts = [first_name, last_name or "", title or ""]
        self.store.add_variable(self.names.customer_name, PIPE.join(parts))

    def set_customer_email(self, email: str) -> None:
        self.store.add_variable(self.names.customer_email, email)

    def set_customer_phone_number(self, phone_number: str) -> None:
        self.store.add_variable(self.names.customer_phone_number, phone_number)

    def set_page_name(self, page_name: str) -> None:
        self.store.add_variable(self.names.page_name, page_name)

    def set_cart_status(self, cart_status: CartStatus) -> None:
        self.store.add_variable(self.names.cart_status, str(int(cart_status)))

    def set_total_value(self, total_value: Decimal | float | int) -> None:
        """Basket value without delivery, discounts applied."""
        self.store.add_variable(self.names.total_value, format_amount(total_value))

    def set_custom_field_one(self, values: Iterable[str | None]) -> None:
        self.store.add_variable(self.names.custom_field_one, pipeline(values))

    def set_custom_field_two(self, values: Iterable[str | None]) -> None:
        self.store.add_variable(self.names.custom_field_two, pipeline(values))

    def add_cart_item(self, id: str | None, name: str | None, value: Decimal | float | int,
                      quantity: int, image_url: str | None = None) -> None:
        # format first so a bad value leaves every accumulator untouched
        formatted_value = format_amount(value)
        formatted_quantity = format_quantity(quantity)

        self.store.append_variable(self.names.cart_item_ids, id or "")
        self.store.append_variable(self.names.cart_item_names, name or "")
        self.store.append_variable(self.names.cart_item_values, formatted_value)
        self.store.append_variable(self.names.cart_item_quantities, formatted_quantity)
        self.store.append_variable(self.names.cart_item_image_urls, image_url)

    def apply(self, body: PageTagRequest) -> None:
        """Run a whole page payload through the setters."""
        self.set_cart_status(body.cart_status)
        if body.total_value is not None:
            self.set_total_value(body.total_value)
        for item in body.items:
            self.add_cart_item(item.id, item.name, item.value, item.quantity, item.image_url)

        c = body.customer
        if c is not None:
            self.set_customer_name(c.first_name, c.last_name, c.title)
            if c.email is not None:
                self.set_customer_email(c.email)
            if c.phone_number is not None:
                self.set_customer_phone_number(c.phone_number)

        if body.custom_field_one is not None:
            self.set_custom_field_one(body.custom_field_one)
        if body.custom_field_two is not None:
            self.set_custom_field_two(body.custom_field_two)
        if body.page_name is not None:
            self.set_page_name(body.page_name)

    # ------------------------------------------------------------------
    # render

    def render(self) -> str:
        """Build the inline script tag. Raises ConfigurationError, never returns partial output."""
        current = self.store.current
        current.state = RenderState.VALIDATING
        logger.debug("salecycle render: %s", current.state.value)
        try:
            self._add_session_id()
            self._add_static_values()
            self._ensure_mandatory_fields()
        except SaleCycleError as e:
            current.state = RenderState.FAILED
            logger.warning("salecycle tag not rendered: %s", e)
            raise

        current.state = RenderState.RENDERING
        logger.debug("salecycle render: %s", current.state.value)
        lines = [SCRIPT_OPEN]
        lines.extend(format_variable(k, v) for k, v in current.values.items())
        lines.append(SCRIPT_LOADER.format(url=self.config.script_url))
        html = "".join(line + "\n" for line in lines)

        current.state = RenderState.RENDERED
        logger.debug("salecycle render: %s (%d variables)", current.state.value, len(current.values))
        return html

    def _add_session_id(self) -> None:
        resolver = self.config.session_resolver
        if resolver is None:
            return
        session_id = resolver()
        if session_id is not None:
            self.store.add_variable(self.names.session_id, session_id)

    def _add_static_values(self) -> None:
        if self.config.client_id is not None:
            self.store.add_variable(self.names.client_id, self.config.client_id)

        if self.config.currency is not None:
            self.store.add_variable(self.names.currency, self.config.currency)

        if self.config.cookie_behavior != CookieBehavior.COOKIES_REQUIRE_SESSION_ID:
            self.store.add_variable(self.names.cookie_behavior, str(int(self.config.cookie_behavior)))

    def _ensure_mandatory_fields(self) -> None:
        if self.config.client_id is None:
            raise ConfigurationError("ClientId required")

        if not self.store.contains(self.names.cart_status):
            raise ConfigurationError("cart status required")

        if (self.config.cookie_behavior == CookieBehavior.COOKIES_REQUIRE_SESSION_ID
                and not self.store.contains(self.names.session_id)):
            raise ConfigurationError("session id required")
