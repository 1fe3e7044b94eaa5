from decimal import Decimal
from pydantic import BaseModel, Field
from salecycle.schemas.enums import CartStatus

class CustomerIn(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    title: str | None = None
    email: str | None = None
    phone_number: str | None = None

class CartItemIn(BaseModel):
    id: str | None = None
    name: str | None = None
    value: Decimal = Field(ge=0)
    quantity: int = Field(ge=0)
    image_url: str | None = None  # None: no segment in the image url accumulator

class PageTagRequest(BaseModel):
    cart_status: CartStatus
    total_value: Decimal | None = None
    items: list[CartItemIn] = []
    customer: CustomerIn | None = None
    custom_field_one: list[str | None] | None = None
    custom_field_two: list[str | None] | None = None
    page_name: str | None = None

class PageTagOut(BaseModel):
    html: str
    variables: dict[str, str]
