import enum

class CookieBehavior(enum.IntEnum):
    # SaleCycle stores cookies and expects the host to supply a session id
    COOKIES_REQUIRE_SESSION_ID = 0
    # SaleCycle manages its own session, no session id needed
    SELF_MANAGED_SESSION = 1
    # no cookies are stored on the visitor's machine
    NO_COOKIES = 2

class CartStatus(enum.IntEnum):
    NO_CART = 0
    CART = 1
    CHECKOUT = 2
    ORDER_COMPLETE = 3

class RenderState(str, enum.Enum):
    NOT_RENDERED = "NOT_RENDERED"
    VALIDATING = "VALIDATING"
    RENDERING = "RENDERING"
    RENDERED = "RENDERED"
    FAILED = "FAILED"
