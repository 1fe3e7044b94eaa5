"""Server-side builder for the SaleCycle inline page tag."""
from salecycle.core.config import SaleCycleConfig, Settings, VariableNames
from salecycle.core.errors import ConfigurationError, InvalidArgument, SaleCycleError
from salecycle.schemas.enums import CartStatus, CookieBehavior, RenderState
from salecycle.services.salecycle import SaleCycle
from salecycle.services.state import InMemoryStateStorage, RequestStateStorage, StateStorage

__all__ = [
    "CartStatus",
    "ConfigurationError",
    "CookieBehavior",
    "InMemoryStateStorage",
    "InvalidArgument",
    "RenderState",
    "RequestStateStorage",
    "SaleCycle",
    "SaleCycleConfig",
    "SaleCycleError",
    "Settings",
    "StateStorage",
    "VariableNames",
]
