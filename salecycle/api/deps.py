from fastapi import Depends, Request
from salecycle.core.config import SaleCycleConfig
from salecycle.services.salecycle import SaleCycle
from salecycle.services.state import RequestStateStorage

def get_config(request: Request) -> SaleCycleConfig:
    return request.app.state.salecycle_config

def get_salecycle(request: Request, config: SaleCycleConfig = Depends(get_config)) -> SaleCycle:
    return SaleCycle(config, RequestStateStorage(request))
