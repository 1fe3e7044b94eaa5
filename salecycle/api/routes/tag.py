from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from salecycle.api.deps import get_salecycle
from salecycle.core.errors import ConfigurationError, InvalidArgument
from salecycle.schemas.tag import PageTagRequest, PageTagOut
from salecycle.services.salecycle import SaleCycle

router = APIRouter(prefix="/salecycle")

def _render(body: PageTagRequest, sc: SaleCycle) -> str:
    try:
        sc.apply(body)
        return sc.render()
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

@router.post("/tag", response_model=PageTagOut)
def render_tag(body: PageTagRequest, sc: SaleCycle = Depends(get_salecycle)):
    html = _render(body, sc)
    return PageTagOut(html=html, variables=dict(sc.page_variables))

@router.post("/tag.html", response_class=HTMLResponse)
def render_tag_html(body: PageTagRequest, sc: SaleCycle = Depends(get_salecycle)):
    """Script tag only, ready to drop at the bottom of <body>."""
    return HTMLResponse(_render(body, sc))
