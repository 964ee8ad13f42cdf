# /lugyi_admin/routers/views_router.py

"""
Server-rendered page shells for the admin frontend. Each route returns a
small HTML document that boots the single-page app; the page itself fetches
its data from the JSON API.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(default_response_class=HTMLResponse)

# URL path -> template name, for pages that take no parameters.
PAGES = {
    "/": "welcome.html",
    "/dashboard": "welcome.html",
    "/privacy": "privacy.html",
    "/claim-reward": "claim-reward.html",
    "/referral-reward": "referral-reward.html",
    "/contents": "contents.html",
    "/contents/new": "new.html",
    "/devices": "devices.html",
    "/livesports": "live-sport.html",
    "/sport": "sports.html",
    "/suggestions": "suggestion.html",
    "/announces": "announces.html",
}


def _page_endpoint(template_name: str):
    def render_page(request: Request):
        return templates.TemplateResponse(request, template_name)
    return render_page


for _path, _template in PAGES.items():
    router.add_api_route(
        _path,
        _page_endpoint(_template),
        methods=["GET"],
        include_in_schema=False,
    )


@router.get("/contents/edit/{content_id}", include_in_schema=False)
def edit_content(request: Request, content_id: str):
    return templates.TemplateResponse(request, "content-edit.html", {"id": content_id})
