import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from hello_web.api import ANY_METHOD
from hello_web.models import BuildInfo, GreetingResponse

router = APIRouter()


class IndentedJSONResponse(JSONResponse):
    """JSON body with 2-space indentation and a trailing newline."""

    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        return (json.dumps(content, indent=2, ensure_ascii=False) + "\n").encode("utf-8")


def get_build_info(request: Request) -> BuildInfo:
    return request.app.state.build_info


@router.api_route("/", methods=ANY_METHOD, response_class=IndentedJSONResponse)
async def greeting(build: BuildInfo = Depends(get_build_info)):
    """
    Greeting with the version/SHA currently deployed.
    """
    resp = GreetingResponse.build(build)
    return IndentedJSONResponse(resp.model_dump())


# Catch-all keeps "/" semantics for any path no other router claims.
# Must be included after every other router.
@router.api_route("/{path:path}", methods=ANY_METHOD, response_class=IndentedJSONResponse, include_in_schema=False)
async def greeting_fallback(path: str, build: BuildInfo = Depends(get_build_info)):
    return await greeting(build)
