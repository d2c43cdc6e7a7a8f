from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from hello_web.api import ANY_METHOD

router = APIRouter()


@router.api_route("/healthz", methods=ANY_METHOD, response_class=PlainTextResponse)
async def healthz():
    """
    Liveness endpoint:
    Always 200, no hostname lookup, no JSON encoding.
    """
    return PlainTextResponse("ok\n")
