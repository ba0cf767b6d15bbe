from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from hookrelay.api.deps import get_relay_service
from hookrelay.services.relay import RelayService

router = APIRouter()


@router.post("/webhooks/bitbucket", response_class=PlainTextResponse)
async def bitbucket_webhook(
    request: Request,
    relay: RelayService = Depends(get_relay_service),
):
    # The signature covers the exact bytes Bitbucket sent, so never re-encode
    body = await request.body()
    headers = dict(request.headers)

    result = await relay.handle(headers, body)
    return PlainTextResponse(result.message, status_code=result.status_code)
