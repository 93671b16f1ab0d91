"""RequestContext backed by the incoming Starlette request."""

from starlette.datastructures import Headers

from counter_service.application.ports.request_context import RequestContext


class HeaderRequestContext(RequestContext):
    def __init__(self, headers: Headers):
        self._headers = headers

    async def get_header(self, name: str) -> str | None:
        return self._headers.get(name)
