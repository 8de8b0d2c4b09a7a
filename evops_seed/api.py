from typing import List

import httpx
from pydantic import BaseModel

from .errors import RpcError
from .gen.evops.api.v1 import api_pb2
from .grpcweb import NOT_FOUND, GrpcWebTransport, route


class User(BaseModel):
    id: str
    name: str


class Tag(BaseModel):
    id: str
    name: str
    aliases: List[str] = []


class Event(BaseModel):
    id: str
    author_id: str
    title: str
    description: str
    tag_ids: List[str] = []
    with_attendance: bool = False
    image_ids: List[str] = []


PACKAGE = api_pb2.DESCRIPTOR.package


class _Service:
    name = ""

    def __init__(self, transport: GrpcWebTransport):
        self.transport = transport

    async def _call(self, method: str, request, response_class):
        return await self.transport.unary(route(f"{PACKAGE}.{self.name}", method), request, response_class)

    async def _find(self, request, response_class, field: str):
        response = await self._call("Find", request, response_class)
        if not response.HasField(field):
            raise RpcError(NOT_FOUND, f"{self.name}: no {field} with id {request.id}")
        return getattr(response, field)


class UserService(_Service):
    name = "UserService"

    async def create(self, form: api_pb2.NewUserForm) -> str:
        request = api_pb2.UserServiceCreateRequest(form=form)
        return (await self._call("Create", request, api_pb2.UserServiceCreateResponse)).user_id

    async def find(self, id: str) -> User:
        request = api_pb2.UserServiceFindRequest(id=id)
        user = await self._find(request, api_pb2.UserServiceFindResponse, "user")
        return User(id=user.id, name=user.name)


class TagService(_Service):
    name = "TagService"

    async def create(self, form: api_pb2.NewTagForm) -> str:
        request = api_pb2.TagServiceCreateRequest(form=form)
        return (await self._call("Create", request, api_pb2.TagServiceCreateResponse)).tag_id

    async def find(self, id: str) -> Tag:
        request = api_pb2.TagServiceFindRequest(id=id)
        tag = await self._find(request, api_pb2.TagServiceFindResponse, "tag")
        return Tag(id=tag.id, name=tag.name, aliases=list(tag.aliases))


class EventService(_Service):
    name = "EventService"

    async def create(self, form: api_pb2.NewEventForm) -> str:
        request = api_pb2.EventServiceCreateRequest(form=form)
        return (await self._call("Create", request, api_pb2.EventServiceCreateResponse)).event_id

    async def find(self, id: str) -> Event:
        request = api_pb2.EventServiceFindRequest(id=id)
        event = await self._find(request, api_pb2.EventServiceFindResponse, "event")
        return Event(
            id=event.id,
            author_id=event.author_id,
            title=event.title,
            description=event.description,
            tag_ids=list(event.tag_ids),
            with_attendance=event.with_attendance,
            image_ids=list(event.image_ids),
        )


class Api:
    """RPC clients and the shared http client for one evops deployment."""

    def __init__(self, url: str, client: httpx.AsyncClient):
        self.url = url
        self.client = client
        transport = GrpcWebTransport(client, url)
        self.user_service = UserService(transport)
        self.tag_service = TagService(transport)
        self.event_service = EventService(transport)

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()


def init_api(api_url: str, timeout: float = 10.0, http_transport=None) -> Api:
    client = httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=http_transport)
    return Api(api_url, client)
