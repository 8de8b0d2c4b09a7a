import httpx
import pytest
import pytest_asyncio

from evops_seed import grpcweb
from evops_seed.api import init_api
from evops_seed.gen.evops.api.v1 import api_pb2

API_URL = "http://evops.test/api/"
IMAGE_HOST = "images.test"
JPEG = b"\xff\xd8\xff\xe0fake-jpeg"


def grpc_ok(message) -> httpx.Response:
    body = grpcweb.encode_frame(message.SerializeToString())
    body += grpcweb.encode_frame(b"grpc-status: 0\r\ngrpc-message: \r\n", grpcweb.TRAILER_FLAG)
    return httpx.Response(200, content=body, headers={"content-type": grpcweb.CONTENT_TYPE})


def grpc_error(code: int, message: str) -> httpx.Response:
    return httpx.Response(
        200,
        headers={"content-type": grpcweb.CONTENT_TYPE, "grpc-status": str(code), "grpc-message": message},
    )


class FakeEvops:
    """In-memory evops API answering gRPC-web calls and image uploads."""

    def __init__(self):
        self.users = {}
        self.tags = {}
        self.events = {}
        self.uploads = []
        self.routes = []
        self.fetched = []

    def _next_id(self, prefix, store):
        return f"{prefix}-{len(store) + 1}"

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == IMAGE_HOST:
            self.fetched.append(str(request.url))
            if request.url.path.endswith("/missing.jpg"):
                return httpx.Response(404)
            return httpx.Response(200, content=JPEG, headers={"content-type": "image/jpeg"})

        assert request.url.path.startswith("/api/")
        route = request.url.path[len("/api/"):]
        if route.startswith("v1/events/") and route.endswith("/images"):
            return self.upload(request, route.split("/")[2])

        self.routes.append(route)
        assert request.headers["content-type"] == grpcweb.CONTENT_TYPE
        assert request.headers["x-grpc-web"] == "1"
        service, method = route.split("/")
        service = service.rsplit(".", 1)[1]
        request_class = getattr(api_pb2, f"{service}{method}Request")
        response_class = getattr(api_pb2, f"{service}{method}Response")
        [(flag, payload)] = grpcweb.decode_frames(request.content)
        assert flag == grpcweb.DATA_FLAG
        return getattr(self, f"{service}_{method}")(request_class.FromString(payload), response_class)

    def upload(self, request, event_id):
        if event_id not in self.events:
            return httpx.Response(404, json={"error": "event not found"})
        assert request.headers["content-type"].startswith("multipart/form-data")
        image_id = f"image-{len(self.uploads) + 1}"
        self.uploads.append((event_id, request.content))
        self.events[event_id].image_ids.append(image_id)
        return httpx.Response(200, json={"image_id": image_id})

    def UserService_Create(self, req, response_class):
        user_id = self._next_id("user", self.users)
        self.users[user_id] = api_pb2.User(id=user_id, name=req.form.name)
        return grpc_ok(response_class(user_id=user_id))

    def UserService_Find(self, req, response_class):
        if req.id not in self.users:
            return grpc_error(grpcweb.NOT_FOUND, "user not found")
        return grpc_ok(response_class(user=self.users[req.id]))

    def TagService_Create(self, req, response_class):
        if any(t.name == req.form.name for t in self.tags.values()):
            return grpc_error(6, "tag already exists")
        tag_id = self._next_id("tag", self.tags)
        self.tags[tag_id] = api_pb2.Tag(id=tag_id, name=req.form.name, aliases=req.form.aliases)
        return grpc_ok(response_class(tag_id=tag_id))

    def TagService_Find(self, req, response_class):
        if req.id not in self.tags:
            return grpc_error(grpcweb.NOT_FOUND, "tag not found")
        return grpc_ok(response_class(tag=self.tags[req.id]))

    def EventService_Create(self, req, response_class):
        if req.form.author_id not in self.users:
            return grpc_error(3, "unknown author")
        event_id = self._next_id("event", self.events)
        form = req.form
        self.events[event_id] = api_pb2.Event(
            id=event_id,
            author_id=form.author_id,
            title=form.title,
            description=form.description,
            tag_ids=form.tag_ids,
            with_attendance=form.with_attendance,
        )
        return grpc_ok(response_class(event_id=event_id))

    def EventService_Find(self, req, response_class):
        if req.id not in self.events:
            return grpc_error(grpcweb.NOT_FOUND, "event not found")
        return grpc_ok(response_class(event=self.events[req.id]))


@pytest.fixture
def fake():
    return FakeEvops()


@pytest_asyncio.fixture
async def api(fake):
    api = init_api(API_URL, http_transport=httpx.MockTransport(fake.handler))
    yield api
    await api.aclose()
