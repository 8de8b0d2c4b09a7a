import asyncio
import sys
from typing import Dict, List

from .api import Api, Event, Tag, User, init_api
from .catalog import Catalog, EventSeed, load_catalog
from .config import load_config
from .gen.evops.api.v1 import api_pb2
from .images import push_image


async def create_user(api: Api, name: str) -> User:
    user_id = await api.user_service.create(api_pb2.NewUserForm(name=name))
    return await api.user_service.find(user_id)


async def create_tag(api: Api, name: str, aliases: List[str]) -> Tag:
    tag_id = await api.tag_service.create(api_pb2.NewTagForm(name=name, aliases=aliases))
    return await api.tag_service.find(tag_id)


async def create_users(api: Api, catalog: Catalog) -> Dict[str, User]:
    users = {}
    for handle, name in catalog.users.items():
        users[handle] = await create_user(api, name)
        print("created user", users[handle].id, name)
    return users


async def create_tags(api: Api, catalog: Catalog) -> Dict[str, Tag]:
    tags = {}
    for name, aliases in catalog.tags.items():
        tags[name] = await create_tag(api, name, aliases)
        print("created tag", tags[name].id, name)
    return tags


async def create_event(api: Api, form, image_urls: List[str], upload_delay: float = 0.1) -> Event:
    event_id = await api.event_service.create(form)
    image_ids = []
    for image_url in image_urls:
        image_ids.append(await push_image(api, event_id, image_url))
        # pause between uploads
        await asyncio.sleep(upload_delay)
    return Event(
        id=event_id,
        author_id=form.author_id,
        title=form.title,
        description=form.description,
        tag_ids=list(form.tag_ids),
        with_attendance=form.with_attendance,
        image_ids=image_ids,
    )


def event_form(seed: EventSeed, users: Dict[str, User], tags: Dict[str, Tag]):
    return api_pb2.NewEventForm(
        author_id=users[seed.author].id,
        title=seed.title,
        description=seed.description,
        tag_ids=[tags[name].id for name in seed.tags],
        with_attendance=seed.with_attendance,
    )


async def create_events(api: Api, catalog: Catalog, upload_delay: float = 0.1) -> List[Event]:
    users = await create_users(api, catalog)
    tags = await create_tags(api, catalog)

    events = []
    for i, seed in enumerate(catalog.events):
        try:
            event = await create_event(api, event_form(seed, users, tags), seed.images, upload_delay)
        except Exception as e:
            sys.stderr.write(f"Error on event #{i} {seed.title[:60]!r}: {e}\n")
            raise
        print("created event", event.id, seed.title[:60], f"images={len(event.image_ids)}")
        events.append(event)
    return events


async def main():
    config = load_config()
    catalog = load_catalog(config.seed_data)
    async with init_api(config.api_url, timeout=config.request_timeout) as api:
        events = await create_events(api, catalog, config.upload_delay)
    images = sum(len(e.image_ids) for e in events)
    print(f"Done. Users={len(catalog.users)} Tags={len(catalog.tags)} Events={len(events)} Images={images}")


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
