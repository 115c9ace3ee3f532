"""Tests for the companion service client."""

import pytest

from ir_learner.api.client import LearnRequestError, ThingsClient, ThingsFetchError
from ir_learner.api.models import LearnRequest, Thing


@pytest.mark.asyncio
async def test_fetch_things_returns_things_in_order(service):
    service.set_things({"dev:1": "Living Room AC", "dev:2": None})

    async with ThingsClient(service.url()) as client:
        things = await client.fetch_things()

    assert things == [Thing("dev:1", "Living Room AC"), Thing("dev:2", None)]


@pytest.mark.asyncio
async def test_trailing_slash_in_base_url_is_ignored(service):
    service.set_things({"abc": "Remote"})

    async with ThingsClient(service.url() + "/") as client:
        assert client.things_url == service.url("/broadlink/things")
        things = await client.fetch_things()

    assert [t.uid for t in things] == ["abc"]


@pytest.mark.asyncio
async def test_fetch_things_wraps_invalid_json(service):
    service.things_body = "<html>not json</html>"

    async with ThingsClient(service.url()) as client:
        with pytest.raises(ThingsFetchError, match="invalid JSON"):
            await client.fetch_things()


@pytest.mark.asyncio
async def test_fetch_things_wraps_unexpected_shape(service):
    service.set_things(["abc"])

    async with ThingsClient(service.url()) as client:
        with pytest.raises(ThingsFetchError, match="unexpected response"):
            await client.fetch_things()


@pytest.mark.asyncio
async def test_fetch_things_wraps_error_status(service):
    service.things_status = 500

    async with ThingsClient(service.url()) as client:
        with pytest.raises(ThingsFetchError, match="500"):
            await client.fetch_things()


@pytest.mark.asyncio
async def test_fetch_things_wraps_connection_errors(unused_tcp_port):
    async with ThingsClient(f"http://127.0.0.1:{unused_tcp_port}/broadlink") as client:
        with pytest.raises(ThingsFetchError):
            await client.fetch_things()


@pytest.mark.asyncio
async def test_learn_sends_query_parameters(service):
    async with ThingsClient(service.url()) as client:
        await client.learn(LearnRequest(thing="abc", command="cmd1"))

    assert service.learn_queries == [{"thing": "abc", "command": "cmd1", "type": "ir"}]
    assert service.learn_raw_queries == ["thing=abc&command=cmd1&type=ir"]


@pytest.mark.asyncio
async def test_learn_percent_encodes_reserved_characters(service):
    async with ThingsClient(service.url()) as client:
        await client.learn(LearnRequest(thing="broadlink:rm4:1", command="on&off=1 2"))

    assert service.learn_queries == [
        {"thing": "broadlink:rm4:1", "command": "on&off=1 2", "type": "ir"}
    ]


@pytest.mark.asyncio
async def test_learn_uses_configured_path(service):
    async with ThingsClient(service.url(), learn_path="/learnIr/") as client:
        assert client.learn_url == service.url("/broadlink/learnIr")


@pytest.mark.asyncio
async def test_learn_raises_on_rejection(service):
    service.learn_status = 400

    async with ThingsClient(service.url()) as client:
        with pytest.raises(LearnRequestError, match="400"):
            await client.learn(LearnRequest(thing="missing", command="x"))
