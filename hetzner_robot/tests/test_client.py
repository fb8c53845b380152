"""End-to-end tests against the in-memory pseudo API."""

import dataclasses
import json

import pytest

from hetzner_robot.client import RobotClient
from hetzner_robot.config import RobotConfig
from hetzner_robot.exceptions import MissingArgumentError, NotFoundError, UnauthorizedError
from hetzner_robot.models.options import TrafficWarningConfig
from hetzner_robot.tests.utils.pseudo_api import (
    REFERENCE_DATABASE,
    PseudoRobotAPI,
    storage_box_summary,
)


def indented(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


# Servers


@pytest.mark.asyncio
async def test_query_servers_returns_indented_list(client: RobotClient) -> None:
    result = await client.query_servers()

    assert result == indented(REFERENCE_DATABASE["servers"])


@pytest.mark.asyncio
async def test_query_server_returns_single_server(client: RobotClient) -> None:
    result = await client.query_server("123.123.123.123")

    assert json.loads(result) == REFERENCE_DATABASE["servers"][0]


@pytest.mark.asyncio
async def test_query_unknown_server_raises_remote_error(client: RobotClient) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await client.query_server("1.2.3.4")

    assert str(exc_info.value) == "SERVER_NOT_FOUND: Server with IP 1.2.3.4 not found"


@pytest.mark.asyncio
async def test_set_server_name_round_trip(client: RobotClient) -> None:
    await client.set_server_name("123.123.123.123", "updatedTestName")

    result = json.loads(await client.query_server("123.123.123.123"))

    assert result["server"]["server_name"] == "updatedTestName"


@pytest.mark.asyncio
async def test_missing_argument_never_reaches_api(
    client: RobotClient, pseudo_api: PseudoRobotAPI
) -> None:
    with pytest.raises(MissingArgumentError):
        client.query_server(None)  # type: ignore[arg-type]
    with pytest.raises(MissingArgumentError):
        client.add_ssh_key("name", None)  # type: ignore[arg-type]

    assert pseudo_api.requests == []


@pytest.mark.asyncio
async def test_wrong_credentials_raise_unauthorized(
    config: RobotConfig, pseudo_api: PseudoRobotAPI
) -> None:
    config = dataclasses.replace(config, password="wrong")

    async with RobotClient(config, transport=pseudo_api) as robot:
        with pytest.raises(UnauthorizedError, match="UNAUTHORIZED: Unauthorized"):
            await robot.query_servers()


@pytest.mark.asyncio
async def test_unknown_route_raises_not_found(client: RobotClient) -> None:
    with pytest.raises(NotFoundError, match="NOT_FOUND: Not Found"):
        await client.query_boot_config("123.123.123.123")


# IPs


@pytest.mark.asyncio
async def test_query_ips_filters_by_server(client: RobotClient) -> None:
    result = json.loads(await client.query_ips("124.124.124.124"))

    assert [entry["ip"]["server_ip"] for entry in result] == ["124.124.124.124"]


@pytest.mark.asyncio
async def test_change_traffic_warnings_round_trip(client: RobotClient) -> None:
    config = TrafficWarningConfig(
        enable_warnings=True,
        hourly_threshold=300,
        daily_threshold=3000,
        monthly_threshold=30,
    )

    await client.change_traffic_warnings("123.123.123.123", config)
    result = json.loads(await client.query_ip("123.123.123.123"))

    assert result["ip"]["traffic_warnings"] is True
    assert result["ip"]["traffic_hourly"] == 300
    assert result["ip"]["traffic_monthly"] == 30


# Storage boxes


@pytest.mark.asyncio
async def test_query_storage_boxes_lists_all(client: RobotClient) -> None:
    result = json.loads(await client.query_storage_boxes())

    assert len(result) == len(REFERENCE_DATABASE["storage_boxes"])


@pytest.mark.asyncio
async def test_query_storage_box_returns_summary(client: RobotClient) -> None:
    result = json.loads(await client.query_storage_box(123456))

    assert result == [storage_box_summary(REFERENCE_DATABASE["storage_boxes"][0])]


@pytest.mark.asyncio
async def test_update_storage_box_name_round_trip(client: RobotClient) -> None:
    await client.update_storage_box_name(123456, "updatedTestName")

    result = json.loads(await client.query_storage_box(123456))

    assert result[0]["storagebox"]["name"] == "updatedTestName"


@pytest.mark.asyncio
async def test_query_storage_box_snapshots(client: RobotClient) -> None:
    result = await client.query_storage_box_snapshots(123456)

    assert result == indented(REFERENCE_DATABASE["storage_boxes"][0]["storagebox"]["snapshots"])


@pytest.mark.asyncio
async def test_unknown_storage_box_raises(client: RobotClient) -> None:
    with pytest.raises(NotFoundError, match="STORAGEBOX_NOT_FOUND"):
        await client.query_storage_box(999)


# SSH keys


@pytest.mark.asyncio
async def test_query_ssh_keys(client: RobotClient) -> None:
    result = await client.query_ssh_keys()

    assert result == indented(REFERENCE_DATABASE["ssh_keys"])


@pytest.mark.asyncio
async def test_query_ssh_key_by_fingerprint(client: RobotClient) -> None:
    key = REFERENCE_DATABASE["ssh_keys"][0]

    result = json.loads(await client.query_ssh_key(key["key"]["fingerprint"]))

    assert result == [key]


@pytest.mark.asyncio
async def test_update_ssh_key_name(client: RobotClient) -> None:
    fingerprint = REFERENCE_DATABASE["ssh_keys"][0]["key"]["fingerprint"]

    result = json.loads(await client.update_ssh_key_name(fingerprint, "newChangedName"))

    assert result[0]["key"]["name"] == "newChangedName"


@pytest.mark.asyncio
async def test_remove_ssh_key_succeeds_with_empty_body(client: RobotClient) -> None:
    fingerprint = REFERENCE_DATABASE["ssh_keys"][0]["key"]["fingerprint"]

    assert await client.remove_ssh_key(fingerprint) == ""

    with pytest.raises(NotFoundError, match="NOT_FOUND: Key not found"):
        await client.query_ssh_key(fingerprint)


# Handles


@pytest.mark.asyncio
async def test_server_handle_matches_direct_call(client: RobotClient) -> None:
    server = client.register_server("123.123.123.123")

    assert await server.query_server() == await client.query_server("123.123.123.123")


@pytest.mark.asyncio
async def test_server_handle_forwards_extra_arguments(client: RobotClient) -> None:
    server = client.register_server("124.124.124.124")

    await server.set_server_name("via-handle")

    result = json.loads(await client.query_server("124.124.124.124"))
    assert result["server"]["server_name"] == "via-handle"


@pytest.mark.asyncio
async def test_storage_box_handle_round_trip(client: RobotClient) -> None:
    box = client.register_storage_box(123457)

    await box.update_storage_box_name("renamed-via-handle")

    result = json.loads(await box.query_storage_box())
    assert result[0]["storagebox"]["name"] == "renamed-via-handle"


@pytest.mark.asyncio
async def test_handle_failures_use_same_channel(client: RobotClient) -> None:
    server = client.register_server("9.9.9.9")

    with pytest.raises(NotFoundError, match="SERVER_NOT_FOUND"):
        await server.query_server()
