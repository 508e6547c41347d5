"""Unit tests for participant attendance confirmation."""

import asyncio

import pytest

from planner.deep_link import DeepLink
from planner.errors import ErrorCode, InvariantViolation, RemoteError
from planner.models import FailureKind, ParticipantConfirmation
from planner.services.invite_confirmation import InviteConfirmationFlow


@pytest.fixture
def flow(participant_client, binding):
    return InviteConfirmationFlow("trip-1", participant_client, binding)


@pytest.mark.asyncio
async def test_confirm_success_binds_trip(flow, participant_client, binding):
    result = await flow.confirm("part-1", "  Ana  ", " ana@example.com ")

    assert result.ok
    participant_client.confirm.assert_awaited_once_with(
        ParticipantConfirmation(participant_id="part-1", name="Ana", email="ana@example.com")
    )
    assert binding.get() == "trip-1"


@pytest.mark.asyncio
async def test_confirm_twice_succeeds_twice(flow, participant_client, binding):
    first = await flow.confirm("part-1", "Ana", "ana@example.com")
    second = await flow.confirm("part-1", "Ana", "ana@example.com")

    assert first.ok and second.ok
    assert participant_client.confirm.await_count == 2
    assert binding.get() == "trip-1"


@pytest.mark.asyncio
async def test_empty_name_rejected_without_remote_call(flow, participant_client, binding):
    binding.save("trip-previous")

    result = await flow.confirm("part-1", "   ", "ana@example.com")

    assert not result.ok
    assert result.kind == FailureKind.VALIDATION
    assert result.code == ErrorCode.MISSING_NAME
    assert result.field == "name"
    participant_client.confirm.assert_not_awaited()
    assert binding.get() == "trip-previous"


@pytest.mark.asyncio
async def test_empty_email_rejected(flow, participant_client):
    result = await flow.confirm("part-1", "Ana", "  ")

    assert result.code == ErrorCode.MISSING_EMAIL
    assert result.field == "email"
    participant_client.confirm.assert_not_awaited()


@pytest.mark.asyncio
async def test_malformed_email_rejected(flow, participant_client):
    result = await flow.confirm("part-1", "Ana", "ana-at-example")

    assert result.code == ErrorCode.INVALID_EMAIL
    assert result.field == "email"
    participant_client.confirm.assert_not_awaited()


@pytest.mark.asyncio
async def test_remote_failure_leaves_binding_untouched(flow, participant_client, binding):
    participant_client.confirm.side_effect = RemoteError(
        "Participant part-1 not found", code=ErrorCode.PARTICIPANT_NOT_FOUND
    )

    result = await flow.confirm("part-1", "Ana", "ana@example.com")

    assert not result.ok
    assert result.kind == FailureKind.REMOTE
    assert result.code == ErrorCode.PARTICIPANT_NOT_FOUND
    assert binding.get() is None
    assert not flow.is_confirming


@pytest.mark.asyncio
async def test_concurrent_confirmation_rejected(flow, participant_client):
    release = asyncio.Event()

    async def slow_confirm(confirmation):
        await release.wait()

    participant_client.confirm.side_effect = slow_confirm

    first = asyncio.create_task(flow.confirm("part-1", "Ana", "ana@example.com"))
    await asyncio.sleep(0)
    assert flow.is_confirming

    second = await flow.confirm("part-1", "Ana", "ana@example.com")
    assert second.kind == FailureKind.IN_FLIGHT

    release.set()
    assert (await first).ok
    participant_client.confirm.assert_awaited_once()


@pytest.mark.asyncio
async def test_from_deep_link(participant_client, binding):
    link = DeepLink(trip_id="trip-9", participant_id="part-9")
    flow = InviteConfirmationFlow.from_deep_link(link, participant_client, binding)

    result = await flow.confirm(link.participant_id, "Ana", "ana@example.com")

    assert result.ok
    assert binding.get() == "trip-9"


def test_from_owner_link_is_invariant_violation(participant_client, binding):
    with pytest.raises(InvariantViolation):
        InviteConfirmationFlow.from_deep_link(DeepLink(trip_id="trip-9"), participant_client, binding)


def test_empty_trip_id_is_invariant_violation(participant_client, binding):
    with pytest.raises(InvariantViolation):
        InviteConfirmationFlow("", participant_client, binding)


@pytest.mark.asyncio
async def test_empty_participant_id_is_invariant_violation(flow):
    with pytest.raises(InvariantViolation):
        await flow.confirm("", "Ana", "ana@example.com")
