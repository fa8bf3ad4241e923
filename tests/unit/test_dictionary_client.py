"""DictionaryClient unit tests: validation, resources and discriminants."""

import asyncio

import pytest

from core.domain.models import (
    DefinitionResult,
    VoteDirection,
    VoteResult,
)
from core.exceptions import (
    EmptyResponseError,
    InvalidArgumentError,
    NotFoundError,
    VoteError,
)
from core.services.dictionary_client import DictionaryClient, check_definition_id, escape_term


@pytest.fixture
def client(transport) -> DictionaryClient:
    return DictionaryClient(transport)


# --- lookup_by_term ---------------------------------------------------------


@pytest.mark.asyncio
async def test_lookup_by_term_returns_decoded_result(client, transport, define_payload) -> None:
    expected = DefinitionResult.model_validate(define_payload)
    transport.execute.return_value = expected

    result = await client.lookup_by_term("YOLO")

    assert result == expected
    assert result.first().word == "YOLO"
    transport.execute.assert_awaited_once_with("define?term=YOLO", DefinitionResult)


@pytest.mark.asyncio
async def test_lookup_by_term_escapes_term(client, transport, define_payload) -> None:
    transport.execute.return_value = DefinitionResult.model_validate(define_payload)

    await client.lookup_by_term("rock & roll/ñ")

    resource = transport.execute.await_args.args[0]
    assert resource == "define?term=rock%20%26%20roll%2F%C3%B1"


@pytest.mark.asyncio
async def test_lookup_by_term_no_results_raises_not_found(client, transport) -> None:
    transport.execute.return_value = DefinitionResult.model_validate({"list": []})

    with pytest.raises(NotFoundError) as exc_info:
        await client.lookup_by_term("qwzxv")

    assert "qwzxv" in str(exc_info.value)
    assert exc_info.value.query == "qwzxv"


@pytest.mark.asyncio
async def test_lookup_by_term_legacy_no_results_token(client, transport, record_factory) -> None:
    transport.execute.return_value = DefinitionResult.model_validate(
        {"result_type": "no_results", "list": [record_factory()]}
    )

    with pytest.raises(NotFoundError):
        await client.lookup_by_term("YOLO")


@pytest.mark.asyncio
async def test_lookup_by_term_empty_string_is_sent(client, transport, define_payload) -> None:
    transport.execute.return_value = DefinitionResult.model_validate(define_payload)

    await client.lookup_by_term("")

    transport.execute.assert_awaited_once_with("define?term=", DefinitionResult)


@pytest.mark.asyncio
async def test_lookup_by_term_twice_yields_equal_results(client, transport, define_payload) -> None:
    transport.execute.side_effect = lambda *_: DefinitionResult.model_validate(define_payload)

    first = await client.lookup_by_term("YOLO")
    second = await client.lookup_by_term("YOLO")

    assert first == second
    assert first is not second


# --- lookup_by_id -----------------------------------------------------------


@pytest.mark.parametrize("bad_id", [0, -1, -5, -123456789])
def test_lookup_by_id_rejects_non_positive_without_awaiting(client, transport, bad_id) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        client.lookup_by_id(bad_id)

    assert exc_info.value.parameter == "defid"
    assert "defid" in str(exc_info.value)
    transport.execute.assert_not_called()


@pytest.mark.parametrize("bad_id", [True, 1.5, "12"])
def test_lookup_by_id_rejects_non_integers(client, transport, bad_id) -> None:
    with pytest.raises(InvalidArgumentError):
        client.lookup_by_id(bad_id)
    transport.execute.assert_not_called()


@pytest.mark.asyncio
async def test_lookup_by_id_issues_single_request(client, transport, define_payload) -> None:
    expected = DefinitionResult.model_validate(define_payload)
    transport.execute.return_value = expected

    result = await client.lookup_by_id(42)

    assert result == expected
    transport.execute.assert_awaited_once_with("define?defid=42", DefinitionResult)


@pytest.mark.asyncio
async def test_lookup_by_id_no_results_mentions_id(client, transport) -> None:
    transport.execute.return_value = DefinitionResult.model_validate({"list": []})

    with pytest.raises(NotFoundError) as exc_info:
        await client.lookup_by_id(987654)

    assert "987654" in str(exc_info.value)
    assert exc_info.value.query == 987654


# --- random -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_random_entries_preserves_server_order(client, transport, random_payload) -> None:
    transport.execute.return_value = DefinitionResult.model_validate(random_payload)

    entries = await client.random_entries()

    assert [e.word for e in entries] == ["yeet", "sus", "rizz"]
    transport.execute.assert_awaited_once_with("random", DefinitionResult)


@pytest.mark.asyncio
async def test_random_entries_empty_list_is_valid(client, transport) -> None:
    transport.execute.return_value = DefinitionResult.model_validate({"list": []})

    assert await client.random_entries() == []


@pytest.mark.asyncio
async def test_random_entry_returns_first(client, transport, random_payload) -> None:
    transport.execute.return_value = DefinitionResult.model_validate(random_payload)

    entry = await client.random_entry()

    assert entry.defid == 10
    assert entry.word == "yeet"


@pytest.mark.asyncio
async def test_random_entry_on_empty_list_raises(client, transport) -> None:
    transport.execute.return_value = DefinitionResult.model_validate({"list": []})

    with pytest.raises(EmptyResponseError) as exc_info:
        await client.random_entry()

    assert exc_info.value.resource == "random"


# --- autocomplete -----------------------------------------------------------


@pytest.mark.asyncio
async def test_autocomplete_escapes_space_and_keeps_order(client, transport) -> None:
    suggestions = ["foo bar", "foo bars", "foo bar baz", "a foo bar"]
    transport.execute.return_value = suggestions

    result = await client.autocomplete("foo bar")

    assert result == suggestions
    assert transport.execute.await_args.args[0] == "autocomplete?term=foo%20bar"


# --- vote -------------------------------------------------------------------


@pytest.mark.parametrize("bad_id", [0, -7])
def test_vote_rejects_non_positive_without_awaiting(client, transport, bad_id) -> None:
    with pytest.raises(InvalidArgumentError):
        client.vote_on_definition(bad_id, VoteDirection.UP)
    transport.execute.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("direction", "token"),
    [(VoteDirection.UP, "up"), (VoteDirection.DOWN, "down"), ("Down", "down")],
)
async def test_vote_sends_lowercase_direction(client, transport, direction, token) -> None:
    transport.execute.return_value = VoteResult(status="saved", up=10, down=2)

    await client.vote_on_definition(55, direction)

    transport.execute.assert_awaited_once_with(f"vote?defid=55&direction={token}", VoteResult)


def test_vote_rejects_unknown_direction(client, transport) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        client.vote_on_definition(55, "sideways")
    assert exc_info.value.parameter == "direction"
    transport.execute.assert_not_called()


@pytest.mark.asyncio
async def test_vote_error_status_raises_vote_error(client, transport) -> None:
    transport.execute.return_value = VoteResult(status="error")

    with pytest.raises(VoteError) as exc_info:
        await client.vote_on_definition(123456789, VoteDirection.UP)

    message = str(exc_info.value)
    assert "123456789" in message
    assert "probably" in message
    assert exc_info.value.defid == 123456789


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["saved", "ok", "unchanged"])
async def test_vote_other_status_is_success(client, transport, status) -> None:
    expected = VoteResult(status=status, up=1, down=0)
    transport.execute.return_value = expected

    assert await client.vote_on_definition(1, VoteDirection.DOWN) == expected


# --- concurrency / lifecycle ------------------------------------------------


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent(client, transport, define_payload) -> None:
    transport.execute.side_effect = lambda *_: DefinitionResult.model_validate(define_payload)

    results = await asyncio.gather(*(client.lookup_by_id(i) for i in range(1, 6)))

    assert len(results) == 5
    assert transport.execute.await_count == 5


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport(transport) -> None:
    async with DictionaryClient(transport):
        pass
    transport.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged(client, transport) -> None:
    boom = RuntimeError("socket closed")
    transport.execute.side_effect = boom

    with pytest.raises(RuntimeError) as exc_info:
        await client.lookup_by_term("YOLO")

    assert exc_info.value is boom


# --- helpers ----------------------------------------------------------------


def test_escape_term_encodes_reserved_characters() -> None:
    assert escape_term("foo bar") == "foo%20bar"
    assert escape_term("a+b=c?") == "a%2Bb%3Dc%3F"


def test_check_definition_id_returns_valid_id() -> None:
    assert check_definition_id(1) == 1
