"""Unit tests for the Sync client facade."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from kontent.sync import (
    AiohttpService,
    ApiMode,
    ConfigurationError,
    ErrorReason,
    Header,
    SyncQueryPayload,
    ValidationFailedError,
    get_sync_client,
)
from kontent.sync.io import AdapterResponse, HttpRequest, HttpResponse, HttpSuccess
from kontent.sync.runtime import get_sdk_id_header

EMPTY_PAYLOAD = {"items": [], "types": [], "languages": [], "taxonomies": []}


class RecordingService:
    """Transport answering every request with the same JSON."""

    def __init__(self, data, *, token="x"):
        self.data = data
        self.token = token
        self.requests: list[HttpRequest] = []

    async def request_async(self, request: HttpRequest):
        self.requests.append(request)
        headers = (Header("X-Continuation", self.token),) if self.token else ()
        return HttpSuccess(
            HttpResponse(
                data=self.data,
                body=request.body,
                method=request.method,
                request_headers=request.request_headers,
                adapter_response=AdapterResponse(
                    status=200, status_text="OK", response_headers=headers
                ),
            )
        )

    def sent_header(self, name):
        return next(
            (h.value for h in self.requests[-1].request_headers if h.name == name), None
        )


class SyncStreamService:
    """Serves tokens a..e; the last page is empty and echoes its own token."""

    tokens = ["a", "b", "c", "d", "e"]

    async def request_async(self, request: HttpRequest):
        token = next(
            h.value for h in request.request_headers if h.name.lower() == "x-continuation"
        )
        index = self.tokens.index(token)
        is_last = index == len(self.tokens) - 1
        next_token = token if is_last else self.tokens[index + 1]
        return HttpSuccess(
            HttpResponse(
                data=_sync_payload(token, is_last),
                body=None,
                method=request.method,
                request_headers=request.request_headers,
                adapter_response=AdapterResponse(
                    status=200,
                    status_text="OK",
                    response_headers=(Header("X-Continuation", next_token),),
                ),
            )
        )


def _sync_payload(token, is_last):
    if is_last:
        return dict(EMPTY_PAYLOAD)
    return {
        "items": [],
        "types": [],
        "taxonomies": [],
        "languages": [
            {
                "change_type": "changed",
                "timestamp": "2021-01-01T00:00:00.000Z",
                "data": {"system": {"id": token, "name": token, "codename": token}},
            }
        ],
    }


class TestClientBuilder:
    def test_empty_environment_rejected(self):
        with pytest.raises(ConfigurationError):
            get_sync_client("")

    @pytest.mark.parametrize("mode", ["preview_api", "secure_api"])
    def test_key_required(self, mode):
        with pytest.raises(ConfigurationError):
            getattr(get_sync_client("x"), mode)("")

    def test_modes(self):
        builder = get_sync_client("x")
        service = RecordingService({})
        assert builder.public_api().create(http_service=service).config.api_mode is ApiMode.PUBLIC
        assert (
            builder.preview_api("k").create(http_service=service).config.api_mode
            is ApiMode.PREVIEW
        )
        assert (
            builder.secure_api("k").create(http_service=service).config.api_mode
            is ApiMode.SECURE
        )

    def test_validation_bool_shorthand(self):
        client = get_sync_client("x").public_api().create(
            http_service=RecordingService({}), response_validation=True
        )
        assert client.config.response_validation.enable is True

    def test_validation_disabled_by_default(self):
        client = get_sync_client("x").public_api().create(http_service=RecordingService({}))
        assert client.config.response_validation.enable is False


class TestClientUrls:
    def test_public_urls(self):
        client = get_sync_client("env").public_api().create(http_service=RecordingService({}))
        assert client.init().to_url() == "https://deliver.kontent.ai/v2/env/sync/init"
        assert client.sync("t").to_url() == "https://deliver.kontent.ai/v2/env/sync"

    def test_preview_url(self):
        client = get_sync_client("env").preview_api("k").create(http_service=RecordingService({}))
        assert client.init().to_url() == "https://preview-deliver.kontent.ai/v2/env/sync/init"

    def test_custom_base_url(self):
        client = get_sync_client("env").public_api().create(
            base_url="http://localhost:8080/", http_service=RecordingService({})
        )
        assert client.sync("t").to_url() == "http://localhost:8080/env/sync"


class TestClientHeaders:
    @pytest.mark.asyncio
    async def test_sdk_tracking_header(self):
        service = RecordingService({})
        await get_sync_client("x").public_api().create(http_service=service).init().resolve()

        assert service.sent_header("X-KC-SDKID") == get_sdk_id_header().value

    @pytest.mark.asyncio
    async def test_public_api_sends_no_authorization(self):
        service = RecordingService({})
        await get_sync_client("x").public_api().create(http_service=service).init().resolve()

        assert service.sent_header("Authorization") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode", ["preview_api", "secure_api"])
    async def test_authorization_header(self, mode):
        service = RecordingService({})
        factory = getattr(get_sync_client("x"), mode)("y")
        await factory.create(http_service=service).init().resolve()

        assert service.sent_header("Authorization") == "Bearer y"

    @pytest.mark.asyncio
    async def test_init_is_post_without_token(self):
        service = RecordingService({})
        await get_sync_client("x").public_api().create(http_service=service).init().resolve()

        assert service.requests[-1].method == "POST"
        assert service.sent_header("X-Continuation") is None

    @pytest.mark.asyncio
    async def test_sync_sends_token(self):
        service = RecordingService(EMPTY_PAYLOAD)
        await get_sync_client("x").public_api().create(http_service=service).sync("t1").resolve()

        assert service.requests[-1].method == "GET"
        assert service.sent_header("X-Continuation") == "t1"


class TestCustomHttpService:
    @pytest.mark.asyncio
    async def test_custom_service_is_used(self):
        service = RecordingService({"result": "ok"}, token="fake-token")

        result = await get_sync_client("x").public_api().create(http_service=service).init().resolve()

        assert result.success
        assert result.response.payload == {"result": "ok"}
        assert result.response.meta.continuation_token == "fake-token"
        assert len(service.requests) == 1


class TestResponseValidation:
    @pytest.mark.asyncio
    async def test_mismatch_with_validation_enabled(self):
        query = (
            get_sync_client("x")
            .public_api()
            .create(response_validation=True, http_service=RecordingService({"result": "ok"}))
            .init()
        )

        result = await query.resolve()

        assert result.success is False
        assert result.error.reason is ErrorReason.VALIDATION_FAILED
        assert isinstance(result.error, ValidationFailedError)
        assert result.error.url == query.to_url()
        assert isinstance(result.error.validation_error, ValidationError)
        assert result.error.message
        assert result.error.response is not None

    @pytest.mark.asyncio
    async def test_matching_payload_with_validation_enabled(self):
        result = await (
            get_sync_client("x")
            .public_api()
            .create(response_validation=True, http_service=RecordingService(EMPTY_PAYLOAD))
            .init()
            .resolve()
        )

        assert result.success is True

    @pytest.mark.asyncio
    async def test_mismatch_with_validation_disabled(self):
        result = await (
            get_sync_client("x")
            .public_api()
            .create(http_service=RecordingService({"result": "ok"}))
            .init()
            .resolve()
        )

        assert result.success is True


class TestSyncPaging:
    @pytest.mark.asyncio
    async def test_resolve_all_until_empty_batch(self):
        result = await (
            get_sync_client("x")
            .public_api()
            .create(response_validation=True, http_service=SyncStreamService())
            .sync("a")
            .resolve_all()
        )

        assert result.success is True
        assert len(result.responses) == 5
        assert result.last_continuation_token == result.responses[-1].meta.continuation_token

        tokens = SyncStreamService.tokens
        for index, response in enumerate(result.responses):
            is_last = index == len(tokens) - 1
            assert response.payload == _sync_payload(tokens[index], is_last)
            expected_token = tokens[-1] if is_last else tokens[index + 1]
            assert response.meta.continuation_token == expected_token

    @pytest.mark.asyncio
    async def test_payloads_parse_into_models(self):
        result = await (
            get_sync_client("x")
            .public_api()
            .create(http_service=SyncStreamService())
            .sync("a")
            .resolve_all()
        )

        batches = [SyncQueryPayload.model_validate(r.payload) for r in result.responses]
        assert [b.has_changes for b in batches] == [True, True, True, True, False]
        assert batches[0].languages[0].data.system.codename == "a"


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_owns_default_service(self):
        client = get_sync_client("x").public_api().create()
        service = client.config.http_service
        assert isinstance(service, AiohttpService)
        service.close = AsyncMock()

        async with client:
            pass

        service.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_leaves_caller_service_open(self):
        service = AiohttpService()
        service.close = AsyncMock()

        client = get_sync_client("x").public_api().create(http_service=service)
        await client.close()

        service.close.assert_not_awaited()

    def test_falsy_caller_service_is_kept(self):
        class _EmptyPoolService(RecordingService):
            def __bool__(self):
                return False

        service = _EmptyPoolService(EMPTY_PAYLOAD)
        client = get_sync_client("x").public_api().create(http_service=service)

        assert client.config.http_service is service
