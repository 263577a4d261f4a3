import asyncio
import json

import httpx
import pytest

from generation import (
    GenerationOrchestrator,
    GenerationRequest,
    PredictionStatus,
    ProviderRequestError,
    ProviderTag,
    ReplicateClient,
)


def _client(handler) -> ReplicateClient:
    return ReplicateClient(
        api_token="r8_test",
        model_version="sdxl-version",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def test_submit_posts_prediction():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": "pred-1", "status": "starting"})

    job_id = asyncio.run(_client(handler).submit("a prompt", "bad things", 3, "1024x1024"))

    assert job_id == "pred-1"
    assert seen["method"] == "POST"
    assert seen["url"] == "https://api.replicate.com/v1/predictions"
    assert seen["auth"] == "Token r8_test"
    assert seen["body"] == {
        "version": "sdxl-version",
        "input": {
            "prompt": "a prompt",
            "negative_prompt": "bad things",
            "num_outputs": 3,
            "image_dimensions": "1024x1024",
        },
    }


def test_submit_non_success_status_raises():
    def handler(request):
        return httpx.Response(422, json={"detail": "invalid version"})

    with pytest.raises(ProviderRequestError) as exc_info:
        asyncio.run(_client(handler).submit("p", "n", 1, "1024x1024"))

    assert exc_info.value.status_code == 422


def test_submit_without_id_raises():
    def handler(request):
        return httpx.Response(201, json={"status": "starting"})

    with pytest.raises(ProviderRequestError):
        asyncio.run(_client(handler).submit("p", "n", 1, "1024x1024"))


def test_transport_errors_are_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderRequestError):
        asyncio.run(_client(handler).status("pred-1"))


def test_status_parses_job():
    def handler(request):
        assert request.url.path == "/v1/predictions/pred-1"
        return httpx.Response(200, json={"status": "succeeded", "output": ["https://img/a.png"]})

    job = asyncio.run(_client(handler).status("pred-1"))

    assert job.id == "pred-1"
    assert job.status == PredictionStatus.SUCCEEDED
    assert job.output == ["https://img/a.png"]


def test_unknown_status_counts_as_processing():
    def handler(request):
        return httpx.Response(200, json={"status": "queued"})

    job = asyncio.run(_client(handler).status("pred-1"))

    assert job.status == PredictionStatus.PROCESSING


@pytest.mark.parametrize("output, expected", [
    ("https://img/a.png", ["https://img/a.png"]),
    ({"https://img/a.png": "x"}, []),
    (["https://img/a.png", None, 3], ["https://img/a.png"]),
])
def test_status_output_shapes(output, expected):
    def handler(request):
        return httpx.Response(200, json={"status": "succeeded", "output": output})

    job = asyncio.run(_client(handler).status("pred-1"))

    assert job.output == expected


def test_dict_output_degrades_to_fallback(recording_sleep):
    def handler(request):
        if request.method == "POST":
            return httpx.Response(201, json={"id": "pred-8", "status": "starting"})
        return httpx.Response(200, json={"id": "pred-8", "status": "succeeded", "output": {"image": "x"}})

    orchestrator = GenerationOrchestrator(_client(handler), sleep=recording_sleep)

    result = asyncio.run(orchestrator.generate(GenerationRequest(seed=11, image_count=2)))

    assert result.provider == ProviderTag.FALLBACK_DEGRADED
    assert all("dicebear" in url for url in result.images)


def test_end_to_end_over_http(recording_sleep):
    polls = iter(["starting", "processing", "succeeded"])

    def handler(request):
        if request.method == "POST":
            return httpx.Response(201, json={"id": "pred-7", "status": "starting"})
        status = next(polls)
        output = ["https://img/1.png", "https://img/2.png"] if status == "succeeded" else None
        return httpx.Response(200, json={"id": "pred-7", "status": status, "output": output})

    orchestrator = GenerationOrchestrator(_client(handler), poll_interval=3, max_poll_attempts=21, sleep=recording_sleep)

    result = asyncio.run(orchestrator.generate(GenerationRequest(seed=11, image_count=2)))

    assert result.provider == ProviderTag.PRIMARY
    assert result.images == ["https://img/1.png", "https://img/2.png"]
    assert result.prediction_id == "pred-7"


def test_http_500_degrades_to_fallback(recording_sleep):
    def handler(request):
        return httpx.Response(500, text="upstream exploded")

    orchestrator = GenerationOrchestrator(_client(handler), sleep=recording_sleep)

    result = asyncio.run(orchestrator.generate(GenerationRequest(seed=11, image_count=2)))

    assert result.provider == ProviderTag.FALLBACK_DEGRADED
    assert len(result.images) == 2


def test_empty_token_rejected():
    with pytest.raises(ValueError):
        ReplicateClient(api_token="", model_version="v")
