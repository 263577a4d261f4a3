import asyncio

import pytest

from generation import PredictionFailedError, PredictionPoller, PredictionTimeoutError


def test_returns_output_on_success(fake_provider, recording_sleep):
    provider = fake_provider([("starting", None), ("processing", None), ("succeeded", ["a.png", "b.png"])])
    poller = PredictionPoller(provider, interval=3, max_attempts=21, sleep=recording_sleep)

    output = asyncio.run(poller.wait("job-1"))

    assert output == ["a.png", "b.png"]
    assert provider.status_calls == 3
    assert recording_sleep.calls == [3, 3]


@pytest.mark.parametrize("terminal", ["failed", "canceled"])
def test_failed_and_canceled_raise(fake_provider, recording_sleep, terminal):
    provider = fake_provider([("processing", None), (terminal, None)])
    poller = PredictionPoller(provider, interval=3, max_attempts=21, sleep=recording_sleep)

    with pytest.raises(PredictionFailedError, match=terminal):
        asyncio.run(poller.wait("job-1"))


def test_times_out_after_max_attempts(fake_provider, recording_sleep):
    provider = fake_provider()  # processing forever
    poller = PredictionPoller(provider, interval=3, max_attempts=21, sleep=recording_sleep)

    with pytest.raises(PredictionTimeoutError) as exc_info:
        asyncio.run(poller.wait("job-1"))

    assert exc_info.value.attempts == 21
    assert provider.status_calls == 21
    assert len(recording_sleep.calls) == 20


def test_cancellation_stops_polling(fake_provider):
    provider = fake_provider()
    poller = PredictionPoller(provider, interval=10, max_attempts=21)

    async def scenario():
        task = asyncio.create_task(poller.wait("job-1"))
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())

    assert provider.status_calls == 1


def test_rejects_zero_attempts(fake_provider):
    with pytest.raises(ValueError):
        PredictionPoller(fake_provider(), max_attempts=0)
