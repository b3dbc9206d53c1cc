from quadkit.executor import FileLoadingFuture, next_frame, resume


def test_resume_runs_one_frame_at_a_time():
    log = []

    async def main():
        log.append("start")
        await next_frame()
        log.append("first")
        await next_frame()
        log.append("second")

    coro = main()
    assert resume(coro) is False
    assert log == ["start", "first"]
    assert resume(coro) is True
    assert log == ["start", "first", "second"]


def test_loop_counts_frames():
    frames = []

    async def main():
        count = 0
        while True:
            count += 1
            frames.append(count)
            await next_frame()

    coro = main()
    for _ in range(5):
        assert resume(coro) is False
    assert frames == [1, 2, 3, 4, 5, 6]
    coro.close()


def test_coroutine_without_awaits_finishes_at_once():
    async def main():
        return None

    assert resume(main()) is True


def test_file_future_waits_for_contents():
    future = FileLoadingFuture()
    received = []

    async def main():
        received.append(await future)

    coro = main()
    assert resume(coro) is False
    assert received == []
    assert future.ready is False

    future.set_result(b"payload")
    assert future.ready is True
    assert resume(coro) is True
    assert received == [b"payload"]
    assert future.ready is False


def test_file_future_pending_after_frame_in_same_resume():
    future = FileLoadingFuture()
    future.set_result(b"data")
    received = []

    async def main():
        await next_frame()
        received.append(await future)

    coro = main()
    assert resume(coro) is False
    assert received == []
    assert resume(coro) is True
    assert received == [b"data"]


def test_file_future_raises_error_in_awaiter():
    future = FileLoadingFuture()
    errors = []

    async def main():
        try:
            await future
        except OSError as exc:
            errors.append(str(exc))

    coro = main()
    future.set_result(OSError("missing file"))
    assert resume(coro) is True
    assert errors == ["missing file"]