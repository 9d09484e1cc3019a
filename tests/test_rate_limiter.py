from _04_ui.core.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_window_slides():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=2, window_seconds=10, clock=clock)

    assert limiter.is_allowed("p")
    assert limiter.is_allowed("p")
    assert not limiter.is_allowed("p")
    assert limiter.is_allowed("other")

    clock.now = 10.0
    assert limiter.is_allowed("p")


def test_reset_clears_history():
    limiter = RateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    assert limiter.is_allowed("p")
    assert not limiter.is_allowed("p")
    limiter.reset("p")
    assert limiter.is_allowed("p")
    limiter.reset()
    assert limiter.is_allowed("p")
