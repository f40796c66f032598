from utils.retry_utils import RetryOutcome


class PerformanceAssert:

    @staticmethod
    def load_time_below(load_time_ms: int, max_ms: int):
        assert load_time_ms < max_ms, f"页面加载耗时{load_time_ms}ms，超过上限{max_ms}ms"

    @staticmethod
    def load_time_above(load_time_ms: int, min_ms: int):
        assert load_time_ms > min_ms, f"performance_glitch_user 加载过快：{load_time_ms}ms <= {min_ms}ms"

    @staticmethod
    def click_succeeded(outcome: RetryOutcome, max_click_ms: int):
        assert outcome.success, f"重试{outcome.attempts}次后仍点击失败：{outcome.last_error}"
        assert outcome.elapsed_ms < max_click_ms, f"点击耗时{outcome.elapsed_ms}ms，超过上限{max_click_ms}ms"
