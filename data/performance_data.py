"""性能/稳定性测试：不同用户类型的预期，单位 ms"""
from utils.retry_utils import RetryConfig

PERFORMANCE_EXPECTATIONS = {
    "standard": {
        "max_load_time": 3000,
        "max_click_time": 1000,
        "image_load_timeout": 5000,
        "wait_timeout": 5000,
        "click_retry": RetryConfig(max_attempts=3, initial_delay_ms=100, max_delay_ms=1000),
        "expected_image_issues": False,
    },
    "performance": {
        "min_load_time": 3000,  # 应明显慢于 standard
        "max_load_time": 15000,
        "max_click_time": 5000,
        "image_load_timeout": 10000,
        "wait_timeout": 30000,
        "click_retry": RetryConfig(max_attempts=3, initial_delay_ms=200, max_delay_ms=5000),
        "expected_image_issues": False,
    },
    "problem": {
        "max_load_time": 3000,
        "max_click_time": 2000,
        "image_load_timeout": 5000,
        "wait_timeout": 5000,
        "click_retry": RetryConfig(max_attempts=5, initial_delay_ms=100, max_delay_ms=2000),
        "expected_image_issues": True,
    },
}
