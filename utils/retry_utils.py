import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from playwright.sync_api import Error as PlaywrightError

logger = logging.getLogger(__name__)

# Playwright 的 TimeoutError 是 Error 的子类；expect 失败抛 AssertionError
DEFAULT_RETRY_ON = (PlaywrightError, AssertionError)


@dataclass(frozen=True)
class RetryConfig:
    """指数退避重试配置，单位 ms"""
    max_attempts: int = 3
    initial_delay_ms: int = 100
    max_delay_ms: int = 1000
    max_jitter_ms: int = 100
    retry_on: tuple = DEFAULT_RETRY_ON

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts 必须 >= 1：{self.max_attempts}")
        if self.initial_delay_ms < 0:
            raise ValueError(f"initial_delay_ms 必须 >= 0：{self.initial_delay_ms}")
        if self.max_delay_ms < self.initial_delay_ms:
            raise ValueError(f"max_delay_ms({self.max_delay_ms}) 不能小于 initial_delay_ms({self.initial_delay_ms})")
        if self.max_jitter_ms < 0:
            raise ValueError(f"max_jitter_ms 必须 >= 0：{self.max_jitter_ms}")
        if not self.retry_on:
            raise ValueError("retry_on 不能为空")


@dataclass(frozen=True)
class RetryOutcome:
    success: bool
    attempts: int
    elapsed_ms: int
    delays_ms: tuple = field(default=())  # 实际 sleep 的退避时长（不含 jitter）
    last_error: Optional[str] = None

    def to_dict(self) -> dict:
        return {"success": self.success, "attempts": self.attempts, "elapsed_ms": self.elapsed_ms,
                "delays_ms": list(self.delays_ms), "last_error": self.last_error}


def _uniform_jitter(max_jitter_ms: int) -> float:
    # 取值 [0, max_jitter_ms)
    return random.random() * max_jitter_ms if max_jitter_ms else 0.0


def retry(action: Callable[[int], object], config: RetryConfig = RetryConfig(), *,
          sleep: Callable[[float], None] = time.sleep,
          clock: Callable[[], float] = time.monotonic,
          jitter: Callable[[int], float] = _uniform_jitter) -> RetryOutcome:
    """
    指数退避执行 action：
    - action(timeout_ms) 执行一次尝试，本次超时 = 当前 delay
    - 成功立即返回，不再重试
    - 失败（config.retry_on 中的异常）不抛出，统一返回 RetryOutcome
    - 其余异常属于代码问题，直接向上抛
    """
    attempts = 0
    delay = config.initial_delay_ms
    delays = []
    last_error = None
    start = clock()

    def elapsed() -> int:
        return max(0, int(round((clock() - start) * 1000)))

    while attempts < config.max_attempts:
        try:
            action(delay)
        except config.retry_on as e:
            attempts += 1
            last_error = f"{type(e).__name__}: {str(e).splitlines()[0] if str(e) else ''}"
            logger.debug("attempt %d/%d failed (timeout=%dms): %s", attempts, config.max_attempts, delay, last_error)
            if attempts == config.max_attempts:
                outcome = RetryOutcome(False, attempts, elapsed(), tuple(delays), last_error)
                logger.info("retry exhausted: %s", outcome)
                return outcome

            # delay 为 0 时从 1ms 起翻倍
            delay = min(max(delay, 1) * 2, config.max_delay_ms)
            delays.append(delay)
            sleep((delay + jitter(config.max_jitter_ms)) / 1000)
        else:
            outcome = RetryOutcome(True, attempts + 1, elapsed(), tuple(delays), last_error)
            if attempts:
                logger.info("succeeded after %d failed attempts: %s", attempts, outcome)
            return outcome

    # max_attempts >= 1，循环内一定会 return
    raise AssertionError("unreachable")


def retry_click(locator, config: RetryConfig = RetryConfig(), **kwargs) -> RetryOutcome:
    """等待元素可见后点击；每次尝试的 wait/click 超时都等于当前退避 delay"""

    def attempt(timeout_ms: int):
        # Playwright 的 timeout=0 表示不超时，至少给 1ms
        timeout_ms = max(timeout_ms, 1)
        locator.wait_for(state="visible", timeout=timeout_ms)
        locator.click(timeout=timeout_ms)

    return retry(attempt, config, **kwargs)


def wait_for_condition(condition: Callable[[], bool], timeout_ms: int = 5000, interval_ms: int = 100, *,
                       sleep: Callable[[float], None] = time.sleep,
                       clock: Callable[[], float] = time.monotonic) -> bool:
    """轮询 condition 直到为 True，超时返回 False"""
    start = clock()
    while (clock() - start) * 1000 < timeout_ms:
        if condition():
            return True
        sleep(interval_ms / 1000)
    return False


def retry_call(func: Callable[[], object], max_attempts: int = 3, interval_ms: int = 1000, *,
               retry_on: tuple = DEFAULT_RETRY_ON,
               sleep: Callable[[float], None] = time.sleep):
    """固定间隔重试，返回 func 结果；全部失败时抛出最后一次异常"""
    if max_attempts < 1:
        raise ValueError(f"max_attempts 必须 >= 1：{max_attempts}")
    for attempt in range(1, max_attempts + 1):
        try:
            return func()
        except retry_on:
            if attempt == max_attempts:
                raise
            logger.debug("retry_call attempt %d/%d failed", attempt, max_attempts)
            sleep(interval_ms / 1000)
