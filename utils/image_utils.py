import logging
from dataclasses import dataclass, asdict
from typing import Optional

from playwright.sync_api import Error as PlaywrightError

logger = logging.getLogger(__name__)

ELEMENT_NOT_FOUND = "element not found"
DECODE_FAILED = "decode failed (naturalWidth is 0)"
LOADING_INCOMPLETE = "loading incomplete"

# 在浏览器内读取 <img> 的渲染状态
_READ_IMAGE_STATE = """img => ({
    complete: img.complete,
    naturalWidth: img.naturalWidth || 0,
    naturalHeight: img.naturalHeight || 0,
    width: img.width || 0,
    height: img.height || 0
})"""


@dataclass(frozen=True)
class ImageDimensions:
    natural_width: int = 0
    natural_height: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class ImageDiagnostic:
    loaded: bool
    exists: bool
    dimensions: Optional[ImageDimensions] = None
    error_info: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


def diagnose_image_state(state: Optional[dict]) -> ImageDiagnostic:
    """把 evaluate 读到的图片状态转换成诊断结果；state 为 None 表示元素不存在"""
    if state is None:
        return ImageDiagnostic(loaded=False, exists=False, error_info=ELEMENT_NOT_FOUND)

    dimensions = ImageDimensions(
        natural_width=int(state.get("naturalWidth") or 0),
        natural_height=int(state.get("naturalHeight") or 0),
        width=int(state.get("width") or 0),
        height=int(state.get("height") or 0))
    complete = bool(state.get("complete"))
    loaded = complete and dimensions.natural_width > 0

    error_info = None
    if not loaded:
        error_info = DECODE_FAILED if complete else LOADING_INCOMPLETE
    return ImageDiagnostic(loaded=loaded, exists=True, dimensions=dimensions, error_info=error_info)


def _read_image_state(locator, timeout_ms: int) -> Optional[dict]:
    if locator.count() == 0:
        return None
    try:
        return locator.first.evaluate(_READ_IMAGE_STATE, timeout=timeout_ms)
    except PlaywrightError as e:
        # count 之后元素被移除/重新渲染
        logger.debug("read image state failed: %s", e)
        return None


def check_image_loaded(locator, timeout_ms: int = 5000) -> ImageDiagnostic:
    """只读检查，不带重试；需要等待时由调用方组合 wait_visible / retry"""
    diagnostic = diagnose_image_state(_read_image_state(locator, timeout_ms))
    if not diagnostic.loaded:
        logger.info("image not loaded: %s", diagnostic)
    return diagnostic


def get_image_dimensions(locator, timeout_ms: int = 5000) -> ImageDimensions:
    diagnostic = diagnose_image_state(_read_image_state(locator, timeout_ms))
    return diagnostic.dimensions or ImageDimensions()
