from config.settings import MESSAGE_MATCH_CONTAINS, MESSAGE_MATCH_EXACT, SETTINGS


def normalize_text(text: str) -> str:
    return " ".join((text or "").split())


def messages_match(actual: str, expected: str, mode: str = None) -> bool:
    """默认精确匹配；contains 为宽松模式，只要求包含预期文案"""
    mode = mode or SETTINGS.message_match
    actual, expected = normalize_text(actual), normalize_text(expected)
    if mode == MESSAGE_MATCH_EXACT:
        return actual == expected
    if mode == MESSAGE_MATCH_CONTAINS:
        return expected in actual
    raise ValueError(f"未知的文案匹配模式：{mode}")
