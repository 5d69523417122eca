"""Duration Value Object.

"30m", "7d" 같은 기간 문자열을 초 단위 정수로 변환합니다.

문법:
    <양의 정수><단위>  단위 = s | m | h | d
    단위 없는 정수는 초로 취급합니다.
    그 외 입력은 기본값으로 대체하지 않고 즉시 실패합니다.
"""

from __future__ import annotations

import re

from apps.auth_session.domain.exceptions.validation import InvalidDurationError

_DURATION_PATTERN = re.compile(r"^(\d+)([smhd]?)$")

UNIT_SECONDS = {
    "": 1,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 60 * 60 * 24,
}


def parse_duration(value: str | int) -> int:
    """기간 문자열을 초 단위로 변환.

    Args:
        value: "30m", "7d", "45s", "12h" 또는 초 단위 정수

    Returns:
        초 단위 기간 (항상 양수)

    Raises:
        InvalidDurationError: 문법에 맞지 않거나 0 이하인 경우
    """
    if isinstance(value, bool):
        raise InvalidDurationError(value)

    if isinstance(value, int):
        if value <= 0:
            raise InvalidDurationError(value)
        return value

    if not isinstance(value, str):
        raise InvalidDurationError(value)

    match = _DURATION_PATTERN.match(value.strip())
    if match is None:
        raise InvalidDurationError(value)

    amount, unit = match.groups()
    seconds = int(amount) * UNIT_SECONDS[unit]
    if seconds <= 0:
        raise InvalidDurationError(value)
    return seconds
