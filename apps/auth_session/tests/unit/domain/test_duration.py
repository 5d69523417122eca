"""parse_duration 단위 테스트."""

import pytest

from apps.auth_session.domain.exceptions.validation import InvalidDurationError
from apps.auth_session.domain.value_objects.duration import parse_duration


class TestParseDuration:
    """기간 문자열 파싱 테스트."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("45s", 45),
            ("30m", 1800),
            ("12h", 43200),
            ("7d", 604800),
            ("90", 90),
            (" 5m ", 300),
            (120, 120),
        ],
    )
    def test_valid_durations(self, value, expected) -> None:
        """지원하는 단위 변환."""
        assert parse_duration(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "m", "30x", "1w", "-5m", "1.5h", "30 m", "0", "0s", 0, -10, True, None, 3.5],
    )
    def test_invalid_durations_fail_fast(self, value) -> None:
        """문법에 맞지 않는 값은 기본값 없이 실패."""
        with pytest.raises(InvalidDurationError):
            parse_duration(value)

    def test_invalid_duration_is_value_error(self) -> None:
        """설정 검증기에서 ValueError로 취급된다."""
        with pytest.raises(ValueError):
            parse_duration("soon")
