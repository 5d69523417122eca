"""User-Agent Device Parser.

User-Agent 문자열을 DeviceInfo(기기 종류 / 브라우저 / OS)로 해석합니다.
감사 기록용이며 인증 판단에는 쓰이지 않습니다.
"""

from __future__ import annotations

import re

from apps.auth_session.domain.value_objects.session_metadata import DeviceInfo

# 순서가 중요 (Edge/Opera UA에는 Chrome, Chrome UA에는 Safari가 포함됨)
_BROWSERS: list[tuple[str, re.Pattern[str]]] = [
    ("edge", re.compile(r"Edg(e|A|iOS)?/", re.I)),
    ("opera", re.compile(r"OPR/|Opera", re.I)),
    ("samsung", re.compile(r"SamsungBrowser/", re.I)),
    ("firefox", re.compile(r"Firefox/|FxiOS/", re.I)),
    ("chrome", re.compile(r"Chrome/|CriOS/", re.I)),
    ("safari", re.compile(r"Safari/", re.I)),
]

_OPERATING_SYSTEMS: list[tuple[str, re.Pattern[str]]] = [
    ("ios", re.compile(r"iPhone|iPad|iPod", re.I)),
    ("android", re.compile(r"Android", re.I)),
    ("windows", re.compile(r"Windows", re.I)),
    ("macos", re.compile(r"Mac OS X|Macintosh", re.I)),
    ("linux", re.compile(r"Linux", re.I)),
]

_TABLET = re.compile(r"iPad|Tablet", re.I)
_MOBILE = re.compile(r"Mobile|iPhone|iPod|Android", re.I)
_BOT = re.compile(r"bot|crawler|spider|curl|httpx|python-requests", re.I)


class UserAgentDeviceParser:
    """정규식 기반 User-Agent 해석기."""

    def parse(self, user_agent: str | None) -> DeviceInfo:
        if not user_agent:
            return DeviceInfo()

        return DeviceInfo(
            device_type=self._device_type(user_agent),
            browser=self._first_match(_BROWSERS, user_agent),
            os=self._first_match(_OPERATING_SYSTEMS, user_agent),
        )

    @staticmethod
    def _device_type(user_agent: str) -> str:
        if _BOT.search(user_agent):
            return "bot"
        if _TABLET.search(user_agent):
            return "tablet"
        if _MOBILE.search(user_agent):
            return "mobile"
        return "desktop"

    @staticmethod
    def _first_match(patterns: list[tuple[str, re.Pattern[str]]], user_agent: str) -> str:
        for name, pattern in patterns:
            if pattern.search(user_agent):
                return name
        return "unknown"
