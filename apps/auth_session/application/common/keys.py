"""Store Key Layout.

모든 세션/토큰 상태의 키 이름을 한 곳에서 생성합니다.

    access_token:{tokenId}                   -> userId
    refresh:{userId}:{deviceId}:{tokenId}    -> tokenId
    session:{userId}:{deviceId}:{tokenId}    -> SessionRecord JSON
    user_sessions:{userId}                   -> Set["{deviceId}:{tokenId}"]
    device_session:{userId}:{deviceId}       -> 현재 tokenId (마지막 발급이 이김)
"""

from __future__ import annotations

ACCESS_TOKEN_KEY_PREFIX = "access_token:"
REFRESH_TOKEN_KEY_PREFIX = "refresh:"
SESSION_KEY_PREFIX = "session:"
USER_SESSIONS_KEY_PREFIX = "user_sessions:"
DEVICE_SESSION_KEY_PREFIX = "device_session:"


class StoreKeys:
    """키 생성기.

    namespace를 지정하면 모든 키 앞에 붙습니다 (여러 환경이 같은 Redis를 공유할 때).
    """

    def __init__(self, namespace: str = "") -> None:
        self._namespace = namespace

    def access_token(self, token_id: str) -> str:
        return f"{self._namespace}{ACCESS_TOKEN_KEY_PREFIX}{token_id}"

    def refresh_token(self, user_id: str, device_id: str, token_id: str) -> str:
        return f"{self._namespace}{REFRESH_TOKEN_KEY_PREFIX}{user_id}:{device_id}:{token_id}"

    def session(self, user_id: str, device_id: str, token_id: str) -> str:
        return f"{self._namespace}{SESSION_KEY_PREFIX}{user_id}:{device_id}:{token_id}"

    def user_sessions(self, user_id: str) -> str:
        return f"{self._namespace}{USER_SESSIONS_KEY_PREFIX}{user_id}"

    def device_session(self, user_id: str, device_id: str) -> str:
        return f"{self._namespace}{DEVICE_SESSION_KEY_PREFIX}{user_id}:{device_id}"


def index_member(device_id: str, token_id: str) -> str:
    """사용자별 세션 인덱스 멤버."""
    return f"{device_id}:{token_id}"


def split_index_member(member: str) -> tuple[str, str]:
    """인덱스 멤버를 (device_id, token_id)로 분리."""
    device_id, _, token_id = member.rpartition(":")
    return device_id, token_id
