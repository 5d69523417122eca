"""KeyValueStore Port.

세션/토큰 상태를 저장하는 외부 Key-Value 저장소 인터페이스입니다.
프로세스 내 캐시는 없으며 모든 확인은 저장소 왕복입니다.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Key-Value 저장소 인터페이스.

    구현체:
        - RedisKeyValueStore (infrastructure/persistence_redis/)

    모든 메서드는 연결 실패/타임아웃 시 StoreUnavailableError를 발생시킵니다.
    """

    async def get(self, key: str) -> str | None:
        """값 조회. 없으면 None."""
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl_seconds: int,
        *,
        only_if_exists: bool = False,
    ) -> bool:
        """TTL과 함께 값 저장.

        Args:
            key: 키
            value: 값
            ttl_seconds: 만료 시간(초)
            only_if_exists: True면 키가 이미 있을 때만 덮어씀

        Returns:
            실제로 저장되었으면 True
        """
        ...

    async def delete(self, *keys: str) -> int:
        """키 삭제. 실제로 삭제된 키 개수를 반환합니다 (단일 명령, 원자적)."""
        ...

    async def exists(self, key: str) -> bool:
        """키 존재 여부."""
        ...

    async def keys_with_prefix(self, prefix: str) -> list[str]:
        """prefix로 시작하는 모든 키. 전체 키 스캔이므로 운영 경로에서는 쓰지 않습니다."""
        ...

    async def add_to_set(self, key: str, member: str, ttl_seconds: int) -> None:
        """Set에 멤버 추가 후 Set 전체의 TTL 갱신."""
        ...

    async def remove_from_set(self, key: str, *members: str) -> None:
        """Set에서 멤버 제거."""
        ...

    async def set_members(self, key: str) -> set[str]:
        """Set의 모든 멤버."""
        ...

    async def ping(self) -> bool:
        """연결 확인."""
        ...
