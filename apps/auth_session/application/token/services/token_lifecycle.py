"""TokenLifecycleManager - 토큰 쌍 발급 / 회전 / 폐기.

"연주자" 역할: access/refresh 토큰 쌍의 상태 전이를 담당합니다.
UseCase(지휘자)와 인증 가드가 이 서비스를 호출합니다.

    ISSUED → VALID → (NEAR_EXPIRY → RENEWED) | EXPIRED | REVOKED

(user, device)마다 유효한 refresh 토큰은 최대 하나입니다.
프로세스 내 락은 쓰지 않습니다. 동시 rotation은 저장소 DEL의 원자성으로 한 쪽만 성공하고,
동시 발급은 기기의 현재 세션 포인터를 마지막으로 기록한 쪽만 남습니다.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, Callable
from uuid import uuid4

from apps.auth_session.application.common.keys import StoreKeys, split_index_member
from apps.auth_session.application.token.dto import TokenPair
from apps.auth_session.domain.enums.token_type import TokenType
from apps.auth_session.domain.exceptions.auth import UnauthorizedRotationError

if TYPE_CHECKING:
    from apps.auth_session.application.common.ports import KeyValueStore
    from apps.auth_session.application.session.services import SessionStore
    from apps.auth_session.application.token.ports import SignedToken, TokenCodec
    from apps.auth_session.domain.enums.user_role import UserRole
    from apps.auth_session.domain.value_objects.session_metadata import SessionMetadata
    from apps.auth_session.domain.value_objects.token_claims import TokenClaims

logger = logging.getLogger(__name__)


class TokenLifecycleManager:
    """토큰 생명주기 관리자.

    Responsibilities:
        - 토큰 쌍 발급 및 등록 (access / refresh / session)
        - access 토큰 등록 여부 확인 (삭제 = 폐기)
        - refresh 토큰 단일 사용 rotation
        - 만료 직전 access 토큰 재발급 (sliding renewal)
        - 기기 / 사용자 단위 세션 폐기

    Collaborators:
        - TokenCodec: 토큰 서명/검증
        - KeyValueStore: access/refresh 등록 저장
        - SessionStore: 세션 레코드
    """

    def __init__(
        self,
        codec: "TokenCodec",
        kv_store: "KeyValueStore",
        session_store: "SessionStore",
        *,
        access_ttl_seconds: int,
        refresh_ttl_seconds: int,
        renewal_window_seconds: int,
        keys: StoreKeys | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._codec = codec
        self._kv = kv_store
        self._session_store = session_store
        self._access_ttl = access_ttl_seconds
        self._refresh_ttl = refresh_ttl_seconds
        self._renewal_window = renewal_window_seconds
        self._keys = keys or StoreKeys()
        self._clock = clock

    async def issue(
        self,
        *,
        user_id: str,
        role: "UserRole",
        metadata: "SessionMetadata",
        session_started_at: datetime | None = None,
    ) -> TokenPair:
        """토큰 쌍을 발급하고 등록합니다.

        기록을 마친 뒤 기기의 현재 세션 포인터가 가리키지 않는 세션은 모두 폐기됩니다.
        동시에 발급되어도 포인터를 마지막으로 기록한 쪽만 남습니다.

        Args:
            user_id: 사용자 ID
            role: 사용자 권한
            metadata: 요청 메타데이터 (device_id, ip, user_agent)
            session_started_at: rotation 시 이어받을 최초 로그인 시각

        Returns:
            TokenPair: 같은 token_id를 공유하는 토큰 쌍
        """
        device_id = metadata.device_id

        # 1. 토큰 발급
        token_id = str(uuid4())
        access = self._codec.issue(
            user_id=user_id,
            role=role,
            token_type=TokenType.ACCESS,
            token_id=token_id,
            ttl_seconds=self._access_ttl,
        )
        refresh = self._codec.issue(
            user_id=user_id,
            role=role,
            token_type=TokenType.REFRESH,
            token_id=token_id,
            ttl_seconds=self._refresh_ttl,
            device_id=device_id,
        )

        # 2. 등록 (세션 포인터는 create의 마지막 단계)
        await self._kv.set(self._keys.access_token(token_id), user_id, self._access_ttl)
        await self._kv.set(
            self._keys.refresh_token(user_id, device_id, token_id),
            token_id,
            self._refresh_ttl,
        )
        await self._session_store.create(
            user_id=user_id,
            token_id=token_id,
            metadata=metadata,
            created_at=session_started_at,
        )

        # 3. 기기당 활성 세션 하나
        await self._supersede_stale_sessions(user_id, device_id, token_id)

        logger.info(
            "Token pair issued",
            extra={"user_id": user_id, "device_id": device_id, "token_id": token_id},
        )

        return TokenPair(
            access_token=access.token,
            refresh_token=refresh.token,
            token_id=token_id,
            access_expires_at=access.expires_at,
            refresh_expires_at=refresh.expires_at,
        )

    async def is_access_valid(self, token_id: str, user_id: str) -> bool:
        """access 토큰 등록 여부.

        서명이 유효하고 만료 전이어도 등록이 없으면 폐기된 토큰입니다.
        """
        return await self._kv.get(self._keys.access_token(token_id)) == user_id

    async def rotate(
        self,
        *,
        user_id: str,
        device_id: str,
        old_token_id: str,
        role: "UserRole",
        metadata: "SessionMetadata",
    ) -> TokenPair:
        """refresh 토큰을 새 토큰 쌍으로 교환합니다.

        Workflow:
            1. refresh 등록이 정확한 키에 있고 기기의 현재 세션인지 확인
            2. 세션 레코드와 요청 메타데이터 비교
            3. refresh 등록 삭제 (삭제 개수로 단일 사용 확정)
            4. 이전 세션 레코드 / access 등록 삭제
            5. 같은 기기로 새 쌍 발급

        Raises:
            UnauthorizedRotationError: 재사용, 메타데이터 불일치, 세션 없음
        """
        refresh_key = self._keys.refresh_token(user_id, device_id, old_token_id)
        log_extra = {"user_id": user_id, "device_id": device_id, "token_id": old_token_id}

        stored = await self._kv.get(refresh_key)
        if stored != old_token_id:
            logger.warning("Refresh token not registered", extra=log_extra)
            raise UnauthorizedRotationError("Refresh token not registered")

        if await self._session_store.current_token_id(user_id, device_id) != old_token_id:
            logger.warning("Refresh token superseded", extra=log_extra)
            raise UnauthorizedRotationError("Refresh token superseded")

        record = await self._session_store.get(user_id, device_id, old_token_id)
        if not self._session_store.is_valid(record, metadata):
            logger.warning("Session validation failed during rotation", extra=log_extra)
            raise UnauthorizedRotationError("Session validation failed")

        if await self._kv.delete(refresh_key) == 0:
            logger.warning("Refresh token already used", extra=log_extra)
            raise UnauthorizedRotationError("Refresh token already used")

        await self._session_store.remove(user_id, device_id, old_token_id)
        await self._kv.delete(self._keys.access_token(old_token_id))

        if metadata.device_id != device_id:
            metadata = replace(metadata, device_id=device_id)

        pair = await self.issue(
            user_id=user_id,
            role=role,
            metadata=metadata,
            session_started_at=record.created_at,
        )
        logger.info("Token pair rotated", extra={**log_extra, "new_token_id": pair.token_id})
        return pair

    async def sliding_renewal(
        self,
        claims: "TokenClaims",
        metadata: "SessionMetadata | None" = None,
    ) -> "SignedToken | None":
        """만료 직전 access 토큰을 조용히 재발급합니다.

        0 < 남은 시간 <= renewal window 일 때만 동작합니다.
        같은 token_id로 새 access 토큰을 서명하고, 등록이 아직 있을 때만
        TTL을 다시 설정합니다 (폐기된 등록은 되살리지 않음).
        refresh 토큰과 그 등록은 건드리지 않습니다.

        Args:
            claims: 가드가 이미 검증한 access 토큰 클레임
            metadata: 감사 로그용 요청 메타데이터

        Returns:
            새 access 토큰, 재발급하지 않았으면 None
        """
        remaining = claims.remaining_seconds(self._clock())
        if remaining <= 0 or remaining > self._renewal_window:
            return None

        renewed = self._codec.issue(
            user_id=claims.user_id,
            role=claims.role,
            token_type=TokenType.ACCESS,
            token_id=claims.token_id,
            ttl_seconds=self._access_ttl,
        )
        rearmed = await self._kv.set(
            self._keys.access_token(claims.token_id),
            claims.user_id,
            self._access_ttl,
            only_if_exists=True,
        )
        if not rearmed:
            return None

        extra = {"user_id": claims.user_id, "token_id": claims.token_id, "remaining": remaining}
        if metadata is not None:
            extra["device_id"] = metadata.device_id
            if metadata.device is not None:
                extra["device_type"] = metadata.device.device_type
                extra["browser"] = metadata.device.browser
                extra["os"] = metadata.device.os
        logger.info("Access token renewed", extra=extra)
        return renewed

    async def invalidate_device_session(self, user_id: str, device_id: str) -> bool:
        """기기의 세션과 토큰 등록을 폐기합니다.

        Returns:
            폐기할 세션이 있었으면 True
        """
        token_ids = await self._session_store.find_token_ids(user_id, device_id)
        if not token_ids:
            return False

        await self._revoke(user_id, device_id, token_ids)

        logger.info(
            "Device session invalidated",
            extra={"user_id": user_id, "device_id": device_id, "token_ids": token_ids},
        )
        return True

    async def invalidate_all_sessions_for_user(self, user_id: str) -> int:
        """사용자의 모든 기기 세션을 폐기합니다.

        사용자별 세션 인덱스를 따라가므로 전체 키 스캔이 없습니다.
        인덱스는 폐기한 멤버만 제거하므로, 진행 중에 새로 발급된 세션은 인덱스에 남습니다.

        Returns:
            폐기된 기기 수
        """
        members = await self._kv.set_members(self._keys.user_sessions(user_id))
        device_ids = sorted({split_index_member(member)[0] for member in members})

        count = 0
        for device_id in device_ids:
            if await self.invalidate_device_session(user_id, device_id):
                count += 1

        logger.info("All sessions invalidated", extra={"user_id": user_id, "count": count})
        return count

    async def invalidate_session_by_token(self, user_id: str, token_id: str) -> bool:
        """token_id로 기기를 찾아 세션을 폐기합니다 (access 토큰만 있는 로그아웃)."""
        device_id = await self._session_store.find_device_id(user_id, token_id)
        if device_id is None:
            await self._kv.delete(self._keys.access_token(token_id))
            return False
        return await self.invalidate_device_session(user_id, device_id)

    async def _revoke(self, user_id: str, device_id: str, token_ids: list[str]) -> None:
        """token_id들의 access / refresh 등록 삭제 후 세션 비활성화."""
        keys: list[str] = []
        for token_id in token_ids:
            keys.append(self._keys.access_token(token_id))
            keys.append(self._keys.refresh_token(user_id, device_id, token_id))
        await self._kv.delete(*keys)
        await self._session_store.deactivate(user_id, device_id, token_ids)

    async def _supersede_stale_sessions(self, user_id: str, device_id: str, token_id: str) -> None:
        """기기의 현재 세션 포인터가 가리키지 않는 세션을 폐기합니다."""
        current_token_id = (
            await self._session_store.current_token_id(user_id, device_id) or token_id
        )
        stale = [
            stale_id
            for stale_id in await self._session_store.find_token_ids(user_id, device_id)
            if stale_id != current_token_id
        ]
        if not stale:
            return

        await self._revoke(user_id, device_id, stale)
        logger.info(
            "Superseded device sessions revoked",
            extra={"user_id": user_id, "device_id": device_id, "token_ids": stale},
        )

    def decode(self, token: str, expected_type: TokenType) -> "TokenClaims":
        """토큰 검증 (코덱에 위임).

        Raises:
            InvalidTokenError: 서명/형식 오류 또는 type 불일치
            TokenExpiredError: 만료
        """
        return self._codec.verify(token, expected_type)
