# pawcare/api/base.py
"""
저장소 기반 서비스의 기본 클래스
모든 도메인 서비스가 상속받는 공통 기능(지연 시뮬레이션, 공통 검증) 제공
"""

import asyncio
import logging
from typing import Optional

from pawcare.core.errors import DataValidationError

logger = logging.getLogger(__name__)


class BaseStoreService:
    """
    변경 작업은 모두 코루틴이며, 검증 → 고정 지연(latency) → 저장소 변경 순서로 처리됩니다.
    지연은 실제 백엔드 호출을 흉내내기 위한 것으로 취소/타임아웃/중복 제거를 지원하지 않습니다.
    """

    def __init__(self, latency: float = 0.0):
        self.latency = latency

    async def _simulate_latency(self) -> None:
        await asyncio.sleep(self.latency if self.latency > 0 else 0)

    @staticmethod
    def _require_text(value: Optional[str], message: str) -> str:
        """공백을 제거한 값이 비어 있으면 DataValidationError를 발생시키고, 정리된 값을 반환합니다."""
        cleaned = (value or "").strip()
        if not cleaned:
            raise DataValidationError(message)
        return cleaned
