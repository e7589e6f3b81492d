# pawcare/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간/날짜 처리를 위한 중앙화된 유틸리티 모듈

이 모듈의 목적:
1. 모든 시간 값을 UTC timezone-aware datetime으로 통일
2. ISO 포맷 파싱/생성 통일
3. 나이 계산, 기간(최근 N일) 기준 시각 계산 제공
"""

import logging
from datetime import datetime, date, timezone, time, timedelta
from typing import Union, Optional, Any
from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def today() -> date:
        """오늘 날짜(UTC 기준)를 반환"""
        return datetime.now(timezone.utc).date()

    @staticmethod
    def ensure_utc(dt: datetime) -> datetime:
        """timezone-naive datetime은 UTC로 간주하고, aware datetime은 UTC로 변환"""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        ISO 포맷 문자열을 datetime 객체로 파싱

        지원 포맷:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15T10:30:00.123456Z
        - 2024-01-15T10:30:00
        """
        try:
            if not iso_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")

            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            dt = dateutil_parser.isoparse(iso_string)
            return DateTimeUtils.ensure_utc(dt)

        except Exception as e:
            logger.error(f"ISO datetime parse failed: {iso_string} - {e}")
            raise ValueError(f"잘못된 ISO 날짜 형식입니다: {iso_string}")

    @staticmethod
    def parse_date_string(date_string: str) -> date:
        """
        날짜 문자열을 date 객체로 파싱 (2024-01-15, 2024/01/15, 01-15-2024)
        """
        try:
            if not date_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")
            return dateutil_parser.parse(date_string).date()

        except Exception as e:
            logger.error(f"Date string parse failed: {date_string} - {e}")
            raise ValueError(f"잘못된 날짜 형식입니다: {date_string}")

    @staticmethod
    def to_date_string(d: date) -> str:
        """date 객체를 YYYY-MM-DD 형식 문자열로 변환"""
        return d.strftime('%Y-%m-%d')

    @staticmethod
    def start_of_day(d: date) -> datetime:
        """date를 해당 날짜 00:00:00 UTC datetime으로 변환"""
        return datetime.combine(d, time.min).replace(tzinfo=timezone.utc)

    @staticmethod
    def calculate_age_years(birthdate: Union[date, datetime, str], on: Optional[date] = None) -> int:
        """생년월일로부터 만 나이(연 단위)를 계산. 생일이 지나야 한 살이 늘어납니다."""
        if isinstance(birthdate, str):
            birthdate = DateTimeUtils.parse_date_string(birthdate)
        elif isinstance(birthdate, datetime):
            birthdate = birthdate.date()

        reference = on or DateTimeUtils.today()
        return relativedelta(reference, birthdate).years

    @staticmethod
    def calculate_age_months(birthdate: Union[date, datetime, str], on: Optional[date] = None) -> int:
        """생년월일로부터 나이를 월 단위로 계산"""
        if isinstance(birthdate, str):
            birthdate = DateTimeUtils.parse_date_string(birthdate)
        elif isinstance(birthdate, datetime):
            birthdate = birthdate.date()

        reference = on or DateTimeUtils.today()
        delta = relativedelta(reference, birthdate)
        return max(0, delta.years * 12 + delta.months)

    @staticmethod
    def years_ago(years: int, on: Optional[date] = None) -> date:
        """기준일로부터 N년 전의 날짜 (윤일은 relativedelta 규칙에 따름)"""
        return (on or DateTimeUtils.today()) - relativedelta(years=years)

    @staticmethod
    def days_ago(days: int, now: Optional[datetime] = None) -> datetime:
        """
        '최근 N일' 필터의 기준 시각(now - N일)을 반환합니다.
        달력 경계가 아닌 고정 폭(24시간 * N) 기준입니다.
        """
        reference = DateTimeUtils.ensure_utc(now) if now else DateTimeUtils.now()
        try:
            return reference - timedelta(days=days)
        except OverflowError:
            # 표현 가능한 가장 이른 시각으로 고정하면 모든 기록이 기간 안에 포함됩니다.
            return datetime.min.replace(tzinfo=timezone.utc)

    @staticmethod
    def validate_datetime_field(value: Any, field_name: str = "datetime") -> datetime:
        """
        입력으로 받은 datetime 값을 검증하고 UTC datetime으로 변환

        Raises:
            ValueError: 잘못된 형식이거나 파싱할 수 없는 경우
        """
        if value is None:
            raise ValueError(f"{field_name}은 필수 필드입니다")
        if isinstance(value, str):
            return DateTimeUtils.parse_iso_datetime(value)
        if isinstance(value, datetime):
            return DateTimeUtils.ensure_utc(value)
        if isinstance(value, date):
            return DateTimeUtils.start_of_day(value)
        raise ValueError(f"{field_name}은 문자열 또는 datetime 객체여야 합니다")

    @staticmethod
    def validate_date_field(value: Any, field_name: str = "date") -> date:
        """입력으로 받은 date 값을 검증하고 date 객체로 변환"""
        if value is None:
            raise ValueError(f"{field_name}은 필수 필드입니다")
        if isinstance(value, str):
            return DateTimeUtils.parse_date_string(value)
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        raise ValueError(f"{field_name}은 문자열 또는 date/datetime 객체여야 합니다")
