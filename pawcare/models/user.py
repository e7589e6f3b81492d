# pawcare/models/user.py
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pawcare.utils.datetime_utils import DateTimeUtils


class Language(Enum):
    ENGLISH = "en"
    SIMPLIFIED_CHINESE = "zh-Hans"
    TRADITIONAL_CHINESE = "zh-Hant"


@dataclass
class User:
    """
    'users' 저장소의 엔티티 구조. 비밀번호는 어떤 형태로도 저장하지 않습니다.
    """
    user_id: str
    email: str
    full_name: Optional[str] = None
    language: Language = Language.ENGLISH
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    def to_dict(self) -> Dict[str, Any]:
        user_dict = asdict(self)
        user_dict['language'] = self.language.value
        return user_dict
