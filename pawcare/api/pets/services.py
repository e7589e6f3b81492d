# pawcare/api/pets/services.py
import logging
from typing import Dict, List, Optional

from pawcare.api.base import BaseStoreService
from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.models.health_record import HealthRecord
from pawcare.models.pet import Pet
from pawcare.models.weight_record import WeightRecord
from pawcare.store.entity_store import EntityStore


class PetService(BaseStoreService):
    """반려동물 프로필의 조회/등록/수정/삭제를 전담하는 서비스. 삭제 시 종속 기록을 함께 정리합니다."""
    def __init__(self,
                 pet_store: EntityStore[Pet],
                 health_record_store: EntityStore[HealthRecord],
                 weight_record_store: EntityStore[WeightRecord],
                 latency: float = 0.0):
        super().__init__(latency)
        self.pets = pet_store
        self.health_records = health_record_store
        self.weight_records = weight_record_store
        logging.info("PetService initialized with stores.")

    # --- 조회 ---
    def get_all_pets(self) -> List[Pet]:
        return self.pets.all()

    def get_pet(self, pet_id: str) -> Optional[Pet]:
        return self.pets.get(pet_id)

    def pets_for_owner(self, owner_id: str) -> List[Pet]:
        """특정 사용자가 소유한 반려동물 목록 (저장소 순서 유지)."""
        return [pet for pet in self.pets.all() if pet.owner_id == owner_id]

    def get_pet_for_owner(self, pet_id: str, user_id: str) -> Pet:
        """[소유자 전용] 반려동물을 조회합니다. 없으면 NotFoundError, 소유자가 다르면 PermissionError."""
        pet = self.pets.get(pet_id)
        if pet is None:
            raise NotFoundError("해당 ID의 반려동물을 찾을 수 없습니다.")
        if pet.owner_id != user_id:
            raise PermissionError("이 반려동물에 접근할 권한이 없습니다.")
        return pet

    # --- 검증 ---
    def _validate(self, pet: Pet) -> str:
        """검증에 성공하면 공백을 제거한 이름을 반환합니다. 전달받은 객체는 수정하지 않습니다."""
        name = self._require_text(pet.name, "반려동물 이름은 비워둘 수 없습니다.")
        if pet.age <= 0:
            raise DataValidationError("반려동물의 나이는 0보다 커야 합니다.")
        return name

    # --- 변경 ---
    async def add_pet(self, pet: Pet) -> Pet:
        """반려동물을 등록합니다. 이름이 비었거나 나이가 0 이하이면 DataValidationError."""
        name = self._validate(pet)
        if self.pets.exists(pet.pet_id):
            raise DataValidationError(f"이미 존재하는 반려동물 ID입니다: {pet.pet_id}")
        pet.name = name

        await self._simulate_latency()
        self.pets.insert(pet)
        logging.info(f"Pet {pet.pet_id} registered for owner {pet.owner_id}")
        return pet

    async def update_pet(self, pet: Pet) -> Pet:
        """같은 pet_id의 반려동물을 제자리에서 교체합니다. 없으면 NotFoundError."""
        if not self.pets.exists(pet.pet_id):
            raise NotFoundError("해당 ID의 반려동물을 찾을 수 없습니다.")
        pet.name = self._validate(pet)

        await self._simulate_latency()
        self.pets.replace(pet)
        logging.info(f"Pet profile updated for {pet.pet_id}")
        return pet

    async def delete_pet(self, pet_id: str) -> Dict[str, int]:
        """
        반려동물을 삭제하고, pet_id가 일치하는 건강 기록과 체중 기록을 모두 함께 삭제합니다.
        존재하지 않는 ID는 NotFoundError.
        """
        if not self.pets.exists(pet_id):
            raise NotFoundError("해당 ID의 반려동물을 찾을 수 없습니다.")

        await self._simulate_latency()
        self.pets.remove(pet_id)
        removed_health = self.health_records.remove_where(lambda r: r.pet_id == pet_id)
        removed_weight = self.weight_records.remove_where(lambda r: r.pet_id == pet_id)
        logging.info(f"Pet {pet_id} deleted with {len(removed_health)} health records "
                     f"and {len(removed_weight)} weight records")
        return {
            'deleted_health_records': len(removed_health),
            'deleted_weight_records': len(removed_weight),
        }
