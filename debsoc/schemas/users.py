# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
from typing import Optional

from pydantic import Field

from debsoc.models.domain import Role
from debsoc.schemas import RequestModel


class TargetRequest(RequestModel):
    """Body of the TechHead verify / unverify / delete calls."""

    president_id: Optional[str] = Field(None, alias="presidentId")
    cabinet_id: Optional[str] = Field(None, alias="cabinetId")
    member_id: Optional[str] = Field(None, alias="memberId")

    def id_for(self, role: Role) -> Optional[str]:
        return {
            Role.PRESIDENT: self.president_id,
            Role.CABINET: self.cabinet_id,
            Role.MEMBER: self.member_id,
        }.get(role)
