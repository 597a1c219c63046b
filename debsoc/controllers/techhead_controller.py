# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
TechHead controller: login, verification management, account removal.
Thin HTTP layer, delegating all logic to the services.
"""

from fastapi import APIRouter, Depends

from debsoc.controllers import envelope
from debsoc.core.dependencies import get_auth_service, get_techhead_service
from debsoc.core.security import require_roles
from debsoc.models.domain import Principal, Role
from debsoc.schemas.auth import LoginRequest
from debsoc.schemas.users import TargetRequest
from debsoc.services.auth_service import AuthService
from debsoc.services.techhead_service import TechHeadService

router = APIRouter(prefix="/api/techhead", tags=["TechHead"])

tech_head_only = require_roles(Role.TECH_HEAD)

_PATH_ROLES = {
    "president": Role.PRESIDENT,
    "cabinet": Role.CABINET,
    "member": Role.MEMBER,
}


@router.post("/login")
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return envelope("Login successful", **auth.login(Role.TECH_HEAD, body.email, body.password))


def _register_target_routes(segment: str, role: Role) -> None:
    @router.post(f"/verify/{segment}", name=f"verify_{segment}")
    def verify(body: TargetRequest,
               principal: Principal = Depends(tech_head_only),
               service: TechHeadService = Depends(get_techhead_service)):
        result = service.verify(role, body.id_for(role), principal.id)
        return envelope(f"{role.label} verified successfully", **{segment: result})

    @router.post(f"/unverify/{segment}", name=f"unverify_{segment}")
    def unverify(body: TargetRequest,
                 principal: Principal = Depends(tech_head_only),
                 service: TechHeadService = Depends(get_techhead_service)):
        result = service.unverify(role, body.id_for(role), principal.id)
        return envelope(f"{role.label} unverified successfully", **{segment: result})

    @router.delete(f"/delete/{segment}", name=f"delete_{segment}")
    def delete(body: TargetRequest,
               principal: Principal = Depends(tech_head_only),
               service: TechHeadService = Depends(get_techhead_service)):
        result = service.delete(role, body.id_for(role), principal.id)
        return envelope(f"{role.label} deleted successfully", **{segment: result})


for _segment, _role in _PATH_ROLES.items():
    _register_target_routes(_segment, _role)


@router.get("/unverified-users")
def unverified_users(_: Principal = Depends(tech_head_only),
                     service: TechHeadService = Depends(get_techhead_service)):
    return envelope("Unverified users", **service.list_by_state(verified=False))


@router.get("/verified-users")
def verified_users(_: Principal = Depends(tech_head_only),
                   service: TechHeadService = Depends(get_techhead_service)):
    return envelope("Verified users", **service.list_by_state(verified=True))
