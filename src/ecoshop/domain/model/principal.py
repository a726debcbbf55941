"""The authenticated caller and the access rules that apply to it.

Principals are issued by the external auth service and passed explicitly
into every use case.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecoshop.domain.exceptions import AccessDeniedError


@dataclass(frozen=True)
class Principal:
    user_id: int
    is_admin: bool = False


def require_admin(principal: Principal, message: str) -> None:
    if not principal.is_admin:
        raise AccessDeniedError(message)


def require_owner_or_admin(principal: Principal, owner_id: int, message: str) -> None:
    if not principal.is_admin and principal.user_id != owner_id:
        raise AccessDeniedError(message)
