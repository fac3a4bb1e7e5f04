"""
Authorization policies.

A policy is a predicate ``(principal, resource_id) -> bool``. The same
predicates back both the route-level gate (api.middleware.auth) and the
account service, so a rule is written once.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from shared.models import Role

from .exceptions import AccountAccessDeniedError


class Principal(Protocol):
    """Anything that identifies a caller: an id and a role."""

    @property
    def id(self) -> str: ...

    @property
    def role(self) -> Role: ...


@dataclass(frozen=True)
class Requester:
    """A principal built from plain ids, for callers without a decoded claim."""

    id: str
    role: Role


Policy = Callable[[Principal, Optional[str]], bool]


def allow_admin(principal: Principal, resource_id: Optional[str] = None) -> bool:
    """Only administrators."""
    return principal.role == Role.ADMIN


def allow_self_or_admin(principal: Principal, resource_id: Optional[str] = None) -> bool:
    """The owner of the resource, or an administrator."""
    return principal.role == Role.ADMIN or (
        resource_id is not None and principal.id == resource_id
    )


def ensure_allowed(
    policy: Policy,
    principal: Principal,
    resource_id: Optional[str],
    action: str,
) -> None:
    """
    Raise unless the policy allows the principal to act on the resource.

    Raises:
        AccountAccessDeniedError: If the policy denies access
    """
    if not policy(principal, resource_id):
        raise AccountAccessDeniedError(resource_id or "", action)
