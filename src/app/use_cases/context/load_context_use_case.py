"""
Load Context Use Case

Describes what the current caller can reach, for the dashboard shell.
"""

from typing import List, Optional

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import Identity


class CustomerAccess(BaseModel):
    id: str
    name: str
    slug: str
    plan: Optional[str] = None
    role: Optional[str] = None


class UserContext(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None


class LoadContextResponse(BaseModel):
    user: UserContext
    is_superadmin: bool
    organization_id: Optional[str] = None
    customers: List[CustomerAccess]


class LoadContextUseCase:
    """
    Use case for loading the caller's context.

    Business Rules:
    - Superadmins see every customer (role is None)
    - Otherwise the resolved accessible customers with their role
    - Profile name comes from the users table when present
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[LoadContextResponse]:
        async with self.uow:
            if identity.has_all_customers:
                customers = await self.uow.customers.list_all()
            else:
                customers = await self.uow.customers.get_by_ids(
                    list(identity.accessible_customer_ids)
                )

            user = await self.uow.users.get_by_id(identity.user_id)

            access = []
            for customer in customers:
                role = identity.role_for(customer.id)
                access.append(
                    CustomerAccess(
                        id=str(customer.id),
                        name=customer.name,
                        slug=customer.slug,
                        plan=customer.plan.value if customer.plan else None,
                        role=role.value if role else None,
                    )
                )

            return Return.ok(
                LoadContextResponse(
                    user=UserContext(
                        id=str(identity.user_id),
                        email=user.email if user else identity.principal.email,
                        full_name=user.full_name if user else None,
                    ),
                    is_superadmin=identity.is_superadmin,
                    organization_id=str(identity.org_scope) if identity.org_scope else None,
                    customers=access,
                )
            )
