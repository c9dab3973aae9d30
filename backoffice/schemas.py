"""Row shapes returned by the Supabase tables."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class OrderSummary(BaseModel):
    """Fields of an ``orders`` row needed by the dashboard grid."""

    id: str
    customer_name: Optional[str] = None
    total_amount: float = 0
    status: str
    created_at: datetime


class Expense(BaseModel):
    id: str
    description: str
    amount: float
    account: str
    vendedor_id: Optional[str] = None
    created_at: datetime

    @property
    def account_label(self) -> str:
        return self.account.replace("_", " ")


class Profile(BaseModel):
    id: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    updated_at: Optional[datetime] = None


class SessionUser(BaseModel):
    """The user the current request acts for."""

    id: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or "Vendedor"


__all__ = ["Expense", "OrderSummary", "Profile", "SessionUser"]
