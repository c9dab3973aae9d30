from .api import ExpenseViewSet, OrderListAPIView
from .dashboard import dashboard, dashboard_orders
from .expenses import ExpensesView, expense_delete

__all__ = [
    "ExpenseViewSet",
    "ExpensesView",
    "OrderListAPIView",
    "dashboard",
    "dashboard_orders",
    "expense_delete",
]
