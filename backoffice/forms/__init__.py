from .expense_forms import ExpenseForm

__all__ = ["ExpenseForm"]
