import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views import View
from django.views.decorators.http import require_POST

from ..forms import ExpenseForm
from ..services import expense_service
from ..services.session import SESSION_ABSENT_MESSAGE, get_session_user

logger = logging.getLogger(__name__)


class ExpensesView(View):
    """List recent company expenses and record new ones.

    Template: backoffice/expenses.html.
    """

    template_name = "backoffice/expenses.html"

    def _render(self, request, form, error=""):
        expenses, fetch_error = expense_service.list_recent_expenses()
        ctx = {
            "form": form,
            "error": error,
            "expenses": expenses,
            "fetch_error": fetch_error,
        }
        return render(request, self.template_name, ctx)

    def get(self, request):
        return self._render(request, ExpenseForm())

    def post(self, request):
        form = ExpenseForm(request.POST)
        user = get_session_user(request)
        if user is None:
            return self._render(request, form, SESSION_ABSENT_MESSAGE)
        if not form.is_valid():
            error = " ".join(form.non_field_errors()) or expense_service.MISSING_FIELDS_MESSAGE
            return self._render(request, form, error)
        success, msg = expense_service.add_expense(user, form.cleaned_data)
        if success:
            messages.success(request, msg)
            return redirect("expenses")
        return self._render(request, form, msg)


@require_POST
def expense_delete(request, pk: str):
    success, msg = expense_service.delete_expense(pk)
    if success:
        messages.success(request, msg)
    else:
        messages.error(request, msg)
    return redirect("expenses")
