from decimal import Decimal

from django import forms

from ..exceptions import ValidationFailure
from ..services.expense_service import ACCOUNT_CHOICES, clean_expense
from .base import StyledFormMixin


class ExpenseForm(StyledFormMixin, forms.Form):
    """Capture a new company expense."""

    description = forms.CharField(
        label="Descripción",
        max_length=255,
        required=False,
        widget=forms.TextInput(attrs={"placeholder": "Compra de insumos..."}),
    )
    amount = forms.DecimalField(
        label="Cantidad ($)",
        max_digits=12,
        decimal_places=2,
        required=False,
        widget=forms.NumberInput(attrs={"min": "0.01", "step": "0.01"}),
    )
    account = forms.ChoiceField(
        label="Cuenta de Pago",
        choices=[("", "Seleccionar cuenta")] + ACCOUNT_CHOICES,
        required=False,
    )

    def clean(self):
        cleaned = super().clean()
        try:
            description, amount, account = clean_expense(
                cleaned.get("description"),
                cleaned.get("amount") or Decimal("0"),
                cleaned.get("account"),
            )
        except ValidationFailure as exc:
            raise forms.ValidationError(exc.message)
        cleaned.update({"description": description, "amount": amount, "account": account})
        return cleaned
