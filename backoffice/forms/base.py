from __future__ import annotations

from django import forms

INPUT_CLASS = "w-full px-3 py-2 bg-background-tertiary border border-card-border rounded-lg"
SELECT_CLASS = INPUT_CLASS + " appearance-none"


class StyledFormMixin:
    """Apply Tailwind CSS classes to form fields."""

    def apply_styling(self) -> None:
        for field in self.fields.values():
            widget = field.widget
            if isinstance(widget, forms.Select):
                widget.attrs.update({"class": SELECT_CLASS})
            else:
                widget.attrs.update({"class": INPUT_CLASS})

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.apply_styling()
