from django.contrib import messages
from django.contrib.auth import login, logout
from django.contrib.auth.forms import AuthenticationForm
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from backoffice.services.session import forget_user, remember_user

PROFILE_MISSING_MESSAGE = "No se encontró un perfil de vendedor para este usuario"


def root_view(request):
    """Send signed-in users to the dashboard, otherwise show the login form."""
    if request.user.is_authenticated:
        return redirect("dashboard")

    form = AuthenticationForm(request, data=request.POST or None)
    if request.method == "POST" and form.is_valid():
        user = form.get_user()
        login(request, user)
        if remember_user(request, user) is None:
            messages.warning(request, PROFILE_MISSING_MESSAGE)
        return redirect("dashboard")

    return render(request, "core/login.html", {"form": form})


@require_POST
def logout_view(request):
    """Clear the persisted session user and sign out."""
    forget_user(request)
    logout(request)
    return redirect("login")


def health_check(request):
    return HttpResponse("ok")
