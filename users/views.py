from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render

import structlog

from .forms import CustomUserCreationForm

logger = structlog.get_logger(__name__)


def register(request: HttpRequest) -> HttpResponse:
    if request.method == "POST":
        form = CustomUserCreationForm(request.POST)
        if form.is_valid():
            user = form.save()
            logger.info("user_registered", user_id=user.pk)
            messages.success(request, f"Account created for {user.email}! You can now log in")
            return redirect("login")
        logger.debug("registration_rejected", fields=sorted(form.errors))
    else:
        form = CustomUserCreationForm()
    return render(request, "registration/register.html", {"form": form})


@login_required
def profile(request: HttpRequest) -> HttpResponse:
    return render(request, "users/profile.html")
