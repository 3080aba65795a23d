"""Password setup routes.

``GET`` serves the page the emailed setup link opens; the page posts the
new password back to ``POST /api/setup-password`` as JSON.
"""

import logging
from html import escape

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from fastapi.responses import HTMLResponse

from uniflow.application.usecase.account import (
    CheckSetupLinkUseCase,
    SetupPasswordUseCase,
)
from uniflow.application.usecase.account.check_setup_link import CheckSetupLinkRequest
from uniflow.application.usecase.account.setup_password import SetupPasswordRequest
from uniflow.application.usecase.base import MessageResponse
from uniflow.domain.error import DomainError
from uniflow.interface.api.errors import status_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["password"], route_class=DishkaRoute)

_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title} - UniFlow</title>
  <style>
    body {{ font-family: Arial, sans-serif; max-width: 420px; margin: 40px auto; padding: 0 20px; color: #333; }}
    h1 {{ color: #4CAF50; }}
    input {{ width: 100%; padding: 10px; margin: 8px 0; box-sizing: border-box; }}
    button {{ width: 100%; padding: 12px; background: #4CAF50; color: white; border: none; border-radius: 5px; }}
    #result {{ margin-top: 16px; }}
  </style>
</head>
<body>
  <h1>{title}</h1>
  {body}
</body>
</html>
"""

_FORM = """<p>Choose a password for <strong>{email}</strong>.</p>
  <form id="setup-form">
    <input type="hidden" name="email" value="{email}">
    <input type="hidden" name="token" value="{token}">
    <input type="password" name="password" placeholder="New password" minlength="6" required>
    <input type="password" name="confirm" placeholder="Confirm password" minlength="6" required>
    <button type="submit">Set Password</button>
  </form>
  <p id="result"></p>
  <script>
    document.getElementById("setup-form").addEventListener("submit", async (event) => {{
      event.preventDefault();
      const form = event.target;
      const result = document.getElementById("result");
      if (form.password.value !== form.confirm.value) {{
        result.textContent = "Passwords do not match";
        return;
      }}
      const response = await fetch("/api/setup-password", {{
        method: "POST",
        headers: {{"Content-Type": "application/json"}},
        body: JSON.stringify({{
          email: form.email.value,
          token: form.token.value,
          password: form.password.value,
        }}),
      }});
      const data = await response.json();
      result.textContent = data.success ? data.message : data.error;
      if (data.success) form.remove();
    }});
  </script>"""


def render_page(title: str, body: str, status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    return HTMLResponse(_PAGE.format(title=escape(title), body=body), status_code=status_code)


def render_error(message: str, status_code: int) -> HTMLResponse:
    return render_page(
        "Password Setup", f"<p>{escape(message)}</p>", status_code=status_code
    )


@router.get("/setup-password", response_class=HTMLResponse)
async def setup_password_form(
    check_setup_link_use_case: FromDishka[CheckSetupLinkUseCase],
    token: str | None = Query(default=None),
    email: str | None = Query(default=None),
) -> HTMLResponse:
    """Serve the password setup form for a setup link.

    Returns a 400 page when the link is incomplete, or (with token
    enforcement on) unknown, expired or already used.
    """
    try:
        link = await check_setup_link_use_case.execute(
            CheckSetupLinkRequest(email=email, token=token)
        )
    except DomainError as e:
        return render_error(e.message, status_for(e))

    if not link.valid:
        logger.info("Setup link rejected")
        return render_error(
            "Invalid or expired password setup link", status.HTTP_400_BAD_REQUEST
        )

    form = _FORM.format(
        email=escape(link.email or "", quote=True),
        token=escape(link.token or "", quote=True),
    )
    return render_page("Set Up Your Password", form)


@router.post("/setup-password", response_model=MessageResponse)
async def setup_password(
    request: SetupPasswordRequest,
    setup_password_use_case: FromDishka[SetupPasswordUseCase],
) -> MessageResponse:
    """Add a password to a federated-only account.

    Example:
        POST /api/setup-password

        Request:
        {"email": "a@b.com", "password": "secret1", "token": "t"}

        Response:
        {
            "success": true,
            "message": "Password set successfully. You can now sign in with email and password."
        }
    """
    return await setup_password_use_case.execute(request)
