"""Transactional email bodies.

Plain string templates; every interpolated value is HTML-escaped in the
HTML part.
"""

from html import escape

from uniflow.domain.value import EmailMessage

_STYLE = """
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background-color: #4CAF50; color: white; padding: 20px; text-align: center; border-radius: 5px 5px 0 0; }
    .content { background-color: #f9f9f9; padding: 30px; border-radius: 0 0 5px 5px; }
    .code { font-size: 32px; font-weight: bold; text-align: center; color: #4CAF50; margin: 20px 0; }
    .button { display: inline-block; padding: 12px 30px; background-color: #4CAF50; color: white; text-decoration: none; border-radius: 5px; margin: 20px 0; }
    .footer { text-align: center; margin-top: 20px; color: #666; font-size: 12px; }
"""

_FOOTER = "UniFlow - Your Academic Companion"


def _layout(title: str, content: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head><style>{_STYLE}</style></head>
<body>
  <div class="container">
    <div class="header"><h1>{title}</h1></div>
    <div class="content">
{content}
    </div>
    <div class="footer"><p>{_FOOTER}</p></div>
  </div>
</body>
</html>
"""


def verification_code_email(to: str, code: str, ttl_minutes: int = 10) -> EmailMessage:
    """Render the one-time verification code email."""
    content = f"""      <p>Hello,</p>
      <p>Your verification code is:</p>
      <div class="code">{escape(code)}</div>
      <p>This code will expire in {ttl_minutes} minutes.</p>
      <p>If you didn't request this code, you can safely ignore this email.</p>"""

    text = (
        f"Your UniFlow verification code is: {code}\n\n"
        f"This code will expire in {ttl_minutes} minutes.\n\n"
        "If you didn't request this code, you can safely ignore this email."
    )

    return EmailMessage(
        to=to,
        subject="Your UniFlow Verification Code",
        html=_layout("Verify Your Email", content),
        text=text,
    )


def password_setup_email(to: str, setup_url: str, ttl_hours: int = 24) -> EmailMessage:
    """Render the password setup link email."""
    url = escape(setup_url, quote=True)
    content = f"""      <p>Hello,</p>
      <p>You requested to set up a password for your UniFlow account. Click the button below to set your password:</p>
      <p style="text-align: center;"><a href="{url}" class="button">Set Up Password</a></p>
      <p>Or copy and paste this link into your browser:</p>
      <p style="word-break: break-all; color: #666;">{url}</p>
      <p><strong>This link will expire in {ttl_hours} hours.</strong></p>
      <p>If you didn't request this, you can safely ignore this email.</p>"""

    text = (
        "Set Up Your Password - UniFlow\n\n"
        "Hello,\n\n"
        "You requested to set up a password for your UniFlow account.\n"
        "Click the link below to set your password:\n\n"
        f"{setup_url}\n\n"
        f"This link will expire in {ttl_hours} hours.\n\n"
        "If you didn't request this, you can safely ignore this email.\n\n"
        f"{_FOOTER}"
    )

    return EmailMessage(
        to=to,
        subject="Set Up Your Password - UniFlow",
        html=_layout("Set Up Your Password", content),
        text=text,
    )
