"""Email service for account notifications."""

import asyncio
import html
import logging
import smtplib
import ssl
from datetime import datetime
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from cashvelo.core.config import Settings, settings
from cashvelo.core.logging import mask_email

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending emails via SMTP."""

    def __init__(self, config: Optional[Settings] = None):
        config = config or settings
        self.app_name = config.APP_NAME
        self.host = config.SMTP_HOST
        self.port = config.SMTP_PORT
        self.user = config.SMTP_USER
        self.password = config.SMTP_PASSWORD
        self.from_email = config.SMTP_FROM_EMAIL
        self.from_name = config.SMTP_FROM_NAME
        self.use_tls = config.SMTP_TLS
        self.reset_expire_minutes = config.PASSWORD_RESET_EXPIRE_MINUTES
        self.enabled = config.email_enabled

    @property
    def is_configured(self) -> bool:
        """Check if email is properly configured."""
        return self.enabled

    def _render(self, title: str, content: str) -> str:
        """Wrap a message body in the shared layout. Styles are inline for mail clients."""
        accent = "#f97316"
        return f"""<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>{title}</title></head>
<body style="margin:0;padding:0;font-family:Arial,sans-serif;line-height:1.6;color:#374151;">
  <div style="max-width:600px;margin:0 auto;padding:20px;">
    <div style="background:{accent};color:#ffffff;padding:32px 24px;text-align:center;border-radius:12px 12px 0 0;">
      <h1 style="margin:0 0 8px 0;font-size:28px;">{self.app_name}</h1>
      <h2 style="margin:0;font-size:18px;font-weight:400;">{title}</h2>
    </div>
    <div style="background:#ffffff;padding:32px 24px;border:1px solid #e5e7eb;border-top:none;border-radius:0 0 12px 12px;">
      {content}
    </div>
    <p style="text-align:center;font-size:12px;color:#9ca3af;">
      &copy; {datetime.now().year} {self.app_name}. This message was sent automatically.
    </p>
  </div>
</body>
</html>
"""

    def _deliver(self, to_email: str, msg: MIMEMultipart) -> None:
        context = ssl.create_default_context()

        if self.use_tls:
            with smtplib.SMTP(self.host, self.port) as server:
                server.starttls(context=context)
                server.login(self.user, self.password)
                server.sendmail(self.from_email, to_email, msg.as_string())
        else:
            with smtplib.SMTP_SSL(self.host, self.port, context=context) as server:
                server.login(self.user, self.password)
                server.sendmail(self.from_email, to_email, msg.as_string())

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
    ) -> bool:
        """
        Send an email.

        Args:
            to_email: Recipient email address
            subject: Email subject
            html_content: HTML body content
            text_content: Plain text fallback (optional)

        Returns:
            True if sent successfully, False otherwise
        """
        if not self.is_configured:
            logger.warning("Email not configured, skipping send")
            return False

        try:
            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = f"{self.from_name} <{self.from_email}>"
            msg["To"] = to_email

            # Add text part (fallback)
            if text_content:
                msg.attach(MIMEText(text_content, "plain", "utf-8"))

            msg.attach(MIMEText(html_content, "html", "utf-8"))

            # smtplib blocks; keep it off the event loop
            await asyncio.to_thread(self._deliver, to_email, msg)

            logger.info(f"Email sent successfully to {mask_email(to_email)}: {subject}")
            return True

        except Exception as e:
            logger.error(f"Failed to send email to {mask_email(to_email)}: {e}")
            return False

    def password_reset_html(self, username: str, reset_url: str) -> str:
        """Reset message: greeting, button, copyable link, expiry notice."""
        minutes = self.reset_expire_minutes
        expiry = "1 hour" if minutes == 60 else f"{minutes} minutes"
        safe_url = html.escape(reset_url, quote=True)

        content = f"""
      <p>Hi <strong>{html.escape(username)}</strong>,</p>
      <p>Someone asked to reset the password on your {self.app_name} account.
      Use the button below to pick a new one.</p>
      <p style="text-align:center;margin:28px 0;">
        <a href="{safe_url}" style="background:#f97316;color:#ffffff;padding:14px 28px;border-radius:8px;text-decoration:none;font-weight:600;">Reset Password</a>
      </p>
      <p>If the button does not work, paste this link into your browser:</p>
      <p style="background:#f9fafb;border:1px solid #e5e7eb;border-radius:8px;padding:12px;word-break:break-all;font-size:13px;">{safe_url}</p>
      <p><strong>This link expires in {expiry}.</strong></p>
      <p>Did not ask for this? Ignore this email and your password stays the same.</p>
        """
        return self._render("Password Reset Request", content)

    async def send_password_reset_email(
        self,
        to_email: str,
        username: str,
        reset_url: str,
    ) -> bool:
        """Send the password reset link."""
        return await self.send_email(
            to_email=to_email,
            subject=f"Password Reset Request - {self.app_name}",
            html_content=self.password_reset_html(username, reset_url),
            text_content=(
                f"Hi {username},\n\n"
                f"Reset your {self.app_name} password here: {reset_url}\n\n"
                "If you didn't request this, ignore this email."
            ),
        )


email_service = EmailService()
