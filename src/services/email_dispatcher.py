"""
Email delivery for Meeting Summarizer application.
Sends summaries over SMTP, or writes them to a local outbox when SMTP is not configured.
"""
import logging
import os
import smtplib
from email.message import EmailMessage
from email.utils import formataddr
from html import escape
from typing import List, Optional

import markdown

from src.models.summary import EmailSendRequest
from src.utils.helpers import outbox_filename

logger = logging.getLogger(__name__)

TRANSCRIPT_ATTACHMENT_NAME = "meeting-transcript.txt"
DEFAULT_SUBJECT = "Meeting Summary - AI Generated"
SMTP_TIMEOUT = 30


class EmailDispatcher:
    """
    SMTP email dispatcher.

    Uses STARTTLS by default or implicit SSL when use_ssl is set. Without an
    SMTP host the message is saved as an .eml file in outbox_dir instead.
    """

    def __init__(
        self,
        smtp_host: Optional[str] = None,
        smtp_port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender_email: Optional[str] = None,
        sender_name: str = "AI Meeting Notes",
        use_ssl: bool = False,
        outbox_dir: str = os.path.join('data', 'outbox')
    ):
        self.smtp_host = smtp_host
        self.smtp_port = int(smtp_port)
        self.username = username
        self.password = password
        self.sender_email = sender_email or username or "noreply@localhost"
        self.sender_name = sender_name
        self.use_ssl = use_ssl
        self.outbox_dir = outbox_dir

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_host)

    def send(self, request: EmailSendRequest) -> None:
        """
        Deliver a summary email. Errors propagate to the caller unchanged.

        Args:
            request: Recipients, subject, content and send options
        """
        msg = self.build_message(request)

        if not self.smtp_configured:
            path = self._write_to_outbox(msg)
            logger.warning(f"SMTP not configured; email for {len(request.recipients)} recipients written to {path}")
            return

        smtp_class = smtplib.SMTP_SSL if self.use_ssl else smtplib.SMTP
        with smtp_class(self.smtp_host, self.smtp_port, timeout=SMTP_TIMEOUT) as server:
            if not self.use_ssl:
                server.ehlo()
                server.starttls()
                server.ehlo()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(msg)

        logger.info(f"Email sent to {len(request.recipients)} recipients via {self.smtp_host}")

    def build_message(self, request: EmailSendRequest) -> EmailMessage:
        """
        Build the MIME message: plain text body, HTML alternative and the
        optional transcript attachment.
        """
        msg = EmailMessage()
        msg["Subject"] = " ".join(request.subject.splitlines())
        msg["From"] = formataddr((self.sender_name, self.sender_email))
        msg["To"] = ", ".join(request.recipients)
        if request.send_copy:
            msg["Bcc"] = self.sender_email

        body_text = self.compose_body(request.summary_content, request.additional_message)
        msg.set_content(body_text, subtype="plain", charset="utf-8")
        msg.add_alternative(
            self.render_email_html(request.summary_content, request.additional_message, request.subject),
            subtype="html",
            charset="utf-8"
        )

        if request.include_original:
            msg.add_attachment(
                request.original_transcript.encode("utf-8"),
                maintype="text",
                subtype="plain",
                filename=TRANSCRIPT_ATTACHMENT_NAME
            )

        return msg

    @staticmethod
    def compose_body(summary_content: str, additional_message: Optional[str] = None) -> str:
        """Plain text body with the additional message placed before the summary."""
        parts: List[str] = []
        if additional_message:
            parts.append(additional_message.strip())
            parts.append("---")
        parts.append(summary_content)
        return "\n\n".join(parts)

    @staticmethod
    def render_email_html(summary_content: str, additional_message: Optional[str] = None, title: Optional[str] = None) -> str:
        """
        Render the Markdown summary into HTML for email clients.
        """
        body_html = markdown.markdown(
            (summary_content or "").strip(),
            extensions=["extra", "sane_lists", "nl2br"],
            output_format="html5",
        )
        message_html = ""
        if additional_message:
            message_html = (
                '<p style="white-space: pre-wrap;">'
                f"{escape(additional_message.strip())}</p>"
                '<hr style="border: none; border-top: 1px solid #eee; margin: 16px 0;" />'
            )

        return f"""\
<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>{escape(title or "Meeting Summary")}</title>
  </head>
  <body style="font-family: Arial, sans-serif; line-height: 1.5; color: #111;">
    <div style="max-width: 760px; margin: 0 auto; padding: 16px;">
      {message_html}
      <div style="font-size: 14px;">
        {body_html}
      </div>
      <hr style="border: none; border-top: 1px solid #eee; margin: 16px 0;" />
      <div style="font-size: 12px; color: #666;">
        Generated with AI Meeting Notes Summarizer.
      </div>
    </div>
  </body>
</html>
"""

    def _write_to_outbox(self, msg: EmailMessage) -> str:
        os.makedirs(self.outbox_dir, exist_ok=True)
        path = os.path.join(self.outbox_dir, outbox_filename(str(msg["Subject"])))
        with open(path, "wb") as f:
            f.write(msg.as_bytes())
        return path
