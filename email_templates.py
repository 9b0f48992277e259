"""HTML bodies and subject lines for inquiry notification emails."""

from html import escape
from typing import Optional, Tuple

from schemas import AdmissionInquiry, ContactInquiry

SCHOOL_NAME = "Young Achievers School Website"

_CELL = "padding:10px; border:1px solid #e5e7eb;"
_LABEL = _CELL + " font-weight:700; background:#f9fafb;"


def _v(value: Optional[str]) -> str:
    # "-" stands in for optional fields left blank
    return escape(value) if value else "-"


def _row(label: str, value: Optional[str]) -> str:
    return f"""
            <tr>
              <td style="{_LABEL}">{label}</td>
              <td style="{_CELL}">{_v(value)}</td>
            </tr>"""


def _header(title: str, gradient: str) -> str:
    return f"""
        <div style="background:linear-gradient(90deg,{gradient}); padding:18px; border-radius:14px; color:#fff;">
          <h2 style="margin:0;">{title}</h2>
          <p style="margin:6px 0 0; opacity:.95;">{SCHOOL_NAME}</p>
        </div>"""


def _call_button(phone: Optional[str], color: str) -> str:
    return f"""
          <div style="margin-top:20px; text-align:center;">
            <a href="tel:{_v(phone)}" style="display:inline-block;background:{color};color:white;padding:12px 20px;border-radius:999px;text-decoration:none;font-weight:700;">
              📞 Call Parent
            </a>
          </div>"""


def render_contact_inquiry(inquiry: ContactInquiry) -> Tuple[str, str]:
    """Return (subject, html) for a contact inquiry."""
    subject = f"📩 New Contact Inquiry: {inquiry.childName}"

    rows = "".join([
        _row("Child Name", inquiry.childName),
        _row("Phone", inquiry.phone),
        _row("Admission Class", inquiry.admissionClass),
    ])

    html_body = f"""
      <div style="font-family: Arial, sans-serif; padding:20px; max-width:700px; margin:auto; border-radius:14px; border:1px solid #e5e7eb;">
        {_header("📩 New Contact Inquiry", "#673AB7,#4FC3F7,#FFB74D")}
        <div style="padding:18px 10px;">
          <table style="width:100%; border-collapse:collapse;">{rows}
          </table>

          <h3 style="margin-top:18px;">Message</h3>
          <div style="padding:14px; border-radius:12px; background:#f9fafb; border:1px solid #e5e7eb; line-height:1.6;">
            {_v(inquiry.message)}
          </div>
          {_call_button(inquiry.phone, "#FF5E5E")}
        </div>
      </div>
    """
    return subject, html_body


def render_admission_inquiry(inquiry: AdmissionInquiry) -> Tuple[str, str]:
    """Return (subject, html) for an admission inquiry."""
    subject = f"🎓 New Admission Inquiry: {inquiry.studentName} ({inquiry.admissionClass})"

    rows = "".join([
        _row("Student Name", inquiry.studentName),
        _row("Admission Class", inquiry.admissionClass),
        _row("DOB", inquiry.dob),
        _row("Phone", inquiry.phone),
        _row("Last School", inquiry.lastSchool),
        _row("Address", inquiry.address),
    ])

    html_body = f"""
      <div style="font-family: Arial, sans-serif; padding:20px; max-width:700px; margin:auto; border-radius:14px; border:1px solid #e5e7eb;">
        {_header("🎓 New Admission Inquiry", "#00BCD4,#673AB7,#FFB74D")}
        <div style="padding:18px 10px;">
          <h3 style="margin:0 0 10px; color:#111827;">Student Details</h3>

          <table style="width:100%; border-collapse:collapse; font-size:14px;">{rows}
          </table>
          {_call_button(inquiry.phone, "#00BCD4")}

          <p style="margin-top:18px;font-size:12px;color:#6b7280;text-align:center;">
            This admission inquiry was submitted from the official school website.
          </p>
        </div>
      </div>
    """
    return subject, html_body
