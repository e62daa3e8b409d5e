"""
Email templates for SkillSwapper.

All templates use inline CSS for email client compatibility.
Each template function returns (subject, html_body, text_body).
"""

from html import escape
from typing import Iterable, List, Optional, Tuple

from skillswapper.domain.entities.user import User
from skillswapper.domain.value_objects.matched_skills import MatchedSkills, SkillSnapshot

APP_NAME = "SkillSwapper"

PRIMARY = "#4F46E5"
TEXT_PRIMARY = "#1F2937"
TEXT_SECONDARY = "#6B7280"
BG_PAGE = "#F3F4F6"
BG_CARD = "#FFFFFF"
TAG_BG = "#EEF2FF"


def _base_layout(content: str) -> str:
    """Wrap content in the base email layout."""
    return f"""\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{APP_NAME}</title>
</head>
<body style="margin: 0; padding: 0; background-color: {BG_PAGE}; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; color: {TEXT_PRIMARY};">
    <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%" style="background-color: {BG_PAGE};">
        <tr>
            <td align="center" style="padding: 40px 20px;">
                <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="600" style="max-width: 600px; width: 100%; background-color: {BG_CARD}; border-radius: 12px; padding: 32px;">
                    <tr>
                        <td>
                            {content}
                        </td>
                    </tr>
                    <tr>
                        <td align="center" style="padding-top: 32px;">
                            <p style="color: {TEXT_SECONDARY}; font-size: 12px; line-height: 1.5; margin: 0;">
                                This email was sent because you have an account with {APP_NAME}.<br>
                                If you no longer wish to receive these emails, you can update your notification preferences in your account settings.
                            </p>
                        </td>
                    </tr>
                </table>
            </td>
        </tr>
    </table>
</body>
</html>"""


def _button(url: str, label: str) -> str:
    """Render a CTA button."""
    return f"""\
<table role="presentation" cellspacing="0" cellpadding="0" border="0" style="margin: 28px auto;">
    <tr>
        <td align="center" style="background-color: {PRIMARY}; border-radius: 8px;">
            <a href="{escape(url)}" target="_blank" style="display: inline-block; padding: 14px 32px; color: #FFFFFF; font-size: 16px; font-weight: 600; text-decoration: none;">
                {label}
            </a>
        </td>
    </tr>
</table>"""


def _skill_tags(skills: Iterable[SkillSnapshot]) -> str:
    tags = [
        f'<span style="display: inline-block; background-color: {TAG_BG}; color: {PRIMARY}; '
        f'padding: 4px 10px; margin: 2px; border-radius: 12px; font-size: 13px;">{escape(s.name)}</span>'
        for s in skills
    ]
    return "".join(tags) or f'<span style="color: {TEXT_SECONDARY};">None listed</span>'


def _skill_text(skills: Iterable[SkillSnapshot]) -> str:
    return ", ".join(s.name for s in skills) or "None listed"


def _contact_html(person: User) -> str:
    lines = [
        "<h4>&#128231; Contact Information</h4>",
        f"<p><strong>Name:</strong> {escape(person.name)}</p>",
        f"<p><strong>Email:</strong> {escape(person.email)}</p>",
    ]
    if person.location:
        lines.append(f"<p><strong>Location:</strong> {escape(person.location)}</p>")
    return "\n".join(lines)


def _contact_text(person: User) -> List[str]:
    lines = [f"  Name: {person.name}", f"  Email: {person.email}"]
    if person.location:
        lines.append(f"  Location: {person.location}")
    return lines


def _connection_email(
    recipient: User,
    counterpart: User,
    skills: MatchedSkills,
    heading: str,
    lead: str,
    next_steps: List[str],
    frontend_url: str,
) -> Tuple[str, str]:
    """Shared HTML and text body for both acceptance emails."""
    other = escape(counterpart.name)
    matches_url = f"{frontend_url.rstrip('/')}/matches"

    html_body = _base_layout(f"""\
<h1 style="margin: 0 0 8px 0;">{heading}</h1>
<p>Hi <strong>{escape(recipient.name)}</strong>,</p>
<p>{escape(lead)}</p>
<p>You can now start exchanging skills and learning from each other.</p>
{_contact_html(counterpart)}
<h4>&#127891; Skills you can teach {other}:</h4>
<p>{_skill_tags(skills.skills_you_can_teach_them)}</p>
<h4>&#128218; Skills you can learn from {other}:</h4>
<p>{_skill_tags(skills.skills_they_can_teach_you)}</p>
{_button(matches_url, "View Your Connections")}
<p><strong>Next Steps:</strong></p>
<ul>
{"".join(f"<li>{escape(step)}</li>" for step in next_steps)}
</ul>
<p>Happy learning and teaching!</p>
<p>The {APP_NAME} Team</p>""")

    text_lines = [
        f"Hi {recipient.name},",
        "",
        lead,
        "You can now start exchanging skills and learning from each other.",
        "",
        "Contact Information:",
        *_contact_text(counterpart),
        "",
        f"Skills you can teach {counterpart.name}: {_skill_text(skills.skills_you_can_teach_them)}",
        f"Skills you can learn from {counterpart.name}: {_skill_text(skills.skills_they_can_teach_you)}",
        "",
        f"View your connections: {matches_url}",
        "",
        "Next Steps:",
        *(f"- {step}" for step in next_steps),
        "",
        "Happy learning and teaching!",
        f"The {APP_NAME} Team",
    ]
    return html_body, "\n".join(text_lines)


def connection_accepted_to_requester(
    requester: User, accepter: User, skills: MatchedSkills, frontend_url: str
) -> Tuple[str, str, str]:
    """
    Sent to the user whose connection request was accepted.

    Args:
        requester: Recipient, the user who proposed the connection.
        accepter: The user who accepted it.
        skills: Matched skills from the requester's perspective.
        frontend_url: Base URL of the web client.
    """
    subject = f"\U0001F389 Your connection request was accepted by {accepter.name}!"
    html_body, text_body = _connection_email(
        recipient=requester,
        counterpart=accepter,
        skills=skills,
        heading="&#127881; Great News! Your connection request was accepted!",
        lead=f"{accepter.name} has accepted your connection request!",
        next_steps=[
            f"Reach out to {accepter.name} via email to introduce yourself",
            "Discuss your learning goals and teaching preferences",
            "Plan your first skill exchange session",
            "Share your availability and preferred communication methods",
        ],
        frontend_url=frontend_url,
    )
    return subject, html_body, text_body


def connection_accepted_to_accepter(
    accepter: User, requester: User, skills: MatchedSkills, frontend_url: str
) -> Tuple[str, str, str]:
    """Sent to the user who accepted a connection request."""
    subject = f"\U0001F91D You've connected with {requester.name} on {APP_NAME}!"
    html_body, text_body = _connection_email(
        recipient=accepter,
        counterpart=requester,
        skills=skills,
        heading=f"&#129309; New Connection! You've connected with {escape(requester.name)}",
        lead=f"You've accepted a connection request from {requester.name}!",
        next_steps=[
            f"Wait for {requester.name} to reach out to you via email",
            "Be ready to discuss your teaching and learning preferences",
            "Plan your first skill exchange session together",
            "Share your availability and preferred communication methods",
        ],
        frontend_url=frontend_url,
    )
    return subject, html_body, text_body
