from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from integration_actions.actions.fields import (
    KIND_INTEGER,
    KIND_JSON,
    KIND_OBJECT,
    ActionSpec,
    FieldSpec,
    build_request,
    check_required,
    decode_fields,
)
from integration_actions.types import SendResult

from ._common import _invoke_app, ensure_authorized

if TYPE_CHECKING:
    from integration_actions.core.context import ActionContext


SEND_EMAIL_SPEC = ActionSpec(
    key="sendgrid-send-an-email",
    name="Send an Email",
    description="Sends an email.",
    version="0.0.35",
    provider="sendgrid",
    tool="sendgrid_send_email",
    fields=(
        FieldSpec(
            "personalizations",
            "personalizations",
            "Personalizations",
            kind=KIND_JSON,
            required=True,
            target="personalizations",
            description=(
                "A JSON-based array of messages and their metadata. Each object is an envelope "
                "defining who receives an individual message and how it is handled. maxItems: 1000. "
                'Example: `[{"to":[{"email":"email@email.com","name":"Example"}],"subject":"Mail Personalization Sample"}]`'
            ),
        ),
        FieldSpec(
            "fromEmail",
            "from_email",
            "From Email",
            required=True,
            target="from.email",
            anchor=True,
            description="The 'From' address; should be a verified sender in the SendGrid account.",
        ),
        FieldSpec(
            "fromName",
            "from_name",
            "From Name",
            target="from.name",
            description="A name or title associated with the sending email address.",
        ),
        FieldSpec(
            "replyToEmail",
            "reply_to_email",
            "Reply To Email",
            target="reply_to.email",
            anchor=True,
            description="The email address where any replies or bounces will be returned.",
        ),
        FieldSpec(
            "replyToName",
            "reply_to_name",
            "Reply To Name",
            target="reply_to.name",
            description="A name or title associated with the `reply_to` email address.",
        ),
        FieldSpec(
            "subject",
            "subject",
            "Subject",
            required=True,
            target="subject",
            description="The global subject; personalizations may override it.",
        ),
        FieldSpec(
            "content",
            "content",
            "Content",
            kind=KIND_JSON,
            required=True,
            target="content",
            description=(
                "A JSON-based array of content objects, each with a MIME `type` and `value`. "
                'Example: `[{"type":"text/plain","value":"Plain text content."}]`'
            ),
        ),
        FieldSpec(
            "attachments",
            "attachments",
            "Attachments",
            kind=KIND_JSON,
            target="attachments",
            description=(
                "A JSON-based array of attachments; `content` (base64) and `filename` are required. "
                'Example: `[{"content":"aGV5","type":"text/plain","filename":"sample.txt"}]`'
            ),
        ),
        FieldSpec(
            "templateId",
            "template_id",
            "Template Id",
            target="template_id",
            description="An email template ID; a template's subject and content override the message's.",
        ),
        FieldSpec(
            "headers",
            "headers",
            "Headers",
            kind=KIND_OBJECT,
            target="headers",
            description="Header names and values to add to the message.",
        ),
        FieldSpec(
            "categories",
            "categories",
            "Categories",
            kind=KIND_JSON,
            target="categories",
            description=(
                "A JSON-based array of category names (max 255 characters each). "
                'Example: `["category1","category2"]`'
            ),
        ),
        FieldSpec(
            "customArgs",
            "custom_args",
            "Custom Args",
            target="custom_args",
            description="Send-wide key/value pairs carried along with the email and its activity data.",
        ),
        FieldSpec(
            "sendAt",
            "send_at",
            "Send At",
            kind=KIND_INTEGER,
            target="send_at",
            description="Unix timestamp for scheduled delivery (at most 72 hours ahead).",
        ),
        FieldSpec(
            "batchId",
            "batch_id",
            "Batch Id",
            kind=KIND_INTEGER,
            target="batch_id",
            description="Batch identifier; allows cancelling or pausing the batch's delivery.",
        ),
        FieldSpec(
            "asm",
            "asm",
            "ASM",
            kind=KIND_OBJECT,
            target="asm",
            description="Advanced Suppression Manager settings for handling unsubscribes.",
        ),
        FieldSpec(
            "ipPoolName",
            "ip_pool_name",
            "Ip Pool Name",
            target="ip_pool_name",
            description="The IP Pool to send this email from.",
        ),
        FieldSpec(
            "mailSettings",
            "mail_settings",
            "Mail Settings",
            kind=KIND_OBJECT,
            target="mail_settings",
            description="Mail settings controlling how this email is handled.",
        ),
        FieldSpec(
            "trackingSettings",
            "tracking_settings",
            "Tracking Settings",
            kind=KIND_OBJECT,
            target="tracking_settings",
            description="Settings for tracking how recipients interact with the email.",
        ),
    ),
    null_when_absent=("reply_to",),
    required_message="Must provide personalizations, fromEmail, subject, and content parameters.",
)


def build_send_email_request(values: Dict[str, Any]) -> Dict[str, Any]:
    """Validate, decode and assemble the SendGrid mail body from parameter values."""
    check_required(SEND_EMAIL_SPEC, values)
    decoded = decode_fields(SEND_EMAIL_SPEC, values)
    # Encoded fields may decode to null.
    check_required(SEND_EMAIL_SPEC, decoded)
    return build_request(SEND_EMAIL_SPEC, decoded)


def sendgrid_send_email(
    context: "ActionContext",
    personalizations: str | None = None,
    from_email: str | None = None,
    subject: str | None = None,
    content: str | None = None,
    from_name: str | None = None,
    reply_to_email: str | None = None,
    reply_to_name: str | None = None,
    attachments: str | None = None,
    template_id: str | None = None,
    headers: Dict[str, Any] | None = None,
    categories: str | None = None,
    custom_args: Any = None,
    send_at: int | None = None,
    batch_id: int | None = None,
    asm: Dict[str, Any] | None = None,
    ip_pool_name: str | None = None,
    mail_settings: Dict[str, Any] | None = None,
    tracking_settings: Dict[str, Any] | None = None,
) -> SendResult:
    """
    Send an email through SendGrid's v3 mail send endpoint.

    Args:
        personalizations: JSON array of recipient envelopes.
        from_email: Verified sender address.
        subject: Message-level subject.
        content: JSON array of `{type, value}` bodies.
        from_name: Optional sender display name.
        reply_to_email: Optional reply-to address; enables `reply_to`.
        reply_to_name: Optional reply-to display name.
        attachments: Optional JSON array of base64 attachments.
        template_id: Optional dynamic/legacy template ID.
        headers: Optional header mapping.
        categories: Optional JSON array of category names.
        custom_args: Optional send-wide custom arguments, passed through as given.
        send_at: Optional unix timestamp for scheduled delivery.
        batch_id: Optional batch identifier.
        asm: Optional suppression settings object.
        ip_pool_name: Optional IP pool name.
        mail_settings: Optional mail settings object.
        tracking_settings: Optional tracking settings object.

    Returns:
        The SendGrid app client's result, unchanged.
    """
    provider = "sendgrid"
    tool_name = "sendgrid_send_email"
    config = build_send_email_request(
        {
            "personalizations": personalizations,
            "from_email": from_email,
            "from_name": from_name,
            "reply_to_email": reply_to_email,
            "reply_to_name": reply_to_name,
            "subject": subject,
            "content": content,
            "attachments": attachments,
            "template_id": template_id,
            "headers": headers,
            "categories": categories,
            "custom_args": custom_args,
            "send_at": send_at,
            "batch_id": batch_id,
            "asm": asm,
            "ip_pool_name": ip_pool_name,
            "mail_settings": mail_settings,
            "tracking_settings": tracking_settings,
        }
    )
    app = ensure_authorized(context, provider)
    return _invoke_app(context, provider, tool_name, app.send_email, config, payload_keys=list(config))


sendgrid_send_email.__action_spec__ = SEND_EMAIL_SPEC
