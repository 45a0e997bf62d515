from __future__ import annotations

import pytest

from integration_actions.actions.fields import (
    ActionSpec,
    FieldSpec,
    bind_payload,
    build_request,
    check_required,
    decode_fields,
)
from integration_actions.actions.wrappers.sendgrid import SEND_EMAIL_SPEC, build_send_email_request
from integration_actions.core.exceptions import ActionValidationError

CONTACT_SPEC = ActionSpec(
    key="demo-contact",
    name="Contact",
    description="",
    version="0.0.1",
    provider="demo",
    tool="demo_contact",
    fields=(
        FieldSpec("contactEmail", "contact_email", "Email", required=True, target="contact.email", anchor=True),
        FieldSpec("contactName", "contact_name", "Name", target="contact.name"),
        FieldSpec("tags", "tags", "Tags", kind="json", target="tags"),
        FieldSpec("note", "note", "Note"),
    ),
)


def test_sendgrid_field_table_maps_props_to_provider_names():
    mapping = {f.prop: f.target for f in SEND_EMAIL_SPEC.fields}

    assert mapping["fromEmail"] == "from.email"
    assert mapping["fromName"] == "from.name"
    assert mapping["replyToEmail"] == "reply_to.email"
    assert mapping["templateId"] == "template_id"
    assert mapping["sendAt"] == "send_at"
    assert mapping["batchId"] == "batch_id"
    assert mapping["ipPoolName"] == "ip_pool_name"
    assert mapping["mailSettings"] == "mail_settings"
    assert mapping["trackingSettings"] == "tracking_settings"
    assert mapping["customArgs"] == "custom_args"


def test_sendgrid_required_and_encoded_fields():
    required = [f.prop for f in SEND_EMAIL_SPEC.required_fields]
    encoded = [f.prop for f in SEND_EMAIL_SPEC.fields if f.kind == "json"]
    integers = [f.prop for f in SEND_EMAIL_SPEC.fields if f.kind == "integer"]

    assert required == ["personalizations", "fromEmail", "subject", "content"]
    assert encoded == ["personalizations", "content", "attachments", "categories"]
    assert integers == ["sendAt", "batchId"]


def test_build_send_email_request_without_dispatch():
    body = build_send_email_request(
        {
            "personalizations": "[]",
            "from_email": "a@b.com",
            "subject": "s",
            "content": '[{"type": "text/html", "value": "<p>x</p>"}]',
            "template_id": "d-1",
        }
    )

    assert body == {
        "personalizations": [],
        "from": {"email": "a@b.com"},
        "reply_to": None,
        "subject": "s",
        "content": [{"type": "text/html", "value": "<p>x</p>"}],
        "template_id": "d-1",
    }


def test_group_without_null_marker_is_omitted():
    body = build_request(CONTACT_SPEC, {"contact_email": "", "contact_name": "Ann", "note": "x"})

    assert body == {}


def test_group_emitted_when_anchor_set():
    body = build_request(CONTACT_SPEC, {"contact_email": "c@d.com", "contact_name": "Ann"})

    assert body == {"contact": {"email": "c@d.com", "name": "Ann"}}


def test_decode_fields_leaves_structured_values_alone():
    decoded = decode_fields(CONTACT_SPEC, {"tags": ["already", "parsed"]})

    assert decoded["tags"] == ["already", "parsed"]


def test_check_required_default_message():
    with pytest.raises(ActionValidationError) as excinfo:
        check_required(CONTACT_SPEC, {})

    assert str(excinfo.value) == "Must provide contactEmail parameters. Missing: contactEmail."
    assert excinfo.value.details == {"required": ["contactEmail"]}


def test_bind_payload_accepts_props_and_params():
    kwargs = bind_payload(CONTACT_SPEC, {"contactEmail": "c@d.com", "contact_name": "Ann"})

    assert kwargs == {"contact_email": "c@d.com", "contact_name": "Ann"}


def test_bind_payload_rejects_unknown_and_duplicate_fields():
    with pytest.raises(ActionValidationError) as unknown:
        bind_payload(CONTACT_SPEC, {"contactEmail": "c@d.com", "bogus": 1})
    assert unknown.value.details["unknown"] == ["bogus"]

    with pytest.raises(ActionValidationError):
        bind_payload(CONTACT_SPEC, {"contactEmail": "c@d.com", "contact_email": "e@f.com"})


def test_describe_reports_optionality_and_targets():
    props = {p["prop"]: p for p in SEND_EMAIL_SPEC.describe()["props"]}

    assert props["fromEmail"]["optional"] is False
    assert props["fromName"]["optional"] is True
    assert props["sendAt"]["type"] == "integer"
    assert props["sendAt"]["target"] == "send_at"
