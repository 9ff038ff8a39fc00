from __future__ import annotations

from clinicportal.app.common.log_redaction import redact_text, redact_value


def test_redact_text_enmascara_email_documento_y_telefono() -> None:
    text = "Contacto: awa.mbarga@example.com seguro 12345678 tel +237 699 00 11 22"

    redacted = redact_text(text)

    assert "awa.mbarga@example.com" not in redacted
    assert "12345678" not in redacted
    assert "+237 699 00 11 22" not in redacted
    assert redacted.count("***") >= 3


def test_redact_text_enmascara_tokens_bearer() -> None:
    assert redact_text("Authorization: Bearer abc.def-123") == "Authorization: Bearer ***"


def test_redact_value_enmascara_claves_de_la_api_recursivamente() -> None:
    payload = {
        "firstname": "Awa",
        "lastname": "Mbarga",
        "contacto": {"email": "awa@example.com", "phone": "699001122"},
        "pagos": [{"patient_name": "Mbarga", "amount": "25000.00"}],
        "status": 400,
    }

    redacted = redact_value(payload)

    assert redacted["firstname"] == "***"
    assert redacted["lastname"] == "***"
    assert redacted["contacto"]["email"] == "***"
    assert redacted["contacto"]["phone"] == "***"
    assert redacted["pagos"][0]["patient_name"] == "***"
    assert redacted["pagos"][0]["amount"] == "25000.00"
    assert redacted["status"] == 400
