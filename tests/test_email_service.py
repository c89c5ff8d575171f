import smtplib

import pytest

from onboarding.services import email_service
from onboarding.services.email_service import EmailService


class FakeSMTP:
    instances = []

    def __init__(self, host, port):
        self.host = host
        self.port = port
        self.started_tls = False
        self.logged_in = None
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, user, password):
        self.logged_in = (user, password)

    def send_message(self, msg):
        self.sent.append(msg)


class FailingSMTP(FakeSMTP):
    def send_message(self, msg):
        raise smtplib.SMTPException("relay refused")


@pytest.fixture(autouse=True)
def clear_instances():
    FakeSMTP.instances.clear()
    yield


def _service(**overrides):
    options = {
        "host": "smtp.example.com",
        "port": 2525,
        "user": "mailer",
        "password": "mail-pass",
        "from_email": "hr@x.com",
    }
    options.update(overrides)
    return EmailService(**options)


def test_send_uses_starttls_login_and_headers(monkeypatch):
    monkeypatch.setattr(email_service.smtplib, "SMTP", FakeSMTP)

    _service().send("alice@x.com", "OTP Verification", "Your OTP is: 123456")

    server = FakeSMTP.instances[0]
    assert (server.host, server.port) == ("smtp.example.com", 2525)
    assert server.started_tls
    assert server.logged_in == ("mailer", "mail-pass")
    msg = server.sent[0]
    assert msg["Subject"] == "OTP Verification"
    assert msg["From"] == "hr@x.com"
    assert msg["To"] == "alice@x.com"
    assert "123456" in msg.get_payload()


def test_transport_failure_is_not_raised(monkeypatch):
    monkeypatch.setattr(email_service.smtplib, "SMTP", FailingSMTP)

    _service().send("alice@x.com", "Temporary Password", "Your temporary password is: abcd1234")

    assert FakeSMTP.instances[0].sent == []


def test_connection_error_is_not_raised(monkeypatch):
    def refuse(host, port):
        raise ConnectionRefusedError("no server")

    monkeypatch.setattr(email_service.smtplib, "SMTP", refuse)

    _service().send("alice@x.com", "OTP Verification", "body")


def test_without_host_nothing_is_sent(monkeypatch):
    monkeypatch.setattr(email_service.smtplib, "SMTP", FakeSMTP)

    _service(host=None).send("alice@x.com", "OTP Verification", "body")

    assert FakeSMTP.instances == []
