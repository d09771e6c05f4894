import pytest

from lldpatterns.dependency_inversion import (
    EmailNotifier,
    GmailNotifier,
    Notifier,
    SMSNotifier,
    UserService,
    UserServices,
    bad_dependency_inversion,
    good_dependency_inversion,
)


class _RecordingNotifier(Notifier):
    def __init__(self):
        self.messages = []

    def send(self, message):
        self.messages.append(message)


def test_email_notifier_output(capsys):
    EmailNotifier().send_email("hello")
    assert capsys.readouterr().out == "Email Sent hello\n"


def test_user_service_output(capsys):
    UserService().register_user("ann")
    assert capsys.readouterr().out == "User Registered ann\nEmail Sent Hi you're welcome ann\n"


def test_user_services_uses_given_notifier(capsys):
    recorder = _RecordingNotifier()
    UserServices(recorder).register_user("ann")
    assert recorder.messages == ["hi MR ann"]
    assert capsys.readouterr().out == "User registered ann\n"


def test_notifiers_output(capsys):
    GmailNotifier().send("a")
    SMSNotifier().send("b")
    assert capsys.readouterr().out == "Email sent a\nSMS Sent b\n"


def test_notifier_is_abstract():
    with pytest.raises(TypeError):
        Notifier()


def test_bad_dependency_inversion_output(capsys):
    bad_dependency_inversion()
    assert capsys.readouterr().out == (
        "User Registered selva\nEmail Sent Hi you're welcome selva\n"
    )


def test_good_dependency_inversion_output(capsys):
    good_dependency_inversion()
    assert capsys.readouterr().out == (
        "User registered selva\nEmail sent hi MR selva\n"
        "User registered kumar\nSMS Sent hi MR kumar\n"
    )