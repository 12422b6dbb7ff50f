import pytest


def make_event(request_type, intent_name=None, **request_fields):
    request = {"type": request_type, "requestId": "amzn1.echo-api.request.test", "locale": "en-US"}
    if intent_name is not None:
        request["intent"] = {"name": intent_name, "confirmationStatus": "NONE"}
    request.update(request_fields)
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.test",
            "application": {"applicationId": "amzn1.ask.skill.test"},
        },
        "context": {},
        "request": request,
    }


@pytest.fixture
def event_factory():
    return make_event
