import pytest
from rest_framework.test import APIClient

from apps.bugtracker.results import Created


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="reporter", password="pass12345!")


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


class FakeSubmitter:
    """Records payloads and answers with queued results (Created by default)."""

    def __init__(self, *results, on_submit=None):
        self.results = list(results)
        self.payloads = []
        self.on_submit = on_submit

    def submit(self, payload):
        self.payloads.append(payload)
        if self.on_submit is not None:
            self.on_submit()
        result = self.results.pop(0) if self.results else Created(record={"id": 1})
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_submitter():
    return FakeSubmitter
