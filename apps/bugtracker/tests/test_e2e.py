"""
Form -> HTTP client -> endpoint -> database, with no mocks in between.
DRF's RequestsClient routes the requests session straight into the app.
"""
import pytest
from rest_framework.test import RequestsClient

from apps.bugtracker.client import BugReportClient
from apps.bugtracker.models import BugReport
from apps.bugtracker.report_form import FormStatus, ReportForm

BASE = "http://testserver"


@pytest.fixture
def session():
    return RequestsClient()


@pytest.fixture
def token(user, session):
    res = session.post(f"{BASE}/api/token/", json={"username": "reporter", "password": "pass12345!"})
    assert res.status_code == 200, res.content
    return res.json()["access"]


@pytest.fixture
def form(session, token):
    return ReportForm(BugReportClient(BASE, session=session, token=token))


@pytest.mark.django_db
def test_valid_data_is_stored_and_form_resets(form):
    form.change("title", "Test bug report")
    form.change("description", "This is a test description")
    form.change("severity", "high")

    form.submit()

    assert form.success_message == "Bug reported!"
    bug = BugReport.objects.get()
    assert (bug.title, bug.description, bug.severity) == (
        "Test bug report",
        "This is a test description",
        "high",
    )
    assert form.draft.as_payload() == {"title": "", "description": "", "severity": "medium"}


@pytest.mark.django_db
def test_default_severity_round_trip(form):
    form.change("title", "Another test bug")
    form.submit()

    assert form.status is FormStatus.SETTLED_SUCCESS
    assert BugReport.objects.get().severity == "medium"


@pytest.mark.django_db
def test_long_title_is_rejected_by_server_and_kept_in_form(form):
    form.change("title", "A" * 101)

    form.submit()

    assert form.field_error("title") == "The title must not be greater than 100 characters."
    assert form.draft.title == "A" * 101
    assert form.banner is None
    assert not BugReport.objects.exists()


@pytest.mark.django_db
def test_empty_title_never_reaches_server(form, session):
    form.submit()

    assert form.field_error("title") == "Title is required."
    assert not BugReport.objects.exists()


@pytest.mark.django_db
def test_unauthenticated_client_gets_general_error(session):
    form = ReportForm(BugReportClient(BASE, session=session))
    form.change("title", "Test server error")

    form.submit()

    assert form.general_error == "An error occurred. Please try again."
    assert form.field_errors == {}
    assert form.draft.title == "Test server error"
    assert not BugReport.objects.exists()
