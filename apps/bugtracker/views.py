from django.contrib.auth.decorators import login_required
from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from .constants import DRAFT_FIELDS, SEVERITIES, SUBMITTING_LABEL
from .report_form import ReportForm
from .services import InProcessSubmitter


@login_required
@require_http_methods(["GET", "POST"])
def report_create(request):
    """
    Server-rendered "Report a Bug" page. It runs the same ReportForm as API
    clients do, just with the create operation called in-process.
    """
    form = ReportForm(InProcessSubmitter(request))
    if request.method == "POST":
        for name in DRAFT_FIELDS:
            form.change(name, request.POST.get(name, getattr(form.draft, name)))
        form.submit()

    ctx = form.as_context()
    ctx["severities"] = SEVERITIES
    ctx["submitting_label"] = SUBMITTING_LABEL
    return render(request, "bugtracker/form.html", ctx)
