# jobs/views.py
import logging

from django.contrib import messages
from django.http import Http404, HttpResponseBadRequest, HttpResponseNotFound
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST
from django.views.static import serve

from accounts.decorators import admin_required
from .apps import get_services
from .exceptions import InvalidArgument, InvalidFile, NotFound
from .forms import ApplyForm, JobForm
from .models import JOB_TYPE_CHOICES, ApplicationStatus, JobStatus
from .services import ALL_STATUSES, parse_id

logger = logging.getLogger(__name__)


def _not_found(exc):
    return HttpResponseNotFound(str(exc))


# -------------------------
# Public job board
# -------------------------
@require_GET
def job_list(request):
    """
    Active jobs only, filtered by ?q, ?location and ?type.
    """
    catalog, _ = get_services()
    q = request.GET.get('q', '').strip()
    location = request.GET.get('location', '').strip()
    job_type = request.GET.get('type', '').strip()

    jobs = catalog.list_active_jobs(q=q, location=location, type=job_type)

    return render(request, 'jobs/job_list.html', {
        'jobs': jobs,
        'q': q,
        'location': location,
        'type': job_type,
        'type_choices': JOB_TYPE_CHOICES,
        'total_active': catalog.counts()['active'],
        'has_filters': bool(q or location or job_type),
    })


@require_GET
def job_detail(request, job_id):
    catalog, _ = get_services()
    try:
        job = catalog.get_job(job_id)
    except NotFound as e:
        return _not_found(e)
    return render(request, 'jobs/job_detail.html', {'job': job, 'form': ApplyForm()})


@require_POST
def job_apply(request, job_id):
    catalog, desk = get_services()
    try:
        job = catalog.get_job(job_id)
    except NotFound as e:
        return _not_found(e)

    form = ApplyForm(request.POST, request.FILES)
    if form.is_valid():
        try:
            desk.submit_application(job.id, form.to_fields(), form.cleaned_data.get('cvFile'))
        except NotFound as e:
            # job deleted between the lookup and the submit
            return _not_found(e)
        except InvalidFile as e:
            form.add_error('cvFile', str(e))
        else:
            return render(request, 'jobs/apply_thanks.html', {'job': job})

    return render(request, 'jobs/job_detail.html', {'job': job, 'form': form}, status=400)


@require_GET
def uploaded_file(request, path):
    """Serve a stored CV from the upload directory chosen at startup."""
    _, desk = get_services()
    try:
        return serve(request, path, document_root=desk.cv_storage.location)
    except Http404:
        return HttpResponseNotFound("File not found")


# -------------------------
# Admin: jobs
# -------------------------
@admin_required
@require_http_methods(["GET", "POST"])
def admin_jobs(request):
    catalog, desk = get_services()

    if request.method == 'POST':
        form = JobForm(request.POST)
        if form.is_valid():
            job = catalog.create_job(form.to_fields())
            messages.success(request, f"Job \"{job.title or 'Untitled'}\" posted.")
            return redirect('jobs:admin_jobs')
        tab = 'create'
    else:
        form = JobForm()
        tab = 'create' if request.GET.get('tab') == 'create' else 'view'

    view_status = JobStatus.ARCHIVED if request.GET.get('status') == JobStatus.ARCHIVED else JobStatus.ACTIVE
    rows = [(job, desk.count_for_job(job.id)) for job in catalog.list_jobs(view_status)]

    return render(request, 'jobs/admin_jobs.html', {
        'tab': tab,
        'view_status': view_status,
        'rows': rows,
        'counts': catalog.counts(),
        'form': form,
        'type_choices': JOB_TYPE_CHOICES,
    })


@admin_required
@require_http_methods(["GET", "POST"])
def job_edit(request, job_id):
    catalog, _ = get_services()
    try:
        job = catalog.get_job(job_id)
    except NotFound as e:
        return _not_found(e)

    if request.method == 'POST':
        form = JobForm(request.POST)
        if form.is_valid():
            try:
                catalog.update_job(job.id, form.to_fields())
            except NotFound as e:
                return _not_found(e)
            messages.success(request, "Job updated.")
            return redirect('jobs:admin_jobs')
    else:
        form = JobForm.for_job(job)
    return render(request, 'jobs/job_edit.html', {'form': form, 'job': job, 'type_choices': JOB_TYPE_CHOICES})


@admin_required
@require_POST
def job_delete(request, job_id):
    catalog, _ = get_services()
    catalog.delete_job(job_id)
    messages.success(request, "Job deleted.")
    return redirect('jobs:admin_jobs')


@admin_required
@require_POST
def job_archive(request, job_id):
    catalog, _ = get_services()
    try:
        catalog.archive_job(job_id)
    except NotFound as e:
        return _not_found(e)
    return redirect('jobs:admin_jobs')


@admin_required
@require_POST
def job_activate(request, job_id):
    catalog, _ = get_services()
    try:
        catalog.activate_job(job_id)
    except NotFound as e:
        return _not_found(e)
    return redirect('jobs:admin_jobs')


# -------------------------
# Admin: applicants
# -------------------------
@admin_required
@require_GET
def admin_applicants(request):
    catalog, desk = get_services()
    status_filter = request.GET.get('status', '').strip() or ALL_STATUSES
    if status_filter != ALL_STATUSES and status_filter not in ApplicationStatus.values:
        status_filter = ALL_STATUSES
    job_id = parse_id(request.GET.get('jobId', ''))

    applications = desk.list_applications(status=status_filter, job_id=job_id)
    rows = [(app, catalog.find_job(app.job_id)) for app in applications]

    return render(request, 'jobs/admin_applicants.html', {
        'rows': rows,
        'status_filter': status_filter,
        'job_for_filter': catalog.find_job(job_id) if job_id is not None else None,
        'counts': desk.status_counts(),
        'statuses': ApplicationStatus.choices,
    })


@admin_required
@require_GET
def admin_applicant_detail(request, app_id):
    catalog, desk = get_services()
    try:
        application = desk.get_application(app_id)
    except NotFound as e:
        return _not_found(e)
    return render(request, 'jobs/admin_applicant_detail.html', {
        'app': application,
        'job': catalog.find_job(application.job_id),
        'statuses': ApplicationStatus.choices,
    })


@admin_required
@require_POST
def applicant_status(request, app_id):
    _, desk = get_services()
    try:
        application = desk.set_application_status(app_id, request.POST.get('status', ''))
    except NotFound as e:
        return _not_found(e)
    except InvalidArgument as e:
        return HttpResponseBadRequest(str(e))
    messages.success(request, f"Status for {application.name or 'applicant'} saved.")
    return redirect('jobs:admin_applicants')
