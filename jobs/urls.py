# jobs/urls.py
from django.urls import re_path

from firstconnect.routing import slash_optional
from . import views

app_name = 'jobs'

urlpatterns = [
    # public job board
    *slash_optional('jobs/', views.job_list, name='job_list'),                          # /jobs?q=&location=&type=
    *slash_optional('jobs/<int:job_id>/', views.job_detail, name='job_detail'),         # /jobs/3
    *slash_optional('jobs/<int:job_id>/apply/', views.job_apply, name='job_apply'),     # /jobs/3/apply
    re_path(r'^uploads/(?P<path>.+)$', views.uploaded_file, name='uploaded_file'),

    # admin: jobs
    *slash_optional('admin/jobs/', views.admin_jobs, name='admin_jobs'),                # ?tab=view|create&status=active|archived
    *slash_optional('admin/jobs/<int:job_id>/edit/', views.job_edit, name='job_edit'),
    *slash_optional('admin/jobs/<int:job_id>/delete/', views.job_delete, name='job_delete'),
    *slash_optional('admin/jobs/<int:job_id>/archive/', views.job_archive, name='job_archive'),
    *slash_optional('admin/jobs/<int:job_id>/activate/', views.job_activate, name='job_activate'),

    # admin: applicants
    *slash_optional('admin/applicants/', views.admin_applicants, name='admin_applicants'),  # ?status=&jobId=
    *slash_optional('admin/applicants/<int:app_id>/', views.admin_applicant_detail, name='admin_applicant_detail'),
    *slash_optional('admin/applicants/<int:app_id>/status/', views.applicant_status, name='applicant_status'),
]
