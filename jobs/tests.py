# jobs/tests.py
import os
import shutil
import tempfile

from django.apps import apps
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase
from django.urls import reverse

from .exceptions import ApplicationNotFound, InvalidArgument, InvalidFile, JobNotFound
from .models import ApplicantFields, ApplicationStatus, JobFields, JobStatus
from .services import ApplicationDesk, JobCatalog, parse_id
from .store import MemoryStore
from .uploads import CvStorage, resolve_upload_root, safe_filename, unique_storage_name

MIB = 1024 * 1024


def job_fields(**overrides):
    values = dict(title='', company='', location='', type='', rate='', deadline='', description='')
    values.update(overrides)
    return JobFields(**values)


class ServiceTestCase(SimpleTestCase):
    def setUp(self):
        self.upload_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.upload_dir, ignore_errors=True)
        self.store = MemoryStore()
        self.cv_storage = CvStorage(self.upload_dir)
        self.catalog = JobCatalog(self.store)
        self.desk = ApplicationDesk(self.store, self.cv_storage)


class JobCatalogTest(ServiceTestCase):

    def test_ids_are_increasing_and_never_reused(self):
        first = self.catalog.create_job(job_fields(title='A'))
        second = self.catalog.create_job(job_fields(title='B'))
        self.catalog.delete_job(second.id)
        third = self.catalog.create_job(job_fields(title='C'))
        self.assertEqual([first.id, second.id, third.id], [1, 2, 3])

    def test_create_defaults(self):
        job = self.catalog.create_job(job_fields(title='Analyst'))
        self.assertEqual(job.type, 'Full-time')
        self.assertEqual(job.status, JobStatus.ACTIVE)
        self.assertEqual(job.company, '')

    def test_filters_are_case_insensitive_and_combined(self):
        engineer = self.catalog.create_job(job_fields(title='Engineer', location='Berlin'))
        self.catalog.create_job(job_fields(title='Manager', location='Paris'))

        jobs = self.catalog.list_active_jobs(q='engineer', location='berlin')
        self.assertEqual(jobs, [engineer])
        self.assertEqual(self.catalog.list_active_jobs(q='engineer', location='paris'), [])

    def test_keyword_matches_company_and_description(self):
        job = self.catalog.create_job(job_fields(title='Lead', company='Finwave', description='Fintech scale-up'))
        self.assertEqual(self.catalog.list_active_jobs(q='FINWAVE'), [job])
        self.assertEqual(self.catalog.list_active_jobs(q='scale-up'), [job])

    def test_type_filter_is_exact(self):
        contract = self.catalog.create_job(job_fields(title='CSM', type='Contract'))
        self.catalog.create_job(job_fields(title='PM', type='Full-time'))
        self.assertEqual(self.catalog.list_active_jobs(type='contract'), [contract])
        self.assertEqual(self.catalog.list_active_jobs(type='contr'), [])

    def test_archived_jobs_never_listed_publicly(self):
        job = self.catalog.create_job(job_fields(title='Engineer'))
        self.catalog.archive_job(job.id)
        self.assertEqual(self.catalog.list_active_jobs(), [])
        self.assertEqual(self.catalog.list_active_jobs(q='engineer'), [])
        self.assertEqual([j.id for j in self.catalog.list_jobs(JobStatus.ARCHIVED)], [job.id])

        self.catalog.activate_job(job.id)
        self.assertEqual([j.id for j in self.catalog.list_active_jobs()], [job.id])

    def test_update_overwrites_every_field_and_keeps_status(self):
        job = self.catalog.create_job(job_fields(title='Old', company='Acme', rate='100'))
        self.catalog.archive_job(job.id)
        updated = self.catalog.update_job(job.id, job_fields(title='New'))
        self.assertEqual(updated.title, 'New')
        self.assertEqual(updated.company, '')
        self.assertEqual(updated.rate, '')
        self.assertEqual(updated.status, JobStatus.ARCHIVED)

    def test_missing_job(self):
        with self.assertRaises(JobNotFound):
            self.catalog.get_job(99)
        with self.assertRaises(JobNotFound):
            self.catalog.update_job(99, job_fields())
        with self.assertRaises(JobNotFound):
            self.catalog.archive_job(99)
        self.catalog.delete_job(99)

    def test_booleans_are_not_ids(self):
        self.catalog.create_job(job_fields(title='First'))
        self.assertIsNone(parse_id(True))
        self.assertIsNone(parse_id(False))
        self.assertEqual(parse_id(' 1 '), 1)
        with self.assertRaises(JobNotFound):
            self.catalog.get_job(True)
        self.assertIsNone(self.catalog.find_job(True))

    def test_invalid_job_status(self):
        job = self.catalog.create_job(job_fields())
        with self.assertRaises(InvalidArgument):
            self.catalog.set_job_status(job.id, 'closed')

    def test_counts(self):
        self.catalog.create_job(job_fields())
        archived = self.catalog.create_job(job_fields())
        self.catalog.archive_job(archived.id)
        self.assertEqual(self.catalog.counts(), {'total': 2, 'active': 1, 'archived': 1})


class ApplicationDeskTest(ServiceTestCase):

    def setUp(self):
        super().setUp()
        self.job = self.catalog.create_job(job_fields(title='Senior Product Manager'))

    def test_submit_snapshots_title(self):
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha', cv='not a url'))
        self.assertEqual(app.status, ApplicationStatus.NEW)
        self.assertEqual(app.job_title, 'Senior Product Manager')
        self.assertEqual(app.cv, 'not a url')
        self.assertEqual(app.cv_file_url, '')
        self.assertIsNotNone(app.created_at)

    def test_submit_for_deleted_job_creates_nothing(self):
        self.catalog.delete_job(self.job.id)
        with self.assertRaises(JobNotFound):
            self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))
        self.assertEqual(self.desk.list_applications(), [])

    def test_title_snapshot_survives_job_changes(self):
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))
        self.catalog.update_job(self.job.id, job_fields(title='Renamed'))
        self.catalog.delete_job(self.job.id)
        self.assertEqual(self.desk.get_application(app.id).job_title, 'Senior Product Manager')
        self.assertEqual(self.desk.get_application(app.id).job_id, self.job.id)

    def test_submit_with_file(self):
        cv = SimpleUploadedFile('my cv.pdf', b'%PDF-1.4 test', content_type='application/pdf')
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'), cv)
        self.assertEqual(app.cv_original_name, 'my cv.pdf')
        self.assertTrue(app.cv_file_url.startswith('/uploads/'))
        self.assertTrue(app.cv_file_url.endswith('-my_cv.pdf'))
        stored_name = app.cv_file_url[len('/uploads/'):]
        self.assertTrue(os.path.exists(os.path.join(self.upload_dir, stored_name)))

    def test_invalid_file_aborts_submission(self):
        exe = SimpleUploadedFile('setup.exe', b'MZ', content_type='application/x-msdownload')
        with self.assertRaises(InvalidFile):
            self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'), exe)
        self.assertEqual(self.desk.list_applications(), [])
        self.assertEqual(os.listdir(self.upload_dir), [])

    def test_list_filters(self):
        other = self.catalog.create_job(job_fields(title='Other'))
        a = self.desk.submit_application(self.job.id, ApplicantFields(name='A'))
        b = self.desk.submit_application(other.id, ApplicantFields(name='B'))
        self.desk.set_application_status(b.id, 'review')

        self.assertEqual([x.id for x in self.desk.list_applications()], [a.id, b.id])
        self.assertEqual([x.id for x in self.desk.list_applications(status='all')], [a.id, b.id])
        self.assertEqual([x.id for x in self.desk.list_applications(status='review')], [b.id])
        self.assertEqual([x.id for x in self.desk.list_applications(job_id=str(self.job.id))], [a.id])
        self.assertEqual(self.desk.list_applications(status='new', job_id=other.id), [])
        self.assertEqual(len(self.desk.list_applications(job_id='abc')), 2)
        with self.assertRaises(InvalidArgument):
            self.desk.list_applications(status='hired')

    def test_status_update(self):
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))
        self.desk.set_application_status(app.id, 'shortlisted')
        self.assertEqual(self.desk.get_application(app.id).status, ApplicationStatus.SHORTLISTED)

        self.desk.set_application_status(app.id, '')
        self.assertEqual(self.desk.get_application(app.id).status, ApplicationStatus.SHORTLISTED)

    def test_invalid_status_is_rejected(self):
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))
        with self.assertRaises(InvalidArgument):
            self.desk.set_application_status(app.id, 'hired')
        self.assertEqual(self.desk.get_application(app.id).status, ApplicationStatus.NEW)
        with self.assertRaises(ApplicationNotFound):
            self.desk.set_application_status(404, 'review')

    def test_status_counts(self):
        a = self.desk.submit_application(self.job.id, ApplicantFields(name='A'))
        self.desk.submit_application(self.job.id, ApplicantFields(name='B'))
        self.desk.set_application_status(a.id, 'rejected')
        counts = self.desk.status_counts()
        self.assertEqual(counts, {'new': 1, 'review': 0, 'shortlisted': 0, 'rejected': 1, 'total': 2})
        self.assertEqual(self.desk.count_for_job(self.job.id), 2)

    def test_end_to_end_flow(self):
        job = self.catalog.create_job(job_fields(title='Senior Product Manager', company='Atlas Metrics'))
        self.assertIn(job, self.catalog.list_active_jobs())

        self.desk.submit_application(job.id, ApplicantFields(name='Asha'))
        apps_for_job = self.desk.list_applications(job_id=job.id)
        self.assertEqual(len(apps_for_job), 1)
        self.assertEqual(apps_for_job[0].name, 'Asha')
        self.assertEqual(apps_for_job[0].status, 'new')

        self.desk.set_application_status(apps_for_job[0].id, 'review')
        self.assertEqual(self.desk.get_application(apps_for_job[0].id).status, 'review')


class CvStorageTest(ServiceTestCase):

    def test_size_limit(self):
        big = SimpleUploadedFile('cv.pdf', b'0' * (6 * MIB), content_type='application/pdf')
        with self.assertRaises(InvalidFile):
            self.cv_storage.accept(big)

    def test_type_checks(self):
        with self.assertRaises(InvalidFile):
            self.cv_storage.validate(SimpleUploadedFile('tool.exe', b'MZ', content_type='application/octet-stream'))
        # extension alone is enough
        self.cv_storage.validate(SimpleUploadedFile('CV.DOCX', b'x', content_type='application/octet-stream'))
        # so is a known mime type
        self.cv_storage.validate(SimpleUploadedFile('cv', b'x', content_type='text/rtf'))

    def test_accepts_one_mib_pdf(self):
        pdf = SimpleUploadedFile('cv.pdf', b'0' * MIB, content_type='application/pdf')
        stored = self.cv_storage.accept(pdf)
        self.assertEqual(stored.original_name, 'cv.pdf')
        self.assertEqual(os.path.getsize(os.path.join(self.upload_dir, stored.name)), MIB)

    def test_storage_names(self):
        self.assertEqual(safe_filename('Résumé (final).pdf'), 'R_sum___final_.pdf')
        name = unique_storage_name('a b.pdf')
        millis, suffix, rest = name.split('-', 2)
        self.assertTrue(millis.isdigit() and suffix.isdigit())
        self.assertEqual(rest, 'a_b.pdf')

    def test_unwritable_root_falls_back_to_temp(self):
        missing_parent = os.path.join(self.upload_dir, 'file.txt')
        with open(missing_parent, 'w') as f:
            f.write('not a directory')
        with self.assertLogs('jobs.uploads', level='WARNING'):
            root = resolve_upload_root(missing_parent)
        self.assertEqual(root, tempfile.gettempdir())
        self.assertEqual(resolve_upload_root(self.upload_dir), self.upload_dir)


class JobBoardViewsTest(SimpleTestCase):
    def setUp(self):
        self.upload_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.upload_dir, ignore_errors=True)
        config = apps.get_app_config('jobs').install(store=MemoryStore(), upload_dir=self.upload_dir)
        self.catalog, self.desk = config.catalog, config.desk
        self.job = self.catalog.create_job(job_fields(title='Engineer', company='Northlight', location='Berlin'))

    def login(self):
        self.client.cookies['adminAuth'] = '1'

    def test_job_list_filters(self):
        self.catalog.create_job(job_fields(title='Manager', location='Paris'))
        resp = self.client.get(reverse('jobs:job_list'), {'q': 'engineer', 'location': 'BERLIN'})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.context['jobs'], [self.job])
        self.assertContains(resp, 'Engineer')
        self.assertNotContains(resp, 'Manager')

    def test_job_detail(self):
        resp = self.client.get(reverse('jobs:job_detail', args=[self.job.id]))
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, 'Northlight')
        resp = self.client.get(reverse('jobs:job_detail', args=[999]))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.content, b'Job not found')

    def test_apply_with_file(self):
        cv = SimpleUploadedFile('cv.pdf', b'%PDF-1.4', content_type='application/pdf')
        resp = self.client.post(reverse('jobs:job_apply', args=[self.job.id]), {'name': 'Asha', 'email': 'asha@example.com', 'cvFile': cv})
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, 'Engineer')
        [app] = self.desk.list_applications()
        self.assertEqual(app.name, 'Asha')
        self.assertEqual(app.cv_original_name, 'cv.pdf')

        served = self.client.get(app.cv_file_url)
        self.assertEqual(served.status_code, 200)
        self.assertEqual(b''.join(served.streaming_content), b'%PDF-1.4')

    def test_apply_rejects_bad_file(self):
        exe = SimpleUploadedFile('setup.exe', b'MZ', content_type='application/x-msdownload')
        resp = self.client.post(reverse('jobs:job_apply', args=[self.job.id]), {'name': 'Asha', 'cvFile': exe})
        self.assertEqual(resp.status_code, 400)
        self.assertContains(resp, 'Unsupported CV file type', status_code=400)
        self.assertEqual(self.desk.list_applications(), [])

    def test_apply_to_missing_job(self):
        self.catalog.delete_job(self.job.id)
        resp = self.client.post(reverse('jobs:job_apply', args=[self.job.id]), {'name': 'Asha'})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.desk.list_applications(), [])

    def test_admin_pages_redirect_to_login(self):
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))
        gated = [
            ('get', reverse('jobs:admin_jobs')),
            ('post', reverse('jobs:admin_jobs')),
            ('get', reverse('jobs:job_edit', args=[self.job.id])),
            ('post', reverse('jobs:job_edit', args=[self.job.id])),
            ('post', reverse('jobs:job_delete', args=[self.job.id])),
            ('post', reverse('jobs:job_archive', args=[self.job.id])),
            ('post', reverse('jobs:job_activate', args=[self.job.id])),
            ('get', reverse('jobs:admin_applicants')),
            ('get', reverse('jobs:admin_applicant_detail', args=[app.id])),
            ('post', reverse('jobs:applicant_status', args=[app.id])),
        ]
        for method, url in gated:
            resp = getattr(self.client, method)(url, {'title': 'Hijacked', 'status': 'rejected'})
            self.assertRedirects(resp, '/admin/login/', fetch_redirect_response=False, msg_prefix=url)
        self.assertEqual(self.catalog.get_job(self.job.id).title, 'Engineer')
        self.assertEqual(self.desk.get_application(app.id).status, 'new')

    def test_admin_creates_and_edits_job(self):
        self.login()
        resp = self.client.post(reverse('jobs:admin_jobs'), {'title': 'Head of Growth', 'company': 'Finwave'})
        self.assertRedirects(resp, reverse('jobs:admin_jobs'), fetch_redirect_response=False)
        job = self.catalog.list_active_jobs(q='growth')[0]
        self.assertEqual(job.type, 'Full-time')

        resp = self.client.post(reverse('jobs:job_edit', args=[job.id]), {'title': 'Head of Marketing'})
        self.assertRedirects(resp, reverse('jobs:admin_jobs'), fetch_redirect_response=False)
        job = self.catalog.get_job(job.id)
        self.assertEqual(job.title, 'Head of Marketing')
        self.assertEqual(job.company, '')

        self.assertEqual(self.client.get(reverse('jobs:job_edit', args=[999])).status_code, 404)

    def test_admin_dashboard(self):
        self.login()
        self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))
        resp = self.client.get(reverse('jobs:admin_jobs'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.context['rows'], [(self.job, 1)])
        self.assertEqual(resp.context['counts'], {'total': 1, 'active': 1, 'archived': 0})

        resp = self.client.get(reverse('jobs:admin_jobs'), {'status': 'archived'})
        self.assertEqual(resp.context['rows'], [])

    def test_archive_activate_delete(self):
        self.login()
        self.client.post(reverse('jobs:job_archive', args=[self.job.id]))
        self.assertEqual(self.catalog.get_job(self.job.id).status, JobStatus.ARCHIVED)
        self.assertEqual(self.client.get(reverse('jobs:job_list')).context['jobs'], [])

        self.client.post(reverse('jobs:job_activate', args=[self.job.id]))
        self.assertEqual(self.catalog.get_job(self.job.id).status, JobStatus.ACTIVE)

        resp = self.client.post(reverse('jobs:job_delete', args=[self.job.id]))
        self.assertEqual(resp.status_code, 302)
        self.assertIsNone(self.catalog.find_job(self.job.id))
        # deleting again is a no-op
        self.assertEqual(self.client.post(reverse('jobs:job_delete', args=[self.job.id])).status_code, 302)
        self.assertEqual(self.client.post(reverse('jobs:job_archive', args=[self.job.id])).status_code, 404)

    def test_applicants_list_and_status_update(self):
        self.login()
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))

        resp = self.client.get(reverse('jobs:admin_applicants'), {'status': 'all', 'jobId': str(self.job.id)})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([a.id for a, _ in resp.context['rows']], [app.id])
        self.assertEqual(resp.context['job_for_filter'], self.job)

        resp = self.client.post(reverse('jobs:applicant_status', args=[app.id]), {'status': 'review'})
        self.assertRedirects(resp, reverse('jobs:admin_applicants'), fetch_redirect_response=False)
        self.assertEqual(self.desk.get_application(app.id).status, 'review')

        resp = self.client.post(reverse('jobs:applicant_status', args=[app.id]), {'status': 'hired'})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.desk.get_application(app.id).status, 'review')

        resp = self.client.post(reverse('jobs:applicant_status', args=[999]), {'status': 'review'})
        self.assertEqual(resp.status_code, 404)

    def test_applicant_detail_after_job_deleted(self):
        self.login()
        app = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha'))
        self.catalog.delete_job(self.job.id)
        resp = self.client.get(reverse('jobs:admin_applicant_detail', args=[app.id]))
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, 'Engineer')
        self.assertIsNone(resp.context['job'])
        resp = self.client.get(reverse('jobs:admin_applicant_detail', args=[999]))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.content, b'Application not found')

    def test_long_free_text_is_accepted(self):
        self.login()
        resp = self.client.post(reverse('jobs:admin_jobs'), {'title': 'x' * 300, 'rate': 'r' * 150})
        self.assertRedirects(resp, reverse('jobs:admin_jobs'), fetch_redirect_response=False)
        job = self.catalog.list_jobs(JobStatus.ACTIVE)[-1]
        self.assertEqual(job.title, 'x' * 300)
        self.assertEqual(job.rate, 'r' * 150)

        resp = self.client.post(reverse('jobs:job_edit', args=[job.id]), {'title': 't' * 400, 'type': 'y' * 80})
        self.assertRedirects(resp, reverse('jobs:admin_jobs'), fetch_redirect_response=False)
        self.assertEqual(self.catalog.get_job(job.id).title, 't' * 400)
        self.assertEqual(self.catalog.get_job(job.id).type, 'y' * 80)

        resp = self.client.post(reverse('jobs:job_apply', args=[self.job.id]),
                                {'name': 'A' * 300, 'phone': '9' * 60, 'cv': 'https://example.com/' + 'c' * 1200})
        self.assertEqual(resp.status_code, 200)
        [app] = self.desk.list_applications()
        self.assertEqual(app.name, 'A' * 300)
        self.assertEqual(len(app.cv), len('https://example.com/') + 1200)

    def test_routes_without_trailing_slash(self):
        self.assertEqual(self.client.get('/jobs').status_code, 200)
        self.assertEqual(self.client.get('/jobs/%d' % self.job.id).status_code, 200)

        resp = self.client.post('/jobs/%d/apply' % self.job.id, {'name': 'Asha'})
        self.assertEqual(resp.status_code, 200)
        [app] = self.desk.list_applications()

        self.assertRedirects(self.client.post('/admin/jobs/%d/archive' % self.job.id), '/admin/login/',
                             fetch_redirect_response=False)
        self.login()
        self.client.post('/admin/jobs/%d/archive' % self.job.id)
        self.assertEqual(self.catalog.get_job(self.job.id).status, JobStatus.ARCHIVED)
        self.client.post('/admin/jobs/%d/activate' % self.job.id)
        self.assertEqual(self.catalog.get_job(self.job.id).status, JobStatus.ACTIVE)
        self.client.post('/admin/jobs/%d/edit' % self.job.id, {'title': 'Staff Engineer'})
        self.assertEqual(self.catalog.get_job(self.job.id).title, 'Staff Engineer')

        self.client.post('/admin/applicants/%d/status' % app.id, {'status': 'shortlisted'})
        self.assertEqual(self.desk.get_application(app.id).status, ApplicationStatus.SHORTLISTED)
        self.assertEqual(self.client.get('/admin/applicants').status_code, 200)
        self.assertEqual(self.client.get('/admin/applicants/%d' % app.id).status_code, 200)

        self.assertEqual(self.client.post('/admin/jobs', {'title': 'Analyst'}).status_code, 302)
        self.client.post('/admin/jobs/%d/delete' % self.job.id)
        self.assertIsNone(self.catalog.find_job(self.job.id))

    def test_cv_text_only_linked_when_web_url(self):
        self.login()
        script = self.desk.submit_application(self.job.id, ApplicantFields(name='Asha', cv='javascript:alert(1)'))
        resp = self.client.get(reverse('jobs:admin_applicant_detail', args=[script.id]))
        self.assertContains(resp, 'javascript:alert(1)')
        self.assertNotContains(resp, 'href="javascript:')

        linked = self.desk.submit_application(self.job.id, ApplicantFields(name='Ravi', cv='https://example.com/cv'))
        resp = self.client.get(reverse('jobs:admin_applicant_detail', args=[linked.id]))
        self.assertContains(resp, 'href="https://example.com/cv"')


class SeedTest(ServiceTestCase):

    def write_json(self, payload):
        path = os.path.join(self.upload_dir, 'jobs.json')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(payload)
        return path

    def test_bundled_demo_jobs(self):
        from django.conf import settings
        from .seed import load_jobs

        created = load_jobs(self.catalog, settings.FIRSTCONNECT_DEMO_JOBS_FILE)
        self.assertEqual(len(created), 5)
        self.assertEqual(created[0].title, 'Senior Product Manager')
        self.assertTrue(all(job.status == JobStatus.ACTIVE for job in created))

    def test_entries_without_title_are_skipped(self):
        from .seed import load_jobs

        path = self.write_json('[{"title": "Analyst", "location": "Leeds"}, {"company": "Nobody"}]')
        with self.assertLogs('jobs.seed', level='WARNING'):
            created = load_jobs(self.catalog, path)
        self.assertEqual([job.title for job in created], ['Analyst'])
        self.assertEqual(created[0].type, 'Full-time')

    def test_bad_files(self):
        from django.core.exceptions import ImproperlyConfigured
        from .seed import load_jobs

        with self.assertRaises(ImproperlyConfigured):
            load_jobs(self.catalog, os.path.join(self.upload_dir, 'missing.json'))
        with self.assertRaises(ImproperlyConfigured):
            load_jobs(self.catalog, self.write_json('{"title": "x"}'))
        with self.assertRaises(ImproperlyConfigured):
            load_jobs(self.catalog, self.write_json('not json'))
