# accounts/tests.py
from django.test import SimpleTestCase, Client, override_settings
from django.test.client import RequestFactory
from django.urls import reverse

from jobs.exceptions import InvalidCredential
from .auth import AdminMarker, RESTRICTED_LOGIN_MESSAGE, check_admin_identifier, is_admin_request


class AdminMarkerTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def request_with_marker(self, value):
        request = self.factory.get('/admin/jobs/')
        if value is not None:
            request.COOKIES['adminAuth'] = value
        return request

    def test_only_exact_sentinel_authorizes(self):
        self.assertTrue(is_admin_request(self.request_with_marker('1')))
        for value in (None, '0', 'true', '', '11'):
            self.assertFalse(is_admin_request(self.request_with_marker(value)), value)

    def test_identifier_is_normalized(self):
        self.assertEqual(check_admin_identifier('  UMAR@FirstConnect.com '), 'umar@firstconnect.com')
        for identifier in ('', None, 'someone@firstconnect.com'):
            with self.assertRaises(InvalidCredential):
                check_admin_identifier(identifier)

    @override_settings(FIRSTCONNECT_ADMIN_EMAIL='lead@example.org')
    def test_admin_email_is_configurable(self):
        self.assertEqual(check_admin_identifier('Lead@Example.org'), 'lead@example.org')
        with self.assertRaises(InvalidCredential):
            check_admin_identifier('umar@firstconnect.com')


class LoginViewsTest(SimpleTestCase):
    def setUp(self):
        self.client = Client()

    def test_login_sets_marker_and_redirects(self):
        resp = self.client.post(reverse('accounts:login'), {'email': 'Umar@FirstConnect.com'})
        self.assertRedirects(resp, reverse('jobs:admin_jobs'), fetch_redirect_response=False)
        self.assertEqual(resp.cookies[AdminMarker.cookie_name].value, '1')
        self.assertEqual(resp.cookies[AdminMarker.cookie_name]['path'], '/')

        resp = self.client.get(reverse('jobs:admin_jobs'))
        self.assertEqual(resp.status_code, 200)

    def test_wrong_email_shows_message(self):
        resp = self.client.post(reverse('accounts:login'), {'email': 'intruder@example.com'})
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, RESTRICTED_LOGIN_MESSAGE)
        self.assertNotIn(AdminMarker.cookie_name, resp.cookies)

    def test_login_page_redirects_when_signed_in(self):
        self.assertEqual(self.client.get(reverse('accounts:login')).status_code, 200)
        self.client.cookies['adminAuth'] = '1'
        resp = self.client.get(reverse('accounts:login'))
        self.assertRedirects(resp, reverse('jobs:admin_jobs'), fetch_redirect_response=False)

    def test_logout_clears_marker(self):
        self.client.cookies['adminAuth'] = '1'
        resp = self.client.post(reverse('accounts:logout'))
        self.assertRedirects(resp, '/', fetch_redirect_response=False)
        self.assertEqual(resp.cookies[AdminMarker.cookie_name].value, '')

        resp = self.client.get(reverse('jobs:admin_jobs'))
        self.assertRedirects(resp, reverse('accounts:login'), fetch_redirect_response=False)

    def test_login_and_logout_without_trailing_slash(self):
        resp = self.client.post('/admin/login', {'email': 'umar@firstconnect.com'})
        self.assertRedirects(resp, '/admin/jobs/', fetch_redirect_response=False)
        self.assertEqual(resp.cookies[AdminMarker.cookie_name].value, '1')

        resp = self.client.post('/admin/logout')
        self.assertRedirects(resp, '/', fetch_redirect_response=False)
        self.assertEqual(resp.cookies[AdminMarker.cookie_name].value, '')

    def test_logout_requires_post(self):
        self.assertEqual(self.client.get(reverse('accounts:logout')).status_code, 405)
