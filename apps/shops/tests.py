"""Tests for shops app."""

from urllib.parse import urlencode
from unittest.mock import Mock, patch

import requests
from django.http import HttpResponse
from django.test import RequestFactory, TestCase, override_settings
from django.contrib.sessions.middleware import SessionMiddleware

from .admin_api import AdminAPIClient, AdminAPIError
from .decorators import admin_required, sign_query, verify_query
from .models import Shop


def _response(payload, status=200):
    response = Mock()
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f'{status} error')
    else:
        response.raise_for_status.return_value = None
    return response


@override_settings(SHOPIFY_API_VERSION='2024-01', SHOPIFY_API_TIMEOUT=5)
class AdminAPIClientTests(TestCase):
    """Tests for the Admin GraphQL client."""

    def setUp(self):
        self.client_api = AdminAPIClient('demo.myshopify.com', 'shpat_token')

    def test_url_uses_shop_and_version(self):
        self.assertEqual(
            self.client_api.url,
            'https://demo.myshopify.com/admin/api/2024-01/graphql.json'
        )

    @patch('apps.shops.admin_api.requests.post')
    def test_graphql_returns_data(self, mock_post):
        """Successful query returns the data object."""
        mock_post.return_value = _response({'data': {'shop': {'name': 'Demo'}}})

        data = self.client_api.graphql('query { shop { name } }', {'a': 1})

        self.assertEqual(data, {'shop': {'name': 'Demo'}})
        _, kwargs = mock_post.call_args
        self.assertEqual(kwargs['headers']['X-Shopify-Access-Token'], 'shpat_token')
        self.assertEqual(kwargs['json']['variables'], {'a': 1})
        self.assertEqual(kwargs['timeout'], 5)

    @patch('apps.shops.admin_api.requests.post')
    def test_graphql_errors_raise(self, mock_post):
        """Top-level GraphQL errors raise AdminAPIError."""
        mock_post.return_value = _response({'errors': [{'message': 'Throttled'}]})

        with self.assertRaisesMessage(AdminAPIError, 'Throttled'):
            self.client_api.graphql('query { shop { name } }')

    @patch('apps.shops.admin_api.requests.post')
    def test_http_error_raises(self, mock_post):
        mock_post.return_value = _response({}, status=500)

        with self.assertRaises(AdminAPIError):
            self.client_api.graphql('query { shop { name } }')

    @patch('apps.shops.admin_api.requests.post')
    def test_timeout_raises(self, mock_post):
        mock_post.side_effect = requests.exceptions.Timeout()

        with self.assertRaises(AdminAPIError):
            self.client_api.graphql('query { shop { name } }')

    def test_for_shop(self):
        shop = Shop.objects.create(domain='other.myshopify.com', access_token='tok')
        client = AdminAPIClient.for_shop(shop)
        self.assertEqual(client.shop_domain, 'other.myshopify.com')
        self.assertEqual(client.access_token, 'tok')


SECRET = 'shpss_test_secret'


def signed_path(path, **params):
    """URL with a valid hmac, as the shop admin opens the app."""
    params['hmac'] = sign_query(params, SECRET)
    return f'{path}?{urlencode(params)}'


@override_settings(SHOPIFY_API_SECRET=SECRET)
class AdminRequiredTests(TestCase):
    """Tests for the admin_required decorator."""

    def setUp(self):
        self.factory = RequestFactory()
        self.shop = Shop.objects.create(domain='demo.myshopify.com', access_token='tok')

        @admin_required
        def view(request):
            return HttpResponse(request.shop.domain)

        self.view = view

    def _request(self, path='/app/', session_shop=None):
        request = self.factory.get(path)
        SessionMiddleware(lambda r: None).process_request(request)
        if session_shop:
            request.session['shop'] = session_shop
        return request

    def test_no_shop_forbidden(self):
        response = self.view(self._request())
        self.assertEqual(response.status_code, 403)

    def test_signed_shop_is_stored_in_session(self):
        path = signed_path('/app/', shop='demo.myshopify.com', timestamp='1700000000')
        request = self._request(path)
        response = self.view(request)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(request.session['shop'], 'demo.myshopify.com')
        self.assertEqual(request.admin.shop_domain, 'demo.myshopify.com')

    def test_unsigned_shop_forbidden(self):
        """A bare ?shop= is not proof of identity."""
        response = self.view(self._request('/app/?shop=demo.myshopify.com'))
        self.assertEqual(response.status_code, 403)

    def test_wrong_signature_forbidden(self):
        response = self.view(self._request('/app/?shop=demo.myshopify.com&hmac=deadbeef'))
        self.assertEqual(response.status_code, 403)

    def test_tampered_shop_forbidden(self):
        """Signature of one shop does not open another."""
        Shop.objects.create(domain='victim.myshopify.com', access_token='tok2')
        path = signed_path('/app/', shop='demo.myshopify.com')
        path = path.replace('demo.myshopify.com', 'victim.myshopify.com')

        response = self.view(self._request(path))
        self.assertEqual(response.status_code, 403)

    @override_settings(SHOPIFY_API_SECRET='')
    def test_no_secret_configured_forbidden(self):
        path = signed_path('/app/', shop='demo.myshopify.com')
        response = self.view(self._request(path))
        self.assertEqual(response.status_code, 403)

    def test_unsigned_query_does_not_override_session(self):
        request = self._request('/app/?shop=other.myshopify.com', session_shop='demo.myshopify.com')
        response = self.view(request)

        self.assertEqual(response.content, b'demo.myshopify.com')

    def test_shop_from_session(self):
        response = self.view(self._request(session_shop='demo.myshopify.com'))
        self.assertEqual(response.content, b'demo.myshopify.com')

    def test_inactive_shop_forbidden(self):
        self.shop.is_active = False
        self.shop.save()

        response = self.view(self._request(session_shop='demo.myshopify.com'))
        self.assertEqual(response.status_code, 403)

    def test_unknown_shop_forbidden(self):
        response = self.view(self._request(signed_path('/app/', shop='unknown.myshopify.com')))
        self.assertEqual(response.status_code, 403)


@override_settings(SHOPIFY_API_SECRET=SECRET)
class VerifyQueryTests(TestCase):

    def test_signature_ignores_param_order(self):
        params = {'timestamp': '1', 'shop': 'demo.myshopify.com', 'host': 'abc'}
        query = {**params, 'hmac': sign_query(dict(reversed(list(params.items()))), SECRET)}
        self.assertTrue(verify_query(query))

    def test_missing_hmac(self):
        self.assertFalse(verify_query({'shop': 'demo.myshopify.com'}))
