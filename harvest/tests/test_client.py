import os
from datetime import date
from unittest import mock

import requests
from django.test import SimpleTestCase, override_settings

from harvest.client import HarvestClient, get_client
from harvest.exceptions import HarvestAPIError, HarvestConfigurationError


def make_response(payload=None, status_error=None, json_error=None):
    response = mock.Mock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class HarvestClientTests(SimpleTestCase):
    """Client behaviour against a mocked requests session."""

    def setUp(self) -> None:
        self.session = mock.Mock()
        self.session.headers = {}
        self.client = HarvestClient(
            access_token='token-123',
            account_id=98765,
            base_url='https://harvest.test/v2/',
            timeout=5,
            session=self.session,
        )

    def test_requires_credentials(self) -> None:
        with self.assertRaises(HarvestConfigurationError):
            HarvestClient(access_token='', account_id='1', session=self.session)
        with self.assertRaises(HarvestConfigurationError):
            HarvestClient(access_token='token', account_id=None, session=self.session)

    def test_auth_headers(self) -> None:
        self.assertEqual(self.session.headers['Authorization'], 'Bearer token-123')
        self.assertEqual(self.session.headers['Harvest-Account-Id'], '98765')
        self.assertIn('User-Agent', self.session.headers)

    def test_get_projects_follows_pagination(self) -> None:
        self.session.get.side_effect = [
            make_response({
                'projects': [{'id': 1}, {'id': 2}],
                'links': {'next': 'https://harvest.test/v2/projects?page=2&is_active=true'},
            }),
            make_response({'projects': [{'id': 3}], 'links': {'next': None}}),
        ]

        projects = self.client.get_projects()

        self.assertEqual([p['id'] for p in projects], [1, 2, 3])
        first, second = self.session.get.call_args_list
        self.assertEqual(first.args[0], 'https://harvest.test/v2/projects')
        self.assertEqual(first.kwargs['params'], {'is_active': 'true'})
        self.assertEqual(first.kwargs['timeout'], 5)
        self.assertEqual(second.args[0], 'https://harvest.test/v2/projects?page=2&is_active=true')
        self.assertIsNone(second.kwargs['params'])

    def test_get_time_entries_params(self) -> None:
        self.session.get.return_value = make_response({'time_entries': []})

        entries = self.client.get_time_entries(
            project_id=55,
            start=date(2023, 1, 1),
            end=date(2023, 3, 31),
        )

        self.assertEqual(entries, [])
        self.assertEqual(
            self.session.get.call_args.kwargs['params'],
            {'project_id': 55, 'from': '2023-01-01', 'to': '2023-03-31'},
        )

    def test_get_users_without_active_filter(self) -> None:
        self.session.get.return_value = make_response({'users': [{'id': 7}]})

        self.assertEqual(self.client.get_users(is_active=None), [{'id': 7}])
        self.assertEqual(self.session.get.call_args.kwargs['params'], {})

    def test_http_error_carries_status_code(self) -> None:
        error = requests.HTTPError(response=mock.Mock(status_code=401))
        self.session.get.return_value = make_response(status_error=error)

        with self.assertRaises(HarvestAPIError) as ctx:
            self.client.get_projects()
        self.assertEqual(ctx.exception.status_code, 401)

    def test_transport_error_is_wrapped(self) -> None:
        self.session.get.side_effect = requests.ConnectionError('boom')

        with self.assertRaises(HarvestAPIError) as ctx:
            self.client.get_projects()
        self.assertIsNone(ctx.exception.status_code)

    def test_invalid_json(self) -> None:
        self.session.get.return_value = make_response(json_error=ValueError('bad json'))

        with self.assertRaises(HarvestAPIError):
            self.client.get_projects()

    def test_missing_collection_key(self) -> None:
        self.session.get.return_value = make_response({'message': 'unexpected'})

        with self.assertRaises(HarvestAPIError):
            self.client.get_time_entries()


class GetClientTests(SimpleTestCase):

    @override_settings(
        HARVEST_ACCESS_TOKEN='settings-token',
        HARVEST_ACCOUNT_ID='111',
        HARVEST_BASE_URL='https://harvest.test/v2',
        HARVEST_TIMEOUT_SECONDS=3,
    )
    def test_reads_settings(self) -> None:
        with mock.patch.dict(os.environ, {'HARVEST_ACCESS_TOKEN': '', 'HARVEST_ACCOUNT_ID': ''}):
            client = get_client()

        self.assertEqual(client.base_url, 'https://harvest.test/v2')
        self.assertEqual(client.timeout, 3.0)
        self.assertEqual(client.session.headers['Authorization'], 'Bearer settings-token')

    @override_settings(HARVEST_ACCESS_TOKEN='settings-token', HARVEST_ACCOUNT_ID='111')
    def test_environment_takes_precedence(self) -> None:
        with mock.patch.dict(os.environ, {'HARVEST_ACCESS_TOKEN': 'env-token', 'HARVEST_ACCOUNT_ID': '222'}):
            client = get_client()

        self.assertEqual(client.session.headers['Authorization'], 'Bearer env-token')
        self.assertEqual(client.session.headers['Harvest-Account-Id'], '222')

    @override_settings(HARVEST_ACCESS_TOKEN='', HARVEST_ACCOUNT_ID='')
    def test_missing_credentials(self) -> None:
        with mock.patch.dict(os.environ, {'HARVEST_ACCESS_TOKEN': '', 'HARVEST_ACCOUNT_ID': ''}):
            with self.assertRaises(HarvestConfigurationError):
                get_client()
