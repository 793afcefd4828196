"""
Harvest API v2 client.

Thin wrapper over ``requests`` for the three collections the dashboard
reads: projects, time entries and users.
"""
import logging
import os
from datetime import date
from typing import Dict, List, Optional

import requests
from django.conf import settings

from .exceptions import HarvestAPIError, HarvestConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.harvestapp.com/v2'
DEFAULT_TIMEOUT = 15
DEFAULT_USER_AGENT = 'TeamBoard (teamboard@example.com)'


class HarvestClient:
    """
    Authenticated Harvest client.

    Every list call follows ``links.next`` until the collection is
    exhausted and returns the concatenated records.
    """

    def __init__(
        self,
        access_token: str,
        account_id: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        if not access_token or not account_id:
            raise HarvestConfigurationError(
                "Harvest access token and account id are required."
            )
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f'Bearer {access_token}',
            'Harvest-Account-Id': str(account_id),
            'User-Agent': user_agent,
            'Content-Type': 'application/json',
        })

    def get_projects(self, is_active: Optional[bool] = True) -> List[Dict]:
        params = {}
        if is_active is not None:
            params['is_active'] = 'true' if is_active else 'false'
        return self._get_collection('projects', 'projects', params)

    def get_time_entries(
        self,
        project_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[Dict]:
        params = {}
        if project_id is not None:
            params['project_id'] = project_id
        if start is not None:
            params['from'] = start.isoformat()
        if end is not None:
            params['to'] = end.isoformat()
        return self._get_collection('time_entries', 'time_entries', params)

    def get_users(self, is_active: Optional[bool] = True) -> List[Dict]:
        params = {}
        if is_active is not None:
            params['is_active'] = 'true' if is_active else 'false'
        return self._get_collection('users', 'users', params)

    def _get_collection(self, path: str, key: str, params: Dict) -> List[Dict]:
        records: List[Dict] = []
        url = f"{self.base_url}/{path}"
        page_params: Optional[Dict] = params

        while url:
            payload = self._get_json(url, page_params)
            page = payload.get(key)
            if not isinstance(page, list):
                raise HarvestAPIError(f"Harvest response for {path} has no '{key}' list")
            records.extend(page)

            # links.next already carries the query string
            url = (payload.get('links') or {}).get('next')
            page_params = None

        logger.debug("Fetched %s Harvest %s", len(records), path)
        return records

    def _get_json(self, url: str, params: Optional[Dict]) -> Dict:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise HarvestAPIError(
                f"Harvest request to {url} failed with status {status_code}",
                status_code=status_code,
            ) from exc
        except requests.RequestException as exc:
            raise HarvestAPIError(f"Harvest request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise HarvestAPIError(f"Harvest response from {url} is not valid JSON") from exc


def _setting(name: str, default=''):
    return os.environ.get(name) or getattr(settings, name, default)


def get_client() -> HarvestClient:
    """
    Build a client from environment variables or Django settings.

    Raises:
        HarvestConfigurationError: If credentials are missing
    """
    return HarvestClient(
        access_token=_setting('HARVEST_ACCESS_TOKEN'),
        account_id=_setting('HARVEST_ACCOUNT_ID'),
        base_url=_setting('HARVEST_BASE_URL', DEFAULT_BASE_URL),
        timeout=float(_setting('HARVEST_TIMEOUT_SECONDS', DEFAULT_TIMEOUT)),
        user_agent=_setting('HARVEST_USER_AGENT', DEFAULT_USER_AGENT),
    )
