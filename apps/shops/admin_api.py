"""Shopify Admin GraphQL API client."""

import logging
from typing import Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

GRAPHQL_URL = "https://{shop}/admin/api/{version}/graphql.json"


class AdminAPIError(Exception):
    """Admin API request failed or returned GraphQL errors."""


class AdminAPIClient:
    """
    Minimal client for the Shopify Admin GraphQL API.

    Usage:
        client = AdminAPIClient('example.myshopify.com', token)
        data = client.graphql('query { shop { name } }')
    """

    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        api_version: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.shop_domain = shop_domain
        self.access_token = access_token
        self.api_version = api_version or settings.SHOPIFY_API_VERSION
        self.timeout = timeout or settings.SHOPIFY_API_TIMEOUT

    @classmethod
    def for_shop(cls, shop) -> 'AdminAPIClient':
        """Build a client for an installed Shop."""
        return cls(shop.domain, shop.access_token)

    @property
    def url(self) -> str:
        return GRAPHQL_URL.format(shop=self.shop_domain, version=self.api_version)

    def graphql(self, query: str, variables: Optional[dict] = None) -> dict:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            The `data` object of the response

        Raises:
            AdminAPIError: on transport errors, non-2xx responses
                or top-level GraphQL errors
        """
        headers = {
            'Content-Type': 'application/json',
            'X-Shopify-Access-Token': self.access_token,
        }
        payload = {'query': query, 'variables': variables or {}}

        try:
            response = requests.post(
                self.url, json=payload, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
            result = response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f'Admin API timeout for {self.shop_domain}')
            raise AdminAPIError(f'Timeout calling Admin API for {self.shop_domain}') from e
        except requests.exceptions.RequestException as e:
            logger.error(f'Admin API request failed for {self.shop_domain}: {e}')
            raise AdminAPIError(str(e)) from e
        except ValueError as e:
            logger.error(f'Admin API returned invalid JSON for {self.shop_domain}')
            raise AdminAPIError('Invalid JSON in Admin API response') from e

        if result.get('errors'):
            logger.error(f'Admin API GraphQL errors for {self.shop_domain}: {result["errors"]}')
            raise AdminAPIError(_format_errors(result['errors']))

        return result.get('data') or {}


def _format_errors(errors) -> str:
    if isinstance(errors, list):
        return '; '.join(e.get('message', str(e)) if isinstance(e, dict) else str(e) for e in errors)
    return str(errors)
