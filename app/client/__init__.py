"""Python client for the DevConnector API."""

from app.client.alerts import Alert, AlertStore
from app.client.api import APIClientError, DevConnectorClient

__all__ = ["Alert", "AlertStore", "APIClientError", "DevConnectorClient"]
