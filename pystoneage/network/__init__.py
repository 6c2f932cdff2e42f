# This file marks pystoneage.network as a Python package.

from .http_resources_client import ResourcesClient

__all__ = ["ResourcesClient"]
