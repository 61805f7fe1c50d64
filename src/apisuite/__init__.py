"""End-to-end API test suite for JSONPlaceholder, REST Countries and httpbin."""

from apisuite.client import ApiHelper
from apisuite.constants import EntityType

__all__ = ["ApiHelper", "EntityType"]

__version__ = "0.1.0"
