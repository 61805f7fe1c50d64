import secrets
import time
from collections.abc import Mapping
from typing import Any

from apisuite.constants import EntityType
from apisuite.exceptions import UnknownEntityTypeError
from apisuite.models.fixtures import FIXTURES, SyntheticRecord

__all__ = ["create_test_data", "generate_random_data"]


def create_test_data(
    entity_type: EntityType | str, overrides: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """
    Build a request payload for an entity from its fixture defaults.

    Overrides replace top-level keys only; nested values are not merged and
    no default is ever removed.

    Args:
        entity_type: An EntityType member or its string value ("user", "post", "comment").
        overrides: Keys to replace or add.

    Returns:
        A new dict, safe for the caller to mutate.

    Raises:
        UnknownEntityTypeError: If there is no fixture for the entity type.
    """
    try:
        fixture = FIXTURES[EntityType(entity_type)]
    except ValueError:
        known = ", ".join(t.value for t in EntityType)
        raise UnknownEntityTypeError(
            f"No test data fixture for entity type {entity_type!r} (expected one of: {known})"
        ) from None

    return {**fixture().model_dump(by_alias=True), **(overrides or {})}


def generate_random_data() -> SyntheticRecord:
    """Return a fresh record with a random id in [0, 1000) and the current epoch ms."""
    random_id = secrets.randbelow(1000)
    timestamp = int(time.time() * 1000)
    return SyntheticRecord(
        id=random_id,
        timestamp=timestamp,
        random_string=f"test_{random_id}_{timestamp}",
        random_email=f"test{random_id}@example.com",
    )
