import time

import pytest

from apisuite import ApiHelper, EntityType
from apisuite.data import create_test_data, generate_random_data
from apisuite.exceptions import UnknownEntityTypeError

# --- create_test_data ---


@pytest.mark.parametrize(
    ("entity_type", "expected"),
    [
        (
            "user",
            {
                "name": "Test User",
                "email": "test@example.com",
                "username": "testuser",
                "phone": "123-456-7890",
            },
        ),
        (
            "post",
            {"title": "Test Post Title", "body": "This is a test post body content", "userId": 1},
        ),
        (
            "comment",
            {
                "postId": 1,
                "name": "Test Commenter",
                "email": "commenter@example.com",
                "body": "This is a test comment",
            },
        ),
    ],
)
def test_defaults_per_entity_type(entity_type, expected):
    assert create_test_data(entity_type) == expected


def test_overrides_replace_and_extend_defaults():
    data = create_test_data(EntityType.USER, {"name": "John Doe", "website": "jd.dev"})

    assert data["name"] == "John Doe"
    assert data["website"] == "jd.dev"
    assert data["email"] == "test@example.com"
    assert data["username"] == "testuser"


def test_override_with_none_keeps_the_key():
    data = create_test_data("post", {"title": None})
    assert "title" in data
    assert data["title"] is None


def test_merge_is_shallow():
    nested = {"geo": {"lat": "1"}}
    data = create_test_data("user", {"address": nested})

    assert data["address"] is nested


def test_results_are_independent_copies():
    first = create_test_data("post")
    first["title"] = "changed"

    assert create_test_data("post")["title"] == "Test Post Title"


def test_unknown_entity_type_fails_fast():
    with pytest.raises(UnknownEntityTypeError, match="'album'") as excinfo:
        create_test_data("album", {"title": "x"})

    assert isinstance(excinfo.value, ValueError)


def test_helper_exposes_factory():
    assert ApiHelper.create_test_data("comment", {"postId": 5})["postId"] == 5


# --- generate_random_data ---


def test_random_data_fields_are_derived_from_id_and_timestamp():
    before = int(time.time() * 1000)
    record = generate_random_data()
    after = int(time.time() * 1000)

    assert 0 <= record.id < 1000
    assert before <= record.timestamp <= after
    assert record.random_string == f"test_{record.id}_{record.timestamp}"
    assert record.random_email == f"test{record.id}@example.com"


def test_random_data_dumps_camel_case_keys():
    dumped = generate_random_data().model_dump(by_alias=True)
    assert set(dumped) == {"id", "timestamp", "randomString", "randomEmail"}
