"""Default payloads for the entities the suites create, plus synthetic records."""

from pydantic import BaseModel, ConfigDict, Field

from apisuite.constants import EntityType

__all__ = [
    "FIXTURES",
    "CommentFixture",
    "PostFixture",
    "SyntheticRecord",
    "UserFixture",
]


class _Fixture(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class UserFixture(_Fixture):
    name: str = "Test User"
    email: str = "test@example.com"
    username: str = "testuser"
    phone: str = "123-456-7890"


class PostFixture(_Fixture):
    title: str = "Test Post Title"
    body: str = "This is a test post body content"
    user_id: int = Field(1, alias="userId")


class CommentFixture(_Fixture):
    post_id: int = Field(1, alias="postId")
    name: str = "Test Commenter"
    email: str = "commenter@example.com"
    body: str = "This is a test comment"


FIXTURES: dict[EntityType, type[_Fixture]] = {
    EntityType.USER: UserFixture,
    EntityType.POST: PostFixture,
    EntityType.COMMENT: CommentFixture,
}


class SyntheticRecord(BaseModel):
    """Throwaway record built from the clock and a random id."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(ge=0, lt=1000)
    timestamp: int
    random_string: str = Field(alias="randomString")
    random_email: str = Field(alias="randomEmail")
