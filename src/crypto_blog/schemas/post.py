"""Post-related Pydantic schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

NANOSECONDS_PER_MILLISECOND = 1_000_000
MILLISECONDS_PER_SECOND = 1000


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., min_length=1, description="Post title")
    body: str = Field(..., min_length=1, description="Post body")
    author: str = Field(..., min_length=1, description="Display name of the author")

    model_config = ConfigDict(frozen=True)


class Post(BaseModel):
    """Schema for a post as returned by the store.

    Posts are owned by the store and never modified by the client.
    """

    id: int
    title: str
    body: str
    author: str
    timestamp: int = Field(..., description="Creation instant in nanoseconds")

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @property
    def posted_at(self) -> datetime:
        """Return the creation instant as an aware local datetime."""
        milliseconds = self.timestamp / NANOSECONDS_PER_MILLISECOND
        return datetime.fromtimestamp(
            milliseconds / MILLISECONDS_PER_SECOND, tz=UTC
        ).astimezone()
