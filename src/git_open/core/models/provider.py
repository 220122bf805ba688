"""Hosting provider model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Provider(BaseModel):
    """URL conventions of a git hosting platform.

    ``base_url`` identifies the provider; the segments are inserted between
    the repository and the commit SHA or ref, e.g.
    ``https://github.com/<repo>/commit/<sha>``.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    commit_segment: str = Field(default="", description="Segment preceding a commit SHA")
    tree_segment: str = Field(default="", description="Segment preceding a ref and path")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("commit_segment", "tree_segment")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        return value.strip("/")
