from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple
from packaging.version import Version


class DependencyEntry(BaseModel):
    """a single dependency of a gem, as published by the registry."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    requirements: str = Field(min_length=1)  # opaque requirement expression, e.g. ">= 1.0, < 3"


class DependencyList(BaseModel):
    """
    development and runtime dependencies of a gem.

    a list that the server omitted (or sent as null) stays None; it is not
    the same thing as an empty one. lists arrive as tuples so a record
    cannot be changed after decoding.
    """
    model_config = ConfigDict(frozen=True)

    development: Optional[Tuple[DependencyEntry, ...]] = None
    runtime: Optional[Tuple[DependencyEntry, ...]] = None


class PackageInfo(BaseModel):
    """published metadata for one gem (from /api/v1/gems/<name>.json)."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    authors: str
    info: Optional[str] = None
    licenses: Optional[Tuple[str, ...]] = None
    project_uri: str = Field(min_length=1)
    gem_uri: str = Field(min_length=1)
    homepage_uri: Optional[str] = None
    wiki_uri: Optional[str] = None
    documentation_uri: Optional[str] = None
    source_code_uri: Optional[str] = None
    bug_tracker_uri: Optional[str] = None
    changelog_uri: Optional[str] = None
    downloads: Optional[int] = None
    version_downloads: Optional[int] = None
    sha: str = Field(min_length=1)
    dependencies: DependencyList

    @property
    def parsed_version(self) -> Version:
        return Version(self.version)
