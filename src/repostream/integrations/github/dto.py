from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class GitHubOwnerDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str | None = None


class GitHubRepositoryItemDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    full_name: str
    owner: GitHubOwnerDTO | None = None
    stargazers_count: int = Field(default=0, ge=0)


class GitHubRepositorySearchResponseDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[GitHubRepositoryItemDTO]


class GitHubCommitDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sha: str


GitHubCommitListAdapter = TypeAdapter(list[GitHubCommitDTO])
