from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class IntegrationResult:
    """연동 Use Case의 최종 결과. 예외 대신 상태 코드 + JSON 본문으로 전달합니다."""
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def success(cls, body: Any) -> "IntegrationResult":
        return cls(status_code=200, body=body)

    @classmethod
    def failure(cls, status_code: int, message: str) -> "IntegrationResult":
        return cls(status_code=status_code, body={"message": message})


# ----------------------------------------------------------------------
# GitHub
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class GithubRepository:
    """GitHub 저장소 메타데이터"""
    full_name: str
    name: str
    html_url: str
    description: str | None
    stargazers_count: int
    forks_count: int
    open_issues_count: int
    language: str | None
    pushed_at: str | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GithubRepository":
        return cls(
            full_name=data.get("full_name", ""),
            name=data.get("name", ""),
            html_url=data.get("html_url", ""),
            description=data.get("description"),
            stargazers_count=data.get("stargazers_count", 0),
            forks_count=data.get("forks_count", 0),
            open_issues_count=data.get("open_issues_count", 0),
            language=data.get("language"),
            pushed_at=data.get("pushed_at"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "full_name": self.full_name,
            "name": self.name,
            "html_url": self.html_url,
            "description": self.description,
            "stargazers_count": self.stargazers_count,
            "forks_count": self.forks_count,
            "open_issues_count": self.open_issues_count,
            "language": self.language,
            "pushed_at": self.pushed_at,
        }


@dataclass(frozen=True)
class GithubCommit:
    """GitHub 커밋 요약"""
    sha: str
    message: str
    author_name: str
    authored_at: str | None
    html_url: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GithubCommit":
        commit = data.get("commit") or {}
        author = commit.get("author") or {}
        return cls(
            sha=data.get("sha", ""),
            message=commit.get("message", ""),
            author_name=author.get("name", ""),
            authored_at=author.get("date"),
            html_url=data.get("html_url", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        # 위젯이 기대하는 GitHub API 원형 구조 유지
        return {
            "sha": self.sha,
            "html_url": self.html_url,
            "commit": {
                "message": self.message,
                "author": {"name": self.author_name, "date": self.authored_at},
            },
        }


@dataclass(frozen=True)
class GithubSummary:
    repository: GithubRepository
    commits: list[GithubCommit]

    def to_dict(self) -> dict[str, Any]:
        return {
            "repo": self.repository.to_dict(),
            "commits": [c.to_dict() for c in self.commits],
        }


# ----------------------------------------------------------------------
# Notion
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class NotionPageSummary:
    """Notion 페이지 요약 (properties는 원본 그대로 보존)"""
    id: str
    url: str
    icon: dict[str, Any] | None
    cover: dict[str, Any] | None
    last_edited_time: str | None
    properties: dict[str, Any]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "NotionPageSummary":
        return cls(
            id=data.get("id", ""),
            url=data.get("url", ""),
            icon=data.get("icon"),
            cover=data.get("cover"),
            last_edited_time=data.get("last_edited_time"),
            properties=data.get("properties") if isinstance(data.get("properties"), dict) else {},
        )

    @property
    def title(self) -> str:
        for prop in self.properties.values():
            if isinstance(prop, dict) and prop.get("type") == "title":
                return "".join(
                    t.get("plain_text", "") for t in prop.get("title") or [] if isinstance(t, dict)
                )
        return ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "icon": self.icon,
            "cover": self.cover,
            "last_edited_time": self.last_edited_time,
            "properties": self.properties,
            "title": self.title,
        }


@dataclass(frozen=True)
class NotionPageError:
    """개별 페이지 조회 실패 레코드 (배치 전체는 실패시키지 않음)"""
    id: str
    error: str
    status: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "error": self.error, "status": self.status}


# ----------------------------------------------------------------------
# News
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class NewsArticle:
    title: str
    link: str
    pub_date: str           # YYYY-MM-DD, 파싱 실패 시 ""
    creator: str
    thumbnail: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "pubDate": self.pub_date,
            "creator": self.creator,
            "thumbnail": self.thumbnail,
        }
