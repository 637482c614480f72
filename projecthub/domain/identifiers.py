import re

# 붙여넣은 URL에서 정규 식별자를 뽑아내는 패턴
_GITHUB_REPO_PATTERN = re.compile(r"github\.com/([^/]+/[^/]+)")
_FIGMA_FILE_KEY_PATTERN = re.compile(r"figma\.com/(?:file|design)/([0-9a-zA-Z]+)")
_BOARD_ID_PATTERN = re.compile(r"/boards/(\d+)")
_NOTION_PAGE_ID_PATTERN = re.compile(r"([a-f0-9]{32})$")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def extract_github_repo(value: str | None) -> str | None:
    """GitHub URL 또는 'owner/repo' 입력을 'owner/repo' 형태로 정규화합니다.

    - github.com 이 포함되지 않으면 이미 정규화된 값으로 보고 그대로 반환
    - github.com/{owner}/{repo} 형태면 앞의 두 경로 세그먼트만 추출
    - github.com 이 있지만 owner/repo 를 찾지 못하면 None
    """
    if not value:
        return None
    if "github.com" not in value:
        return value
    match = _GITHUB_REPO_PATTERN.search(value)
    return match.group(1) if match else None


def extract_figma_file_key(value: str | None) -> str | None:
    """Figma URL에서 File Key를 추출합니다. /file/ 과 /design/ 경로 모두 허용.

    매칭되지 않으면 이미 Key가 입력된 것으로 보고 원본을 그대로 반환합니다.
    """
    if not value:
        return None
    match = _FIGMA_FILE_KEY_PATTERN.search(value)
    return match.group(1) if match else value


def extract_board_id(value: str | int | None) -> int | None:
    """Project-Lite 보드 ID를 정수로 정규화합니다.

    - .../boards/123 형태의 URL이면 숫자 부분을 추출
    - 숫자만 입력되었으면 정수로 변환
    - 빈 값, 또는 URL도 숫자도 아닌 입력은 None (0으로 강제 변환하지 않음)
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    text = value.strip()
    if not text:
        return None

    match = _BOARD_ID_PATTERN.search(text)
    if match:
        return int(match.group(1))
    if _INTEGER_PATTERN.fullmatch(text):
        return int(text)
    return None


def extract_notion_page_id(value: str | None) -> str | None:
    """Notion 페이지 URL 끝의 32자리 hex ID를 추출합니다.

    예: https://www.notion.so/Page-Title-1234567890abcdef1234567890abcdef
    매칭되지 않으면 원본을 그대로 반환합니다.
    """
    if not value:
        return None
    match = _NOTION_PAGE_ID_PATTERN.search(value)
    return match.group(1) if match else value
