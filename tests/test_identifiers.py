"""URL → 정규 식별자 추출 테스트"""

import pytest

from projecthub.domain.identifiers import (
    extract_board_id,
    extract_figma_file_key,
    extract_github_repo,
    extract_notion_page_id,
)

PAGE_HEX = "1234567890abcdef1234567890abcdef"


class TestGithubRepo:
    @pytest.mark.parametrize(
        "value",
        [
            "octo/hello",
            "https://github.com/octo/hello",
            "https://github.com/octo/hello/tree/main/src",
            "http://www.github.com/octo/hello/pulls",
            "github.com/octo/hello",
        ],
    )
    def test_canonical_form(self, value):
        assert extract_github_repo(value) == "octo/hello"

    def test_non_github_input_passes_through(self):
        assert extract_github_repo("just-a-name") == "just-a-name"

    def test_github_url_without_repo_is_none(self):
        assert extract_github_repo("https://github.com/octo") is None

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert extract_github_repo(value) is None


class TestFigmaFileKey:
    def test_file_and_design_paths_give_same_key(self):
        legacy = extract_figma_file_key("https://www.figma.com/file/AbC123xyz/My-Design?node-id=1")
        current = extract_figma_file_key("https://www.figma.com/design/AbC123xyz/My-Design")
        assert legacy == current == "AbC123xyz"

    def test_raw_key_passes_through(self):
        assert extract_figma_file_key("AbC123xyz") == "AbC123xyz"

    def test_unknown_url_is_kept(self):
        url = "https://www.figma.com/proto/AbC123xyz"
        assert extract_figma_file_key(url) == url

    def test_empty(self):
        assert extract_figma_file_key(None) is None
        assert extract_figma_file_key("") is None


class TestBoardId:
    def test_url(self):
        assert extract_board_id("https://x/boards/42") == 42

    def test_url_with_trailing_path(self):
        assert extract_board_id("http://localhost/boards/5/settings") == 5

    def test_numeric_string(self):
        assert extract_board_id("42") == 42
        assert extract_board_id(" 7 ") == 7

    def test_integer(self):
        assert extract_board_id(42) == 42

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty(self, value):
        assert extract_board_id(value) is None

    def test_non_numeric_is_none_not_zero(self):
        assert extract_board_id("my-board") is None


class TestNotionPageId:
    def test_title_url(self):
        url = f"https://www.notion.so/workspace/Page-Title-{PAGE_HEX}"
        assert extract_notion_page_id(url) == PAGE_HEX

    def test_bare_id(self):
        assert extract_notion_page_id(PAGE_HEX) == PAGE_HEX

    def test_non_matching_passes_through(self):
        assert extract_notion_page_id("not-a-page") == "not-a-page"

    def test_query_string_prevents_match(self):
        url = f"https://www.notion.so/Page-{PAGE_HEX}?v=abc"
        assert extract_notion_page_id(url) == url

    def test_empty(self):
        assert extract_notion_page_id(None) is None


class TestIdempotence:
    @pytest.mark.parametrize(
        "extractor, value",
        [
            (extract_github_repo, "https://github.com/octo/hello/issues"),
            (extract_github_repo, "octo/hello"),
            (extract_figma_file_key, "https://www.figma.com/design/AbC123xyz/x"),
            (extract_figma_file_key, "AbC123xyz"),
            (extract_board_id, "https://x/boards/42"),
            (extract_board_id, "42"),
            (extract_notion_page_id, f"https://www.notion.so/Page-{PAGE_HEX}"),
            (extract_notion_page_id, "free-text"),
        ],
    )
    def test_second_pass_is_noop(self, extractor, value):
        once = extractor(value)
        assert extractor(once) == once
