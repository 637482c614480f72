import logging
import xml.etree.ElementTree as ET
from email.utils import parsedate_to_datetime

from projecthub.domain.errors import FeedFormatError
from projecthub.domain.integrations import NewsArticle

logger = logging.getLogger(__name__)

DEFAULT_ARTICLE_LIMIT = 5

_NAMESPACES = {
    "dc": "http://purl.org/dc/elements/1.1/",
    "media": "http://search.yahoo.com/mrss/",
}


def parse_feed(xml_text: str, limit: int = DEFAULT_ARTICLE_LIMIT) -> list[NewsArticle]:
    """RSS 피드에서 앞쪽 limit개의 기사를 추출합니다.

    항목 단위로 방어적으로 파싱합니다. 날짜가 없거나 깨진 항목은 pubDate="",
    썸네일이 없으면 None. item이 하나도 없으면 빈 리스트를 반환합니다.

    Raises:
        FeedFormatError: XML 자체를 파싱할 수 없는 경우
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise FeedFormatError(f"피드 XML 파싱 실패: {e}") from e

    articles = []
    for item in root.iter("item"):
        if len(articles) >= limit:
            break
        articles.append(_parse_item(item))

    logger.info("피드 파싱 완료: %d건", len(articles))
    return articles


def _parse_item(item: ET.Element) -> NewsArticle:
    creator = item.findtext("dc:creator", default="", namespaces=_NAMESPACES)
    if not creator:
        creator = item.findtext("author", default="")

    return NewsArticle(
        title=(item.findtext("title") or "").strip(),
        link=(item.findtext("link") or "").strip(),
        pub_date=_format_pub_date(item.findtext("pubDate")),
        creator=creator.strip(),
        thumbnail=_find_thumbnail(item),
    )


def _format_pub_date(raw: str | None) -> str:
    """RFC 822 날짜를 YYYY-MM-DD로 변환합니다. 실패 시 빈 문자열."""
    if not raw or not raw.strip():
        return ""
    try:
        return parsedate_to_datetime(raw.strip()).strftime("%Y-%m-%d")
    except (TypeError, ValueError, IndexError):
        logger.warning("pubDate 파싱 실패: %s", raw)
        return ""


def _find_thumbnail(item: ET.Element) -> str | None:
    enclosure = item.find("enclosure")
    if enclosure is not None and enclosure.get("url"):
        return enclosure.get("url")

    for tag in ("media:thumbnail", "media:content"):
        media = item.find(tag, _NAMESPACES)
        if media is not None and media.get("url"):
            return media.get("url")

    return None
