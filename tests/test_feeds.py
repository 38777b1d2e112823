"""Unit tests for the RSS feed and sitemap builders."""

from datetime import datetime, timezone
from xml.etree import ElementTree

from app.models.post import Post
from app.services.feeds import ATOM_NS, SITEMAP_NS, build_rss, build_sitemap

SITE = "https://blog.test"


class TestBuildRss:
    """Test build_rss function."""

    def test_channel_and_items(self) -> None:
        posts = [
            Post(
                slug="tech-2",
                title="두 번째",
                description="설명 & 요약",
                category="기타",
                featured_image="https://cdn.test/a.jpg",
                published_at=datetime(2024, 5, 2, 9, 30, tzinfo=timezone.utc),
            ),
            Post(slug="tech-1", title="첫 번째", description=None, category="기타", published_at=None),
        ]
        body = build_rss(posts, SITE, "테크매니아", "블로그 설명")
        assert body.startswith(b"<?xml")

        root = ElementTree.fromstring(body)
        channel = root.find("channel")
        assert root.get("version") == "2.0"
        assert channel.findtext("title") == "테크매니아"
        assert channel.findtext("language") == "ko-KR"
        assert channel.find(f"{{{ATOM_NS}}}link").get("href") == f"{SITE}/feed.xml"

        items = channel.findall("item")
        assert len(items) == 2
        first = items[0]
        assert first.findtext("link") == f"{SITE}/posts/tech-2"
        assert first.findtext("description") == "설명 & 요약"
        assert first.findtext("pubDate") == "Thu, 02 May 2024 09:30:00 GMT"
        assert first.find("enclosure").get("url") == "https://cdn.test/a.jpg"
        assert items[1].find("enclosure") is None
        assert items[1].findtext("description") == ""

    def test_empty_feed(self) -> None:
        root = ElementTree.fromstring(build_rss([], SITE, "t", "d"))
        assert root.find("channel").findall("item") == []


class TestBuildSitemap:
    """Test build_sitemap function."""

    def test_entries(self) -> None:
        body = build_sitemap(
            SITE,
            [("tech-1", datetime(2024, 1, 5, tzinfo=timezone.utc)), ("tech-2", None)],
            ["테니스 원리"],
        )
        root = ElementTree.fromstring(body)
        urls = root.findall(f"{{{SITEMAP_NS}}}url")
        locs = [u.findtext(f"{{{SITEMAP_NS}}}loc") for u in urls]
        assert locs == [
            SITE,
            f"{SITE}/posts/tech-1",
            f"{SITE}/posts/tech-2",
            f"{SITE}/category/%ED%85%8C%EB%8B%88%EC%8A%A4%20%EC%9B%90%EB%A6%AC",
        ]
        assert urls[0].findtext(f"{{{SITEMAP_NS}}}priority") == "1.0"
        assert urls[1].findtext(f"{{{SITEMAP_NS}}}lastmod") == "2024-01-05"
        assert urls[3].findtext(f"{{{SITEMAP_NS}}}changefreq") == "weekly"
