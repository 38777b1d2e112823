# app/services/feeds.py
"""RSS 2.0 y sitemap.xml a partir de posts ya consultados."""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable, List, Optional, Tuple
from xml.etree.ElementTree import Element, SubElement, register_namespace, tostring

from app.core.seo import category_url, post_url
from app.models.post import Post

ATOM_NS = "http://www.w3.org/2005/Atom"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

register_namespace("atom", ATOM_NS)


def _aware(value: Optional[datetime]) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _rfc822(value: Optional[datetime]) -> str:
    return format_datetime(_aware(value), usegmt=True)


def build_rss(posts: Iterable[Post], site_url: str, title: str, description: str) -> bytes:
    rss = Element("rss", version="2.0")
    channel = SubElement(rss, "channel")

    SubElement(channel, "title").text = title
    SubElement(channel, "link").text = site_url
    SubElement(channel, "description").text = description
    SubElement(channel, "language").text = "ko-KR"
    SubElement(channel, "lastBuildDate").text = _rfc822(None)
    SubElement(
        channel,
        f"{{{ATOM_NS}}}link",
        href=f"{site_url}/feed.xml",
        rel="self",
        type="application/rss+xml",
    )

    image = SubElement(channel, "image")
    SubElement(image, "url").text = f"{site_url}/logo.png"
    SubElement(image, "title").text = title
    SubElement(image, "link").text = site_url

    for post in posts:
        link = post_url(site_url, post.slug)
        item = SubElement(channel, "item")
        SubElement(item, "title").text = post.title
        SubElement(item, "link").text = link
        SubElement(item, "guid", isPermaLink="true").text = link
        SubElement(item, "description").text = post.description or ""
        SubElement(item, "pubDate").text = _rfc822(post.published_at)
        SubElement(item, "category").text = post.category
        if post.featured_image:
            SubElement(item, "enclosure", url=post.featured_image, type="image/jpeg")

    return tostring(rss, encoding="utf-8", xml_declaration=True)


def build_sitemap(
    site_url: str,
    posts: Iterable[Tuple[str, Optional[datetime]]],
    categories: Iterable[str],
) -> bytes:
    """Home (diaria), posts (semanal, lastmod = updated_at) y categorías."""
    today = _aware(None).date().isoformat()
    urlset = Element("urlset", xmlns=SITEMAP_NS)

    entries: List[Tuple[str, str, str, str]] = [(site_url, today, "daily", "1.0")]
    for slug, updated_at in posts:
        entries.append((post_url(site_url, slug), _aware(updated_at).date().isoformat(), "weekly", "0.8"))
    for category in categories:
        entries.append((category_url(site_url, category), today, "weekly", "0.6"))

    for loc, lastmod, changefreq, priority in entries:
        url = SubElement(urlset, "url")
        SubElement(url, "loc").text = loc
        SubElement(url, "lastmod").text = lastmod
        SubElement(url, "changefreq").text = changefreq
        SubElement(url, "priority").text = priority

    return tostring(urlset, encoding="utf-8", xml_declaration=True)
