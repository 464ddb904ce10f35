"""
Feed document model and RSS 2.0 serialization.

Dates and channel text are kept exactly as the catalog sent them. feedgen
renders whatever it accepts; text it would reject (an empty description, a
date it cannot format) is written into its XML tree verbatim instead.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from dateutil import parser as date_parser
from feedgen.feed import FeedGenerator
from lxml import etree

from utils.config import Config
from utils.logger import get_logger, FeedError

logger = get_logger(__name__)

# Fields missing from a timestamp are taken from here, never from today
DATE_DEFAULT = datetime(1970, 1, 1)

# Stands in for channel text feedgen refuses to leave empty
PLACEHOLDER = '-'


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Read a catalog timestamp, assuming Japan time when no offset is given.

    Returns None when the text is not a date.
    """
    try:
        parsed = date_parser.parse(value, default=DATE_DEFAULT)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Keeping '{value}' as text: {e}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=Config.FEED_TIMEZONE)
    return parsed


@dataclass(frozen=True)
class FeedImage:
    """Channel image block."""

    url: str
    link: str
    title: str


@dataclass(frozen=True)
class Enclosure:
    """Media attached to an item.

    ``mime_type`` and ``length`` are empty strings when the image server
    did not report them. The model keeps them empty, but in the XML an
    empty length is written as ``length="0"`` since RSS requires a number
    there; an empty type stays ``type=""``.
    """

    url: str
    mime_type: str = ""
    length: str = ""


@dataclass(frozen=True)
class FeedItem:
    """One feed entry, built from one public episode.

    ``pub_date`` is the episode's publish timestamp as catalog text.
    """

    title: str
    link: str
    guid: str
    pub_date: str
    author: str
    enclosure: Enclosure
    guid_is_permalink: bool = True


@dataclass(frozen=True)
class FeedDocument:
    """An RSS channel and its items."""

    title: str
    link: str
    description: str
    image: FeedImage
    pub_date: str
    last_build_date: str
    items: Tuple[FeedItem, ...] = field(default_factory=tuple)

    def to_rss(self) -> str:
        """Serialize to an RSS 2.0 document.

        Items keep document order. Dates that parse are written in RFC 822
        form, others as given. Every value comes from the document itself,
        so equal documents serialize to equal strings.
        """
        pub_date = parse_timestamp(self.pub_date)
        last_build_date = parse_timestamp(self.last_build_date)
        item_dates = [parse_timestamp(item.pub_date) for item in self.items]

        try:
            fg = FeedGenerator()
            fg.load_extension('dc')

            fg.title(self.title or PLACEHOLDER)
            fg.link(href=self.link or PLACEHOLDER, rel='alternate')
            fg.description(self.description or PLACEHOLDER)
            fg.image(url=self.image.url, title=self.image.title, link=self.image.link)
            if pub_date is not None:
                fg.pubDate(pub_date)
            if last_build_date is not None:
                fg.lastBuildDate(last_build_date)

            for item, item_date in zip(self.items, item_dates):
                fe = fg.add_entry(order='append')
                fe.title(item.title)
                fe.link(href=item.link, rel='alternate')
                fe.guid(item.guid, permalink=item.guid_is_permalink)
                if item_date is not None:
                    fe.pubDate(item_date)
                # RSS <author> must be an e-mail address
                fe.dc.dc_creator(item.author)
                fe.enclosure(
                    url=item.enclosure.url,
                    length=item.enclosure.length,
                    type=item.enclosure.mime_type,
                )

            rss = fg.rss_str(pretty=False)
        except ValueError as e:
            raise FeedError(f"Cannot serialize feed '{self.title}': {e}") from e

        root = etree.fromstring(rss, etree.XMLParser(remove_blank_text=True))
        channel = root.find('channel')

        channel.find('title').text = self.title
        channel.find('link').text = self.link
        channel.find('description').text = self.description

        # feedgen fills lastBuildDate with the current time when unset
        if last_build_date is None:
            channel.find('lastBuildDate').text = self.last_build_date
        if pub_date is None:
            raw = etree.Element('pubDate')
            raw.text = self.pub_date
            channel.find('lastBuildDate').addnext(raw)

        for element, item, item_date in zip(channel.findall('item'), self.items, item_dates):
            if item_date is None:
                etree.SubElement(element, 'pubDate').text = item.pub_date

        return etree.tostring(
            root, pretty_print=True, xml_declaration=True, encoding='UTF-8'
        ).decode('utf-8')
