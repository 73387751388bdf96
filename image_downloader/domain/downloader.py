"""ImageDownloader — drives the fetch/collect loop for one channel.

States: FETCHING -> PROCESSING_PAGE -> (FETCHING | DONE). The loop ends on an
empty page (feed exhausted) or once the quantity budget is reached. Any
TransportError or PersistError propagates and aborts the run.
"""

import sys

from image_downloader.domain.collector import Collector
from image_downloader.domain.models import RunSummary, Settings, StopReason
from image_downloader.domain.paginator import Paginator
from image_downloader.ports.outbound import ImageStorePort, MessageSourcePort


def _log(msg: str):
    print(msg, file=sys.stderr)


class ImageDownloader:
    """Downloads channel images through a message source and an image store.

    Cursor and collected-set state live on a Paginator and Collector created
    fresh for every ``run`` call, so one downloader can be reused.
    """

    def __init__(self, source: MessageSourcePort, store: ImageStorePort):
        self._source = source
        self._store = store

    async def run(self, settings: Settings) -> RunSummary:
        paginator = Paginator(
            self._source,
            channel_id=settings.channel_id,
            token=settings.token,
            start=settings.start,
        )
        collector = Collector(
            self._store,
            destination=settings.destination,
            quantity=settings.quantity,
        )

        stop_reason = StopReason.EXHAUSTED
        while True:
            page = await paginator.next_page()
            if not page:
                break
            if not await collector.process_page(page):
                stop_reason = StopReason.BUDGET
                break

        summary = RunSummary(
            collected=dict(collector.collected),
            pages_fetched=paginator.pages_fetched,
            stop_reason=stop_reason,
            time_range=settings.has_time_range,
        )
        _log(
            f"Run finished ({stop_reason.value}): {summary.messages_collected} message(s), "
            f"{summary.images_saved} file(s), {summary.pages_fetched} page(s)"
        )
        return summary
