"""Tests for domain data models."""

from pathlib import Path

import pytest

from image_downloader.domain.models import Attachment, Message, RunSummary, Settings, StopReason


class TestAttachment:
    def test_width_marks_image(self):
        assert Attachment(url="u", width=1).is_image is True

    def test_zero_width_still_image(self):
        assert Attachment(url="u", width=0).is_image is True

    def test_missing_width(self):
        assert Attachment(url="u").is_image is False


class TestMessage:
    def test_images_keeps_order(self):
        a, b, c = Attachment("a", 1), Attachment("b"), Attachment("c", 2)
        assert Message(id=1, attachments=(a, b, c)).images() == [a, c]

    def test_no_attachments(self):
        assert Message(id=1).images() == []


class TestSettings:
    def test_defaults_unbounded(self):
        s = Settings(channel_id="1", token="t", destination=Path("."))
        assert s.start == 0
        assert s.quantity is None
        assert s.has_time_range is False

    def test_with_time_range(self):
        s = Settings(channel_id="1", token="t", destination=Path("."), start=5, quantity=3)
        assert s.has_time_range is True

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_rejects_non_positive_quantity(self, quantity):
        with pytest.raises(ValueError):
            Settings(channel_id="1", token="t", destination=Path("."), quantity=quantity)

    def test_rejects_non_numeric_channel(self):
        with pytest.raises(ValueError):
            Settings(channel_id="general", token="t", destination=Path("."))

    @pytest.mark.parametrize("channel_id", ["\u00b2\u0663", str(2 ** 64)])
    def test_rejects_non_ascii_or_oversized_channel(self, channel_id):
        with pytest.raises(ValueError):
            Settings(channel_id=channel_id, token="t", destination=Path("."))

    def test_frozen(self):
        s = Settings(channel_id="1", token="t", destination=Path("."))
        with pytest.raises(Exception):
            s.quantity = 5


class TestRunSummary:
    def test_plural(self):
        summary = RunSummary(collected={1: 1, 2: 3})
        assert summary.report() == "Successfully saved 2 images!"
        assert summary.images_saved == 4

    def test_singular(self):
        assert RunSummary(collected={1: 2}).report() == "Successfully saved 1 image!"

    def test_zero(self):
        assert RunSummary().report() == "The selected channel doesn't contain any images!"

    def test_zero_with_time_range(self):
        summary = RunSummary(time_range=True, stop_reason=StopReason.EXHAUSTED)
        assert "in the selected time range" in summary.report()
