"""Tests for upload option models."""

import pytest
from pydantic import ValidationError

from modules.uploads.models import ResponseFormat, UploadOptions


class TestUploadOptions:
    def test_defaults_to_json_format(self):
        assert UploadOptions().to_form_fields() == {"format": "json"}

    def test_form_fields_are_strings(self):
        options = UploadOptions(
            title="Holiday",
            album_id="abc",
            category_id=3,
            width=800,
            nsfw=1,
            format=ResponseFormat.TXT,
        )
        assert options.to_form_fields() == {
            "title": "Holiday",
            "album_id": "abc",
            "category_id": "3",
            "width": "800",
            "nsfw": "1",
            "format": "txt",
        }

    def test_nsfw_is_a_flag(self):
        with pytest.raises(ValidationError):
            UploadOptions(nsfw=2)

    def test_unknown_format(self):
        with pytest.raises(ValidationError):
            UploadOptions(format="xml")
