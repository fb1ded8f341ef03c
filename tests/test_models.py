"""Unit tests for the tool input models."""

import pytest
from pydantic import ValidationError

from waitlister_mcp.models import (
    AddSubscriberInput,
    GetSubscriberInput,
    ListSubscribersInput,
    LogViewInput,
    UpdateSubscriberInput,
)


class TestAddSubscriberInput:
    def test_email_only(self) -> None:
        assert AddSubscriberInput(email="a@b.com").to_body() == {"email": "a@b.com"}

    def test_name_and_phone(self) -> None:
        body = AddSubscriberInput(email="a@b.com", name="Ada", phone="+1555").to_body()
        assert body == {"email": "a@b.com", "name": "Ada", "phone": "+1555"}

    def test_referred_by_goes_into_metadata(self) -> None:
        body = AddSubscriberInput(email="a@b.com", referred_by="REF1").to_body()
        assert body["metadata"] == {"referred_by": "REF1"}
        assert "referred_by" not in body

    def test_referred_by_wins_on_collision(self) -> None:
        body = AddSubscriberInput(
            email="a@b.com",
            referred_by="REF1",
            metadata={"referred_by": "OLD", "company": "Acme"},
        ).to_body()
        assert body["metadata"] == {"referred_by": "REF1", "company": "Acme"}

    def test_metadata_is_not_mutated(self) -> None:
        metadata = {"company": "Acme"}
        AddSubscriberInput(email="a@b.com", referred_by="REF1", metadata=metadata).to_body()
        assert metadata == {"company": "Acme"}

    def test_empty_metadata_is_dropped(self) -> None:
        assert "metadata" not in AddSubscriberInput(email="a@b.com", metadata={}).to_body()

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "not-an-email",
            "a@b",
            "@b.com",
            "a@@b.com",
            "a b@c.com",
            ".a@b.com",
            "a..b@c.com",
            "a@b.com\n",
            "\na@b.com",
        ],
    )
    def test_rejects_malformed_email(self, email: str) -> None:
        with pytest.raises(ValidationError):
            AddSubscriberInput(email=email)

    @pytest.mark.parametrize("email", ["a@b.com", "first.last+tag@sub.example.co.uk", "o'neil@x.io"])
    def test_accepts_valid_email(self, email: str) -> None:
        assert AddSubscriberInput(email=email).email == email

    def test_metadata_values_must_be_strings(self) -> None:
        with pytest.raises(ValidationError):
            AddSubscriberInput(email="a@b.com", metadata={"seats": {"n": 3}})

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AddSubscriberInput(email="a@b.com", points=3)


class TestListSubscribersInput:
    def test_defaults(self) -> None:
        assert ListSubscribersInput().to_params() == {
            "limit": "20",
            "page": "1",
            "sort_by": "date",
            "sort_dir": "desc",
        }

    @pytest.mark.parametrize("limit", [0, 101, -5])
    def test_limit_out_of_range(self, limit: int) -> None:
        with pytest.raises(ValidationError):
            ListSubscribersInput(limit=limit)

    @pytest.mark.parametrize("limit", [1, 100])
    def test_limit_bounds_inclusive(self, limit: int) -> None:
        assert ListSubscribersInput(limit=limit).limit == limit

    def test_page_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ListSubscribersInput(page=0)

    def test_rejects_unknown_sort_field(self) -> None:
        with pytest.raises(ValidationError):
            ListSubscribersInput(sort_by="name")

    def test_rejects_unknown_sort_direction(self) -> None:
        with pytest.raises(ValidationError):
            ListSubscribersInput(sort_dir="up")


class TestSubscriberPath:
    def test_email_is_percent_encoded(self) -> None:
        assert GetSubscriberInput(id_or_email="a+b@c.com").path == "/subscribers/a%2Bb%40c.com"

    def test_plain_id(self) -> None:
        assert GetSubscriberInput(id_or_email="sub_123").path == "/subscribers/sub_123"

    def test_empty_identifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GetSubscriberInput(id_or_email="")


class TestUpdateSubscriberInput:
    def test_omitted_fields_absent(self) -> None:
        assert UpdateSubscriberInput(id_or_email="x", name="Ada").to_body() == {"name": "Ada"}

    def test_zero_and_empty_string_present(self) -> None:
        body = UpdateSubscriberInput(id_or_email="x", name="", phone="", points=0).to_body()
        assert body == {"name": "", "phone": "", "points": 0}

    def test_no_fields_gives_empty_body(self) -> None:
        assert UpdateSubscriberInput(id_or_email="x").to_body() == {}

    def test_metadata_sent_as_is(self) -> None:
        body = UpdateSubscriberInput(id_or_email="x", metadata={"plan": "pro"}).to_body()
        assert body == {"metadata": {"plan": "pro"}}

    def test_fractional_points(self) -> None:
        assert UpdateSubscriberInput(id_or_email="x", points=2.5).to_body() == {"points": 2.5}


class TestLogViewInput:
    def test_empty(self) -> None:
        assert LogViewInput().to_body() == {}

    def test_referring_domain_wrapped_in_metadata(self) -> None:
        body = LogViewInput(visitor_id="v1", referring_domain="news.ycombinator.com").to_body()
        assert body == {
            "visitor_id": "v1",
            "metadata": {"referring_domain": "news.ycombinator.com"},
        }
