"""Unit tests for column labels, extractors and row projection."""
from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

import pytest

from event_export.application.export import (
    ColumnProjector,
    capitalize,
    column_label,
    column_value,
    country_name,
    display_value,
)
from event_export.kernel.types import ClickDetails, Customer, SaleDetails


# ---------------------------------------------------------------------------
# labels
# ---------------------------------------------------------------------------
class TestColumnLabel:
    @pytest.mark.parametrize(
        ("key", "label"),
        [
            ("trigger", "Event"),
            ("url", "Destination URL"),
            ("os", "OS"),
            ("referer", "Referrer"),
            ("refererUrl", "Referrer URL"),
            ("timestamp", "Date"),
            ("invoiceId", "Invoice ID"),
            ("saleAmount", "Sale Amount"),
            ("clickId", "Click ID"),
        ],
    )
    def test_fixed_labels(self, key, label):
        assert column_label(key) == label

    def test_other_keys_are_capitalised(self):
        assert column_label("country") == "Country"
        assert column_label("link") == "Link"
        assert column_label("eventName") == "EventName"

    def test_capitalize_only_touches_first_character(self):
        assert capitalize("bROWSER") == "BROWSER"
        assert capitalize("") == ""


# ---------------------------------------------------------------------------
# extractors
# ---------------------------------------------------------------------------
class TestColumnValue:
    def test_link_joins_domain_and_key(self, make_click):
        assert column_value("link", make_click()) == "dub.sh/abc"

    def test_root_link_renders_bare_domain(self, make_click):
        assert column_value("link", make_click(key="_root")) == "dub.sh"

    def test_country_code_becomes_name(self, make_click):
        assert column_value("country", make_click(country="US")) == "United States"

    def test_unknown_country_code_passes_through(self, make_click):
        assert column_value("country", make_click(country="XX")) == "XX"

    def test_trigger_only_on_clicks(self, make_click, make_lead):
        assert column_value("trigger", make_click(trigger="qr")) == "qr"
        assert column_value("trigger", make_lead()) is None

    def test_event_name_on_leads_and_sales(self, make_click, make_lead, make_sale):
        assert column_value("event", make_lead()) == "Sign up"
        assert column_value("event", make_sale()) == "Purchase"
        assert column_value("event", make_click()) is None

    def test_click_fields(self, make_click):
        click = make_click()
        assert column_value("url", click) == "https://acme.com/pricing"
        assert column_value("referer", click) == "google.com"
        assert column_value("refererUrl", click) == "https://google.com/search"
        assert column_value("clickId", click) == "clk_1"

    def test_click_fields_on_conversions_use_originating_click(self, make_lead):
        lead = make_lead(click=ClickDetails(id="clk_9", url="https://acme.com"))
        assert column_value("clickId", lead) == "clk_9"
        assert column_value("url", lead) == "https://acme.com"
        assert column_value("clickId", make_lead()) is None

    def test_customer_name_and_email(self, make_lead):
        assert column_value("customer", make_lead()) == "Jane Doe <jane@example.com>"

    def test_customer_without_name(self, make_lead):
        lead = make_lead(customer=Customer(id="c", email="anon@example.com"))
        assert column_value("customer", lead) == "<anon@example.com>"

    def test_customer_without_email(self, make_lead):
        assert column_value("customer", make_lead(customer=Customer(id="c", name="Jo"))) == "Jo"

    def test_missing_customer_is_empty(self, make_lead, make_click):
        assert column_value("customer", make_lead(customer=None)) == ""
        assert column_value("customer", make_click()) is None

    def test_sale_amount_in_dollars(self, make_sale):
        assert column_value("saleAmount", make_sale()) == "$49.99"
        assert column_value("saleAmount", make_sale(sale=SaleDetails(amount=5))) == "$0.05"
        assert column_value("saleAmount", make_sale(sale=SaleDetails(amount=120000))) == "$1200.00"

    def test_invoice_id(self, make_sale, make_lead):
        assert column_value("invoiceId", make_sale()) == "inv_001"
        assert column_value("invoiceId", make_lead()) is None

    def test_plain_attribute_fallback(self, make_click):
        click = make_click(browser="Firefox", link_id="link_abc")
        assert column_value("browser", click) == "Firefox"
        assert column_value("linkId", click) == "link_abc"

    def test_unknown_column_is_none(self, make_click):
        assert column_value("bogus", make_click()) is None

    def test_private_names_are_not_exposed(self, make_click):
        assert column_value("__class__", make_click()) is None
        assert column_value("_fields", make_click()) is None


class TestCountryName:
    def test_lower_case_code(self):
        assert country_name("de") == "Germany"

    def test_common_name_preferred(self):
        assert country_name("TW") == "Taiwan"

    def test_unknown(self):
        assert country_name("ZZ") is None


# ---------------------------------------------------------------------------
# display
# ---------------------------------------------------------------------------
class _Colour(Enum):
    RED = "red"


class TestDisplayValue:
    def test_none_is_empty(self):
        assert display_value(None) == ""

    def test_booleans(self):
        assert display_value(True) == "true"
        assert display_value(False) == "false"

    def test_datetime_is_utc_iso_with_millis(self):
        value = datetime(2026, 10, 19, 11, 0, 5, 123456, tzinfo=UTC)
        assert display_value(value) == "2026-10-19T11:00:05.123Z"

    def test_enum_uses_value(self):
        assert display_value(_Colour.RED) == "red"

    def test_nested_record_is_json(self):
        assert display_value(SaleDetails(amount=1)) == (
            '{"amount": 1, "invoice_id": null, "currency": "usd", "payment_processor": null}'
        )

    def test_numbers(self):
        assert display_value(0) == "0"
        assert display_value(1.5) == "1.5"


# ---------------------------------------------------------------------------
# ColumnProjector
# ---------------------------------------------------------------------------
class TestColumnProjector:
    def test_headers_follow_column_order(self):
        projector = ColumnProjector(["timestamp", "link", "country"])
        assert projector.headers == ("Date", "Link", "Country")
        assert projector.columns == ("timestamp", "link", "country")

    def test_colliding_labels_are_qualified(self):
        projector = ColumnProjector(["trigger", "event"])
        assert projector.headers == ("Event", "Event (event)")

    def test_project_row(self, make_click):
        projector = ColumnProjector(["timestamp", "link", "country", "bogus"])
        row = projector.project_row(make_click())
        assert row == {
            "Date": "2026-10-19T11:00:00.000Z",
            "Link": "dub.sh/abc",
            "Country": "United States",
            "Bogus": "",
        }

    def test_project_keeps_record_order(self, make_click):
        records = [make_click(key="a"), make_click(key="b")]
        rows = ColumnProjector(["link"]).project(records)
        assert [r["Link"] for r in rows] == ["dub.sh/a", "dub.sh/b"]
