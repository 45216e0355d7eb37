"""Integration tests for the search and calculator pipelines.

Tests the complete flow from catalog → session → search → summary → export,
and price → mortgage → schedule → bank comparison.
"""

import asyncio

import pytest

from procv.application.services.catalog import load_catalog, load_default_catalog
from procv.application.services.exporter import ResultExporter
from procv.application.services.leads import LeadInquiry, LoggingDispatcher, process_inquiry
from procv.application.services.search_session import PropertySearchSession, SearchState
from procv.core.financial import (
    calculate_affordability,
    calculate_mortgage,
    compare_bank_offers,
    generate_amortization_schedule,
    summarize_schedule_by_year,
)
from procv.domain.search.statistics import summarize


class TestSearchPipeline:
    """Integration tests for the property search flow."""

    def test_search_summarize_export(self, tmp_path):
        session = PropertySearchSession(load_default_catalog(), delay_seconds=0)
        session.update_filter("listingType", "buy")
        session.update_filter("minPrice", 100000)
        assert asyncio.run(session.perform_search_async())

        results = session.results
        assert [p.id for p in results] == ["3", "9", "1", "2", "10"]

        summary = summarize(results)
        assert summary.count == 5
        assert summary.average_price == pytest.approx((680000 + 320000 + 450000 + 185000 + 145000) / 5)

        exporter = ResultExporter(output_dir=str(tmp_path))
        path = exporter.save_results(results, metadata=session.filters.model_dump(mode="json"))
        assert [p.id for p in load_catalog(path)] == [p.id for p in results]

    def test_refine_then_clear(self):
        session = PropertySearchSession(load_default_catalog(), delay_seconds=0)
        session.perform_search()
        session.update_filter("island", "Santiago")
        session.update_filter("sortBy", "price-desc")
        assert [p.id for p in session.results] == ["9", "2", "8"]

        session.clear_filters()
        assert session.state is SearchState.NOT_SEARCHED
        assert session.results_count == 10

    def test_inquiry_on_search_result(self):
        session = PropertySearchSession(load_default_catalog(), delay_seconds=0)
        session.update_filter("search_query", "ocean view")
        listing = session.perform_search()[0]

        dispatcher = LoggingDispatcher()
        outcome = process_inquiry(
            LeadInquiry(property_id=listing.id, inquiry_type="viewing"),
            listing,
            dispatcher,
            "agent@procv.cv",
        )
        assert outcome.success
        assert dispatcher.sent[0].payload["property_id"] == listing.id


class TestCalculatorPipeline:
    """Integration tests for the calculators on a real listing."""

    def test_listing_to_mortgage_schedule(self, sample_catalog):
        villa = next(p for p in sample_catalog if p.id == "1")
        deposit = villa.price * 0.2
        mortgage = calculate_mortgage(villa.price, deposit, 4.5, 25)

        schedule = generate_amortization_schedule(mortgage.loan_amount, 4.5, 300)
        yearly = summarize_schedule_by_year(schedule)
        assert len(yearly) == 25
        assert yearly["interest"].sum() == pytest.approx(mortgage.total_interest, rel=1e-6)

        quotes = compare_bank_offers(villa.price, deposit, 25)
        assert all(q.monthly_payment > mortgage.monthly_payment for q in quotes)
        assert {q.bank_name for q in quotes if not q.eligible} == {
            "Caixa Económica de Cabo Verde",
            "Banco Interatlântico",
            "Ecobank Cabo Verde",
        }

    def test_affordability_selects_listings(self, sample_catalog):
        result = calculate_affordability(5000, 800, 50000, 4.5, 25)
        session = PropertySearchSession(sample_catalog, delay_seconds=0)
        session.update_filter("listing_type", "buy")
        session.update_filter("max_price", result.max_property_price)
        affordable = session.perform_search()
        assert affordable
        assert all(p.price <= result.max_property_price for p in affordable)
