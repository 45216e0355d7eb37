"""Unit tests for procv.domain.models Pydantic models."""

from datetime import date

import pytest
from pydantic import ValidationError

from procv.core.exceptions import InvalidParameterError
from procv.domain.models.calculation import BankOffer, BankQuote, MortgageResult
from procv.domain.models.filters import PropertyFilters, SortOrder
from procv.domain.models.property import ListingType, Property, PropertyType


class TestProperty:
    """Tests for the Property model."""

    def test_valid_listing(self, sample_listing_data):
        prop = Property.model_validate(sample_listing_data)
        assert prop.id == "42"
        assert prop.property_type is PropertyType.APARTMENT
        assert prop.listing_type is ListingType.BUY
        assert prop.total_area == 90
        assert prop.date_added == date(2024, 11, 30)
        assert prop.features == ("Ocean View", "Balcony")

    def test_populate_by_attribute_name(self):
        prop = Property(
            id="1", title="T", location="L", island="Sal", property_type="villa",
            price=1, listing_type="rent", date_added="2024-01-01", total_area=50,
        )
        assert prop.property_type is PropertyType.VILLA
        assert prop.total_area == 50

    def test_numeric_id_coerced(self, sample_listing_data):
        sample_listing_data["id"] = 7
        assert Property.model_validate(sample_listing_data).id == "7"

    def test_frozen(self, sample_listing_data):
        prop = Property.model_validate(sample_listing_data)
        with pytest.raises(ValidationError):
            prop.price = 1

    def test_unknown_type_rejected(self, sample_listing_data):
        sample_listing_data["type"] = "castle"
        with pytest.raises(ValidationError):
            Property.model_validate(sample_listing_data)

    def test_negative_price_rejected(self, sample_listing_data):
        sample_listing_data["price"] = -1
        with pytest.raises(ValidationError):
            Property.model_validate(sample_listing_data)

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            Property.model_validate({"id": "1", "title": "Nothing else"})

    def test_extra_keys_ignored(self, sample_listing_data):
        sample_listing_data["agent"] = {"name": "Maria"}
        prop = Property.model_validate(sample_listing_data)
        assert not hasattr(prop, "agent")

    def test_price_per_sqm(self, sample_listing_data):
        prop = Property.model_validate(sample_listing_data)
        assert prop.price_per_sqm == pytest.approx(210000 / 90)

    def test_timestamp_date_added(self, sample_listing_data):
        sample_listing_data["dateAdded"] = "2024-12-20T10:00:00Z"
        assert Property.model_validate(sample_listing_data).date_added == date(2024, 12, 20)

    def test_malformed_date_rejected(self, sample_listing_data):
        sample_listing_data["dateAdded"] = "2024-12-20Tnoon"
        with pytest.raises(ValidationError):
            Property.model_validate(sample_listing_data)

    def test_price_per_sqm_without_area(self, sample_listing_data):
        sample_listing_data["totalArea"] = 0
        assert Property.model_validate(sample_listing_data).price_per_sqm is None


class TestPropertyFilters:
    """Tests for the PropertyFilters model."""

    def test_defaults(self):
        filters = PropertyFilters()
        assert filters.search_query == ""
        assert filters.property_type == "all"
        assert filters.min_price == 0
        assert filters.max_price == 2_000_000
        assert filters.bedrooms == 0
        assert filters.bathrooms == 0
        assert filters.island == "all"
        assert filters.listing_type == "all"
        assert filters.sort_by is SortOrder.NEWEST
        assert filters.is_default()

    def test_assignment_validated(self):
        filters = PropertyFilters()
        filters.sort_by = "price-asc"
        assert filters.sort_by is SortOrder.PRICE_ASC
        with pytest.raises(ValidationError):
            filters.sort_by = "cheapest"

    def test_property_type_accepts_enum(self):
        filters = PropertyFilters(property_type=PropertyType.VILLA)
        assert filters.property_type == "villa"

    def test_property_type_is_free_text(self):
        """Unknown categories are kept, and case is folded."""
        assert PropertyFilters(property_type="castle").property_type == "castle"
        assert PropertyFilters(property_type=" House ").property_type == "house"

    def test_listing_type_accepts_enum(self):
        assert PropertyFilters(listing_type=ListingType.RENT).listing_type == "rent"

    def test_camel_case_aliases(self):
        filters = PropertyFilters.model_validate({"minPrice": 1000, "sortBy": "oldest"})
        assert filters.min_price == 1000
        assert filters.sort_by is SortOrder.OLDEST

    def test_inverted_price_range_accepted(self):
        """min > max is not corrected; it simply matches nothing."""
        filters = PropertyFilters(min_price=500000, max_price=100000)
        assert filters.min_price > filters.max_price

    @pytest.mark.parametrize("key,expected", [
        ("min_price", "min_price"),
        ("minPrice", "min_price"),
        ("searchQuery", "search_query"),
        ("island", "island"),
    ])
    def test_field_for(self, key, expected):
        assert PropertyFilters.field_for(key) == expected

    def test_field_for_unknown(self):
        with pytest.raises(InvalidParameterError):
            PropertyFilters.field_for("colour")


class TestCalculationModels:
    """Tests for calculator result models."""

    def test_mortgage_result_defaults_to_zero(self):
        result = MortgageResult()
        assert result.monthly_payment == result.total_payment == result.loan_amount == 0

    def test_bank_quote_name(self):
        offer = BankOffer(name="Ecobank Cabo Verde", annual_rate_pct=7.2, min_deposit_pct=25)
        quote = BankQuote(offer=offer, monthly_payment=1, total_interest=1, eligible=True)
        assert quote.bank_name == "Ecobank Cabo Verde"

    def test_bank_offer_deposit_bounds(self):
        with pytest.raises(ValidationError):
            BankOffer(name="X", annual_rate_pct=5, min_deposit_pct=120)
