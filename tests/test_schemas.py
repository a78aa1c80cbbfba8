"""Tests for domain models."""

from __future__ import annotations

import pydantic
import pytest

from park_wildlife.reference import LOCAL_SPECIES
from park_wildlife.schemas import ALL_MONTHS, Availability, LoadingState, Seasonality


class TestSeasonality:
    def test_defaults_to_all_months(self) -> None:
        s = Seasonality()
        assert s.best_months == ALL_MONTHS
        assert s.availability == Availability.YEAR_ROUND

    def test_empty_months_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Seasonality(best_months=[])

    @pytest.mark.parametrize("month", [0, 13])
    def test_out_of_range_month_rejected(self, month: int) -> None:
        with pytest.raises(pydantic.ValidationError):
            Seasonality(best_months=[1, month])

    def test_availability_serializes_with_hyphen(self) -> None:
        assert Seasonality().model_dump(mode="json")["availability"] == "year-round"


class TestSpecies:
    def test_display_name(self) -> None:
        coyote = LOCAL_SPECIES[0]
        assert coyote.display_name == "Coyote (Canis latrans)"

    def test_display_name_without_common_name(self) -> None:
        coyote = LOCAL_SPECIES[0].model_copy(update={"name": "Canis latrans"})
        assert coyote.display_name == "Canis latrans"

    def test_frozen(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LOCAL_SPECIES[0].name = "Dog"  # type: ignore[misc]

    def test_local_ids_are_unique(self) -> None:
        ids = [s.id for s in LOCAL_SPECIES]
        assert len(ids) == len(set(ids))


class TestLoadingState:
    def test_initial_state(self) -> None:
        state = LoadingState()
        assert state.is_loading is False
        assert state.error is None
        assert state.is_using_fallback is False
        assert state.last_updated is None
