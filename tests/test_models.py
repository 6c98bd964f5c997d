"""
Tests for the entity models: identity state, visit ledger and specialties.
"""

from datetime import date

import pytest

from petclinic_core.models import (
    DEFAULT_PET_PHOTO,
    UNSAVED,
    Owner,
    Persisted,
    Pet,
    PetType,
    Specialty,
    Unsaved,
    Vet,
    Visit,
    identity_of,
)


class TestIdentity:
    """Test cases for the Unsaved / Persisted identity state."""

    def test_identity_of_none_is_unsaved(self):
        assert identity_of(None) == UNSAVED
        assert isinstance(identity_of(None), Unsaved)

    def test_identity_of_id_is_persisted(self):
        assert identity_of(7) == Persisted(7)

    def test_new_entity_is_unsaved(self):
        pet = Pet(name="Leo")

        assert pet.is_new
        assert pet.identity == UNSAVED

    def test_entity_with_id_is_persisted(self):
        pet = Pet(id=3, name="Leo")

        assert not pet.is_new
        assert pet.identity == Persisted(3)

    def test_string_forms(self):
        assert str(UNSAVED) == "unsaved"
        assert str(Persisted(4)) == "persisted(4)"


class TestBaseModel:
    """Test cases for the shared model helpers."""

    def test_to_dict_serializes_dates(self):
        pet = Pet(id=1, name="Leo", birth_date=date(2010, 9, 7))

        data = pet.to_dict()

        assert data["id"] == 1
        assert data["name"] == "Leo"
        assert data["birth_date"] == "2010-09-07"

    def test_update_fields(self):
        owner = Owner(first_name="Old")
        owner.update_fields(first_name="New", city="Madison")

        assert owner.first_name == "New"
        assert owner.city == "Madison"

    def test_update_fields_rejects_unknown_field(self):
        owner = Owner(first_name="Old")

        with pytest.raises(AttributeError):
            owner.update_fields(first_name="New", nonexistent_field="value")

        assert owner.first_name == "Old"

    def test_table_names(self):
        assert Owner.get_table_name() == "owners"
        assert PetType.get_table_name() == "types"
        assert Visit.get_table_name() == "visits"

    def test_named_model_repr(self):
        text = repr(PetType(id=100, name="TestEntity"))

        assert "100" in text
        assert "TestEntity" in text

    def test_named_model_str(self):
        assert str(PetType(name="hamster")) == "hamster"
        assert str(Specialty()) == ""


class TestPetVisitLedger:
    """Test cases for the visits a pet owns."""

    def test_new_pet_has_no_visits(self):
        assert Pet(name="Leo").visits == []

    def test_add_visit_appends(self):
        pet = Pet(name="Leo")
        first = Visit(description="first", visit_date=date(2021, 1, 1))
        second = Visit(description="second", visit_date=date(2020, 1, 1))

        pet.add_visit(first)
        pet.add_visit(second)

        assert pet.visits == [first, second]
        assert first.pet is pet

    def test_add_visit_keeps_visit_identity(self):
        pet = Pet(id=1, name="Leo")
        visit = Visit(description="checkup")

        pet.add_visit(visit)

        assert visit.is_new

    def test_visit_date_defaults_to_today(self):
        assert Visit().visit_date == date.today()

    def test_explicit_visit_date_is_kept(self):
        assert Visit(visit_date=date(2013, 1, 2)).visit_date == date(2013, 1, 2)


class TestPetPhoto:
    """Test cases for the pet photo attribute."""

    def test_default_photo(self):
        assert Pet(name="Leo").photo == DEFAULT_PET_PHOTO

    def test_stored_photo(self):
        pet = Pet(name="Leo", photo_filename="abc.png")
        assert pet.photo == "abc.png"


class TestVetSpecialties:
    """Test cases for the alphabetical specialty view."""

    def test_specialties_are_sorted(self, sample_vet):
        assert [s.name for s in sample_vet.specialties] == ["dentistry", "surgery"]

    def test_backing_collection_keeps_insertion_order(self, sample_vet):
        assert [s.name for s in sample_vet.assigned_specialties] == [
            "surgery",
            "dentistry",
        ]

    def test_order_is_recomputed_after_adding(self, sample_vet):
        sample_vet.add_specialty(Specialty(name="anesthesia"))

        assert [s.name for s in sample_vet.specialties] == [
            "anesthesia",
            "dentistry",
            "surgery",
        ]

    def test_duplicates_are_kept(self):
        vet = Vet(first_name="Henry", last_name="Stevens")
        radiology = Specialty(id=1, name="radiology")
        vet.add_specialty(radiology)
        vet.add_specialty(radiology)

        assert vet.nr_of_specialties == 2
        assert vet.specialties == [radiology, radiology]

    def test_equal_names_keep_insertion_order(self):
        vet = Vet()
        first = Specialty(id=1, name="surgery")
        second = Specialty(id=2, name="surgery")
        vet.add_specialty(first)
        vet.add_specialty(second)

        assert vet.specialties == [first, second]

    def test_vet_without_specialties(self):
        vet = Vet(first_name="James", last_name="Carter")

        assert vet.specialties == []
        assert vet.nr_of_specialties == 0

    def test_display_name(self, sample_vet):
        assert sample_vet.display_name == "Linda Douglas"
