"""
Tests for the Pydantic input and response schemas.
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from petclinic_core.exceptions import format_validation_errors
from petclinic_core.models import DEFAULT_PET_PHOTO
from petclinic_core.schemas import (
    OwnerCreate,
    OwnerResponse,
    PetCreate,
    PetResponse,
    PetUpdate,
    VetListResponse,
    VetResponse,
    VisitCreate,
)


@pytest.fixture
def owner_data():
    return {
        "first_name": "Betty",
        "last_name": "Davis",
        "address": "638 Cardinal Ave.",
        "city": "Sun Prairie",
        "telephone": "6085551749",
    }


class TestOwnerCreate:
    """Test cases for OwnerCreate validation."""

    def test_valid_owner(self, owner_data):
        owner = OwnerCreate(**owner_data)

        assert owner.last_name == "Davis"
        assert owner.telephone == "6085551749"

    def test_strips_whitespace(self, owner_data):
        owner_data["city"] = "  Madison  "

        assert OwnerCreate(**owner_data).city == "Madison"

    @pytest.mark.parametrize("telephone", ["608555174", "60855517490", "608-555-1749", "abcdefghij"])
    def test_invalid_telephone(self, owner_data, telephone):
        owner_data["telephone"] = telephone

        with pytest.raises(ValidationError) as exc_info:
            OwnerCreate(**owner_data)

        assert "Telephone must be a 10-digit number" in str(exc_info.value)

    @pytest.mark.parametrize("field", ["first_name", "last_name", "address", "city"])
    def test_blank_required_field(self, owner_data, field):
        owner_data[field] = "   "

        with pytest.raises(ValidationError):
            OwnerCreate(**owner_data)

    def test_missing_field_is_reported(self, owner_data):
        del owner_data["address"]

        with pytest.raises(ValidationError) as exc_info:
            OwnerCreate(**owner_data)

        formatted = format_validation_errors(exc_info.value.errors())
        assert formatted == {"address": ["This field is required"]}


class TestPetInput:
    """Test cases for PetCreate and PetUpdate validation."""

    def test_valid_pet(self):
        pet = PetCreate(name=" Leo ", birth_date=date(2020, 1, 1), type_id=1)

        assert pet.name == "Leo"

    def test_future_birth_date_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            PetCreate(
                name="Leo",
                birth_date=date.today() + timedelta(days=1),
                type_id=1,
            )

        assert "Birth date cannot be in the future" in str(exc_info.value)

    def test_birth_date_today_is_accepted(self):
        assert PetCreate(name="Leo", birth_date=date.today(), type_id=1)

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValidationError):
            PetCreate(name="   ", birth_date=date(2020, 1, 1), type_id=1)

    @pytest.mark.parametrize("type_id", [0, -1])
    def test_type_id_must_be_positive(self, type_id):
        with pytest.raises(ValidationError):
            PetCreate(name="Leo", birth_date=date(2020, 1, 1), type_id=type_id)

    def test_update_without_type(self):
        update = PetUpdate(name="Leo", birth_date=date(2020, 1, 1))

        assert update.type_id is None


class TestVisitCreate:
    """Test cases for VisitCreate validation."""

    def test_date_defaults_to_today(self):
        assert VisitCreate(description="checkup").visit_date == date.today()

    def test_blank_description_is_rejected(self):
        with pytest.raises(ValidationError):
            VisitCreate(description="  ")

    def test_description_is_required(self):
        with pytest.raises(ValidationError):
            VisitCreate()


class TestResponses:
    """Test cases for serializing models."""

    def test_owner_response(self, owner_with_pets, visit_factory):
        owner_with_pets.add_visit(7, visit_factory.build(description="rabies shot"))

        response = OwnerResponse.model_validate(owner_with_pets)

        assert response.id == 6
        assert response.is_new is False
        assert [pet.name for pet in response.pets] == ["Samantha", "Max", "Bowser"]
        assert response.pets[0].visits[0].description == "rabies shot"
        assert response.pets[2].id is None

    def test_pet_response_uses_default_photo(self, pet_factory, cat_type):
        pet = pet_factory.build("Leo", pet_id=1, type=cat_type)

        response = PetResponse.model_validate(pet)

        assert response.photo == DEFAULT_PET_PHOTO
        assert response.type.name == "cat"

    def test_vet_response_lists_sorted_specialties(self, sample_vet):
        response = VetResponse.model_validate(sample_vet)

        assert [s.name for s in response.specialties] == ["dentistry", "surgery"]

    def test_vet_list_response(self, sample_vet):
        response = VetListResponse(
            vets=[VetResponse.model_validate(sample_vet)], total=1, size=5
        )

        assert response.page == 1
        assert response.vets[0].last_name == "Douglas"
