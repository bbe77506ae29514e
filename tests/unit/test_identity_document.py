import pytest

from src.core.entities.identity_document import IdentityDocument
from src.core.entities.validation import ValidationError


class TestCreate:

    def test_valid_document_is_trimmed(self):
        result = IdentityDocument.create(
            id=1, name="  DNI ", abbreviation=" DNI", country="Peru ", length=8, numeric_only=True
        )

        assert result.ok
        assert result.value.name == "DNI"
        assert result.value.abbreviation == "DNI"
        assert result.value.country == "Peru"
        assert result.value.is_active is True

    @pytest.mark.parametrize(
        "field, message",
        [
            ("name", "Document name is required."),
            ("abbreviation", "Document abbreviation is required."),
            ("country", "Document country is required."),
        ],
    )
    def test_blank_text_fails(self, field, message):
        kwargs = dict(id=1, name="DNI", abbreviation="DNI", country="Peru", length=8)
        kwargs[field] = "   "

        result = IdentityDocument.create(**kwargs)

        assert not result.ok
        assert result.error.message == message

    @pytest.mark.parametrize("length", [0, -3])
    def test_non_positive_length_fails(self, length):
        result = IdentityDocument.create(id=1, name="DNI", abbreviation="DNI", country="Peru", length=length)

        assert result.error.message == "Document length must be greater than zero."

    def test_direct_construction_raises(self):
        with pytest.raises(ValidationError):
            IdentityDocument(id=1, name="", abbreviation="DNI", country="Peru", length=8)


class TestActivation:

    def test_deactivate_returns_new_value(self, dni):
        inactive = dni.deactivate()

        assert inactive.is_active is False
        assert dni.is_active is True
        assert inactive.id == dni.id

    def test_activate(self, inactive_document):
        assert inactive_document.activate().is_active is True

    def test_document_is_immutable(self, dni):
        with pytest.raises(AttributeError):
            dni.length = 10
