from datetime import date

import pytest

from src.core.entities.beneficiary import Beneficiary, check_document_number, normalize_gender
from src.core.entities.validation import ValidationError

BIRTH = date(1990, 5, 1)


def build(document, number="12345678", gender="F", first="Ana", last="Diaz"):
    return Beneficiary.create(
        first_names=first,
        last_names=last,
        document=document,
        document_number=number,
        birth_date=BIRTH,
        gender=gender,
    )


class TestCreate:

    def test_lowercase_gender_is_normalized(self, dni):
        result = build(dni, gender="f")

        assert result.ok
        assert result.value.gender == "F"
        assert result.value.id == 0
        assert result.value.identity_document_id == 1
        assert result.value.is_persisted is False

    def test_values_are_trimmed(self, dni):
        b = build(dni, number=" 12345678 ", first="  Ana ", last=" Diaz ", gender=" m ").unwrap()

        assert b.first_names == "Ana"
        assert b.last_names == "Diaz"
        assert b.document_number == "12345678"
        assert b.gender == "M"
        assert b.full_name == "Ana Diaz"

    @pytest.mark.parametrize("gender", ["X", "male", "MF"])
    def test_invalid_gender_fails(self, dni, gender):
        assert build(dni, gender=gender).error.message == "Gender must be 'M' or 'F'."

    def test_missing_gender_fails(self, dni):
        assert build(dni, gender="  ").error.message == "Gender is required."

    def test_missing_names_fail(self, dni):
        assert build(dni, first="").error.message == "FirstNames is required."
        assert build(dni, last=None).error.message == "LastNames is required."

    def test_names_checked_before_document(self):
        assert build(None, first=" ").error.message == "FirstNames is required."

    def test_length_mismatch_fails(self, dni):
        assert build(dni, number="1234567").error.message == "Document number must have 8 characters."

    def test_numeric_only_rejects_letters(self, dni):
        assert build(dni, number="1234567A").error.message == "Document number only accepts digits."

    def test_alphanumeric_document_accepts_letters(self, passport):
        assert build(passport, number="AB1234567").ok

    def test_inactive_document_fails(self, inactive_document):
        assert build(inactive_document).error.message == "Identity document must be active."

    def test_missing_document_fails(self):
        assert build(None).error.message == "Identity document is required."

    def test_unwrap_raises_validation_error(self, dni):
        with pytest.raises(ValidationError, match="8 characters"):
            build(dni, number="1").unwrap()


class TestDocumentNumberRules:

    def test_inactive_reported_before_missing_number(self, inactive_document):
        with pytest.raises(ValidationError, match="must be active"):
            check_document_number(inactive_document, "")

    def test_missing_number(self, dni):
        with pytest.raises(ValidationError, match="Document number is required."):
            check_document_number(dni, "   ")

    def test_length_reported_before_digits(self, dni):
        with pytest.raises(ValidationError, match="8 characters"):
            check_document_number(dni, "ABC")

    def test_normalize_gender(self):
        assert normalize_gender("m") == "M"


class TestRehydrate:

    def test_trusts_stored_document_number(self):
        b = Beneficiary.rehydrate(
            id=7, first_names="Ana", last_names="Diaz", identity_document_id=1,
            document_number="123", birth_date=BIRTH, gender="F",
        )

        assert b.id == 7
        assert b.document_number == "123"

    @pytest.mark.parametrize("document_id", [0, -1, None])
    def test_requires_a_document_id(self, document_id):
        with pytest.raises(ValidationError, match="Identity document is required."):
            Beneficiary.rehydrate(
                id=7, first_names="Ana", last_names="Diaz", identity_document_id=document_id,
                document_number="12345678", birth_date=BIRTH, gender="F",
            )


class TestUpdates:

    def test_with_basic_data_keeps_document(self, ana):
        updated = ana.with_basic_data("Ana Maria", "Diaz Rojas", date(1991, 1, 2), "f").unwrap()

        assert updated.first_names == "Ana Maria"
        assert updated.last_names == "Diaz Rojas"
        assert updated.birth_date == date(1991, 1, 2)
        assert updated.document_number == ana.document_number
        assert ana.first_names == "Ana"

    def test_with_basic_data_failure_leaves_original(self, ana):
        result = ana.with_basic_data("Ana", "Diaz", BIRTH, "Z")

        assert not result.ok
        assert ana.gender == "F"

    def test_with_document_switches_type(self, ana, passport):
        updated = ana.with_document(passport, "AB1234567").unwrap()

        assert updated.identity_document_id == passport.id
        assert updated.document_number == "AB1234567"

    def test_with_document_rejects_inactive(self, ana, inactive_document):
        result = ana.with_document(inactive_document, "12345678")

        assert result.error.message == "Identity document must be active."
        assert ana.identity_document_id == 1

    def test_chained_updates_stop_at_first_failure(self, ana, dni):
        result = ana.with_basic_data("", "Diaz", BIRTH, "F").then(lambda b: b.with_document(dni, "87654321"))

        assert result.error.message == "FirstNames is required."

    @pytest.mark.parametrize("bad_id", [0, -1])
    def test_with_id_rejects_non_positive(self, ana, bad_id):
        result = ana.with_id(bad_id)

        assert result.error.message == "Identifier must be greater than zero."
        assert ana.id == 0

    def test_with_id(self, ana):
        persisted = ana.with_id(42).unwrap()

        assert persisted.id == 42
        assert persisted.is_persisted

    def test_beneficiary_is_immutable(self, ana):
        with pytest.raises(AttributeError):
            ana.gender = "M"
