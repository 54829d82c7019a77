"""Tests for row materialization and cross-field post-processing."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from csvbind.core.exceptions import InputError, InvalidDirectiveError, SchemaError
from csvbind.decoding.materializer import materialize
from csvbind.models.schema import ZERO_TIMESTAMP, CsvRecord, RecordSchema, csv_field
from tests.fakes import StaticNameSplitter


class Person(CsvRecord):
    fullname: str = csv_field("Full")
    firstname: str = csv_field("First", "tc")
    mi: str = ""
    lastname: str = csv_field("Last", "tc")
    phone: str = csv_field("Phone", "fp")
    email: str = csv_field("Email", "-")
    zip: str = csv_field("Zip")
    zip4: str = csv_field("Plus4")
    dob: datetime = csv_field("DOB", default=ZERO_TIMESTAMP)


@pytest.fixture
def splitter():
    return StaticNameSplitter()


@pytest.fixture
def schema():
    return RecordSchema.from_model(Person)


class TestFieldAssignment:
    def test_formats_and_assigns(self, schema, splitter):
        column_map = {"firstname": 0, "lastname": 1, "phone": 2, "email": 3}
        rows = [[" jOHN ", "DOE", "949-323-7895", " J@X.COM "]]
        [record] = materialize(column_map, rows, schema, name_splitter=splitter)
        assert record.firstname == "John"
        assert record.lastname == "Doe"
        assert record.phone == "(949) 323-7895"
        assert record.email == " J@X.COM "

    def test_no_directive_assigns_raw(self, schema, splitter):
        [record] = materialize({"zip": 0}, [["ABC 12"]], schema, name_splitter=splitter)
        assert record.zip == "ABC 12"

    def test_require_directive_leaves_undirected_fields_at_zero(self, schema, splitter):
        [record] = materialize(
            {"zip": 0, "phone": 1}, [["92882", "3237895"]], schema,
            name_splitter=splitter, require_directive=True,
        )
        assert record.zip == ""
        assert record.phone == "323-7895"

    def test_temporal_fields_are_parsed(self, schema, splitter):
        records = materialize({"dob": 0}, [["12/31/2003"], ["garbage"], [""]], schema, name_splitter=splitter)
        assert records[0].dob == datetime(2003, 12, 31, tzinfo=timezone.utc)
        assert records[1].dob == ZERO_TIMESTAMP
        assert records[2].dob == ZERO_TIMESTAMP

    def test_unbound_fields_keep_zero_values(self, schema, splitter):
        [record] = materialize({"phone": 0}, [["3237895"]], schema, name_splitter=splitter)
        assert record.firstname == ""
        assert record.dob == ZERO_TIMESTAMP

    def test_unformattable_phone_is_empty(self, schema, splitter):
        [record] = materialize({"phone": 0}, [["94932"]], schema, name_splitter=splitter)
        assert record.phone == ""

    def test_preserves_row_order(self, schema, splitter):
        rows = [["a@x"], ["b@x"], ["c@x"]]
        records = materialize({"email": 0}, rows, schema, name_splitter=splitter)
        assert [r.email for r in records] == ["a@x", "b@x", "c@x"]

    def test_no_rows_yields_empty_list(self, schema, splitter):
        assert materialize({"email": 0}, [], schema, name_splitter=splitter) == []


class TestShortRows:
    def test_missing_cell_reads_as_empty(self, schema, splitter):
        [record] = materialize({"email": 0, "phone": 3}, [["a@x"]], schema, name_splitter=splitter)
        assert record.email == "a@x"
        assert record.phone == ""

    def test_error_policy_raises(self, schema, splitter):
        with pytest.raises(InputError, match="phone"):
            materialize({"phone": 3}, [["a@x"]], schema, name_splitter=splitter, short_rows="error")


class TestNameDecomposition:
    def test_splits_full_name_when_first_or_last_empty(self, schema, splitter):
        splitter.set_parts("Mary Ann Smith", first="Mary", middle="Ann", last="Smith")
        [record] = materialize({"fullname": 0}, [["Mary Ann Smith"]], schema, name_splitter=splitter)
        assert (record.firstname, record.mi, record.lastname) == ("Mary", "Ann", "Smith")

    def test_split_overwrites_present_first_name(self, schema, splitter):
        column_map = {"fullname": 0, "firstname": 1}
        [record] = materialize(column_map, [["John Q Public", "Johnny"]], schema, name_splitter=splitter)
        assert (record.firstname, record.mi, record.lastname) == ("John", "Q", "Public")

    def test_no_split_when_first_and_last_present(self, schema, splitter):
        column_map = {"fullname": 0, "firstname": 1, "lastname": 2}
        [record] = materialize(column_map, [["John Q Public", "jim", "beam"]], schema, name_splitter=splitter)
        assert (record.firstname, record.lastname) == ("Jim", "Beam")
        assert splitter.calls == []

    def test_no_split_when_full_name_empty(self, schema, splitter):
        materialize({"fullname": 0}, [[""]], schema, name_splitter=splitter)
        assert splitter.calls == []

    def test_schema_without_name_parts_skips_split(self, splitter):
        class Named(CsvRecord):
            fullname: str = csv_field("Name")

        [record] = materialize({"fullname": 0}, [["john doe"]], Named, name_splitter=splitter)
        assert record.fullname == "john doe"
        assert splitter.calls == []


class TestPostalSplit:
    def test_zip_is_reduced_to_five_digits(self, schema, splitter):
        [record] = materialize({"zip": 0}, [["92882-1234"]], schema, name_splitter=splitter)
        assert record.zip == "92882"
        assert record.zip4 == ""

    def test_existing_plus4_is_overwritten(self, schema, splitter):
        [record] = materialize({"zip": 0, "zip4": 1}, [["928821234", "9999"]], schema, name_splitter=splitter)
        assert (record.zip, record.zip4) == ("92882", "1234")

    def test_empty_plus4_is_never_populated(self, schema, splitter):
        [record] = materialize({"zip": 0, "zip4": 1}, [["92882 1234", ""]], schema, name_splitter=splitter)
        assert (record.zip, record.zip4) == ("92882", "")

    def test_unsplittable_zip_is_kept(self, schema, splitter):
        [record] = materialize({"zip": 0}, [["K1A 0B1"]], schema, name_splitter=splitter)
        assert record.zip == "K1A 0B1"


class TestFailures:
    def test_unknown_directive_propagates(self, splitter):
        class BadFormat(CsvRecord):
            city: str = csv_field("City", "xx")

        with pytest.raises(InvalidDirectiveError):
            materialize({"city": 0}, [["Irvine"]], BadFormat, name_splitter=splitter)

    def test_unknown_directive_on_unbound_field_is_not_evaluated(self, splitter):
        class BadFormat(CsvRecord):
            city: str = csv_field("City", "xx")

        [record] = materialize({}, [["Irvine"]], BadFormat, name_splitter=splitter)
        assert record.city == ""

    def test_non_record_target_raises(self, splitter):
        with pytest.raises(SchemaError):
            materialize({}, [["x"]], dict, name_splitter=splitter)

    def test_unvalidatable_row_raises_input_error(self, splitter):
        class Counted(CsvRecord):
            count: int = csv_field("Count", default=0)

        with pytest.raises(InputError, match="Row 1"):
            materialize({"count": 0}, [["many"]], Counted, name_splitter=splitter)
