"""
Tests for the field registries.
"""

import pytest
from sqlalchemy.types import Integer, Numeric, Text

from jobly.sql.fields import COMPANY_FIELDS, JOB_FIELDS, FieldRegistry, FieldSpec


@pytest.mark.unit
class TestFieldRegistry:
    """Test FieldRegistry lookups and rendering."""

    def test_company_translations(self):
        assert COMPANY_FIELDS.translations() == {
            "numEmployees": "num_employees",
            "logoUrl": "logo_url",
        }

    def test_job_translations(self):
        assert JOB_FIELDS.translations() == {"companyHandle": "company_handle"}

    def test_column_lookup(self):
        """Test column lookup, with unknown names passing through."""
        assert COMPANY_FIELDS.column_for("numEmployees") == "num_employees"
        assert COMPANY_FIELDS.column_for("name") == "name"
        assert COMPANY_FIELDS.column_for("unknown") == "unknown"

    def test_type_lookup(self):
        assert isinstance(COMPANY_FIELDS.type_for("numEmployees"), Integer)
        assert isinstance(JOB_FIELDS.type_for("equity"), Numeric)
        assert JOB_FIELDS.type_for("unknown") is None

    def test_key_column(self):
        assert COMPANY_FIELDS.key_column == "handle"
        assert JOB_FIELDS.key_column == "id"

    def test_select_list_aliases_translated_columns(self):
        """Test that only renamed columns get a camelCase alias."""
        assert COMPANY_FIELDS.select_list() == (
            'handle, name, description, '
            'num_employees AS "numEmployees", logo_url AS "logoUrl"'
        )

    def test_select_list_subset_with_alias(self):
        """Test a qualified subset of columns."""
        assert JOB_FIELDS.select_list(["id", "companyHandle"], table_alias="j") == (
            'j.id AS "id", j.company_handle AS "companyHandle"'
        )

    def test_field_order(self):
        assert JOB_FIELDS.names == ["id", "title", "salary", "equity", "companyHandle"]
        assert JOB_FIELDS["companyHandle"].translated is True

    def test_typed_values(self):
        """Test that values and bind types come back in key order."""
        values, types = COMPANY_FIELDS.typed_values({"numEmployees": 5, "name": "Acme"})

        assert values == [5, "Acme"]
        assert isinstance(types[0], Integer)
        assert isinstance(types[1], Text)

    def test_typed_values_unknown_field(self):
        values, types = JOB_FIELDS.typed_values({"unknown": 1})

        assert values == [1]
        assert types == [None]

    def test_duplicate_field_rejected(self):
        with pytest.raises(ValueError):
            FieldRegistry("t", "a", [FieldSpec("a", "a", Integer()), FieldSpec("a", "b", Integer())])

    def test_unregistered_key_rejected(self):
        with pytest.raises(ValueError):
            FieldRegistry("t", "id", [FieldSpec("a", "a", Integer())])
