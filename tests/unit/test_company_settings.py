"""Unit tests for services/company_settings.py — tagged-path updates, documentConfig checks."""

from __future__ import annotations

import copy

import pytest

from hrconf.services.company_settings import (
    DocumentConfig,
    PathError,
    apply_input_change,
    apply_nested_input_change,
    check_document_config,
    get_in,
    parse_path,
    set_in,
)


def _settings_doc() -> dict:
    return {
        "companyName": "Acme",
        "documentConfig": DocumentConfig().model_dump(by_alias=True),
        "communicationPrefs": {
            "localization": {"dateFormat": "MM/DD/YYYY", "timeFormat": "12-hour"},
        },
        "tags": ["a", "b"],
    }


class TestSetIn:
    def test_leaf_update_returns_new_tree(self):
        doc = _settings_doc()
        before = copy.deepcopy(doc)
        updated = set_in(doc, ("communicationPrefs", "localization", "dateFormat"), "DD/MM/YYYY")

        assert updated["communicationPrefs"]["localization"]["dateFormat"] == "DD/MM/YYYY"
        assert updated["communicationPrefs"]["localization"]["timeFormat"] == "12-hour"
        assert doc == before

    def test_new_leaf_key_allowed(self):
        updated = set_in(_settings_doc(), ("documentConfig", "payslipFormat"), "PAY-{###}")
        assert updated["documentConfig"]["payslipFormat"] == "PAY-{###}"

    def test_missing_section_raises(self):
        with pytest.raises(PathError) as exc_info:
            set_in(_settings_doc(), ("securityPolicy", "mfa"), True)
        assert exc_info.value.depth == 0

    def test_non_mapping_intermediate_raises(self):
        with pytest.raises(PathError):
            set_in(_settings_doc(), ("companyName", "legal"), "Acme Inc")

    def test_list_is_not_traversed(self):
        with pytest.raises(PathError):
            set_in(_settings_doc(), ("tags", "0"), "z")

    def test_empty_path(self):
        with pytest.raises(ValueError):
            set_in({}, (), 1)

    def test_path_error_is_key_error(self):
        with pytest.raises(KeyError):
            set_in({}, ("a", "b"), 1)


class TestGetIn:
    def test_nested(self):
        doc = _settings_doc()
        assert get_in(doc, ("communicationPrefs", "localization", "timeFormat")) == "12-hour"

    def test_missing_returns_default(self):
        assert get_in(_settings_doc(), ("nope", "x"), default="fallback") == "fallback"

    def test_through_scalar_returns_default(self):
        assert get_in(_settings_doc(), ("companyName", "x")) is None


class TestParsePath:
    def test_dotted(self):
        assert parse_path("section.field.property") == ("section", "field", "property")

    @pytest.mark.parametrize("bad", ["", ".a", "a.", "a..b"])
    def test_malformed(self, bad):
        with pytest.raises(ValueError):
            parse_path(bad)


class TestInputChangeHandlers:
    def test_top_level(self):
        updated = apply_input_change(_settings_doc(), "companyName", "Acme Ltd")
        assert updated["companyName"] == "Acme Ltd"

    def test_nested_keeps_siblings(self):
        updated = apply_nested_input_change(
            _settings_doc(), "documentConfig", "employeeIdFormat", "E{YY}-{####}",
        )
        assert updated["documentConfig"]["employeeIdFormat"] == "E{YY}-{####}"
        assert updated["documentConfig"]["invoiceNumberFormat"] == "INV-{YYYY}-{###}"


class TestDocumentConfig:
    def test_defaults_by_alias(self):
        dumped = DocumentConfig().model_dump(by_alias=True)
        assert dumped == {
            "employeeIdFormat": "EMP{YYYY}-{###}",
            "documentRefFormat": "DOC-{YYYY}-{MM}-{###}",
            "invoiceNumberFormat": "INV-{YYYY}-{###}",
        }

    def test_defaults_are_valid(self):
        results = check_document_config(DocumentConfig())
        assert set(results) == {"employeeIdFormat", "documentRefFormat", "invoiceNumberFormat"}
        assert all(r.valid for r in results.values())

    def test_check_from_raw_section(self):
        results = check_document_config({"employeeIdFormat": "EMP{BOGUS}", "invoiceNumberFormat": "INV{"})
        assert results["employeeIdFormat"].errors == ["Unknown placeholder: {BOGUS}"]
        assert results["invoiceNumberFormat"].errors == ["Unterminated placeholder"]
        assert results["documentRefFormat"].valid is True
