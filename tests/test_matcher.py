"""
tests/test_matcher.py

Claim matching: the note and the payer identity must both match.
"""

import pytest

from conftest import make_receipt

from cashapp_receipt_verifier.errors import ReceiptMismatchError
from cashapp_receipt_verifier.matcher import match_claim
from cashapp_receipt_verifier.models import VerificationRequest, VerificationStatus

MISMATCH = "Failed to verify web receipt, Unmatched notes or host."


def _claim(username="alice", reference="RENT"):
    return VerificationRequest(username=username, reference=reference)


def _mismatch_field(payload, claim):
    with pytest.raises(ReceiptMismatchError) as exc_info:
        match_claim(payload, claim)
    assert exc_info.value.message == MISMATCH
    return exc_info.value.details["field"]


class TestMatchingClaim:

    def test_case_insensitive_note_match(self):
        payload = make_receipt(notes="rent", payer="alice")
        result = match_claim(payload, _claim())

        assert result.type == VerificationStatus.SUCCESS
        assert result.message == "Web Receipt Verified Successfully."
        assert result.data == payload

    def test_extra_receipt_fields_kept_in_data(self):
        payload = make_receipt(notes="Invoice 42", payer="alice")
        payload["amount_formatted"] = "$12.00"
        result = match_claim(payload, _claim(reference="invoice 42"))

        assert result.data["amount_formatted"] == "$12.00"


class TestMismatchedClaim:

    def test_different_payer(self):
        assert _mismatch_field(make_receipt(payer="bob"), _claim()) == "payer"

    def test_payer_comparison_is_case_sensitive(self):
        assert _mismatch_field(make_receipt(payer="Alice"), _claim()) == "payer"

    def test_missing_payer_value(self):
        assert _mismatch_field(make_receipt(payer=None), _claim()) == "payer"

    def test_empty_payer_value(self):
        assert _mismatch_field(make_receipt(payer=""), _claim(username="alice")) == "payer"

    def test_different_note(self):
        assert _mismatch_field(make_receipt(notes="groceries"), _claim()) == "notes"

    def test_empty_note(self):
        assert _mismatch_field(make_receipt(notes=""), _claim()) == "notes"

    def test_too_few_detail_rows(self):
        payload = {"notes": "rent", "detail_rows": [{"value": "alice"}]}
        assert _mismatch_field(payload, _claim()) == "payer"

    @pytest.mark.parametrize("payload", [
        [],
        "rent",
        None,
        {"detail_rows": [{}, {}, {}, {"value": "alice"}]},
        {"notes": None, "detail_rows": [{}, {}, {}, {"value": "alice"}]},
    ])
    def test_unexpected_shapes_are_mismatches(self, payload):
        assert _mismatch_field(payload, _claim()) == "notes"

    def test_non_list_detail_rows(self):
        payload = {"notes": "rent", "detail_rows": {"3": {"value": "alice"}}}
        assert _mismatch_field(payload, _claim()) == "payer"
