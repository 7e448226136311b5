from __future__ import annotations

import pytest

from contracthub.utils.partner_ids import DISPLAY_SEPARATOR, decode_partner_ids, encode_partner_ids


@pytest.mark.parametrize("raw", [None, "", ",", " , ,"])
def test_empty_input_decodes_to_empty_list(raw):
    assert decode_partner_ids(raw) == []


def test_decode_trims_and_drops_bad_tokens():
    assert decode_partner_ids(" 1, 2 ,abc,,3.5, 4") == [1, 2, 4]


def test_decode_keeps_order_and_duplicates():
    assert decode_partner_ids("3,1,3") == [3, 1, 3]


def test_decode_rejects_python_only_integer_forms_and_overflow():
    assert decode_partner_ids("1_000,0x10,99999999999,7") == [7]


def test_decode_accepts_signed_tokens():
    assert decode_partner_ids("+5,-2") == [5, -2]


def test_decode_rejects_non_ascii_digits():
    assert decode_partner_ids("١,٢") == []
    assert decode_partner_ids("３, 4") == [4]


def test_decode_drops_failed_parse_marker():
    assert decode_partner_ids("1,-1,2") == [1, 2]


def test_encode_uses_persisted_separator_by_default():
    assert encode_partner_ids([1, 2, 3]) == "1,2,3"
    assert encode_partner_ids([1, 2, 3], separator=DISPLAY_SEPARATOR) == "1, 2, 3"


@pytest.mark.parametrize("ids", [[1], [2, 1, 2], [10, 20, 30, 2147483647]])
def test_decode_inverts_encode(ids):
    assert decode_partner_ids(encode_partner_ids(ids)) == ids
    assert decode_partner_ids(encode_partner_ids(ids, separator=DISPLAY_SEPARATOR)) == ids
