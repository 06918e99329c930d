from __future__ import annotations

import pytest

from ibancore import Iban, calculate_checksum, parse
from ibancore.constants import DEFAULT_REGISTRY_PATH
from ibancore.registry import get_registry, read_registry_rows

# One published example per registry country
REGISTRY_EXAMPLES = [
    "AA110011123Z5678",
    "AD1200012030200359100100",
    "AE070331234567890123456",
    "AL47212110090000000235698741",
    "AO44123412341234123412341",
    "AT611904300234573201",
    "AX2112345600000785",
    "AZ21NABZ00000000137010001944",
    "BA391290079401028494",
    "BE68539007547034",
    "BF4512341234123412341234123",
    "BG80BNBG96611020345678",
    "BH67BMAG00001299123456",
    "BI33123412341234",
    "BJ83A12312341234123412341234",
    "BL6820041010050500013M02606",
    "BR9700360305000010009795493P1",
    "BY13NBRB3600900000002Z00AB00",
    "CF4220001000010120069700160",
    "CG3930013020003710721836132",
    "CH9300762011623852957",
    "CI77A12312341234123412341234",
    "CM1512341234123412341234123",
    "CR05015202001026284066",
    "CV05123412341234123412341",
    "CY17002001280000001200527600",
    "CZ6508000000192000145399",
    "DE89370400440532013000",
    "DJ2110002010010409943020008",
    "DK5000400440116243",
    "DO28BAGR00000001212453611324",
    "DZ3512341234123412341234",
    "EE382200221020145685",
    "EG380019000500000000263180002",
    "ES9121000418450200051332",
    "FI2112345600000785",
    "FO2000400440116243",
    "FR1420041010050500013M02606",
    "GA2142001007341520000106963",
    "GB29NWBK60161331926819",
    "GE29NB0000000101904917",
    "GF4120041010050500013M02606",
    "GI75NWBK000000007099453",
    "GL2000400440116243",
    "GP1120041010050500013M02606",
    "GQ7050002001003715228190196",
    "GR1601101250000000012300695",
    "GT82TRAJ01020000001210029690",
    "GW04GW1430010181800637601",
    "HN54PISA00000000000000123124",
    "HR1210010051863000160",
    "HU42117730161111101800000000",
    "IE29AIBK93115212345678",
    "IL620108000000099999999",
    "IQ98NBIQ850123456789012",
    "IR081234123412341234123412",
    "IS140159260076545510730339",
    "IT60X0542811101000000123456",
    "JO94CBJO0010000000000131000302",
    "KM4600005000010010904400137",
    "KW81CBKU0000000000001234560101",
    "KZ86125KZT5004100100",
    "LB62099900000001001901229114",
    "LC55HEMM000100010012001200023015",
    "LI21088100002324013AA",
    "LT121000011101001000",
    "LU280019400644750000",
    "LV80BANK0000435195001",
    "MA64011519000001205000534921",
    "MC5811222000010123456789030",
    "MD24AG000225100013104168",
    "ME25505000012345678951",
    "MF8420041010050500013M02606",
    "MG4012341234123412341234123",
    "MK07250120000058984",
    "ML75A12312341234123412341234",
    "MQ5120041010050500013M02606",
    "MR1300020001010000123456753",
    "MT84MALT011000012345MTLCAST001S",
    "MU17BOMM0101101030300200000MUR",
    "MZ97123412341234123412341",
    "NC8420041010050500013M02606",
    "NE58NE0380100100130305000268",
    "NI92BAMC000000000000000003123123",
    "NL91ABNA0417164300",
    "NO9386011117947",
    "PF5720041010050500013M02606",
    "PK36SCBL0000001123456702",
    "PL61109010140000071219812874",
    "PM3620041010050500013M02606",
    "PS92PALS000000000400123456702",
    "PT50000201231234567890154",
    "QA58DOHB00001234567890ABCDEFG",
    "RE4220041010050500013M02606",
    "RO49AAAA1B31007593840000",
    "RS35260005601001611379",
    "SA0380000000608010167519",
    "SC18SSCB11010000000000001497USD",
    "SE4550000000058398257466",
    "SI56191000000123438",
    "SK3112000000198742637541",
    "SM86U0322509800000000270100",
    "SN15A12312341234123412341234",
    "ST68000100010051845310112",
    "SV62CENR00000000000000700025",
    "TD8960003000203710253860174",
    "TF2120041010050500013M02606",
    "TG53TG0090604310346500400070",
    "TL380080012345678910157",
    "TN5910006035183598478831",
    "TR330006100519786457841326",
    "UA213996220000026007233566001",
    "VG96VPVG0000012345678901",
    "WF9120041010050500013M02606",
    "XK051212012345678906",
    "YT3120041010050500013M02606",
]


@pytest.mark.parametrize("text", REGISTRY_EXAMPLES)
def test_registry_example_parses_and_roundtrips(text):
    iban = parse(text)
    assert iban.as_str() == text
    assert calculate_checksum(iban.as_str()) == 1
    assert len(iban) == iban.rule.expected_length


@pytest.mark.parametrize("text", REGISTRY_EXAMPLES)
def test_print_form_parses_to_same_value(text):
    iban = parse(text)
    spaced = str(iban)
    assert " " in spaced
    assert parse(spaced) == iban
    # lower-cased, spaced input normalizes back to the same value
    assert parse(spaced.lower()).as_str().upper() == text


def test_every_registry_country_has_an_example():
    assert {t[:2] for t in REGISTRY_EXAMPLES} == set(get_registry())


def test_bundled_examples_match_their_rules():
    for row in read_registry_rows(DEFAULT_REGISTRY_PATH):
        iban = Iban(row.iban_example)
        assert iban.country_code == row.country_code
        rule = get_registry()[row.country_code]
        assert sum(count for count, _ in rule.segments) + 2 == rule.expected_length
        assert rule.pattern().fullmatch(iban.as_str())
        assert rule.pattern(spaced=True).fullmatch(str(iban))
