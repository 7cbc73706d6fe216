"""Domain Types: verifies the closed protocol and channel enumerations.

Tests:
    - ReportProtocol has exactly the two wire names
    - PayloadChannel has exactly two members
    - Enums compare equal to their string values
"""

from aggregatable_reports.core.domain_types import PayloadChannel, ReportProtocol


def test_report_protocol_has_exactly_two_members():
    assert len(ReportProtocol) == 2
    assert ReportProtocol.ONE_PARTY.value == "one-party"
    assert ReportProtocol.MPC.value == "mpc"


def test_payload_channel_has_exactly_two_members():
    assert set(PayloadChannel) == {PayloadChannel.ENCRYPTED, PayloadChannel.CLEARTEXT}


def test_enums_compare_equal_to_strings():
    assert ReportProtocol.MPC == "mpc"
    assert PayloadChannel.CLEARTEXT == "cleartext"
