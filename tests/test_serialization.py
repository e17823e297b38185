"""
Tests for the canonical message encoding.
"""

import base64
import json

import pytest
from charm.toolbox.pairinggroup import ZR, G1

from ped_commitment import (
    Commitment,
    CommitmentOpening,
    CommitmentValue,
    CommitVerifier,
    MalformedMessageError,
    TrapdoorExposureError,
    VerifierPublicKey,
    commit,
)
from ped_commitment.serialization import IDENTITY_G1, decode_message, encode_message, from_json, to_json


@pytest.fixture
def messages(params, group):
    value = CommitmentValue.from_int(3, group)
    public_key, verifier = CommitVerifier.init(params)
    commitment, opening = commit(value, public_key, params)
    return {
        'public_key': public_key,
        'commitment': commitment,
        'value': value,
        'opening': opening,
        'verifier': verifier,
    }


def test_protocol_over_json(params, messages):
    """Run the decommit phase with every message passed through JSON."""
    verifier = messages['verifier']

    wire = {tag: to_json(messages[tag], params) for tag in ('public_key', 'commitment', 'value', 'opening')}

    received_pk = from_json(wire['public_key'], params, 'public_key')
    assert received_pk == messages['public_key']

    verifier.receive_commitment(from_json(wire['commitment'], params, 'commitment'))
    value = from_json(wire['value'], params, 'value')
    opening = from_json(wire['opening'], params, 'opening')

    assert verifier.verify(value, opening)


def test_encoding_layout(params, messages):
    encoded = encode_message(messages['commitment'], params)

    assert encoded['type'] == 'commitment'
    assert encoded['curve'] == params['group_name']
    assert base64.b64decode(encoded['data']).startswith(b'1:')


def test_encoding_is_canonical(params, messages):
    assert to_json(messages['commitment'], params) == to_json(messages['commitment'], params)


def test_trapdoor_is_never_encoded(params, messages):
    with pytest.raises(TrapdoorExposureError):
        encode_message(messages['verifier']._trapdoor, params)


def test_unknown_object_rejected(params, group):
    with pytest.raises(TypeError):
        encode_message(group.init(ZR, 3), params)


class TestDecodeErrors:

    def test_wrong_expected_type(self, params, messages):
        encoded = encode_message(messages['commitment'], params)
        with pytest.raises(MalformedMessageError):
            decode_message(encoded, params, expected_type='public_key')

    def test_unknown_type(self, params, messages):
        encoded = encode_message(messages['commitment'], params)
        encoded['type'] = 'trapdoor'
        with pytest.raises(MalformedMessageError):
            decode_message(encoded, params)

    def test_curve_mismatch(self, params, messages):
        encoded = encode_message(messages['commitment'], params)
        encoded['curve'] = 'SS512'
        with pytest.raises(MalformedMessageError):
            decode_message(encoded, params)

    def test_missing_field(self, params, messages):
        encoded = encode_message(messages['commitment'], params)
        del encoded['data']
        with pytest.raises(MalformedMessageError):
            decode_message(encoded, params)

    def test_not_a_dict(self, params):
        with pytest.raises(MalformedMessageError):
            decode_message(['commitment'], params)

    def test_invalid_base64(self, params, messages):
        encoded = encode_message(messages['commitment'], params)
        encoded['data'] = '!!not base64!!'
        with pytest.raises(MalformedMessageError):
            decode_message(encoded, params)

    def test_scalar_payload_in_point_message(self, params, messages):
        # A ZR encoding relabelled as a commitment must not decode to a point.
        encoded = encode_message(messages['opening'], params)
        encoded['type'] = 'commitment'
        with pytest.raises(MalformedMessageError):
            decode_message(encoded, params)

    def test_invalid_json(self, params):
        with pytest.raises(MalformedMessageError):
            from_json('{"type": "commitment"', params)

    def test_json_missing_fields(self, params):
        with pytest.raises(MalformedMessageError):
            from_json(json.dumps({'type': 'commitment'}), params)


class TestIdentityElement:
    """The identity of G1 is a valid key and commitment and must travel intact."""

    def test_identity_public_key(self, params, group):
        identity = group.init(G1, 1)
        encoded = encode_message(VerifierPublicKey(identity), params)

        assert encoded['data'] == IDENTITY_G1
        assert decode_message(encoded, params, 'public_key').point == identity

    def test_identity_commitment_over_json(self, params, group):
        identity = group.init(G1, 1)
        text = to_json(Commitment(identity), params)

        assert from_json(text, params, 'commitment') == Commitment(identity)

    def test_identity_commitment_verifies_zero_opening(self, params, group):
        _, verifier = CommitVerifier.init(params)
        wire = to_json(Commitment(group.init(G1, 1)), params)
        verifier.receive_commitment(from_json(wire, params, 'commitment'))

        assert verifier.verify(CommitmentValue.from_int(0, group), CommitmentOpening.from_int(0, group))
        assert not verifier.verify(CommitmentValue.from_int(1, group), CommitmentOpening.from_int(0, group))

    def test_non_identity_points_keep_base64(self, params, messages):
        assert encode_message(messages['commitment'], params)['data'] != IDENTITY_G1

    def test_identity_tag_rejected_for_scalars(self, params):
        with pytest.raises(MalformedMessageError):
            decode_message({'type': 'opening', 'curve': params['group_name'], 'data': IDENTITY_G1}, params)
