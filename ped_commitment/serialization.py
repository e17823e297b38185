"""
Message Serialization
=====================

Canonical encoding of protocol messages for whatever transport carries them.

Each message becomes a JSON-safe dict:

    {"type": "commitment", "curve": "MNT224", "data": "<base64>"}

where data is the base64 of group.serialize(elem), charm-crypto's compressed
element encoding ("<type id>:<payload>"). Decoding checks the message type,
the curve name, the element type id and group membership before building
the message object.

The compressed point encoding drops the point-at-infinity flag, so the
identity of G1 is carried as the tag "__IDENTITY_G1__" instead of base64.

The verifier trapdoor has no encoding.
"""

import base64
import binascii
import json

from charm.toolbox.pairinggroup import ZR, G1

from .exceptions import MalformedMessageError, TrapdoorExposureError
from .messages import (
    Commitment,
    CommitmentOpening,
    CommitmentValue,
    VerifierPublicKey,
    VerifierTrapdoor,
)
from .utils import deserialize_element, is_identity, serialize_element

# message type tag -> (class, attribute, element type)
MESSAGE_TYPES = {
    'public_key': (VerifierPublicKey, 'point', G1),
    'commitment': (Commitment, 'point', G1),
    'value': (CommitmentValue, 'scalar', ZR),
    'opening': (CommitmentOpening, 'blinding', ZR),
}

_TAGS = {cls: (tag, attr, elem_type) for tag, (cls, attr, elem_type) in MESSAGE_TYPES.items()}

IDENTITY_G1 = "__IDENTITY_G1__"


def encode_message(message, params: dict) -> dict:
    """
    Encode a protocol message as a JSON-safe dict.

    Raises
    ------
    TrapdoorExposureError
        If asked to encode a VerifierTrapdoor.
    TypeError
        If the object is not a protocol message.
    """
    if isinstance(message, VerifierTrapdoor):
        raise TrapdoorExposureError("VerifierTrapdoor cannot be serialized")
    if type(message) not in _TAGS:
        raise TypeError(f"Cannot encode {type(message).__name__}")

    tag, attr, elem_type = _TAGS[type(message)]
    elem = getattr(message, attr)
    return {
        'type': tag,
        'curve': params['group_name'],
        'data': _encode_element(elem, elem_type, params['group']),
    }


def _encode_element(elem, elem_type, group) -> str:
    if elem_type == G1 and is_identity(elem, group):
        return IDENTITY_G1
    return base64.b64encode(serialize_element(elem, group)).decode('ascii')


def decode_message(data: dict, params: dict, expected_type: str = None):
    """
    Decode a dict produced by encode_message().

    Parameters
    ----------
    data : dict
        The encoded message
    params : dict
        The group parameters from setup(); the curve must match
    expected_type : str, optional
        If given, the message must carry this type tag

    Raises
    ------
    MalformedMessageError
        If the dict is incomplete, names another curve or message type, or
        does not hold a valid element of the expected group.
    """
    if not isinstance(data, dict):
        raise MalformedMessageError(f"Expected a dict, got {type(data).__name__}")
    try:
        tag, curve, payload = data['type'], data['curve'], data['data']
    except KeyError as e:
        raise MalformedMessageError(f"Missing field {e}") from e

    if tag not in MESSAGE_TYPES:
        raise MalformedMessageError(f"Unknown message type {tag!r}")
    if expected_type is not None and tag != expected_type:
        raise MalformedMessageError(f"Expected a {expected_type!r} message, got {tag!r}")
    if curve != params['group_name']:
        raise MalformedMessageError(f"Message is for curve {curve!r}, not {params['group_name']!r}")

    cls, _, elem_type = MESSAGE_TYPES[tag]
    elem = _decode_element(payload, elem_type, params['group'])
    return cls(elem)


def _decode_element(payload, elem_type, group):
    if not isinstance(payload, str):
        raise MalformedMessageError("Element payload must be a base64 string")
    if payload == IDENTITY_G1:
        if elem_type != G1:
            raise MalformedMessageError(f"Identity tag is not valid for element type {elem_type}")
        return group.init(G1, 1)
    try:
        raw = base64.b64decode(payload.encode('ascii'), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise MalformedMessageError(f"Invalid base64 payload: {e}") from e

    type_id, sep, _ = raw.partition(b':')
    if not sep or type_id != str(elem_type).encode('ascii'):
        raise MalformedMessageError(f"Payload does not encode an element of type {elem_type}")

    try:
        elem = deserialize_element(raw, group)
    except Exception as e:
        raise MalformedMessageError(f"Could not decode element: {e}") from e
    if elem is None or isinstance(elem, bool) or not group.ismember(elem):
        raise MalformedMessageError("Decoded element is not a member of the group")
    return elem


def to_json(message, params: dict) -> str:
    return json.dumps(encode_message(message, params), sort_keys=True)


def from_json(text: str, params: dict, expected_type: str = None):
    try:
        data = json.loads(text)
    except ValueError as e:
        raise MalformedMessageError(f"Invalid JSON: {e}") from e
    return decode_message(data, params, expected_type)
