"""
Utility Functions
=================

Group helpers shared by the committer and the verifier.

Key Operations:
- Multi-exponentiation: Compute ∏ g_i^{e_i}, the multiplicative form of the
  linear combination Σ e_i·g_i
- Point equality: Compare two G1 elements through their canonical encodings
- Serialization: Convert group elements to/from canonical bytes

According to charm-crypto documentation:
- Group operations use * for multiplication, ** for exponentiation
- group.serialize(elem) / group.deserialize(data) give the canonical
  compressed encoding, prefixed with the element type
"""

import hmac
from typing import List, Union

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1


def multiexp_g1(bases: List[G1], exponents: List[ZR], group: PairingGroup) -> G1:
    """
    Compute G^r · H^m, the commitment r·G + m·H in additive notation.

    Called with bases [G, H] and exponents [r, m]; the lists must line up.
    """
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = group.init(G1, 1)
    for base, exp in zip(bases, exponents):
        result *= base ** exp

    return result


def scalar_from_int(x: int, group: PairingGroup) -> ZR:
    """Map any Python int (negative included) to its residue in ZR."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"Expected an int, got {type(x).__name__}")
    return group.init(ZR, x % int(group.order()))


def is_identity(elem: G1, group: PairingGroup) -> bool:
    return elem == group.init(G1, 1)


def points_equal(a: G1, b: G1, group: PairingGroup) -> bool:
    """
    Test equality of two G1 elements.

    Group equality decides; the compressed encoding alone cannot, since it
    maps the identity and a finite point with x = 0 to the same bytes. The
    encodings are still compared with hmac.compare_digest on every call, so
    the running time does not depend on where they first differ.
    """
    same_point = a == b
    same_bytes = hmac.compare_digest(serialize_element(a, group), serialize_element(b, group))
    return same_point and same_bytes


def serialize_element(elem: Union[G1, ZR], group: PairingGroup) -> bytes:
    """
    Serialize a group element or scalar to its canonical bytes.

    Parameters
    ----------
    elem : Union[G1, ZR]
        The element to serialize
    group : PairingGroup
        The pairing group

    Returns
    -------
    bytes
        The compressed encoding produced by group.serialize()
    """
    return group.serialize(elem)


def deserialize_element(data: bytes, group: PairingGroup) -> Union[G1, ZR]:
    """Inverse of serialize_element()."""
    return group.deserialize(data)
