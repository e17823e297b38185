"""
Group Initialization and Setup
===============================

This module initializes the prime-order group used by the commitment scheme.

The commitment group is the source group G1 of a charm-crypto pairing curve.
The pairing itself is never used; G1 is simply a group of prime order ℓ with
a matching scalar field ZR = Z/ℓZ.

According to charm-crypto documentation (https://jhuisi.github.io/charm/tutorial.html):
- PairingGroup('MNT224') provides asymmetric Type-3 pairings with 224-bit base field
- Alternative curves: 'BN254', 'SS512'
- group.hash(data, G1) hashes data onto a point of G1
- Group operations are written multiplicatively: P * Q, P ** k
"""

import logging

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1

from .config import config

logger = logging.getLogger(__name__)

FALLBACK_CURVES = ('BN254', 'SS512')


def setup(group_name: str = None, generator_seed: str = None) -> dict:
    """
    Initialize the commitment group and its fixed public generator.

    Parameters
    ----------
    group_name : str, optional
        The pairing curve identifier. Defaults to config.pairing_curve ('MNT224').
        If the curve is not available, 'BN254' then 'SS512' are tried.
    generator_seed : str, optional
        Public seed hashed onto G1 to obtain the generator G.
        Defaults to config.generator_seed.

    Returns
    -------
    dict
        A dictionary containing:
        - 'group': The PairingGroup object
        - 'group_name': The name of the curve actually used
        - 'g': The fixed public generator G ∈ G1
        - 'order': The prime group order ℓ as a Python int
        - 'G1': The G1 group type constant
        - 'ZR': The ZR (scalar field) type constant

    Notes
    -----
    G is derived deterministically from a public seed, so two parties that
    run setup() with the same curve and seed agree on G without exchanging it.

    Examples
    --------
    >>> params = setup('BN254')
    >>> G = params['g']
    >>> k = params['group'].random(ZR)
    >>> P = G ** k
    """
    group_name = group_name or config.pairing_curve
    generator_seed = generator_seed or config.generator_seed

    try:
        group = PairingGroup(group_name)
    except Exception as e:
        group, group_name = _fallback_group(group_name, e)

    g = hash_to_generator(group, generator_seed)
    logger.debug("Initialized commitment group %s", group_name)

    return {
        'group': group,
        'group_name': group_name,
        'g': g,
        'order': int(group.order()),
        'G1': G1,
        'ZR': ZR,
    }


def _fallback_group(group_name: str, error: Exception):
    last_error = error
    for candidate in FALLBACK_CURVES:
        if candidate == group_name:
            continue
        logger.warning("%s not available (%s), falling back to %s", group_name, last_error, candidate)
        try:
            return PairingGroup(candidate), candidate
        except Exception as e:
            group_name, last_error = candidate, e
    raise last_error


def hash_to_generator(group: PairingGroup, seed) -> G1:
    """
    Hash a public seed onto a generator of G1.

    Parameters
    ----------
    group : PairingGroup
        The initialized pairing group
    seed : str or bytes
        The public seed

    Returns
    -------
    G1
        A point of G1 whose discrete log with respect to any other generator
        is unknown to everyone ("nothing up my sleeve").

    Notes
    -----
    G1 has prime order, so every element other than the identity generates it.
    """
    point = group.hash(seed, G1)
    if point == group.init(G1, 1):
        raise ValueError(f"Seed {seed!r} hashes to the identity of G1")
    return point
