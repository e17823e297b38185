"""
Key Setup
=========

This module generates the verifier's public key H.

Two modes are provided:

- Trapdoor mode (_keygen): H = G^a for a secret a ∈ Z_ℓ held by the verifier.
  This is the protocol's default. Whoever knows a can open one commitment to
  two different values (m·a + r = m'·a + r'), so binding only holds against
  committers, never against the verifier itself.
- Public generator mode (public_generator_key): H is hashed onto G1 from a
  public seed, so nobody knows log_G(H). This is the standard Pedersen set-up.

Formula:
--------
H := G^a            (trapdoor mode)
H := hash_G1(seed)  (public generator mode)
"""

import logging

from .config import config
from .groups import hash_to_generator
from .messages import VerifierPublicKey, VerifierTrapdoor
from .randomness import sample_scalar

logger = logging.getLogger(__name__)


def _keygen(params: dict, rng=None) -> tuple:
    """
    Generate a verifier key pair.

    Only CommitVerifier.init() calls this; the trapdoor it returns goes
    straight into the new verifier.

    Parameters
    ----------
    params : dict
        The group parameters from setup()
    rng : object, optional
        Random source with a sample() method. Defaults to GroupRandomSource.

    Returns
    -------
    tuple
        (public_key, trapdoor) with public_key.point = G^a

    Raises
    ------
    RandomnessUnavailableError
        If the random source cannot produce a scalar.
    """
    a = sample_scalar(rng, params['group'])
    trapdoor = VerifierTrapdoor(a)
    public_key = trapdoor.derive_public_key(params['g'])
    logger.debug("Generated verifier key pair on %s", params['group_name'])
    return public_key, trapdoor


def public_generator_key(params: dict, seed=None) -> VerifierPublicKey:
    """
    Derive a trapdoor-free public key by hashing a public seed onto G1.

    Parameters
    ----------
    params : dict
        The group parameters from setup()
    seed : str or bytes, optional
        Public seed. Defaults to config.nums_seed. It must differ from the
        seed used for G, otherwise H = G.

    Returns
    -------
    VerifierPublicKey
        H with unknown discrete log relative to G
    """
    seed = seed or config.nums_seed
    point = hash_to_generator(params['group'], seed)
    if point == params['g']:
        raise ValueError("Public key seed must differ from the generator seed")
    logger.debug("Derived public generator key on %s", params['group_name'])
    return VerifierPublicKey(point)
