"""
Commitment Generation
=====================

The committer is stateless: every call draws a fresh blinding factor and
nothing is retained between calls.

Formula (Pedersen commitment):
------------------------------
C := G^r · H^m ∈ G1     (r·G + m·H in additive notation)

where m is the committed value, r the blinding factor and H the verifier's
public key.
"""

import logging

from .messages import Commitment, CommitmentOpening, CommitmentValue, VerifierPublicKey
from .randomness import sample_scalar
from .utils import multiexp_g1

logger = logging.getLogger(__name__)


def commit(value: CommitmentValue, public_key: VerifierPublicKey, params: dict, rng=None) -> tuple:
    """
    Commit to a value under the verifier's public key.

    Parameters
    ----------
    value : CommitmentValue
        The value m to commit to
    public_key : VerifierPublicKey
        The verifier's key H. Any G1 element is accepted; its form is not checked.
    params : dict
        The group parameters from setup()
    rng : object, optional
        Random source with a sample() method. Defaults to GroupRandomSource.

    Returns
    -------
    tuple
        (Commitment, CommitmentOpening). Send the commitment now and keep
        the opening secret until decommit time.

    Raises
    ------
    RandomnessUnavailableError
        If the random source cannot produce a scalar.

    Examples
    --------
    >>> value = CommitmentValue.from_int(3, params['group'])
    >>> commitment, opening = commit(value, public_key, params)
    """
    _check_types(value, public_key)
    r = sample_scalar(rng, params['group'])
    opening = CommitmentOpening(r)
    commitment = commit_with_opening(value, opening, public_key, params)
    logger.debug("Created commitment on %s", params['group_name'])
    return commitment, opening


def commit_with_opening(value: CommitmentValue, opening: CommitmentOpening,
                        public_key: VerifierPublicKey, params: dict) -> Commitment:
    """
    Recompute the commitment for a known (m, r) pair.

    This is a deterministic function of (r, m, H): replaying the same opening
    and value against the same key always gives the same commitment.
    """
    _check_types(value, public_key)
    if not isinstance(opening, CommitmentOpening):
        raise TypeError(f"Expected CommitmentOpening, got {type(opening).__name__}")
    C = multiexp_g1(
        [params['g'], public_key.point],
        [opening.blinding, value.scalar],
        params['group'],
    )
    return Commitment(C)


def _check_types(value, public_key):
    if not isinstance(value, CommitmentValue):
        raise TypeError(f"Expected CommitmentValue, got {type(value).__name__}")
    if not isinstance(public_key, VerifierPublicKey):
        raise TypeError(f"Expected VerifierPublicKey, got {type(public_key).__name__}")
