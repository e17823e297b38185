"""
Pedersen Commitments
====================

A two-party Pedersen commitment scheme over the prime-order group G1 of a
charm-crypto pairing curve.

Protocol:
---------
1. Verifier -> Committer: public key H = G^a
2. Committer -> Verifier: commitment C = G^r · H^m
3. Committer -> Verifier: value m and opening r; the verifier accepts iff
   G^r · H^m = C

Modules:
--------
- groups: Group initialization and the fixed public generator G
- keygen: Verifier key setup (trapdoor and public generator modes)
- commit: Commitment generation (stateless)
- verifier: The stateful verifier
- messages: Protocol message types
- serialization: Canonical message encoding
- randomness: Random sources for secret scalars
- exceptions: Error taxonomy
- config: Environment configuration and logging set-up

Usage:
------
    from ped_commitment import setup, commit, CommitVerifier, CommitmentValue

    params = setup('BN254')
    value = CommitmentValue.from_int(3, params['group'])

    public_key, verifier = CommitVerifier.init(params)
    commitment, opening = commit(value, public_key, params)

    verifier.receive_commitment(commitment)
    assert verifier.verify(value, opening)
"""

__version__ = "0.1.0"

from .groups import setup
from .keygen import public_generator_key
from .commit import commit, commit_with_opening
from .verifier import CommitVerifier, VerifierState
from .messages import (
    Commitment,
    CommitmentOpening,
    CommitmentValue,
    VerifierPublicKey,
)
from .randomness import GroupRandomSource
from .exceptions import (
    CommitmentAlreadyReceivedError,
    MalformedMessageError,
    NoCommitmentReceivedError,
    PedersenError,
    ProtocolSequenceError,
    RandomnessUnavailableError,
    TrapdoorExposureError,
)

__all__ = [
    'setup',
    'public_generator_key',
    'commit',
    'commit_with_opening',
    'CommitVerifier',
    'VerifierState',
    'Commitment',
    'CommitmentOpening',
    'CommitmentValue',
    'VerifierPublicKey',
    'GroupRandomSource',
    'CommitmentAlreadyReceivedError',
    'MalformedMessageError',
    'NoCommitmentReceivedError',
    'PedersenError',
    'ProtocolSequenceError',
    'RandomnessUnavailableError',
    'TrapdoorExposureError',
]
