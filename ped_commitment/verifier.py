"""
Verifier Implementation
=======================

The verifier sends the first message (its public key) and receives two:
the commitment, then the (value, opening) pair.

State machine:
--------------
AWAITING_COMMITMENT --receive_commitment--> COMMITMENT_RECEIVED

verify() may be called any number of times once a commitment is stored.
Calling it earlier raises NoCommitmentReceivedError; a mismatching opening
is reported as False, never as an exception.

Security Model:
---------------
- In trapdoor mode the verifier knows a = log_G(H) and could open any
  commitment to any value itself. The committer is still bound.
- The value passed to verify() must come from an authenticated channel;
  it is not carried by the opening.
"""

import enum
import logging
import threading

from .commit import commit_with_opening
from .config import config
from .exceptions import CommitmentAlreadyReceivedError, NoCommitmentReceivedError
from .keygen import _keygen, public_generator_key
from .messages import Commitment, CommitmentOpening, CommitmentValue, VerifierPublicKey
from .utils import points_equal

logger = logging.getLogger(__name__)


class VerifierState(enum.Enum):
    AWAITING_COMMITMENT = 'awaiting_commitment'
    COMMITMENT_RECEIVED = 'commitment_received'


class CommitVerifier:
    """
    The party verifying a commitment.

    Holds its public key, optionally the trapdoor behind it, and one
    commitment slot guarded by a lock.
    """

    def __init__(self, params: dict, public_key: VerifierPublicKey, *, allow_recommit: bool = None):
        """
        Initialize the Verifier.

        Parameters
        ----------
        params : dict
            The group parameters from setup()
        public_key : VerifierPublicKey
            The key H sent to the committer
        allow_recommit : bool, optional
            Whether receive_commitment() may replace a stored commitment.
            Defaults to config.allow_recommit.

        Notes
        -----
        Use CommitVerifier.init() or CommitVerifier.with_public_generator()
        rather than calling this directly. Only init() gives the verifier a
        trapdoor; one created elsewhere cannot be handed in.
        """
        if not isinstance(public_key, VerifierPublicKey):
            raise TypeError(f"Expected VerifierPublicKey, got {type(public_key).__name__}")
        self.params = params
        self._public_key = public_key
        self._trapdoor = None
        self.allow_recommit = config.allow_recommit if allow_recommit is None else allow_recommit
        self._commitment = None
        self._lock = threading.Lock()

    @classmethod
    def init(cls, params: dict, rng=None, allow_recommit: bool = None) -> tuple:
        """
        Run key setup and build a verifier in trapdoor mode.

        Returns
        -------
        tuple
            (public_key, verifier). Only the public key is meant to leave
            the verifier.
        """
        public_key, trapdoor = _keygen(params, rng)
        verifier = cls(params, public_key, allow_recommit=allow_recommit)
        verifier._trapdoor = trapdoor
        return public_key, verifier

    @classmethod
    def with_public_generator(cls, params: dict, seed=None, allow_recommit: bool = None) -> tuple:
        """Build a verifier whose key has no trapdoor (standard Pedersen set-up)."""
        public_key = public_generator_key(params, seed)
        return public_key, cls(params, public_key, allow_recommit=allow_recommit)

    @property
    def public_key(self) -> VerifierPublicKey:
        return self._public_key

    @property
    def has_trapdoor(self) -> bool:
        return self._trapdoor is not None and not self._trapdoor.wiped

    @property
    def state(self) -> VerifierState:
        with self._lock:
            if self._commitment is None:
                return VerifierState.AWAITING_COMMITMENT
            return VerifierState.COMMITMENT_RECEIVED

    def receive_commitment(self, commitment: Commitment):
        """
        Store the commitment received from the committer.

        Raises
        ------
        CommitmentAlreadyReceivedError
            If a commitment is already stored and allow_recommit is False.
            The stored commitment is kept.
        """
        if not isinstance(commitment, Commitment):
            raise TypeError(f"Expected Commitment, got {type(commitment).__name__}")
        with self._lock:
            if self._commitment is not None:
                if not self.allow_recommit:
                    raise CommitmentAlreadyReceivedError()
                logger.warning("Replacing previously received commitment")
            self._commitment = commitment
        logger.debug("Commitment received")

    def verify(self, value: CommitmentValue, opening: CommitmentOpening) -> bool:
        """
        Check a (value, opening) pair against the stored commitment.

        Formula:
        --------
        C' := G^r · H^m, accept iff C' = C

        Parameters
        ----------
        value : CommitmentValue
            The value m the committer claims
        opening : CommitmentOpening
            The blinding factor r

        Returns
        -------
        bool
            True if the pair opens the stored commitment, False otherwise

        Raises
        ------
        NoCommitmentReceivedError
            If no commitment has been received yet.
        """
        with self._lock:
            commitment = self._commitment
        if commitment is None:
            raise NoCommitmentReceivedError()

        expected = commit_with_opening(value, opening, self._public_key, self.params)
        ok = points_equal(expected.point, commitment.point, self.params['group'])
        logger.debug("Verification %s", "passed" if ok else "failed")
        return ok

    def close(self):
        """Wipe the trapdoor. verify() keeps working since it only needs H."""
        trapdoor = getattr(self, '_trapdoor', None)
        if trapdoor is not None:
            trapdoor.wipe()
            self._trapdoor = None

    def __del__(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"CommitVerifier(group={self.params['group_name']!r}, state={self.state.value!r})"
