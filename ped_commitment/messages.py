"""
Protocol Messages
=================

The three messages exchanged by the two parties, plus the verifier's secret:

- VerifierPublicKey (verifier -> committer): H = G^a ∈ G1
- Commitment (committer -> verifier): C = G^r · H^m ∈ G1
- CommitmentValue, CommitmentOpening (committer -> verifier at decommit time):
  the message m ∈ Z_ℓ and the blinding factor r ∈ Z_ℓ
- VerifierTrapdoor: a ∈ Z_ℓ, owned by one CommitVerifier and never exported

All messages are immutable once constructed.
"""

from dataclasses import dataclass

from charm.toolbox.pairinggroup import PairingGroup, ZR, G1

from .exceptions import TrapdoorExposureError
from .utils import scalar_from_int


@dataclass(frozen=True)
class CommitmentValue:
    """The value m the committer binds itself to. Every scalar is valid."""

    scalar: ZR

    @classmethod
    def from_int(cls, x: int, group: PairingGroup) -> 'CommitmentValue':
        """Build a value from any int; it is reduced modulo the group order."""
        return cls(scalar_from_int(x, group))

    @classmethod
    def from_bytes(cls, data: bytes, group: PairingGroup) -> 'CommitmentValue':
        """
        Build a value from an arbitrary byte string.

        The bytes are hashed to a scalar with group.hash(data, ZR); verifying
        later requires the same bytes, which are hashed the same way.
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Expected bytes, got {type(data).__name__}")
        return cls(group.hash(bytes(data), ZR))


@dataclass(frozen=True)
class CommitmentOpening:
    """The blinding factor r revealed at decommit time."""

    blinding: ZR

    @classmethod
    def from_int(cls, x: int, group: PairingGroup) -> 'CommitmentOpening':
        return cls(scalar_from_int(x, group))


@dataclass(frozen=True)
class VerifierPublicKey:
    """The verifier's public key H, sent to the committer in the first round."""

    point: G1


@dataclass(frozen=True)
class Commitment:
    """The commitment C, sent to the verifier in the second round."""

    point: G1


class VerifierTrapdoor:
    """
    Opaque holder for the verifier's secret scalar a, where H = G^a.

    The scalar has no public accessor. The holder refuses to be pickled or
    copied, prints as a placeholder, and can be wiped once the owning
    verifier is discarded.
    """

    __slots__ = ('_scalar',)

    def __init__(self, scalar: ZR):
        self._scalar = scalar

    def __repr__(self):
        return 'VerifierTrapdoor(<redacted>)'

    __str__ = __repr__

    def __reduce__(self):
        raise TrapdoorExposureError("VerifierTrapdoor cannot be serialized")

    def __copy__(self):
        raise TrapdoorExposureError("VerifierTrapdoor cannot be copied")

    def __deepcopy__(self, memo):
        raise TrapdoorExposureError("VerifierTrapdoor cannot be copied")

    @property
    def wiped(self) -> bool:
        return self._scalar is None

    def derive_public_key(self, g: G1) -> VerifierPublicKey:
        """Compute H = G^a."""
        if self._scalar is None:
            raise ValueError("Trapdoor has been wiped")
        return VerifierPublicKey(g ** self._scalar)

    def wipe(self):
        # Python cannot overwrite the underlying integer in place; dropping the
        # only reference is the closest equivalent.
        self._scalar = None
