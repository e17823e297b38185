"""
Error Taxonomy
==============

A verification that does not match is NOT an error: verify() returns False.
The exceptions below cover the cases where a verdict cannot be produced, or
where an operation would break a protocol guarantee.
"""


class PedersenError(Exception):
    """Base class for all commitment protocol errors."""


class ProtocolSequenceError(PedersenError):
    """A protocol message arrived in a state that does not accept it."""


class NoCommitmentReceivedError(ProtocolSequenceError):
    """verify() was called before any commitment was received."""

    def __init__(self, message: str = "No commitment received"):
        super().__init__(message)


class CommitmentAlreadyReceivedError(ProtocolSequenceError):
    """A second commitment was sent to a verifier that forbids re-commitment."""

    def __init__(self, message: str = "Commitment already received"):
        super().__init__(message)


class RandomnessUnavailableError(PedersenError):
    """
    The random source could not produce a scalar.

    Fatal for key setup and commit: there is no fallback to weaker randomness.
    """


class MalformedMessageError(PedersenError, ValueError):
    """An encoded protocol message could not be decoded into a valid element."""


class TrapdoorExposureError(PedersenError, TypeError):
    """An attempt was made to serialize or copy out the verifier trapdoor."""
