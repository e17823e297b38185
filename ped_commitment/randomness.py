"""
Random Sources
==============

Key setup and commit draw their secret scalars from a random source: any
object with a sample() method returning a uniformly random ZR element.
Passing the source explicitly keeps both operations free of hidden state and
lets tests substitute a deterministic one.
"""

import logging

from charm.toolbox.pairinggroup import PairingGroup, ZR

from .exceptions import RandomnessUnavailableError

logger = logging.getLogger(__name__)


class GroupRandomSource:
    """
    Random source backed by charm-crypto's group.random(ZR).

    Charm seeds its generator from the operating system, so samples are
    uniform in Z_ℓ and suitable for trapdoors and blinding factors.
    """

    def __init__(self, group: PairingGroup):
        self.group = group

    def sample(self) -> ZR:
        try:
            return self.group.random(ZR)
        except Exception as e:
            logger.error("Random scalar generation failed: %s", e)
            raise RandomnessUnavailableError(f"Secure random source failed: {e}") from e


def sample_scalar(rng, group: PairingGroup) -> ZR:
    """
    Draw one scalar from rng, or from a GroupRandomSource when rng is None.

    Any failure of a caller-supplied source is reported as
    RandomnessUnavailableError.
    """
    if rng is None:
        rng = GroupRandomSource(group)
    try:
        return rng.sample()
    except RandomnessUnavailableError:
        raise
    except Exception as e:
        raise RandomnessUnavailableError(f"Secure random source failed: {e}") from e
