"""Deterministic and failing random sources for tests."""

from charm.toolbox.pairinggroup import ZR


class FixedSource:
    """Random source yielding the given integers in order."""

    def __init__(self, group, values):
        self.group = group
        self.values = list(values)

    def sample(self):
        return self.group.init(ZR, self.values.pop(0))


class BrokenSource:
    """Random source that always fails."""

    def sample(self):
        raise OSError("entropy source unavailable")
