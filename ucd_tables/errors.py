class CorpusError(ValueError):
    """The Unicode data files do not have the shape the tables depend on."""


def expect(condition, message):
    if not condition:
        raise CorpusError(message)
