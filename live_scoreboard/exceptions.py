class InvalidArgumentError(ValueError):
    pass


class DuplicateMatchError(InvalidArgumentError):
    pass


class MatchNotFoundError(InvalidArgumentError):
    pass
