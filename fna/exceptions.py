# -*- coding: utf-8 -*-


class InvalidCallbackError(ValueError):

    def __init__(self, msg='Invalid callback') -> None:
        super().__init__(msg)


class InvalidParameterError(ValueError):
    pass


class InvalidArgumentShapeError(InvalidParameterError):

    def __init__(self, msg='Unable to handle mixed arrays') -> None:
        super().__init__(msg)


class MissingParameterError(InvalidParameterError):

    def __init__(self, name: str, position: int) -> None:
        super().__init__(f"Missing parameter '{name}' on position {position}")
        self.name = name
        self.position = position
