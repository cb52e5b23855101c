class EngineError(Exception):
    pass


class OutOfBoundsIndex(EngineError, ValueError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} is out of range for board of size {size}")
        self.index = index
        self.size = size


class IllegalMove(EngineError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Move at index {index} is not legal")
        self.index = index


class InvalidConfiguration(EngineError, ValueError):
    pass
