class PasslistError(Exception):
    pass


class InputNotFoundError(PasslistError, FileNotFoundError):
    pass


class UnrecognizedSchemaError(PasslistError):
    pass


class MalformedRecordError(PasslistError):
    def __init__(self, record_index: int, reason: str) -> None:
        super().__init__(f"row {record_index}: {reason}")
        self.record_index = record_index
        self.reason = reason


class OutputWriteError(PasslistError):
    pass


class InputReadError(PasslistError):
    pass


class ConfigError(PasslistError):
    pass
