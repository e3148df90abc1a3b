from typing import Union


class AutoRBHException(Exception):
    pass

class TabularFormatException(AutoRBHException):
    def __init__(self, column: str, value: str, line_number: Union[int, None] = None):
        self.column = column
        self.value = value
        self.line_number = line_number
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Expected a number in column \"{column}\"{location} but found \"{value}\". This is not a valid tabular alignment file.")

class InputFileAccessException(AutoRBHException):
    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Unable to use input file \"{file_path}\": {reason}.")
