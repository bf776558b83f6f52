from __future__ import annotations


class RinhaError(Exception):
    """ Base class for all Rinha errors"""
    kind = "Error"

    def __init__(self, message: str, location=None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.message} (at {self.location})"

class RinhaUnsupportedPrintValue(RinhaError):
    """ Raised when print is given a value with no textual rendering"""
    kind = "UnsupportedPrintValue"

class RinhaInvalidOperation(RinhaError):
    """ Raised when a binary operator is applied to unsupported operand types"""
    kind = "InvalidOperation"

class RinhaInvalidCondition(RinhaError):
    """ Raised when an if condition does not evaluate to a boolean"""
    kind = "InvalidCondition"

class RinhaUnboundVariable(RinhaError):
    """ Raised when a name is used before it is bound"""
    kind = "UnboundVariable"

class RinhaArityMismatch(RinhaError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = "ArityMismatch"

class RinhaNotCallable(RinhaError):
    """ Raised when something other than a closure is called"""
    kind = "NotCallable"

class RinhaStackExhausted(RinhaError):
    """ Raised when evaluation runs out of host stack"""
    kind = "StackExhausted"

class RinhaLoadError(RinhaError):
    """ Raised when the program document is malformed"""
    kind = "LoadError"
