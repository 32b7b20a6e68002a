class CrispError(Exception):
    """ Base class for all Crisp errors"""
    pass


# -------------------------------
# Parse errors
# -------------------------------
class CrispParseError(CrispError):
    """ Raised when text cannot be turned into a value"""
    pass

class CrispMalformedInput(CrispParseError):
    """ Raised when the text does not have the shape its recognizer expects"""

class CrispIntegerOverflow(CrispParseError):
    """ Raised when an integer literal does not fit in 32 bits"""

class CrispInvalidEscape(CrispParseError):
    """ Raised when a string literal contains an unknown escape sequence"""

class CrispUnmatchedBrackets(CrispParseError):
    """ Raised when brackets are not balanced"""

class CrispEmptyCall(CrispParseError):
    """ Raised for ()"""

class CrispInvalidCall(CrispParseError):
    """ Raised when the head of a call is not an unquoted symbol"""

class CrispNoParserAvailable(CrispParseError):
    """ Raised when no recognizer accepts the text"""


# -------------------------------
# Evaluation errors
# -------------------------------
class CrispEvalError(CrispError):
    """ Raised when evaluation fails"""
    pass

class CrispArgsMismatch(CrispEvalError):
    """ Raised when the arguments passed to a function have the wrong number or type"""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason

class CrispVariableIsVoid(CrispEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Symbol's value as variable is void: {name}")
        self.name = name

class CrispFunctionDefinitionIsVoid(CrispEvalError):
    """ Raised when calling a name that has no function registered"""

    def __init__(self, name: str):
        super().__init__(f"Symbol's function definition is void: {name}")
        self.name = name

class CrispErrorDuringParsing(CrispEvalError):
    """ Raised when the text handed to the interpreter does not parse"""

    def __init__(self, cause: CrispParseError):
        super().__init__(f"Error during parsing: {cause}")
        self.cause = cause

class CrispFileError(CrispEvalError):
    """ Raised when a source file cannot be read"""

    def __init__(self, path, cause: OSError):
        super().__init__(f"Cannot read {path}: {cause}")
        self.path = path
        self.cause = cause
