class ForkLispError(Exception):
    """ Base class for all forklisp errors"""
    pass

class ForkLispSyntaxError(ForkLispError):
    """ Raised when the program text cannot be read"""

class ForkLispUnboundSymbol(ForkLispError):
    """ Raised when a symbol is looked up but bound in no frame"""
    pass

class ForkLispTypeError(ForkLispError):
    """ Raised when a value has the wrong shape for an operation"""

class ForkLispArityError(ForkLispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class ForkLispNoPrimitive(ForkLispError):
    """ Raised when an atom in function position names no primitive"""

class ForkLispZeroDivision(ForkLispError):
    """ Raised on integer division by zero"""

class ForkLispIndexError(ForkLispError):
    """ Raised when a positional selector runs off the end of a list"""

class ForkLispFrameError(ForkLispError):
    """ Raised when a letrec frame is filled more than once"""
