"""Custom errors for the lending model"""

class ProtocolError(Exception):
    """Base error class for protocol errors"""
    pass

class MissingParameterError(ProtocolError):
    """A collateral lacks a risk parameter the calculation needs"""

    def __init__(self, parameter: str, collateral=None):
        self.parameter = parameter
        self.collateral = collateral
        label = getattr(collateral, "name", None)
        where = f" on collateral '{label}'" if label else ""
        super().__init__(f"{parameter} is not defined{where}")

class InvalidDomainError(ProtocolError, ValueError):
    """Error for arguments outside the range an operation accepts"""
    pass

class InsufficientDataError(ProtocolError):
    """Error for too few data points to compute a result"""
    pass

class ArithmeticOverflowError(ProtocolError, ArithmeticError):
    """Error for fixed point overflow past u128"""
    pass
