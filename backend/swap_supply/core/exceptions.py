"""
Custom exceptions for the swap-and-supply executor
"""


class SwapSupplyException(Exception):
    """Base exception for all custom exceptions"""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(SwapSupplyException):
    """Raised when settings are missing, malformed or still placeholders"""
    pass


class ConnectionError(SwapSupplyException):
    """Raised when connection to the RPC endpoint fails"""
    pass


class AbiLoadError(SwapSupplyException):
    """Raised when a contract ABI cannot be loaded"""
    pass


class DataValidationError(SwapSupplyException):
    """Raised when data validation fails"""
    pass


class ContractError(SwapSupplyException):
    """Raised when smart contract interaction fails"""
    pass


class TransactionFailedError(ContractError):
    """Raised when a mined transaction reports status 0"""
    pass


class TransactionTimeoutError(ContractError):
    """Raised when a receipt does not arrive in time"""
    pass


class InsufficientBalanceError(SwapSupplyException):
    """Raised when the wallet holds less than the amount to swap"""
    pass


class SwapOutputNotFoundError(ContractError):
    """Raised when the swap receipt carries no output transfer"""
    pass
