"""
Deployment Exceptions
Error hierarchy shared by configuration, RPC and transaction handling
"""

from typing import Any, Dict, Optional


class DeploymentError(Exception):
    """Base exception for all deployment errors"""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class ConfigurationError(DeploymentError):
    """Invalid collection configuration or missing credentials"""


class RPCError(DeploymentError):
    """JSON-RPC endpoint returned an error payload"""

    def __init__(self, message: str, error: Optional[Dict[str, Any]] = None):
        cause = (error or {}).get('cause') or {}
        super().__init__(message, {'cause': cause['name']} if cause.get('name') else None)
        self.error = error or {}
        self.cause_name = cause.get('name')


class AccountNotFoundError(RPCError):
    """Queried account does not exist on the network"""


class TransactionError(DeploymentError):
    """Transaction could not be assembled"""
