"""
Transaction Builder
Collects the ordered actions of a single NEAR transaction
"""

import json
from dataclasses import dataclass
from typing import Dict, List, Union


@dataclass(frozen=True)
class DeployContract:
    code: bytes


@dataclass(frozen=True)
class FunctionCall:
    method_name: str
    args: bytes
    gas: int
    deposit: int = 0

    def decoded_args(self) -> Dict:
        return json.loads(self.args.decode('utf-8'))


Action = Union[DeployContract, FunctionCall]


class TransactionBuilder:
    """
    Builds a transaction against one receiver account

    Actions are applied by the network in the order they were added.
    """

    def __init__(self, receiver_id: str):
        """
        Initialize Transaction Builder

        Args:
            receiver_id: Account the actions are applied to
        """
        self.receiver_id = receiver_id
        self.actions: List[Action] = []

    def deploy_contract(self, code: bytes) -> 'TransactionBuilder':
        """Deploy code as the receiver's contract"""
        self.actions.append(DeployContract(code=bytes(code)))
        return self

    def function_call(
        self,
        method_name: str,
        args: Dict,
        gas: int,
        deposit: int = 0
    ) -> 'TransactionBuilder':
        """
        Call a method on the receiver's contract

        Args:
            method_name: Contract method
            args: JSON-serializable arguments
            gas: Gas budget for the call
            deposit: Attached deposit in yoctoNEAR
        """
        encoded = json.dumps(args, separators=(',', ':')).encode('utf-8')
        self.actions.append(FunctionCall(method_name, encoded, gas, deposit))
        return self

    def __len__(self) -> int:
        return len(self.actions)

    def __repr__(self) -> str:
        kinds = ', '.join(type(action).__name__ for action in self.actions)
        return f"TransactionBuilder(receiver_id={self.receiver_id!r}, actions=[{kinds}])"
