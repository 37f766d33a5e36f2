# bnb_kp/solvers/interface.py
from abc import ABC, abstractmethod
from typing import Dict, Any


class SolverInterface(ABC):
    """
    Common shape of every solver class in the registry.
    A solver reads one instance file and reports value, time and solution.
    """
    def __init__(self, config: Dict[str, Any] = None):
        self.config = config if config is not None else {}
        self.name = self.__class__.__name__

    @abstractmethod
    def solve(self, instance_path: str) -> Dict[str, Any]:
        """
        Solves the instance stored at `instance_path`.

        Returns:
            Dict[str, Any]: {"value": int, "time": float, "solution": List[int]}
                where "solution" holds one 0/1 decision per item in file order.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
