"""Local mirror of the account's credit balance."""

from ..core import get_logger

logger = get_logger(__name__)


class CreditAccount:
    """
    Advisory credit balance.

    ``deduct`` applies the export cost optimistically; ``reconcile`` replaces
    the local value with the credits service's, which is authoritative.
    """

    def __init__(self, balance: int = 0, export_cost: int = 200) -> None:
        if export_cost < 0:
            raise ValueError("export_cost must be >= 0")
        self.balance = balance
        self.export_cost = export_cost

    def can_afford(self) -> bool:
        return self.balance >= self.export_cost

    def deduct(self) -> int:
        """Subtract one export's cost; returns the new local balance."""
        self.balance -= self.export_cost
        logger.debug("credits_deducted", cost=self.export_cost, balance=self.balance)
        return self.balance

    def reconcile(self, server_balance: int, export_cost: int | None = None) -> None:
        """Adopt the server's balance (and cost, when reported)."""
        if server_balance != self.balance:
            logger.info("credits_reconciled", local=self.balance, server=server_balance)
        self.balance = server_balance
        if export_cost:
            self.export_cost = export_cost
