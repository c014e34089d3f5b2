"""
Use case: Share the caller's portfolio.

Input: SharePortfolioCommand (user_id, payload)
Output: SharePortfolioResult
Side effects: Stores the payload as the user's shared portfolio.
Failure cases: UpstreamUnavailableError.

Verification is deliberately weak: the market-data collaborator only has
to confirm that the wallet holds some portfolio. The shared payload is
not compared with what the collaborator returns.
"""

import logging

from app.application.social.dtos import SharePortfolioCommand, SharePortfolioResult
from app.domain.errors import NotFoundError, ValidationError
from app.domain.markets.ports import MarketDataPort
from app.domain.social.social_graph_store import SocialGraphStore

logger = logging.getLogger(__name__)


class SharePortfolioUseCase:
    """Publishes a portfolio once the wallet is known to hold one."""

    def __init__(self, store: SocialGraphStore, market_data: MarketDataPort) -> None:
        self._store = store
        self._market_data = market_data

    def execute(self, command: SharePortfolioCommand) -> SharePortfolioResult:
        """Run the share portfolio use case.

        Raises:
            ValidationError: If the payload is empty.
            UpstreamUnavailableError: If the market-data lookup fails.
        """
        if not command.payload:
            raise ValidationError("portfolio_data", "is required")

        try:
            self._market_data.get_account_portfolio(command.user_id)
        except NotFoundError:
            logger.info("Portfolio share rejected: no portfolio on record")
            return SharePortfolioResult(
                success=False, message="Could not verify portfolio"
            )

        share = self._store.share_portfolio(command.user_id, command.payload)
        return SharePortfolioResult(
            success=True,
            message="Portfolio shared successfully",
            shared_at=share.shared_at,
        )
