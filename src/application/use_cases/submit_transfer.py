"""Use case to validate and submit a wallet transfer."""

from dataclasses import replace
from decimal import Decimal
from typing import Mapping

from src.application.ports.wallet_gateway import TransferSubmissionPort
from src.domain.models import TransferRequest, TransferValidation
from src.domain.services import validate_transfer
from src.infrastructure.logging.logger import get_app_logger


class SubmitTransferUseCase:
    """Submit deposits, swaps and sends that pass local validation."""

    def __init__(
        self,
        submission_port: TransferSubmissionPort,
        logger=None,
    ) -> None:
        self._submission_port = submission_port
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        request: TransferRequest,
        balances: Mapping[str, Decimal],
    ) -> TransferValidation:
        """Validate the request and submit it when accepted.

        Transport errors from the submission port propagate unchanged.

        Returns:
            TransferValidation: The validation outcome.
        """
        validation = validate_transfer(request, balances)
        if not validation.ok:
            self._logger.info(
                f"Transfer rejected ({validation.reason.value}): {validation.message}"
            )
            return validation

        if request.recipient is not None:
            request = replace(request, recipient=request.recipient.strip())
        await self._submission_port.submit_transfer(request)
        kind = request.kind.value if request.kind else "transfer"
        self._logger.info(
            f"Transfer submitted: kind={kind}, "
            f"{request.amount} {request.from_currency}"
        )
        return validation


__all__ = ["SubmitTransferUseCase"]
