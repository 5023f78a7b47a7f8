import json
from collections import OrderedDict
from typing import Optional

from config.settings import settings
from governance.errors import SubmissionError
from governance.models.transaction import TransactionRequest, TransactionResult
from governance.models.wallet_identity import WalletIdentity
from smart_wallet.smart_wallet_client import SmartWalletClient
from utils.formatter_utils import normalize_chain, to_normalized_address
from utils.logger_utils import get_logger
from utils.validation_utils import validate_contract_address

logger = get_logger("Transaction Submission Client")


class TransactionSubmissionClient(SmartWalletClient):
    """
    Asks the Smart Wallet API to sign and broadcast a call on behalf of a
    wallet, sponsoring gas.

    The acknowledgment is synchronous: it says the service accepted the call,
    not that the transaction was confirmed on-chain.

    Submitted request ids are remembered to refuse replays. Only the most
    recent max_tracked_requests ids are kept, so memory stays bounded for a
    long-lived client.
    """

    error_class = SubmissionError

    def __init__(
            self,
            *args,
            endpoint: Optional[str] = None,
            max_tracked_requests: int = 10000,
            **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.endpoint = endpoint or settings.smart_wallet.transactions_endpoint
        self.max_tracked_requests = max(1, max_tracked_requests)
        # request id -> None, oldest first
        self._consumed_request_ids: "OrderedDict[str, None]" = OrderedDict()

    async def submit(
            self,
            identity: WalletIdentity,
            chain: str,
            target: str,
            payload: bytes
    ) -> TransactionResult:
        """
        Builds a fresh TransactionRequest and submits it.

        Raises:
            SubmissionError: If the chain is not supported by the wallet or the
                target is not an address (no call is made), or the service
                rejects the request.
        """
        normalized_chain = normalize_chain(chain)
        if not identity.supports(normalized_chain):
            raise SubmissionError(
                f"Chain '{chain}' is not supported by wallet {identity.address} "
                f"(supported: {', '.join(identity.supported_chains)})"
            )

        try:
            validate_contract_address(target)
        except ValueError as e:
            raise SubmissionError(str(e)) from e

        request = TransactionRequest(
            wallet_address=identity.address,
            chain=normalized_chain,
            target_contract_address=to_normalized_address(target),
            call_data=bytes(payload),
        )
        return await self.submit_request(request)

    async def submit_request(self, request: TransactionRequest) -> TransactionResult:
        """
        Sends one TransactionRequest. A request is consumed exactly once.

        Raises:
            SubmissionError: If the request was already submitted (no call is
                made), or the service is unreachable or answers non-2xx.
        """
        if request.request_id in self._consumed_request_ids:
            raise SubmissionError(f"Transaction request {request.request_id} was already submitted")
        self._consumed_request_ids[request.request_id] = None
        while len(self._consumed_request_ids) > self.max_tracked_requests:
            self._consumed_request_ids.popitem(last=False)

        logger.info(
            f"Submitting sponsored transaction {request.request_id} on {request.chain} "
            f"to {request.target_contract_address} from {request.wallet_address}"
        )
        status, body = await self._post(self.endpoint, request.to_payload())

        try:
            acknowledgment = json.loads(body) if body else None
        except ValueError:
            acknowledgment = body

        logger.info(f"Transaction {request.request_id} acknowledged with status {status}")
        return TransactionResult(
            request_id=request.request_id,
            chain=request.chain,
            status=status,
            payload=acknowledgment,
        )
